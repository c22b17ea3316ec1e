from .engine import (
    AccessibilityReport,
    CategoryIssue,
    ContrastPair,
    SimulatedContrastIssue,
    build_accessibility_report,
    warning_key,
)
from .renderer import render_report_text

__all__ = [
    "AccessibilityReport",
    "CategoryIssue",
    "ContrastPair",
    "SimulatedContrastIssue",
    "build_accessibility_report",
    "render_report_text",
    "warning_key",
]
