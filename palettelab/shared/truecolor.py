#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/truecolor.py

import os
import sys


def ensure_truecolor() -> None:
    """Advertise 24-bit colour support to child tools unless the user opted out."""
    if sys.platform == "win32" or os.environ.get("NO_COLOR"):
        return
    os.environ.setdefault("COLORTERM", "truecolor")


def colour_enabled() -> bool:
    """Swatches are drawn unless NO_COLOR is set (https://no-color.org)."""
    return not os.environ.get("NO_COLOR")
