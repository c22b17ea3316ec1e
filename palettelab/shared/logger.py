#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/logger.py

import argparse
import sys
from typing import Optional

from palettelab.core import config as c


def log(level: str, message: str) -> None:
    """Print a '[level] message' line; info/success to stdout, the rest to stderr."""
    level = str(level).lower()
    stream = sys.stdout if level in ("info", "success") else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


def fail(message: str, hint: Optional[str] = None, code: int = 2) -> None:
    """Log an error, optionally an info hint, and exit."""
    log("error", message)
    if hint:
        log("info", hint)
    sys.exit(code)


class PalettelabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Route argparse errors through log() and exit with status 2."""
        log("error", message)
        sys.exit(2)
