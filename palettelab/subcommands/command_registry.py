#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/command_registry.py

from . import (
    contrast,
    convert,
    report,
    scale,
    scheme,
    vision,
)

SUBCOMMANDS = {
    "convert": convert,
    "contrast": contrast,
    "vision": vision,
    "scheme": scheme,
    "scale": scale,
    "report": report,
}
