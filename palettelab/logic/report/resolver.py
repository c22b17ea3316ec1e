#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/report/resolver.py

import argparse
from typing import List

from palettelab.core.types import PaletteColour
from palettelab.shared.logger import fail


def resolve_report_colours(args: argparse.Namespace) -> List[PaletteColour]:
    """Number the parsed colour specs c1, c2, ... so warning keys stay stable."""
    specs = args.colour or []
    if len(specs) < 2:
        fail(
            "an accessibility report needs at least 2 colours",
            "use -c 'COLOUR[:NAME[:CATEGORY[:ROLE]]]' multiple times",
        )
    return [spec._replace(id=f"c{i}") for i, spec in enumerate(specs, 1)]
