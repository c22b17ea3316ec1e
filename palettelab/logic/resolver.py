#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/resolver.py

import argparse
import random
from typing import Tuple

from palettelab.core.harmony import generate_random_colour
from palettelab.shared.logger import fail


def make_rng(args: argparse.Namespace) -> random.Random:
    """A private Random, seeded when --seed was given."""
    return random.Random(getattr(args, "seed", None))


def resolve_colour_input(args: argparse.Namespace, prog: str) -> Tuple[str, str]:
    """Resolve -c/--colour or -r/--random into (hex, title)."""
    if getattr(args, "random", False):
        return generate_random_colour(make_rng(args)), "random"

    colour = getattr(args, "colour", None)
    if isinstance(colour, list):
        colour = colour[0] if colour else None
    if colour:
        return colour, "colour"

    fail(
        "one of the arguments -c/--colour -r/--random is required",
        f"use 'palettelab {prog} -h' for usage",
    )
