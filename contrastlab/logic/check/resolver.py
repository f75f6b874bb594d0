#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/check/resolver.py

import argparse
from typing import Tuple

from contrastlab.core.types import ColorValue
from contrastlab.shared.logger import fail
from contrastlab.shared.sanitizer import resolve_color_or_exit


def resolve_pair_input(args: argparse.Namespace) -> Tuple[ColorValue, ColorValue]:
    """Resolve raw CLI input into a (background, text) pair"""

    if args.background is None or args.text is None:
        fail(
            "both -b/--background and -t/--text are required",
            hint="use 'contrastlab --help' for more information",
        )

    background = resolve_color_or_exit(args.background, args.background_format, "background")
    text = resolve_color_or_exit(args.text, args.text_format, "text")
    return background, text
