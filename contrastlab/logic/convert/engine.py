#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/convert/engine.py

import argparse

from contrastlab.core import config as c
from contrastlab.shared.sanitizer import resolve_color_or_exit
from .renderer import render_convert_info, render_verbose


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for color conversion"""
    color = resolve_color_or_exit(args.value, args.from_format, "input")

    out = render_convert_info(color, args.to_format)

    if args.verbose:
        if c.FORMAT_ALIASES.get(args.from_format) is None:
            # auto-detected input is echoed as typed
            src = f"{c.BOLD_WHITE}{args.value.strip()}{c.RESET}"
        else:
            src = render_convert_info(color, args.from_format)
        print(render_verbose(src, out))
    else:
        print(out)
