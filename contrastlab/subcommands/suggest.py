#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/suggest.py

import argparse
import sys

from contrastlab.core import config as c
from contrastlab.logic.suggest import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_suggest_parser() -> argparse.ArgumentParser:
    """Create argument parser for the suggest command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab suggest",
        description="contrastlab suggest: list text and background alternatives that reach a target ratio",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-b",
        "--background",
        required=True,
        type=str,
        help="background color, e.g. \"#FFFFFF\" or \"rgb(255, 255, 255)\"",
    )
    parser.add_argument(
        "-t",
        "--text",
        required=True,
        type=str,
        help="text color, e.g. \"#777\" or \"hsl(0, 0%%, 47%%)\"",
    )
    parser.add_argument(
        "-bf",
        "--background-format",
        default="auto",
        type=INPUT_HANDLERS["format"],
        help="format of the background value (hex rgb hsl auto)",
    )
    parser.add_argument(
        "-tf",
        "--text-format",
        default="auto",
        type=INPUT_HANDLERS["format"],
        help="format of the text value (hex rgb hsl auto)",
    )
    parser.add_argument(
        "--target",
        default=c.DEFAULT_TARGET_RATIO,
        type=INPUT_HANDLERS["ratio"],
        help=f"target contrast ratio, e.g. 7 or 7:1 (default: {c.DEFAULT_TARGET_RATIO:g})",
    )
    parser.add_argument(
        "-n",
        "--limit",
        default=None,
        type=INPUT_HANDLERS["limit"],
        help=f"show at most this many suggestions (1 to {c.MAX_SUGGESTIONS})",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="print the suggestions as JSON",
    )
    return parser


def main() -> None:
    """Main entry point for the suggest command."""
    parser = get_suggest_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args, parser)


if __name__ == "__main__":
    main()
