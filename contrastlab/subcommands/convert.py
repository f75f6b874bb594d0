#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/convert.py

import argparse
import sys

from contrastlab.logic.convert import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_convert_parser() -> argparse.ArgumentParser:
    parser = ContrastlabArgumentParser(
        prog="contrastlab convert",
        description="contrastlab convert: convert a color value between hex, rgb and hsl",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    formats_list = "hex rgb hsl auto"
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-f",
        "--from-format",
        default="auto",
        type=INPUT_HANDLERS["format"],
        help="the format to convert from (default: auto)\n" f"all formats: {formats_list}",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        required=True,
        type=INPUT_HANDLERS["format"],
        help="the format to convert to\n" "all formats: hex rgb hsl",
    )
    parser.add_argument(
        "-v",
        "--value",
        required=True,
        type=str,
        help=(
            "color value to convert must be in quotes\n"
            "examples:\n"
            '  -v "#1E90FF"\n'
            '  -v "fff"\n'
            '  -v "rgb(30, 144, 255)"\n'
            '  -v "hsl(210, 100%%, 56%%)"'
        ),
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the conversion verbosely",
    )
    return parser


def main() -> None:
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    if args.to_format == "auto":
        parser.error("argument -t/--to-format: 'auto' is only valid as a source format")
    engine.run(args, parser)


if __name__ == "__main__":
    main()
