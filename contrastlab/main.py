#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/main.py

import argparse
import sys

from contrastlab import __version__
from contrastlab.logic.check import engine
from contrastlab.subcommands.command_registry import SUBCOMMANDS
from contrastlab.shared.logger import log, ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS
from contrastlab.shared.preview import ensure_truecolor


def get_check_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main contrast check command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab",
        description="contrastlab: check WCAG contrast between two colors and suggest accessible alternatives",
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
        "-v",
        "--version",
        action="version",
        version=f"contrastlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    # Color Input Group
    color_group = parser.add_argument_group("colors")
    color_group.add_argument(
        "-b",
        "--background",
        type=str,
        help="background color: #RGB, #RRGGBB, rgb(r, g, b) or hsl(h, s%%, l%%)",
    )
    color_group.add_argument(
        "-t",
        "--text",
        type=str,
        help="text (foreground) color, same forms as --background",
    )
    color_group.add_argument(
        "-bf",
        "--background-format",
        default="auto",
        type=INPUT_HANDLERS["format"],
        help="format of the background value: hex rgb hsl auto (default: auto)",
    )
    color_group.add_argument(
        "-tf",
        "--text-format",
        default="auto",
        type=INPUT_HANDLERS["format"],
        help="format of the text value: hex rgb hsl auto (default: auto)",
    )

    # Report Options
    report_group = parser.add_argument_group("report options")
    report_group.add_argument(
        "-L",
        "--large",
        action="store_true",
        help="classify for large text (18pt, or 14pt bold)",
    )
    report_group.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="print the report as JSON",
    )
    report_group.add_argument(
        "-np",
        "--no-preview",
        action="store_true",
        help="hide the truecolor text preview",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_check_command(args: argparse.Namespace) -> None:
    """Entry point for the core contrast check command."""
    parser = get_check_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser")
            getter().print_help()
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    engine.run(args, parser)


def main() -> None:
    """Main entry point for contrastlab CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_check_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_check_command(args)


if __name__ == "__main__":
    main()
