#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/preview.py

import os
import re
import sys

from contrastlab.core import config as c
from contrastlab.core.types import ColorValue

SAMPLE_TEXT = "The quick brown fox jumps over the lazy dog"


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def _bg(color: ColorValue) -> str:
    return f"\033[48;2;{color.r};{color.g};{color.b}m"


def _fg(color: ColorValue) -> str:
    return f"\033[38;2;{color.r};{color.g};{color.b}m"


def print_color_block(color: ColorValue, title: str = "color", label: str = None) -> None:
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)
    label = label or color.hex

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {_bg(color)}                {c.RESET}  {c.BOLD_WHITE}{label}{c.RESET}")


def print_pair_preview(background: ColorValue, text: ColorValue, sample: str = SAMPLE_TEXT) -> None:
    """Render sample text in the text color on the background color."""
    width = len(sample) + 4
    blank = f"{_bg(background)}{' ' * width}{c.RESET}"
    normal = f"{_bg(background)}{_fg(text)}  {sample}  {c.RESET}"
    heading = sample[: width // 2 - 4].upper()
    large = f"{_bg(background)}{_fg(text)}\033[1m  {heading:<{width - 2}}{c.RESET}"

    print(f"{c.MSG_BOLD_COLORS['info']}preview{c.RESET}           {c.BOLD_WHITE}:{c.RESET}   {blank}")
    print(f"                      {normal}")
    print(f"                      {large}")
    print(f"                      {blank}")
