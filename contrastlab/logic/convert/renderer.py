#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/convert/renderer.py

from contrastlab.core import config as c
from contrastlab.core.codec import format_color
from contrastlab.core.types import ColorValue


def render_convert_info(color: ColorValue, fmt: str) -> str:
    """Composes a color into a bold formatted output string."""
    return f"{c.BOLD_WHITE}{format_color(color, fmt)}{c.RESET}"


def render_verbose(src: str, out: str) -> str:
    return f"{src} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {out}"
