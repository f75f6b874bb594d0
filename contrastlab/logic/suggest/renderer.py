#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/suggest/renderer.py

from typing import List

from contrastlab.core import config as c
from contrastlab.core.types import ColorValue, Suggestion
from contrastlab.logic.check.renderer import suggestion_line
from contrastlab.shared.preview import print_color_block


def render_suggestions(
    background: ColorValue,
    text: ColorValue,
    current: float,
    target: float,
    suggestions: List[Suggestion],
) -> None:
    info_c = c.MSG_BOLD_COLORS["info"]

    print()
    print_color_block(background, f"{c.BOLD_WHITE}background{c.RESET}")
    print_color_block(text, f"{c.BOLD_WHITE}text{c.RESET}")
    print(f"\n{info_c}contrast ratio{c.RESET}    {c.BOLD_WHITE}: {current:.2f}:1{c.RESET}")
    print(f"{info_c}target{c.RESET}            {c.BOLD_WHITE}: {target:g}:1{c.RESET}")
    print()

    if current >= target:
        print(f"{c.MSG_BOLD_COLORS['success']}already meets {target:g}:1, nothing to suggest{c.RESET}")
    elif not suggestions:
        print(f"{c.MSG_BOLD_COLORS['warning']}no alternative reaches {target:g}:1{c.RESET}")
    else:
        for s in suggestions:
            print_color_block(s.color, f"{info_c}{s.kind.value}{c.RESET}", label=suggestion_line(s))
    print()
