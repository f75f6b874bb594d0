#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/check/renderer.py

from typing import Any, Dict, List, Optional

from contrastlab.core import config as c
from contrastlab.core.types import ColorValue, ComplianceResult, Level, Suggestion
from contrastlab.shared.preview import print_color_block, print_pair_preview


PASS_ROWS = [
    ("AA", "passes_normal_text", c.WCAG_AA_NORMAL),
    ("AA-Large", "passes_large_text", c.WCAG_AA_LARGE),
    ("AAA", "passes_enhanced_normal_text", c.WCAG_AAA_NORMAL),
    ("AAA-Large", "passes_enhanced_large_text", c.WCAG_AAA_LARGE),
]


def recommendation_message(level: Level) -> str:
    if level is Level.AAA:
        return "excellent contrast: meets WCAG AAA"
    if level is Level.AA:
        return "good contrast: meets WCAG AA, suggestions for AAA below"
    return "contrast does not meet the WCAG minimum, see suggestions below"


def suggestion_line(s: Suggestion) -> str:
    return f"change {s.kind.value} color to {s.hex} (contrast: {s.ratio:.2f}:1)"


def build_check_report(
    background: ColorValue,
    text: ColorValue,
    result: ComplianceResult,
    target: Optional[float],
    suggestions: List[Suggestion],
) -> Dict[str, Any]:
    """Plain data version of the check report, for JSON output."""
    report = {
        "background": background.hex,
        "text": text.hex,
    }
    report.update(result.as_dict())
    report["message"] = recommendation_message(result.level)
    report["target"] = target
    report["suggestions"] = [s.as_dict() for s in suggestions]
    return report


def render_check_info(
    background: ColorValue,
    text: ColorValue,
    result: ComplianceResult,
    target: Optional[float],
    suggestions: List[Suggestion],
    show_preview: bool = True,
) -> None:
    """Strictly prints the check report. Data must be pre-calculated by the engine."""
    info_c = c.MSG_BOLD_COLORS["info"]
    succ_c, err_c = c.MSG_BOLD_COLORS["success"], c.MSG_BOLD_COLORS["error"]

    print()
    print_color_block(background, f"{c.BOLD_WHITE}background{c.RESET}")
    print_color_block(text, f"{c.BOLD_WHITE}text{c.RESET}")

    if show_preview:
        print()
        print_pair_preview(background, text)

    level_c = c.LEVEL_COLORS.get(result.level.value, c.BOLD_WHITE)
    print(f"\n{info_c}contrast ratio{c.RESET}    {c.BOLD_WHITE}: {result.ratio:.2f}:1{c.RESET}")
    print(f"{info_c}level{c.RESET}             {c.BOLD_WHITE}:{c.RESET} {level_c}{result.level.value}{c.RESET}"
          f" {c.MSG_COLORS['info']}({result.text_size.value} text){c.RESET}")

    print()
    for name, attr, threshold in PASS_ROWS:
        status = f"{succ_c}Pass{c.RESET}" if getattr(result, attr) else f"{err_c}Fail{c.RESET}"
        label = f"{name} ({threshold:g}:1)"
        print(f"{info_c}{label:<18}{c.RESET}{c.BOLD_WHITE}:{c.RESET} {status}")

    print(f"\n{level_c}{recommendation_message(result.level)}{c.RESET}")
    if target is not None:
        if suggestions:
            for i, s in enumerate(suggestions, start=1):
                print(f"  {c.BOLD_WHITE}{i}.{c.RESET} {suggestion_line(s)}")
        else:
            print(f"  {c.MSG_COLORS['warning']}no alternative reaches {target:g}:1{c.RESET}")
    print()
