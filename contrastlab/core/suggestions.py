#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/suggestions.py

from typing import List, Optional

from . import config as c
from .contrast import contrast_ratio
from .conversions import hsl_to_rgb, rgb_to_hsl
from .types import ColorValue, HSLValue, Suggestion, SuggestionKind


def _shift_lightness(hsl: HSLValue, delta: int) -> HSLValue:
    """Move lightness by delta points, keeping hue and saturation."""
    return HSLValue(hsl.h, hsl.s, max(0, min(c.PERCENT_MAX, hsl.l + delta)))


def _as_color(color) -> ColorValue:
    return color if isinstance(color, ColorValue) else ColorValue(*color)


def suggest(
    background,
    text,
    target_ratio: float = c.DEFAULT_TARGET_RATIO,
    limit: Optional[int] = None,
) -> List[Suggestion]:
    """
    Propose text or background colors that reach target_ratio.

    Candidates are the text and background shifted by LIGHTNESS_STEP points
    of HSL lightness in both directions, plus pure black and pure white text.
    A candidate is kept only if it beats the current ratio and both its
    exact and its reported two-decimal ratio meet the target. Results are
    sorted by descending ratio; an already compliant pair yields an empty
    list.
    """
    background = _as_color(background)
    text = _as_color(text)

    current = contrast_ratio(background, text)
    if current >= target_ratio:
        return []

    bg_hsl = rgb_to_hsl(*background)
    text_hsl = rgb_to_hsl(*text)
    step = c.LIGHTNESS_STEP

    candidates = [
        (SuggestionKind.TEXT, hsl_to_rgb(*_shift_lightness(text_hsl, -step)), background),
        (SuggestionKind.TEXT, hsl_to_rgb(*_shift_lightness(text_hsl, step)), background),
        (SuggestionKind.BACKGROUND, hsl_to_rgb(*_shift_lightness(bg_hsl, step)), text),
        (SuggestionKind.BACKGROUND, hsl_to_rgb(*_shift_lightness(bg_hsl, -step)), text),
        (SuggestionKind.TEXT, ColorValue(*c.BLACK), background),
        (SuggestionKind.TEXT, ColorValue(*c.WHITE), background),
    ]

    kept = []
    seen = set()
    for kind, color, partner in candidates:
        ratio = contrast_ratio(partner, color)
        reported = round(ratio, c.RATIO_DECIMALS)
        if ratio <= current or min(ratio, reported) < target_ratio:
            continue
        if (kind, color) in seen:
            continue
        seen.add((kind, color))
        kept.append(Suggestion(kind=kind, color=color, ratio=reported))

    kept.sort(key=lambda s: s.ratio, reverse=True)
    return kept if limit is None else kept[:limit]
