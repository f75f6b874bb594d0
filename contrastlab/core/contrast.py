#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/contrast.py

from typing import Optional

from . import config as c
from .luminance import relative_luminance
from .types import ComplianceResult, Level, TextSize


def contrast_ratio(c1, c2) -> float:
    """
    Calculate the WCAG contrast ratio between two colors.

    Source: https://www.w3.org/TR/WCAG20/#contrast-ratiodef
    Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter luminance.
    """
    y1 = relative_luminance(c1)
    y2 = relative_luminance(c2)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def classify(ratio: float, text_size=TextSize.NORMAL) -> ComplianceResult:
    """
    Classify a contrast ratio against the WCAG 2.0 thresholds.

    The level uses the thresholds for the given text size. The four pass
    flags always use the fixed thresholds, so a ratio of 3.5 reports a
    large-text AA pass even when normal-text AA fails.
    """
    size = TextSize.coerce(text_size)
    if size is TextSize.LARGE:
        aa_threshold, aaa_threshold = c.WCAG_AA_LARGE, c.WCAG_AAA_LARGE
    else:
        aa_threshold, aaa_threshold = c.WCAG_AA_NORMAL, c.WCAG_AAA_NORMAL

    if ratio >= aaa_threshold:
        level = Level.AAA
    elif ratio >= aa_threshold:
        level = Level.AA
    else:
        level = Level.FAIL

    return ComplianceResult(
        ratio=ratio,
        level=level,
        passes_normal_text=ratio >= c.WCAG_AA_NORMAL,
        passes_large_text=ratio >= c.WCAG_AA_LARGE,
        passes_enhanced_normal_text=ratio >= c.WCAG_AAA_NORMAL,
        passes_enhanced_large_text=ratio >= c.WCAG_AAA_LARGE,
        text_size=size,
    )


def check(background, text, text_size=TextSize.NORMAL) -> ComplianceResult:
    """Compute and classify the contrast of text drawn on background."""
    return classify(contrast_ratio(background, text), text_size)


def recommended_target(level: Level, text_size=TextSize.NORMAL) -> Optional[float]:
    """Next ratio worth suggesting for: AA after a fail, AAA after AA."""
    level = Level(level)
    large = TextSize.coerce(text_size) is TextSize.LARGE
    if level is Level.FAIL:
        return c.WCAG_AA_LARGE if large else c.WCAG_AA_NORMAL
    if level is Level.AA:
        return c.WCAG_AAA_LARGE if large else c.WCAG_AAA_NORMAL
    return None
