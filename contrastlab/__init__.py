#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/__init__.py

"""contrastlab: WCAG contrast checking and accessible color suggestions."""

__version__ = "1.0.0"

from contrastlab.core.codec import parse, format_color
from contrastlab.core.contrast import check, classify, contrast_ratio, recommended_target
from contrastlab.core.conversions import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from contrastlab.core.errors import ColorError, InvalidFormat, OutOfRange, UnrecognizedColor
from contrastlab.core.luminance import relative_luminance
from contrastlab.core.suggestions import suggest
from contrastlab.core.types import (
    ColorFormat,
    ColorValue,
    ComplianceResult,
    HSLValue,
    Level,
    Suggestion,
    SuggestionKind,
    TextSize,
)

__all__ = [
    "__version__",
    "parse",
    "format_color",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "relative_luminance",
    "contrast_ratio",
    "classify",
    "check",
    "recommended_target",
    "suggest",
    "ColorFormat",
    "ColorValue",
    "ComplianceResult",
    "HSLValue",
    "Level",
    "Suggestion",
    "SuggestionKind",
    "TextSize",
    "ColorError",
    "InvalidFormat",
    "OutOfRange",
    "UnrecognizedColor",
]
