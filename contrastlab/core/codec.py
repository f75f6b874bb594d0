#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/codec.py

"""
Text <-> ColorValue codec for the hex, rgb and hsl notations.

Declared formats are strict. Without a (recognized) declared format the
input is routed through DETECTORS, an ordered list of (predicate, parser)
pairs; the first predicate that accepts the text decides which grammar
parses it.
"""

import re
from typing import Callable, List, Tuple

from . import config as c
from .conversions import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from .errors import InvalidFormat, OutOfRange, UnrecognizedColor
from .types import ColorFormat, ColorValue

# Components are ASCII integers separated by a comma (optionally padded) or by whitespace
_SEP = r"(?:\s*,\s*|\s+)"
_INT = r"(-?[0-9]+)"
_PCT = r"(-?[0-9]+)%?"

_RGB_PATTERNS = (
    re.compile(rf"rgb\s*\(?\s*{_INT}{_SEP}{_INT}{_SEP}{_INT}\s*\)?", re.IGNORECASE),
    re.compile(rf"{_INT}{_SEP}{_INT}{_SEP}{_INT}"),
)
_HSL_PATTERNS = (
    re.compile(rf"hsl\s*\(?\s*{_INT}{_SEP}{_PCT}{_SEP}{_PCT}\s*\)?", re.IGNORECASE),
    re.compile(rf"{_INT}{_SEP}{_PCT}{_SEP}{_PCT}"),
)
_BARE_HEX = re.compile(r"[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}")


def _match_components(text: str, patterns, model_name: str) -> Tuple[int, int, int]:
    for pattern in patterns:
        match = pattern.fullmatch(text)
        if match:
            try:
                return tuple(int(v) for v in match.groups())
            except ValueError:
                # digit runs past the interpreter's int conversion limit
                raise OutOfRange(f"{model_name} component too large in '{text[:40]}...'", text)
    raise InvalidFormat(f"invalid {model_name} color: '{text}'", text)


def _check_range(name: str, value: int, upper: int, text: str) -> int:
    if not 0 <= value <= upper:
        raise OutOfRange(f"{name}={value} outside 0-{upper} in '{text}'", text)
    return value


def parse_hex(text: str) -> ColorValue:
    return hex_to_rgb(text)


def parse_rgb(text: str) -> ColorValue:
    r, g, b = _match_components(text, _RGB_PATTERNS, "rgb")
    return ColorValue(
        _check_range("r", r, c.RGB_MAX, text),
        _check_range("g", g, c.RGB_MAX, text),
        _check_range("b", b, c.RGB_MAX, text),
    )


def parse_hsl(text: str) -> ColorValue:
    h, s, L = _match_components(text, _HSL_PATTERNS, "hsl")
    return hsl_to_rgb(
        _check_range("h", h, c.HUE_MAX, text),
        _check_range("s", s, c.PERCENT_MAX, text),
        _check_range("l", L, c.PERCENT_MAX, text),
    )


def _looks_like_hex(text: str) -> bool:
    return text.startswith("#") or _BARE_HEX.fullmatch(text) is not None


def _looks_like_rgb(text: str) -> bool:
    return text.lower().startswith("rgb")


def _looks_like_hsl(text: str) -> bool:
    return text.lower().startswith("hsl")


# Auto-detection priority: hex, then rgb, then hsl
DETECTORS: List[Tuple[Callable[[str], bool], Callable[[str], ColorValue]]] = [
    (_looks_like_hex, parse_hex),
    (_looks_like_rgb, parse_rgb),
    (_looks_like_hsl, parse_hsl),
]

PARSERS = {
    ColorFormat.HEX: parse_hex,
    ColorFormat.RGB: parse_rgb,
    ColorFormat.HSL: parse_hsl,
}


def detect(text: str) -> ColorValue:
    """Parse text with the first detector whose predicate accepts it."""
    for predicate, parser in DETECTORS:
        if predicate(text):
            return parser(text)
    raise UnrecognizedColor(f"unrecognized color: '{text}'", text)


def parse(text: str, declared_format=None) -> ColorValue:
    """
    Parse a color string into a ColorValue.

    declared_format may be a ColorFormat or its name. A recognized format is
    applied strictly; None or an unknown name falls back to auto-detection.
    Raises InvalidFormat, OutOfRange or UnrecognizedColor.
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"color must be a string, got {type(text).__name__}", text)
    value = text.strip()

    fmt = ColorFormat.coerce(declared_format)
    if fmt is None:
        return detect(value)
    return PARSERS[fmt](value)


def format_color(color, target_format=ColorFormat.HEX) -> str:
    """Render a color as '#RRGGBB', 'rgb(r, g, b)' or 'hsl(h, s%, l%)'."""
    if not isinstance(color, ColorValue):
        color = ColorValue(*color)
    fmt = ColorFormat.coerce(target_format) or ColorFormat.HEX

    if fmt is ColorFormat.RGB:
        return f"rgb({color.r}, {color.g}, {color.b})"
    if fmt is ColorFormat.HSL:
        h, s, L = rgb_to_hsl(*color)
        return f"hsl({h}, {s}%, {L}%)"
    return rgb_to_hex(*color)
