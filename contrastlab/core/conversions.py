#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/conversions.py

import functools
import math
import re

from . import config as c
from .errors import InvalidFormat
from .types import ColorValue, HSLValue

_HEX_PATTERN = re.compile(r"#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")


def _round_half_up(v: float) -> int:
    """Round to the nearest integer, ties away from zero for positives."""
    return int(math.floor(v + c.HALF))


def _to_channel(v: float) -> int:
    """Scale a normalized component to an 8-bit channel."""
    return max(0, min(c.RGB_MAX, _round_half_up(v * c.RGB_MAX)))


def hex_to_rgb(hex_code: str) -> ColorValue:
    """Convert #RGB / #RRGGBB (hash optional) to a ColorValue."""
    match = _HEX_PATTERN.fullmatch(str(hex_code).strip())
    if not match:
        raise InvalidFormat(f"invalid hex color: '{hex_code}'", hex_code)
    digits = match.group(1)
    if len(digits) == 3:
        # e.g., 'ABC' becomes 'AABBCC'
        digits = "".join(ch * 2 for ch in digits)
    return ColorValue(*(int(digits[i : i + 2], 16) for i in (0, 2, 4)))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB channels to an uppercase #RRGGBB string."""
    return ColorValue(r, g, b).hex


def rgb_to_hsl(r: int, g: int, b: int) -> HSLValue:
    """Convert RGB to integer HSL (degrees, percent, percent)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    L = (cmax + cmin) / c.DIV_2
    if cmax == cmin:
        h = 0.0
        s = 0.0
    else:
        delta = cmax - cmin
        s = delta / (c.DIV_2 - cmax - cmin) if L > c.HALF else delta / (cmax + cmin)
        if cmax == r_f:
            h = (g_f - b_f) / delta + (c.HSL_HUE_MOD if g_f < b_f else 0.0)
        elif cmax == g_f:
            h = (b_f - r_f) / delta + c.DIV_2
        else:
            h = (r_f - g_f) / delta + c.DIV_2 * c.DIV_2
        h *= c.HUE_SECTOR
    return HSLValue(
        _round_half_up(h) % c.HUE_MAX,
        _round_half_up(s * c.PERCENT_MAX),
        _round_half_up(L * c.PERCENT_MAX),
    )


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += c.UNIT
    if t > 1:
        t -= c.UNIT
    if t < c.UNIT / 6:
        return p + (q - p) * 6 * t
    if t < c.HALF:
        return q
    if t < c.UNIT * 2 / 3:
        return p + (q - p) * (c.UNIT * 2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, L: float) -> ColorValue:
    """Convert HSL (degrees, percent, percent) to a ColorValue.

    Hue wraps around the circle; saturation and lightness are clamped
    to [0, 100] before conversion.
    """
    h_n = (h % c.HUE_MAX) / c.HUE_MAX
    s_n = max(0, min(c.PERCENT_MAX, s)) / c.PERCENT_MAX
    l_n = max(0, min(c.PERCENT_MAX, L)) / c.PERCENT_MAX

    if s_n == 0:
        r = g = b = l_n
    else:
        q = l_n * (c.UNIT + s_n) if l_n < c.HALF else l_n + s_n - l_n * s_n
        p = c.DIV_2 * l_n - q
        r = _hue_to_rgb(p, q, h_n + c.UNIT / 3)
        g = _hue_to_rgb(p, q, h_n)
        b = _hue_to_rgb(p, q, h_n - c.UNIT / 3)
    return ColorValue(_to_channel(r), _to_channel(g), _to_channel(b))


# ==========================================
# Direct Conversion Wrappers
# ==========================================


def hex_to_hsl(hex_code: str) -> HSLValue:
    """Direct Hex to HSL."""
    return rgb_to_hsl(*hex_to_rgb(hex_code))


def hsl_to_hex(h: float, s: float, L: float) -> str:
    """Direct HSL to Hex."""
    return hsl_to_rgb(h, s, L).hex


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
