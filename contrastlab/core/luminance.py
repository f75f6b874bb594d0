#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/luminance.py

import functools
import math

from . import config as c


def _srgb_to_linear(color_comp: int) -> float:
    """Linearize an 8-bit sRGB component (WCAG 2.0 transfer curve)."""
    c_norm = color_comp / c.RGB_MAX
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


@functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)
def get_luminance(r: int, g: int, b: int) -> float:
    lum = math.fsum((
        c.LUMA_R * _srgb_to_linear(r),
        c.LUMA_G * _srgb_to_linear(g),
        c.LUMA_B * _srgb_to_linear(b),
    ))
    return max(0.0, min(c.UNIT, lum))


def relative_luminance(color) -> float:
    """
    Relative luminance of a color in [0, 1].

    Source: https://www.w3.org/TR/WCAG20/#relativeluminancedef
    """
    r, g, b = color
    return get_luminance(r, g, b)
