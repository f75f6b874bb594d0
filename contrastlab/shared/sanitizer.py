#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/sanitizer.py

import argparse
import re

from contrastlab.core import config as c
from contrastlab.core.codec import parse
from contrastlab.core.errors import ColorError
from contrastlab.core.types import ColorValue
from .logger import fail


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_alpha_only(value: str) -> str:
    """Extracts only alphabetical characters from a string, lowercasing them."""
    if value is None:
        return ""
    return "".join(re.findall(r"[a-z]", str(value).lower()))


def _extract_positive_float(value: str) -> float:
    """
    Extracts a non-negative float, tolerating a trailing ':1' ratio suffix
    (e.g., '4.5:1' -> 4.5).
    """
    if value is None:
        return None
    s = str(value).strip()
    s = re.sub(r":\s*1$", "", s)
    try:
        return float(s)
    except ValueError:
        return None


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_format(v: str) -> str:
    """Validator for color format names; 'auto' maps to auto-detection."""
    cleaned = _extract_alpha_only(v)
    if cleaned not in c.FORMAT_ALIASES:
        raw = _sanitize_for_log(v)
        choices = ", ".join(c.FORMAT_ALIASES)
        raise argparse.ArgumentTypeError(f"invalid format: '{raw}' (choose from {choices})")
    return cleaned


def handle_ratio(v: str) -> float:
    """Validator for contrast ratios; only the WCAG range 1-21 is meaningful."""
    val = _extract_positive_float(v)
    if val is None or not c.WCAG_MIN_RATIO <= val <= c.WCAG_MAX_RATIO:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid contrast ratio: '{raw}' (expected {c.WCAG_MIN_RATIO:g} to {c.WCAG_MAX_RATIO:g})"
        )
    return val


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        digits = "".join(re.findall(r"[0-9]", str(v)))
        if not digits:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")
        return max(min_v, min(max_v, int(digits)))
    return validator


def resolve_color_or_exit(value: str, fmt: str, label: str) -> ColorValue:
    """Parse a CLI color value, logging the failure and exiting with 2."""
    try:
        return parse(value, c.FORMAT_ALIASES.get(fmt))
    except ColorError as e:
        fail(f"invalid {label} color: {e}", hint="accepted forms: #RGB, #RRGGBB, rgb(r, g, b), hsl(h, s%, l%)")


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "format": handle_format,
    "ratio": handle_ratio,
    "limit": handle_int_range(1, c.MAX_SUGGESTIONS),
}
