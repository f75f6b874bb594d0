#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG20/#visual-audio-contrast-contrast)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Flare offset in the (L + 0.05) contrast formula

# sRGB Transfer Function Constants (Source: WCAG 2.0 relative luminance definition)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.03928        # WCAG 2.0 threshold for the linear segment

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
HALF = 0.5                         # Midpoint used for lightness branches and rounding
RGB_MAX = 255                      # 8-bit color depth limit
HUE_MAX = 360                      # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector count
PERCENT_MAX = 100                  # Saturation / lightness upper bound
RATIO_DECIMALS = 2                 # Decimal places reported for contrast ratios

# ==========================================
# Suggestion Search
# ==========================================

LIGHTNESS_STEP = 40                # Lightness shift (percentage points) for candidates
BLACK = (0, 0, 0)                  # Always-available dark text fallback
WHITE = (255, 255, 255)            # Always-available light text fallback
DEFAULT_TARGET_RATIO = WCAG_AA_NORMAL
MAX_SUGGESTIONS = 6                # Four lightness shifts plus black and white text
MAX_DISPLAY_SUGGESTIONS = 3        # Suggestions shown by the check report

# ==========================================
# CLI UI & Data Structures
# ==========================================

# Format aliases accepted on the command line
FORMAT_ALIASES = {
    'hex': 'hex',
    'rgb': 'rgb',
    'hsl': 'hsl',
    'auto': None,
}

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

LEVEL_COLORS = {
    "AAA": MSG_BOLD_COLORS["success"],
    "AA": MSG_BOLD_COLORS["warning"],
    "FAIL": MSG_BOLD_COLORS["error"],
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
