#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/types.py

"""Value types shared by the codec, contrast and suggestion modules."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Optional

from . import config as c
from .errors import InvalidFormat, OutOfRange


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"

    @classmethod
    def coerce(cls, value) -> Optional["ColorFormat"]:
        """Map a format name (any case) to a member, or None if unknown."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class TextSize(str, Enum):
    NORMAL = "normal"
    LARGE = "large"

    @classmethod
    def coerce(cls, value) -> "TextSize":
        if isinstance(value, cls):
            return value
        if value is True:
            return cls.LARGE
        if value in (None, False):
            return cls.NORMAL
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown text size: '{value}'")


class Level(str, Enum):
    FAIL = "FAIL"
    AA = "AA"
    AAA = "AAA"


class SuggestionKind(str, Enum):
    TEXT = "text"
    BACKGROUND = "background"


@dataclass(frozen=True)
class ColorValue:
    """Canonical sRGB color: three integer channels in [0, 255]."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidFormat(f"channel {name} must be an integer, got {v!r}", v)
            if not 0 <= v <= c.RGB_MAX:
                raise OutOfRange(f"channel {name}={v} outside 0-{c.RGB_MAX}", v)

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


@dataclass(frozen=True)
class HSLValue:
    """Integer HSL triple: h in [0, 360), s and l in [0, 100]."""

    h: int
    s: int
    l: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.h, self.s, self.l))


@dataclass(frozen=True)
class ComplianceResult:
    ratio: float
    level: Level
    passes_normal_text: bool
    passes_large_text: bool
    passes_enhanced_normal_text: bool
    passes_enhanced_large_text: bool
    text_size: TextSize = TextSize.NORMAL

    def as_dict(self) -> Dict[str, Any]:
        return {
            "ratio": round(self.ratio, c.RATIO_DECIMALS),
            "level": self.level.value,
            "text_size": self.text_size.value,
            "passes": {
                "AA": self.passes_normal_text,
                "AA-Large": self.passes_large_text,
                "AAA": self.passes_enhanced_normal_text,
                "AAA-Large": self.passes_enhanced_large_text,
            },
        }


@dataclass(frozen=True)
class Suggestion:
    kind: SuggestionKind
    color: ColorValue
    ratio: float

    @property
    def hex(self) -> str:
        return self.color.hex

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "color": self.color.hex, "ratio": self.ratio}
