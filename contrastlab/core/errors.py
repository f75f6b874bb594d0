#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/errors.py


class ColorError(ValueError):
    """Base class for every color input failure."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class InvalidFormat(ColorError):
    """Text does not match the grammar of the declared or detected format."""


class OutOfRange(ColorError):
    """A component parsed as a number but lies outside its legal domain."""


class UnrecognizedColor(ColorError):
    """Auto-detection could not classify the text as hex, rgb or hsl."""
