"""Tests for contrastlab.shared.sanitizer: argparse type validators."""

import argparse

import pytest

from contrastlab.core.types import ColorValue
from contrastlab.shared.sanitizer import INPUT_HANDLERS, handle_int_range, resolve_color_or_exit


class TestFormatHandler:
    def test_case_insensitive(self):
        assert INPUT_HANDLERS['format']('HEX') == 'hex'

    def test_auto(self):
        assert INPUT_HANDLERS['format']('auto') == 'auto'

    def test_unknown(self):
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS['format']('cmyk')


class TestRatioHandler:
    def test_plain_number(self):
        assert INPUT_HANDLERS['ratio']('7') == 7.0

    def test_ratio_suffix(self):
        assert INPUT_HANDLERS['ratio']('4.5:1') == 4.5

    def test_above_21(self):
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS['ratio']('30')

    def test_garbage(self):
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS['ratio']('high')


class TestIntRange:
    def test_clamps(self):
        validator = handle_int_range(1, 6)
        assert validator('10') == 6
        assert validator('0') == 1
        assert validator('3') == 3

    def test_no_digits(self):
        with pytest.raises(argparse.ArgumentTypeError):
            handle_int_range(1, 6)('many')


class TestResolveColor:
    def test_valid(self):
        assert resolve_color_or_exit('#fff', 'auto', 'text') == ColorValue(255, 255, 255)

    def test_invalid_exits_with_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            resolve_color_or_exit('#ff0000', 'rgb', 'text')
        assert exc.value.code == 2
        assert 'invalid text color' in capsys.readouterr().err
