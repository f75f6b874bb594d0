"""Tests for contrastlab.core.suggestions: the lightness-shift search."""

import pytest

from contrastlab.core.contrast import contrast_ratio
from contrastlab.core import suggestions
from contrastlab.core.suggestions import suggest
from contrastlab.core.types import ColorValue, SuggestionKind

WHITE = ColorValue(255, 255, 255)
BLACK = ColorValue(0, 0, 0)
LIGHT_GRAY = ColorValue(200, 200, 200)


class TestSuggest:
    def test_compliant_pair_yields_nothing(self):
        assert suggest(WHITE, BLACK) == []

    def test_light_gray_on_white(self):
        result = suggest(WHITE, LIGHT_GRAY, 4.5)
        assert [s.hex for s in result] == ['#000000', '#616161']
        assert all(s.kind is SuggestionKind.TEXT for s in result)
        assert result[0].ratio == 21.0
        assert result[1].ratio == pytest.approx(6.19, abs=0.02)

    def test_sorted_descending(self):
        result = suggest(ColorValue(90, 90, 200), ColorValue(60, 60, 150), 3.0)
        ratios = [s.ratio for s in result]
        assert ratios == sorted(ratios, reverse=True)

    def test_every_suggestion_meets_target_and_improves(self):
        bg, fg = ColorValue(30, 120, 200), ColorValue(60, 140, 210)
        current = contrast_ratio(bg, fg)
        for s in suggest(bg, fg, 4.5):
            partner = bg if s.kind is SuggestionKind.TEXT else fg
            actual = contrast_ratio(partner, s.color)
            assert actual >= 4.5
            assert actual > current

    def test_ratios_rounded_to_two_decimals(self):
        for s in suggest(WHITE, ColorValue(119, 119, 119)):
            assert s.ratio == round(s.ratio, 2)

    def test_no_duplicate_entries(self):
        # black text is both the darkened text and the black fallback here
        result = suggest(WHITE, ColorValue(102, 102, 102), 7.0)
        keys = [(s.kind, s.color) for s in result]
        assert len(keys) == len(set(keys))

    def test_limit(self):
        assert len(suggest(WHITE, LIGHT_GRAY, 4.5, limit=1)) == 1

    def test_accepts_tuples(self):
        assert suggest((255, 255, 255), (200, 200, 200))[0].hex == '#000000'

    def test_as_dict(self):
        d = suggest(WHITE, LIGHT_GRAY)[0].as_dict()
        assert d == {'kind': 'text', 'color': '#000000', 'ratio': 21.0}

    def test_idempotent(self):
        bg, fg = ColorValue(30, 120, 200), ColorValue(60, 140, 210)
        assert suggest(bg, fg, 4.5) == suggest(bg, fg, 4.5)


class TestReportedRatio:
    @pytest.fixture
    def fixed_ratios(self, monkeypatch):
        # original pair at 1.5:1, every candidate at 4.503:1
        def fake_ratio(a, b):
            return 1.5 if (a, b) == (WHITE, LIGHT_GRAY) else 4.503
        monkeypatch.setattr(suggestions, 'contrast_ratio', fake_ratio)

    def test_rounded_ratio_below_target_is_dropped(self, fixed_ratios):
        assert suggest(WHITE, LIGHT_GRAY, 4.501) == []

    def test_rounded_ratio_meeting_target_is_kept(self, fixed_ratios):
        result = suggest(WHITE, LIGHT_GRAY, 4.5)
        assert result
        assert all(s.ratio == 4.5 for s in result)
