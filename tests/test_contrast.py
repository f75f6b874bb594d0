"""Tests for contrastlab.core.luminance and contrastlab.core.contrast."""

import pytest

from contrastlab.core.contrast import check, classify, contrast_ratio, recommended_target
from contrastlab.core.luminance import relative_luminance
from contrastlab.core.types import ColorValue, Level, TextSize

WHITE = ColorValue(255, 255, 255)
BLACK = ColorValue(0, 0, 0)


class TestRelativeLuminance:
    def test_white(self):
        assert relative_luminance(WHITE) == 1.0

    def test_black(self):
        assert relative_luminance(BLACK) == 0.0

    def test_linear_segment(self):
        # 10/255 is below the 0.03928 threshold
        assert relative_luminance((10, 10, 10)) == pytest.approx((10 / 255) / 12.92)

    def test_green_dominates(self):
        assert relative_luminance((0, 255, 0)) > relative_luminance((255, 0, 0))
        assert relative_luminance((255, 0, 0)) > relative_luminance((0, 0, 255))

    def test_range(self):
        for color in [(12, 200, 99), (250, 250, 1), (3, 4, 5)]:
            assert 0.0 <= relative_luminance(color) <= 1.0


class TestContrastRatio:
    def test_black_on_white(self):
        assert contrast_ratio(WHITE, BLACK) == 21.0
        assert contrast_ratio(BLACK, WHITE) == 21.0

    def test_same_color(self):
        assert contrast_ratio((120, 30, 200), (120, 30, 200)) == 1.0

    def test_symmetry(self):
        a = ColorValue(100, 50, 200)
        b = ColorValue(120, 160, 180)
        assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_known_gray(self):
        assert contrast_ratio(WHITE, (118, 118, 118)) == pytest.approx(4.54, abs=0.01)
        assert contrast_ratio(WHITE, (119, 119, 119)) == pytest.approx(4.48, abs=0.01)


class TestClassify:
    def test_aa_boundary_is_inclusive(self):
        assert classify(4.5).level is Level.AA

    def test_just_below_aa(self):
        assert classify(4.49999).level is Level.FAIL

    def test_aaa_boundary(self):
        assert classify(7.0).level is Level.AAA

    def test_large_text_thresholds(self):
        assert classify(3.0, TextSize.LARGE).level is Level.AA
        assert classify(4.5, 'large').level is Level.AAA
        assert classify(2.99, TextSize.LARGE).level is Level.FAIL

    def test_flags_are_independent_of_level(self):
        result = classify(3.5)
        assert result.level is Level.FAIL
        assert result.passes_large_text
        assert not result.passes_normal_text
        assert not result.passes_enhanced_normal_text
        assert not result.passes_enhanced_large_text

    def test_flags_ignore_text_size(self):
        assert classify(5.0, TextSize.LARGE).passes_normal_text
        assert not classify(5.0, TextSize.NORMAL).passes_enhanced_normal_text

    def test_as_dict(self):
        d = classify(4.54321, TextSize.LARGE).as_dict()
        assert d['ratio'] == 4.54
        assert d['level'] == 'AAA'
        assert d['text_size'] == 'large'
        assert d['passes'] == {'AA': True, 'AA-Large': True, 'AAA': False, 'AAA-Large': True}


class TestCheck:
    def test_white_black(self):
        result = check(WHITE, BLACK)
        assert result.level is Level.AAA
        assert round(result.ratio, 2) == 21.0

    def test_large_flag(self):
        result = check(WHITE, (148, 148, 148), True)
        assert result.text_size is TextSize.LARGE
        assert result.level is Level.AA


class TestRecommendedTarget:
    def test_normal_text(self):
        assert recommended_target(Level.FAIL) == 4.5
        assert recommended_target(Level.AA) == 7.0
        assert recommended_target(Level.AAA) is None

    def test_large_text(self):
        assert recommended_target(Level.FAIL, TextSize.LARGE) == 3.0
        assert recommended_target('AA', TextSize.LARGE) == 4.5
