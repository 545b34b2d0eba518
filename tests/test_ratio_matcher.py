"""
Tests for RatioMatcher in utils/ratio_matcher.py
"""

import pytest

from constants import DEFAULT_SCREEN_RATIOS
from utils.ratio_matcher import RatioMatcher


class TestRatioMatcher:
    """Tests for screen ratio matching"""

    @pytest.fixture
    def matcher(self):
        return RatioMatcher([(1.539, 3.513), (1.547, 3.088)], tolerance=0.001)

    def test_defaults(self):
        """Test matcher uses the built-in table when none is given"""
        matcher = RatioMatcher()
        assert matcher.screen_ratios == [(float(r), float(p)) for r, p in DEFAULT_SCREEN_RATIOS]

    def test_match_14_inch(self, matcher):
        """Test 3024x1964 matches the first entry"""
        assert matcher.match(3024, 1964) == 3.513

    def test_match_16_inch(self, matcher):
        """Test 3456x2234 matches the second entry"""
        assert matcher.match(3456, 2234) == 3.088

    def test_no_match_16_9(self, matcher):
        """Test a 1920x1080 screen has no notch"""
        assert matcher.match(1920, 1080) is None
        assert matcher.notch_height_pixels(1920, 1080) == 0

    def test_notch_height_pixels(self, matcher):
        """Test notch height is rounded percentage of screen height"""
        assert matcher.notch_height_pixels(3024, 1964) == round(1964 * 3.513 / 100)
        assert matcher.notch_height_pixels(3024, 1964) == 69

    def test_scaled_resolution_matches(self, matcher):
        """Test logical (scaled) sizes match by ratio alone"""
        assert matcher.notch_height_pixels(1512, 982) == round(982 * 3.513 / 100)

    def test_outside_tolerance(self):
        """Test ratio just outside tolerance does not match"""
        matcher = RatioMatcher([(1.5, 3.0)], tolerance=0.001)
        assert matcher.match(1503, 1000) is None
        assert matcher.match(1500.5, 1000) == 3.0

    def test_first_match_wins(self):
        """Test overlapping entries resolve to the first one"""
        matcher = RatioMatcher([(1.54, 4.0), (1.541, 2.0)], tolerance=0.01)
        assert matcher.match(1540, 1000) == 4.0

    def test_empty_table(self):
        """Test empty table never matches"""
        matcher = RatioMatcher([], tolerance=1.0)
        assert matcher.notch_height_pixels(3024, 1964) == 0

    def test_zero_percent_entry(self):
        """Test a matching entry with 0% gives no notch"""
        matcher = RatioMatcher([(1.5, 0.0)], tolerance=0.001)
        assert matcher.notch_height_pixels(1500, 1000) == 0
