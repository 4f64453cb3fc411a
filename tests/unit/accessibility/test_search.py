"""Tests for brightness boundary search."""

from __future__ import annotations

import pytest

from huecurve.core.accessibility.contrast import contrast_ratio
from huecurve.core.accessibility.convert import hsv_to_hex
from huecurve.core.accessibility.search import find_threshold, find_threshold_linear

SEARCHES = [find_threshold, find_threshold_linear]


@pytest.mark.parametrize("search", SEARCHES)
class TestLightBackground:
    """Searches against white: highest brightness that still passes."""

    def test_gray_boundary(self, search):
        """Gray at v=46 (#757575) passes 4.5:1 on white; v=47 (#787878) does not."""
        assert search("#ffffff", 0, 0, 4.5, True) == 46

    def test_everything_passes_returns_max(self, search):
        """A threshold of 1 is met even by white itself."""
        assert search("#ffffff", 0, 0, 1.0, True) == 100

    def test_black_fails_returns_none(self, search):
        """Nothing reaches the threshold on a light gray at 21:1."""
        assert search("#f0f0f0", 0, 50, 21.0, True) is None

    @pytest.mark.parametrize("hue,saturation", [(0, 100), (217, 60), (120, 30), (300, 85)])
    def test_result_is_boundary(self, search, hue: float, saturation: int):
        """Result passes and the next brightness fails."""
        value = search("#ffffff", hue, saturation, 4.5, True)
        assert value is not None
        assert contrast_ratio("#ffffff", hsv_to_hex(hue, saturation, value)) >= 4.5
        if value < 100:
            assert contrast_ratio("#ffffff", hsv_to_hex(hue, saturation, value + 1)) < 4.5


@pytest.mark.parametrize("search", SEARCHES)
class TestDarkBackground:
    """Searches against black: lowest brightness that passes."""

    def test_gray_boundary(self, search):
        """Gray at v=46 (#757575) passes 4.5:1 on black; v=45 (#737373) does not."""
        assert search("#000000", 0, 0, 4.5, False) == 46

    def test_everything_passes_returns_min(self, search):
        assert search("#000000", 0, 0, 1.0, False) == 0

    def test_saturated_blue_returns_none(self, search):
        """Pure blue only reaches ~2.4:1 on black."""
        assert search("#000000", 240, 100, 4.5, False) is None

    @pytest.mark.parametrize("hue,saturation", [(30, 60), (60, 100), (217, 40), (200, 10)])
    def test_result_is_boundary(self, search, hue: float, saturation: int):
        """Result passes and the previous brightness fails."""
        value = search("#1e293b", hue, saturation, 4.5, False)
        assert value is not None
        assert contrast_ratio("#1e293b", hsv_to_hex(hue, saturation, value)) >= 4.5
        if value > 0:
            assert contrast_ratio("#1e293b", hsv_to_hex(hue, saturation, value - 1)) < 4.5


class TestLinearStart:
    """Tests for the seeded linear scan."""

    @pytest.mark.parametrize("start", [0, 20, 46, 80, 100])
    def test_start_does_not_change_result_on_light(self, start: int):
        assert find_threshold_linear("#ffffff", 0, 0, 4.5, True, start=start) == 46

    @pytest.mark.parametrize("start", [0, 20, 46, 80, 100])
    def test_start_does_not_change_result_on_dark(self, start: int):
        assert find_threshold_linear("#000000", 0, 0, 4.5, False, start=start) == 46

    def test_out_of_range_start_is_clamped(self):
        assert find_threshold_linear("#ffffff", 0, 0, 4.5, True, start=-10) == 46
        assert find_threshold_linear("#000000", 0, 0, 4.5, False, start=250) == 46
