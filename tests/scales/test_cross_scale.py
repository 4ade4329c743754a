"""
Tests for cross-scale conversion and delta application.
"""

import pytest

from ratioscale.scales import (
    linear_scale,
    logarithmic_scale,
    rastered_linear_scale,
)


@pytest.fixture
def linear():
    return linear_scale(0, 100)


@pytest.fixture
def logarithmic():
    return logarithmic_scale(-1000, -1)


class TestConvertTo:
    @pytest.mark.parametrize(
        "value,expected",
        [
            # ratio 0 sits at the smaller magnitude of a negative log range
            (0, -1.0),
            (50, -(10**1.5)),
            (100, -1000.0),
        ],
    )
    def test_linear_to_log(self, linear, logarithmic, value, expected):
        assert linear.convert_to(logarithmic, value) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "value,expected",
        [(-1, 0.0), (-10, 100 / 3), (-100, 200 / 3), (-1000, 100.0)],
    )
    def test_log_to_linear(self, linear, logarithmic, value, expected):
        assert logarithmic.convert_to(linear, value) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize("value", [0.0, 1.0, 25.0, 50.0, 63.7, 99.0, 100.0])
    def test_inverse_round_trip(self, linear, logarithmic, value):
        there = linear.convert_to(logarithmic, value)

        assert logarithmic.convert_to(linear, there) == pytest.approx(value, abs=1e-9)

    def test_linear_to_linear(self, linear):
        assert linear.convert_to(linear_scale(0, 200), 30) == pytest.approx(60.0)
        assert linear.convert_to(linear_scale(0, 200, inverted=True), 30) == pytest.approx(140.0)

    def test_into_rastered(self, linear):
        pixels = rastered_linear_scale(0, 300, 1)

        # 0.333 * 300 = 99.9 -> 100
        assert linear.convert_to(pixels, 33.3) == 100.0

    def test_from_rastered(self, linear):
        pixels = rastered_linear_scale(0, 200, 1)

        # 99.6 -> 100 -> ratio 0.5
        assert pixels.convert_to(linear, 99.6) == 50.0


class TestApplyDeltaTo:
    def test_linear_to_linear(self, linear):
        other = linear_scale(0, 200)

        # 50 -> ratio 0.25 -> 25 + 10 -> ratio 0.35 -> 70
        assert linear.apply_delta_to(other, 10, 50) == pytest.approx(70.0)

    def test_pixels_drag_log_value(self):
        """Dragging 10 px on a 100 px track moves a log value by a tenth of its decades."""
        track = linear_scale(0, 100)
        gain = logarithmic_scale(1, 1000)

        # 10 -> ratio 1/3 -> 33.33 + 10 -> ratio 0.4333 -> 10 ** 1.3
        assert track.apply_delta_to(gain, 10, 10) == pytest.approx(10**1.3, rel=1e-9)

    def test_negative_delta(self, linear, logarithmic):
        # -100 -> ratio 2/3 -> 66.67 - 100/3 -> ratio 1/3 -> -10
        assert linear.apply_delta_to(logarithmic, -100 / 3, -100) == pytest.approx(-10.0)

    def test_zero_delta_is_identity(self, linear, logarithmic):
        assert linear.apply_delta_to(logarithmic, 0, -42.0) == pytest.approx(-42.0)

    def test_rastered_delta_snaps(self):
        slider = rastered_linear_scale(0, 100, 10)
        other = linear_scale(0, 1000)

        # 500 -> ratio 0.5 -> 50 + 4 = 54 -> snapped 50 -> ratio 0.5 -> 500
        assert slider.apply_delta_to(other, 4, 500) == 500.0
        # 50 + 6 = 56 -> snapped 60 -> 600
        assert slider.apply_delta_to(other, 6, 500) == pytest.approx(600.0)

    def test_delta_beyond_range_extrapolates(self, linear):
        other = linear_scale(0, 10)

        assert linear.apply_delta_to(other, 100, 5) == pytest.approx(15.0)
