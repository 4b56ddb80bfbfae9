"""Unit tests for model.py module."""

import math

import numpy as np
import pytest

from rawaccel_libinput.config import AccelParams, default_params
from rawaccel_libinput.model import (
    CLAMP_SHARPNESS,
    sensitivity,
    sensitivity_array,
    sharpness_from_smooth,
)


def make_params(**overrides):
    """Helper returning default params with selected fields replaced."""
    values = default_params().as_dict()
    values.update(overrides)
    return AccelParams(**values)


class TestSharpness:
    """Test conversion of smooth into the activation exponent."""

    def test_zero_smooth_selects_clamp(self):
        assert sharpness_from_smooth(0.0) == CLAMP_SHARPNESS

    def test_negative_smooth_selects_clamp(self):
        assert sharpness_from_smooth(-1.0) == CLAMP_SHARPNESS

    def test_positive_smooth(self):
        assert sharpness_from_smooth(0.5) == 1.0
        assert sharpness_from_smooth(0.25) == 2.0


class TestSensitivityFixedPoints:
    """Test values that are fixed by construction."""

    @pytest.mark.parametrize("sync_speed", [0.5, 1.0, 4.0, 12.3])
    @pytest.mark.parametrize("smooth", [0.0, 0.1, 0.5, 2.0])
    def test_sync_speed_is_identity(self, sync_speed, smooth):
        params = make_params(sync_speed=sync_speed, smooth=smooth)
        assert sensitivity(sync_speed, params) == 1.0

    def test_zero_input_is_identity(self):
        assert sensitivity(0.0, default_params()) == 1.0

    def test_negative_input_is_identity(self):
        assert sensitivity(-5.0, default_params()) == 1.0


class TestSensitivitySmoothRegime:
    """Test the tanh activation branch."""

    def test_reference_scenario_below_sync(self):
        """sync 4, motivity 2.5, gamma 1, smooth 0.5 evaluated at 0.1."""
        params = default_params()
        value = sensitivity(0.1, params)

        gamma_const = 1.0 / math.log(2.5)
        log_space = abs(gamma_const * (math.log(0.1) - math.log(4.0)))
        expected = 2.5 ** (-math.tanh(log_space))

        assert value == pytest.approx(expected, rel=1e-12)
        assert value == pytest.approx(0.4002, abs=1e-3)
        assert 1.0 / 2.5 <= value < 1.0

    def test_above_sync_is_above_one(self):
        params = default_params()
        assert 1.0 < sensitivity(10.0, params) <= params.motivity

    def test_log_symmetry(self):
        """Speeds equally far from sync in log-space give reciprocal multipliers."""
        params = default_params()
        low = sensitivity(params.sync_speed / 3.0, params)
        high = sensitivity(params.sync_speed * 3.0, params)
        assert low * high == pytest.approx(1.0, rel=1e-12)

    def test_scale_and_dpi_do_not_affect_curve(self):
        base = default_params()
        other = make_params(scale=2.5, output_dpi=3200.0)
        for speed in (0.3, 2.0, 7.5, 40.0):
            assert sensitivity(speed, base) == sensitivity(speed, other)


class TestSensitivityClampRegime:
    """Test the linear clamp branch (smooth = 0)."""

    def test_clamp_values(self):
        params = make_params(sync_speed=4.0, motivity=2.0, gamma=1.0, smooth=0.0)
        # gamma_const = 1/ln(2), so doubling the speed saturates the clamp
        assert sensitivity(8.0, params) == pytest.approx(2.0)
        assert sensitivity(4.0 * math.sqrt(2.0), params) == pytest.approx(math.sqrt(2.0))
        assert sensitivity(2.0, params) == pytest.approx(0.5)
        assert sensitivity(100.0, params) == pytest.approx(2.0)
        assert sensitivity(0.01, params) == pytest.approx(0.5)

    def test_small_smooth_reaches_clamp(self):
        """smooth = 1/32 gives sharpness 16, the clamp threshold."""
        clamp = make_params(smooth=0.0)
        sharp = make_params(smooth=0.5 / 16.0)
        for speed in (0.5, 3.0, 5.0, 20.0):
            assert sensitivity(speed, sharp) == sensitivity(speed, clamp)

    def test_zero_smooth_clamps_with_raised_threshold(self):
        params = make_params(sync_speed=4.0, motivity=2.0, gamma=1.0, smooth=0.0)
        assert sharpness_from_smooth(0.0, clamp_sharpness=20.0) == 20.0
        assert sensitivity(8.0, params, clamp_sharpness=20.0) == pytest.approx(2.0)
        assert sensitivity(4.0 * math.sqrt(2.0), params, clamp_sharpness=20.0) == pytest.approx(math.sqrt(2.0))
        values = sensitivity_array(np.array([2.0, 8.0, 100.0]), params, clamp_sharpness=20.0)
        np.testing.assert_allclose(values, [0.5, 2.0, 2.0])

    def test_custom_clamp_threshold(self):
        params = make_params(smooth=0.25)  # sharpness 2
        smooth_value = sensitivity(6.0, params)
        clamped_value = sensitivity(6.0, params, clamp_sharpness=2.0)
        assert smooth_value != clamped_value
        assert clamped_value == sensitivity(6.0, make_params(smooth=0.0))


class TestSensitivityProperties:
    """Range and monotonicity over sampled speeds."""

    @pytest.mark.parametrize(
        "params",
        [
            default_params(),
            make_params(motivity=1.1, gamma=0.1, smooth=2.0),
            make_params(motivity=5.0, gamma=3.0, smooth=0.1),
            make_params(sync_speed=0.5, smooth=0.0),
        ],
    )
    def test_range_bound(self, params):
        speeds = np.linspace(0.01, 100.0, 2000)
        values = np.array([sensitivity(x, params) for x in speeds])
        assert np.all(values <= params.motivity + 1e-12)
        assert np.all(values >= 1.0 / params.motivity - 1e-12)

    @pytest.mark.parametrize("smooth", [0.0, 0.2, 0.5, 1.0])
    def test_monotonic_on_each_side_of_sync(self, smooth):
        params = make_params(smooth=smooth)
        below = np.linspace(0.05, params.sync_speed, 300)
        above = np.linspace(params.sync_speed, 60.0, 300)
        values_below = np.array([sensitivity(x, params) for x in below])
        values_above = np.array([sensitivity(x, params) for x in above])

        # Multiplier approaches 1 from below, then grows towards motivity.
        assert np.all(np.diff(values_below) >= -1e-12)
        assert np.all(np.diff(values_above) >= -1e-12)
        assert np.all(values_below <= 1.0)
        assert np.all(values_above >= 1.0)


class TestSensitivityArray:
    """Test the vectorized model against the scalar one."""

    @pytest.mark.parametrize("smooth", [0.0, 0.5, 1.5])
    def test_matches_scalar(self, smooth):
        params = make_params(smooth=smooth)
        speeds = np.linspace(-1.0, 50.0, 257)
        expected = np.array([sensitivity(x, params) for x in speeds])
        np.testing.assert_allclose(sensitivity_array(speeds, params), expected, rtol=1e-12)

    def test_fixed_points(self):
        params = default_params()
        values = sensitivity_array(np.array([-2.0, 0.0, params.sync_speed]), params)
        np.testing.assert_array_equal(values, [1.0, 1.0, 1.0])

    def test_does_not_modify_input(self):
        speeds = np.array([0.5, 4.0, 9.0])
        sensitivity_array(speeds, default_params())
        np.testing.assert_array_equal(speeds, [0.5, 4.0, 9.0])

    def test_empty_input(self):
        assert sensitivity_array(np.array([]), default_params()).shape == (0,)
