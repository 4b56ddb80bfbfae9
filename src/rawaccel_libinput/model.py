"""Synchronous acceleration curve model.

RawAccel's synchronous mode maps an input pointer speed to a sensitivity
multiplier that is symmetric in log-space around ``sync_speed``:

    sharpness   = 16 if smooth <= 0 else 0.5 / smooth
    gamma_const = gamma / ln(motivity)
    log_diff    = ln(x) - ln(sync_speed)

    sharpness >= 16:  activation = clamp(gamma_const * log_diff, -1, 1)
    otherwise:        activation = sign(log_diff)
                                   * tanh(|gamma_const * log_diff| ** sharpness) ** (1 / sharpness)

    sensitivity = motivity ** activation

so the multiplier moves between ``1/motivity`` (slow input) and ``motivity``
(fast input) and is exactly 1 at ``sync_speed``. Once sharpness reaches 16
the tanh activation is numerically indistinguishable from a hard clamp and
the clamp is used instead.

The functions here do not validate their parameters; ``motivity <= 1`` or
``sync_speed <= 0`` give NaN or infinite results. Use
:meth:`AccelParams.validate` first.
"""

from __future__ import annotations

import math

import numpy as np

from .config import AccelParams

CLAMP_SHARPNESS = 16.0


def sharpness_from_smooth(smooth: float, clamp_sharpness: float = CLAMP_SHARPNESS) -> float:
    """Convert the ``smooth`` parameter into the activation exponent."""
    return clamp_sharpness if smooth <= 0 else 0.5 / smooth


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def sensitivity(input_speed: float, params: AccelParams, clamp_sharpness: float = CLAMP_SHARPNESS) -> float:
    """Return the sensitivity multiplier for a single input speed.

    Args:
        input_speed: Pointer speed [counts/ms]. Non-positive speeds map to 1.
        params: Synchronous acceleration parameters.
        clamp_sharpness: Sharpness at or above which the linear clamp replaces
            the tanh activation.

    Returns:
        Multiplier in ``[1/motivity, motivity]``.
    """
    if input_speed <= 0:
        return 1.0
    if input_speed == params.sync_speed:
        return 1.0

    sharpness = sharpness_from_smooth(params.smooth, clamp_sharpness)
    gamma_const = params.gamma / math.log(params.motivity)
    log_diff = math.log(input_speed) - math.log(params.sync_speed)

    if sharpness >= clamp_sharpness:
        activation = max(-1.0, min(1.0, gamma_const * log_diff))
    else:
        log_space = abs(gamma_const * log_diff)
        tanh_result = math.tanh(log_space**sharpness)
        # tanh/pow only act on the magnitude; the side of sync_speed comes back here
        activation = _sign(log_diff) * tanh_result ** (1.0 / sharpness)

    return params.motivity**activation


def sensitivity_array(
    input_speeds: np.ndarray,
    params: AccelParams,
    clamp_sharpness: float = CLAMP_SHARPNESS,
) -> np.ndarray:
    """Vectorized :func:`sensitivity` over an array of input speeds."""
    speeds = np.asarray(input_speeds, dtype=float)
    result = np.ones_like(speeds)

    active = (speeds > 0) & (speeds != params.sync_speed)
    if not np.any(active):
        return result

    sharpness = sharpness_from_smooth(params.smooth, clamp_sharpness)
    gamma_const = params.gamma / math.log(params.motivity)
    log_diff = np.log(speeds[active]) - math.log(params.sync_speed)

    if sharpness >= clamp_sharpness:
        activation = np.clip(gamma_const * log_diff, -1.0, 1.0)
    else:
        log_space = np.abs(gamma_const * log_diff)
        tanh_result = np.tanh(np.power(log_space, sharpness))
        activation = np.sign(log_diff) * np.power(tanh_result, 1.0 / sharpness)

    result[active] = np.power(params.motivity, activation)
    return result
