"""Sampling and resampling of the synchronous curve.

Two sweeps drive the curve model:

* a dense sweep over ``[0.1, max_speed + 0.1]`` used for charts
  (:func:`build_curve_series`), and
* a small uniform sweep from 0 used for libinput export
  (:func:`build_libinput_points`).

The libinput points are then re-fit onto ``K`` uniformly spaced inputs by
:func:`resample_outputs`, which is what the exported custom acceleration
function contains.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from .config import RESAMPLE_METHODS, AccelParams, InvalidParameterError
from .model import CLAMP_SHARPNESS, sensitivity_array

EMPTY_STEP = 1.0


def _frozen(values: np.ndarray) -> np.ndarray:
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class CurvePoint:
    """One sampled point: ``output = input * sensitivity(input)``."""

    input: float
    output: float


@dataclass(frozen=True)
class CurveSeries:
    """Dense sampling of the curve as three parallel arrays.

    Attributes:
        input: Input speeds [counts/ms], ascending.
        output: Output speeds [counts/ms], ``input * sensitivity``.
        sensitivity: Sensitivity multiplier at each input.
    """

    input: np.ndarray
    output: np.ndarray
    sensitivity: np.ndarray

    def __post_init__(self) -> None:
        lengths = {len(self.input), len(self.output), len(self.sensitivity)}
        if len(lengths) != 1:
            raise ValueError(
                "input, output and sensitivity must have the same length.\n"
                f"Got: input={len(self.input)}, output={len(self.output)}, "
                f"sensitivity={len(self.sensitivity)}"
            )
        object.__setattr__(self, "input", _frozen(self.input))
        object.__setattr__(self, "output", _frozen(self.output))
        object.__setattr__(self, "sensitivity", _frozen(self.sensitivity))

    def __len__(self) -> int:
        return len(self.input)

    @property
    def max_input(self) -> float:
        """Upper x-axis bound for plotting."""
        return float(np.max(self.input)) if len(self) else 0.0

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "input": self.input,
                "output": self.output,
                "sensitivity": self.sensitivity,
            }
        )


@dataclass(frozen=True)
class LibinputTable:
    """Canonical libinput points plus their uniform re-fit.

    Attributes:
        points: Directly evaluated points, uniformly spaced from input 0.
        point_step: Input spacing of ``points``.
        values: Resampled output speeds, one per exported point.
        step: Input spacing of ``values``; the libinput ``AccelStep``.
        method: Reconstruction used for ``values``.
    """

    points: tuple[CurvePoint, ...]
    point_step: float
    values: np.ndarray
    step: float
    method: str = "neighbor"

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "values", _frozen(self.values))

    @property
    def target_count(self) -> int:
        return len(self.values)

    @property
    def inputs(self) -> np.ndarray:
        return np.array([p.input for p in self.points], dtype=float)

    @property
    def outputs(self) -> np.ndarray:
        return np.array([p.output for p in self.points], dtype=float)

    @property
    def sensitivities(self) -> np.ndarray:
        """Multiplier at each canonical point; 1 at input 0."""
        inputs = self.inputs
        outputs = self.outputs
        return np.divide(outputs, inputs, out=np.ones_like(inputs), where=inputs > 0)

    @property
    def value_inputs(self) -> np.ndarray:
        """Input speeds that ``values`` correspond to."""
        return np.arange(self.target_count) * self.step


def _check_sweep(max_speed: float, num_points: int, min_points: int) -> None:
    if max_speed <= 0:
        raise InvalidParameterError(f"max_speed must be positive, got {max_speed}.")
    if num_points < min_points:
        raise InvalidParameterError(
            f"num_points must be at least {min_points}, got {num_points}."
        )


def build_curve_series(
    params: AccelParams,
    max_speed: float = 50.0,
    num_points: int = 200,
    input_offset: float = 0.1,
    clamp_sharpness: float = CLAMP_SHARPNESS,
) -> CurveSeries:
    """Evaluate the curve at ``num_points + 1`` inputs for charting.

    Inputs are ``i * (max_speed / num_points) + input_offset`` for
    ``i = 0..num_points``; the offset keeps the first sample out of log(0).
    """
    _check_sweep(max_speed, num_points, 1)
    step = max_speed / num_points
    inputs = np.arange(num_points + 1) * step + input_offset
    sens = sensitivity_array(inputs, params, clamp_sharpness)
    return CurveSeries(input=inputs, output=inputs * sens, sensitivity=sens)


def build_libinput_points(
    params: AccelParams,
    num_points: int = 20,
    max_speed: float = 20.0,
    clamp_sharpness: float = CLAMP_SHARPNESS,
) -> tuple[CurvePoint, ...]:
    """Evaluate the curve at ``num_points`` uniform inputs from 0 to ``max_speed``."""
    _check_sweep(max_speed, num_points, 2)
    step = max_speed / (num_points - 1)
    inputs = np.arange(num_points) * step
    outputs = inputs * sensitivity_array(inputs, params, clamp_sharpness)
    return tuple(CurvePoint(float(x), float(y)) for x, y in zip(inputs, outputs))


def resample_step(points: Sequence[CurvePoint], target_count: int) -> float:
    """Uniform input spacing for ``target_count`` values over ``points``."""
    if target_count < 2:
        raise InvalidParameterError(
            f"target_count must be at least 2, got {target_count}.\n"
            f"The step max(input) / (target_count - 1) is undefined otherwise."
        )
    if len(points) == 0:
        return EMPTY_STEP
    return max(p.input for p in points) / (target_count - 1)


def _nearest_neighbor_fit(inputs: np.ndarray, outputs: np.ndarray, targets: np.ndarray) -> np.ndarray:
    last = inputs.size - 1
    result = np.empty_like(targets)
    for j, target in enumerate(targets):
        # argmin keeps the first of equally close points
        closest = int(np.argmin(np.abs(inputs - target)))
        if closest == 0:
            result[j] = outputs[0]
        elif closest == last:
            result[j] = outputs[last]
        else:
            x0, x1 = inputs[closest - 1], inputs[closest + 1]
            y0, y1 = outputs[closest - 1], outputs[closest + 1]
            frac = (target - x0) / (x1 - x0)
            result[j] = y0 + frac * (y1 - y0)
    return result


def resample_outputs(
    points: Sequence[CurvePoint],
    target_count: int,
    method: str = "neighbor",
) -> tuple[np.ndarray, float]:
    """Re-fit ``points`` onto ``target_count`` uniformly spaced inputs.

    Target inputs are ``j * max(input) / (target_count - 1)``.

    With ``method="neighbor"`` each target is matched to its nearest point;
    the first and last points pass their output through, and any other
    nearest point is replaced by linear interpolation between *its two
    neighbours*. This is the reconstruction behind previously exported
    curves and is kept as the default. ``method="bracketing"`` uses ordinary
    linear interpolation between the two samples around each target.

    Args:
        points: Ordered points, typically from :func:`build_libinput_points`.
        target_count: Number of values to produce (at least 2).
        method: ``"neighbor"`` or ``"bracketing"``.

    Returns:
        ``(values, step)``. Empty ``points`` give an empty array.
    """
    if method not in RESAMPLE_METHODS:
        raise InvalidParameterError(
            f"Unknown resample method {method!r}.\n"
            f"Expected one of: {', '.join(RESAMPLE_METHODS)}."
        )
    step = resample_step(points, target_count)
    if len(points) == 0:
        return np.empty(0), step

    inputs = np.array([p.input for p in points], dtype=float)
    outputs = np.array([p.output for p in points], dtype=float)
    targets = np.arange(target_count) * step

    if method == "bracketing":
        return np.interp(targets, inputs, outputs), step
    return _nearest_neighbor_fit(inputs, outputs, targets), step


def build_libinput_table(
    params: AccelParams,
    target_count: int = 20,
    num_points: int = 20,
    max_speed: float = 20.0,
    method: str = "neighbor",
    clamp_sharpness: float = CLAMP_SHARPNESS,
) -> LibinputTable:
    """Build the canonical points and their ``target_count``-value re-fit."""
    points = build_libinput_points(params, num_points, max_speed, clamp_sharpness)
    values, step = resample_outputs(points, target_count, method)
    return LibinputTable(
        points=points,
        point_step=max_speed / (num_points - 1),
        values=values,
        step=step,
        method=method,
    )
