"""Configuration primitives for the RawAccel to libinput converter."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace


class InvalidParameterError(ValueError):
    """Raised when acceleration parameters or sampling settings are out of domain."""


# Slider bounds exposed by the parameter controls (min, max).
PARAMETER_RANGES: dict[str, tuple[float, float]] = {
    "sync_speed": (0.1, 20.0),
    "motivity": (1.1, 5.0),
    "gamma": (0.1, 3.0),
    "smooth": (0.1, 2.0),
    "scale": (0.1, 3.0),
    "output_dpi": (400.0, 3200.0),
}


@dataclass(frozen=True)
class AccelParams:
    """Parameters of the RawAccel "synchronous" acceleration mode.

    Attributes:
        sync_speed: Input speed [counts/ms] at which the multiplier equals 1.
            The curve is symmetric around it in log-space.
        motivity: Bound of the multiplier range ``[1/motivity, motivity]``.
        gamma: Steepness of the transition between the two asymptotes.
        smooth: Activation smoothness. ``0`` selects the hard-clamp regime.
        scale: Carried through for DPI normalization; unused by the curve.
        output_dpi: Carried through for DPI normalization; unused by the curve.

    Instances are not validated on construction so that callers can clamp
    raw slider values first. Call :meth:`validate` before evaluating.
    """

    sync_speed: float = 4.0
    motivity: float = 2.5
    gamma: float = 1.0
    smooth: float = 0.5
    scale: float = 1.0
    output_dpi: float = 1000.0

    def validate(self) -> "AccelParams":
        """Return ``self`` if the parameters are in domain, raise otherwise."""
        for field_ in fields(self):
            value = getattr(self, field_.name)
            if not math.isfinite(value):
                raise InvalidParameterError(
                    f"{field_.name} must be a finite number, got {value}.\n"
                    f"NaN or infinite parameters make every sample undefined."
                )

        if self.sync_speed <= 0:
            raise InvalidParameterError(
                f"sync_speed must be positive, got {self.sync_speed}.\n"
                f"The curve is centered on log(sync_speed), which is undefined for values <= 0."
            )
        if self.motivity <= 1:
            raise InvalidParameterError(
                f"motivity must be greater than 1, got {self.motivity}.\n"
                f"The multiplier range is [1/motivity, motivity]; log(motivity) must be positive."
            )
        if self.gamma <= 0:
            raise InvalidParameterError(
                f"gamma must be positive, got {self.gamma}.\n"
                f"Typical values lie between {PARAMETER_RANGES['gamma'][0]} and {PARAMETER_RANGES['gamma'][1]}."
            )
        if self.smooth < 0:
            raise InvalidParameterError(
                f"smooth must be non-negative, got {self.smooth}.\n"
                f"Use 0 for a hard clamp between the two asymptotes."
            )
        return self

    def clamped(self) -> "AccelParams":
        """Return a copy with every field clamped into :data:`PARAMETER_RANGES`."""
        values = {
            name: min(max(getattr(self, name), low), high)
            for name, (low, high) in PARAMETER_RANGES.items()
        }
        return replace(self, **values)

    def as_dict(self) -> dict[str, float]:
        return {field_.name: getattr(self, field_.name) for field_ in fields(self)}


def default_params() -> AccelParams:
    """Synchronous settings loaded by the "load current settings" action."""
    return AccelParams(
        sync_speed=4.0,
        motivity=2.5,
        gamma=1.0,
        smooth=0.5,
        scale=1.0,
        output_dpi=1000.0,
    )


RESAMPLE_METHODS = ("neighbor", "bracketing")


@dataclass(frozen=True)
class EngineConfig:
    """Holds the sampling constants for the curve engine.

    **Chart sweep:**
    - chart_max_speed, chart_num_points: dense sweep resolution
    - chart_input_offset: shift away from 0, where log-space is undefined

    **libinput sweep:**
    - libinput_max_speed, libinput_num_points: canonical export points
    - min/max/default_target_points: allowed resampled point counts

    **Model and export:**
    - clamp_sharpness: sharpness at which the tanh activation becomes a clamp
    - decimals: precision of every exported number
    - resample_method: ``"neighbor"`` (historical output) or ``"bracketing"``
    """

    chart_max_speed: float = 50.0
    chart_num_points: int = 200
    chart_input_offset: float = 0.1

    libinput_max_speed: float = 20.0
    libinput_num_points: int = 20
    min_target_points: int = 10
    max_target_points: int = 50
    default_target_points: int = 20

    clamp_sharpness: float = 16.0
    decimals: int = 3
    resample_method: str = "neighbor"

    def __post_init__(self) -> None:
        if self.chart_max_speed <= 0 or self.libinput_max_speed <= 0:
            raise InvalidParameterError(
                f"Sweep max speeds must be positive, got chart={self.chart_max_speed}, "
                f"libinput={self.libinput_max_speed}."
            )
        if self.chart_num_points < 1:
            raise InvalidParameterError(
                f"chart_num_points must be at least 1, got {self.chart_num_points}."
            )
        if self.libinput_num_points < 2:
            raise InvalidParameterError(
                f"libinput_num_points must be at least 2, got {self.libinput_num_points}.\n"
                f"A uniform step needs two points to be defined."
            )
        if not (2 <= self.min_target_points <= self.default_target_points <= self.max_target_points):
            raise InvalidParameterError(
                "Target point bounds must satisfy 2 <= min <= default <= max, got "
                f"min={self.min_target_points}, default={self.default_target_points}, "
                f"max={self.max_target_points}."
            )
        if self.resample_method not in RESAMPLE_METHODS:
            raise InvalidParameterError(
                f"Unknown resample method {self.resample_method!r}.\n"
                f"Expected one of: {', '.join(RESAMPLE_METHODS)}."
            )

    @property
    def chart_step(self) -> float:
        """Input spacing of the dense chart sweep [counts/ms]."""
        return self.chart_max_speed / self.chart_num_points

    @property
    def libinput_step(self) -> float:
        """Input spacing of the canonical libinput points [counts/ms]."""
        return self.libinput_max_speed / (self.libinput_num_points - 1)

    @property
    def target_range(self) -> range:
        return range(self.min_target_points, self.max_target_points + 1)
