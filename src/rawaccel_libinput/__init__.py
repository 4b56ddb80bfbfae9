"""RawAccel "synchronous" to libinput custom acceleration converter.

RawAccel's synchronous mode describes mouse acceleration as a smooth curve,
symmetric in log-space around a sync speed. libinput only accepts a
piecewise-linear custom acceleration function: a list of output speeds on a
uniform input step. This package evaluates the curve and resamples it into
that form.

Main Components:
    - AccelParams: The six synchronous-mode parameters
    - sensitivity: Curve model mapping input speed to a multiplier
    - build_curve_series: Dense sampling for charts
    - build_libinput_table: Uniform points plus the exported re-fit
    - CurveEngine: Stateful front that recomputes on parameter changes
    - libinput_command / xorg_config / hyprland_config: Text artifacts

Quick Start:
    >>> from rawaccel_libinput import CurveEngine, default_params, libinput_command
    >>>
    >>> engine = CurveEngine(default_params())
    >>> table = engine.get_libinput_table(20)
    >>> print(libinput_command(table))
"""

from .config import AccelParams, EngineConfig, InvalidParameterError, default_params
from .engine import CurveEngine
from .export import hyprland_config, libinput_command, render_all, xorg_config
from .model import sensitivity, sensitivity_array
from .sampling import (
    CurvePoint,
    CurveSeries,
    LibinputTable,
    build_curve_series,
    build_libinput_points,
    build_libinput_table,
    resample_outputs,
)

__all__ = [
    "AccelParams",
    "EngineConfig",
    "InvalidParameterError",
    "default_params",
    "CurveEngine",
    "sensitivity",
    "sensitivity_array",
    "CurvePoint",
    "CurveSeries",
    "LibinputTable",
    "build_curve_series",
    "build_libinput_points",
    "build_libinput_table",
    "resample_outputs",
    "libinput_command",
    "xorg_config",
    "hyprland_config",
    "render_all",
]
