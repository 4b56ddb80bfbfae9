"""Stateful front for the curve engine.

:class:`CurveEngine` owns the current parameters and recomputes the chart
series and libinput points whenever they change. Everything it returns is an
immutable value built by :mod:`rawaccel_libinput.sampling`.
"""

from __future__ import annotations

from .config import AccelParams, EngineConfig, InvalidParameterError, default_params
from .sampling import (
    CurvePoint,
    CurveSeries,
    LibinputTable,
    build_curve_series,
    build_libinput_points,
    resample_outputs,
)


class CurveEngine:
    """Recomputes curve samples for the presentation layer.

    Attributes:
        config: Sampling constants.
    """

    def __init__(self, params: AccelParams | None = None, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        params = (params or default_params()).validate()
        self._series, self._points = self._sample(params)
        self._params = params
        self._tables: dict[tuple[int, str], LibinputTable] = {}

    @property
    def params(self) -> AccelParams:
        return self._params

    @property
    def points(self) -> tuple[CurvePoint, ...]:
        """Canonical libinput points for the current parameters."""
        return self._points

    def _sample(self, params: AccelParams) -> tuple[CurveSeries, tuple[CurvePoint, ...]]:
        config = self.config
        series = build_curve_series(
            params,
            max_speed=config.chart_max_speed,
            num_points=config.chart_num_points,
            input_offset=config.chart_input_offset,
            clamp_sharpness=config.clamp_sharpness,
        )
        points = build_libinput_points(
            params,
            num_points=config.libinput_num_points,
            max_speed=config.libinput_max_speed,
            clamp_sharpness=config.clamp_sharpness,
        )
        return series, points

    def set_params(self, params: AccelParams) -> None:
        """Validate ``params`` and recompute the series and points.

        Setting parameters equal to the current ones keeps cached results.
        """
        params.validate()
        if params == self._params:
            return

        self._series, self._points = self._sample(params)
        self._tables.clear()
        self._params = params

    def get_curve_series(self) -> CurveSeries:
        return self._series

    def get_libinput_table(self, target_point_count: int | None = None, method: str | None = None) -> LibinputTable:
        """Resample the libinput points onto ``target_point_count`` values.

        Args:
            target_point_count: Number of exported values, within
                ``config.target_range``. Defaults to ``config.default_target_points``.
            method: Resample method; defaults to ``config.resample_method``.

        Raises:
            InvalidParameterError: If the count is not an integer or is
                outside the allowed range.
        """
        config = self.config
        if target_point_count is None:
            count = config.default_target_points
        else:
            count = int(target_point_count)
            if count != target_point_count or isinstance(target_point_count, bool):
                raise InvalidParameterError(
                    f"target_point_count must be a whole number, got {target_point_count!r}."
                )
        if count not in config.target_range:
            raise InvalidParameterError(
                f"target_point_count must lie in [{config.min_target_points}, {config.max_target_points}], "
                f"got {target_point_count}.\n"
                f"libinput accepts a limited number of custom acceleration points."
            )
        method = method or config.resample_method

        key = (count, method)
        if key not in self._tables:
            values, step = resample_outputs(self._points, count, method)
            self._tables[key] = LibinputTable(
                points=self._points,
                point_step=config.libinput_step,
                values=values,
                step=step,
                method=method,
            )
        return self._tables[key]
