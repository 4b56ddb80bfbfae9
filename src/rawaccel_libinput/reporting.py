"""Reporting utilities for sampled curves."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from tabulate import tabulate

from .export import format_number, format_values
from .sampling import CurveSeries, LibinputTable


@dataclass(frozen=True)
class CurveMetrics:
    min_sensitivity: float
    max_sensitivity: float
    speed_at_min: float
    speed_at_max: float
    max_output: float
    n_points: int


def compute_curve_metrics(series: CurveSeries) -> CurveMetrics:
    if len(series) == 0:
        raise ValueError("Cannot compute metrics for an empty curve series.")
    min_idx = int(np.argmin(series.sensitivity))
    max_idx = int(np.argmax(series.sensitivity))
    return CurveMetrics(
        min_sensitivity=float(series.sensitivity[min_idx]),
        max_sensitivity=float(series.sensitivity[max_idx]),
        speed_at_min=float(series.input[min_idx]),
        speed_at_max=float(series.input[max_idx]),
        max_output=float(np.max(series.output)),
        n_points=len(series),
    )


def summarize_libinput_table(table: LibinputTable, decimals: int = 3) -> str:
    rows: list[tuple] = []
    for idx, (point, sens) in enumerate(zip(table.points, table.sensitivities)):
        rows.append(
            (
                idx,
                format_number(point.input, decimals),
                format_number(point.output, decimals),
                format_number(sens, decimals),
            )
        )
    body = tabulate(
        rows,
        headers=["#", "Input [counts/ms]", "Output [counts/ms]", "Sensitivity"],
        tablefmt="github",
    )
    footer = (
        f"Resampled {table.target_count} values ({table.method}), "
        f"step {format_number(table.step, decimals)}: {format_values(table.values, decimals)}"
    )
    return body + "\n" + footer


def summarize_curve_metrics(metrics: CurveMetrics) -> str:
    rows = [
        ("Min sensitivity", f"{metrics.min_sensitivity:.4f}", f"{metrics.speed_at_min:.2f}"),
        ("Max sensitivity", f"{metrics.max_sensitivity:.4f}", f"{metrics.speed_at_max:.2f}"),
    ]
    table = tabulate(rows, headers=["Metric", "Value", "At input [counts/ms]"], tablefmt="github")
    return table + "\n" + f"Max output speed: {metrics.max_output:.2f} counts/ms over {metrics.n_points} samples"
