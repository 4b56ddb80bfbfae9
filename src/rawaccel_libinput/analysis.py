"""Analysis routines that render curves and export artifacts to disk."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

import matplotlib.pyplot as plt
from tqdm import tqdm

from .config import AccelParams, EngineConfig
from .engine import CurveEngine
from .export import ARTIFACT_FILENAMES, render_all
from .reporting import CurveMetrics, compute_curve_metrics, summarize_curve_metrics, summarize_libinput_table
from .sampling import CurveSeries, LibinputTable


def _get_verbosity() -> int:
    """Get verbosity level from environment: 0=quiet, 1=normal, 2=verbose."""
    return int(os.environ.get("RAWACCEL_VERBOSITY", "1"))


@dataclass(slots=True)
class AnalysisArtifacts:
    params: AccelParams
    series: CurveSeries
    table: LibinputTable
    metrics: CurveMetrics
    report: str
    texts: Dict[str, str]
    files: Dict[str, Path]


class CurveAnalysis:
    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self.engine = CurveEngine(config=self.config)

    def _plot_velocity(self, series: CurveSeries, out_path: Path) -> None:
        plt.figure(figsize=(7.5, 5.0))
        plt.plot(series.input, series.input, "-", label="Input Velocity", linewidth=2.0, color="#6366f1")
        plt.plot(series.input, series.output, "-", label="Output Velocity", linewidth=2.0, color="#ef4444")
        plt.xlim(0.0, series.max_input)
        plt.ylim(bottom=0.0)
        plt.xlabel("Input Speed (counts/ms)")
        plt.ylabel("Speed (counts/ms)")
        plt.title("Input vs Output Velocity")
        plt.grid(True, alpha=0.3)
        plt.legend(loc="upper left")
        plt.tight_layout()
        plt.savefig(out_path)
        plt.close()

    def _plot_sensitivity(self, series: CurveSeries, table: LibinputTable, out_path: Path) -> None:
        plt.figure(figsize=(7.5, 5.0))
        plt.plot(series.input, series.sensitivity, "-", label="Sensitivity Multiplier", linewidth=2.0, color="#22c55e")
        plt.scatter(table.inputs, table.sensitivities, color="black", s=12, zorder=5, label="libinput points")
        plt.xlim(0.0, series.max_input)
        plt.ylim(bottom=0.0)
        plt.xlabel("Input Speed (counts/ms)")
        plt.ylabel("Sensitivity Multiplier")
        plt.title("Sensitivity Curve")
        plt.grid(True, alpha=0.3)
        plt.legend(loc="lower right")
        plt.tight_layout()
        plt.savefig(out_path)
        plt.close()

    def run(
        self,
        params: AccelParams | None = None,
        target_point_count: int | None = None,
        output_dir: str | Path | None = None,
        method: str | None = None,
        plots: bool = True,
    ) -> AnalysisArtifacts:
        verbosity = _get_verbosity()

        if params is not None:
            self.engine.set_params(params)
        params = self.engine.params

        if verbosity >= 2:
            print(f"Sampling curve for {params}...")

        series = self.engine.get_curve_series()
        table = self.engine.get_libinput_table(target_point_count, method)
        metrics = compute_curve_metrics(series)
        report = summarize_libinput_table(table, self.config.decimals) + "\n\n" + summarize_curve_metrics(metrics)
        texts = render_all(table, self.config.decimals)

        files: Dict[str, Path] = {}
        if output_dir is not None:
            artifact_dir = Path(output_dir)
            artifact_dir.mkdir(parents=True, exist_ok=True)

            if verbosity >= 1:
                print(f"Writing artifacts to {artifact_dir}...")

            for name, text in texts.items():
                path = artifact_dir / ARTIFACT_FILENAMES[name]
                path.write_text(text + "\n")
                files[name] = path

            files["series"] = artifact_dir / "curve_series.csv"
            series.to_frame().to_csv(files["series"], index=False)
            files["report"] = artifact_dir / "libinput_table.txt"
            files["report"].write_text(report + "\n")

            if plots:
                files["velocity_plot"] = artifact_dir / "velocity_curve.png"
                files["sensitivity_plot"] = artifact_dir / "sensitivity_curve.png"
                self._plot_velocity(series, files["velocity_plot"])
                self._plot_sensitivity(series, table, files["sensitivity_plot"])

        return AnalysisArtifacts(
            params=params,
            series=series,
            table=table,
            metrics=metrics,
            report=report,
            texts=texts,
            files=files,
        )


def run_preset_batch(
    presets: Mapping[str, AccelParams],
    output_dir: str | Path,
    target_point_count: int | None = None,
    config: EngineConfig | None = None,
    plot_limit: Optional[int] = None,
) -> Dict[str, AnalysisArtifacts]:
    """Run :class:`CurveAnalysis` for several presets, one sub-directory each."""
    analysis = CurveAnalysis(config)
    disable_pbar = _get_verbosity() == 0
    results: Dict[str, AnalysisArtifacts] = {}

    preset_iter = tqdm(list(presets.items()), desc="Exporting presets", disable=disable_pbar, leave=False)
    for idx, (name, params) in enumerate(preset_iter):
        plots = plot_limit is None or idx < plot_limit
        results[name] = analysis.run(
            params=params,
            target_point_count=target_point_count,
            output_dir=Path(output_dir) / name,
            plots=plots,
        )
    return results
