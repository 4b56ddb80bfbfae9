"""Tests for analysis.py file outputs."""

import pandas as pd
import pytest

from rawaccel_libinput.analysis import CurveAnalysis, run_preset_batch
from rawaccel_libinput.config import AccelParams, default_params
from rawaccel_libinput.export import ARTIFACT_FILENAMES


@pytest.fixture(autouse=True)
def quiet(monkeypatch):
    monkeypatch.setenv("RAWACCEL_VERBOSITY", "0")


class TestCurveAnalysis:
    def test_run_without_output_dir(self):
        artifacts = CurveAnalysis().run()
        assert artifacts.params == default_params()
        assert artifacts.files == {}
        assert artifacts.table.target_count == 20
        assert set(artifacts.texts) == set(ARTIFACT_FILENAMES)
        assert "Resampled 20 values" in artifacts.report

    def test_run_writes_artifacts(self, tmp_path):
        artifacts = CurveAnalysis().run(target_point_count=15, output_dir=tmp_path)

        for name, filename in ARTIFACT_FILENAMES.items():
            path = tmp_path / filename
            assert path.exists()
            assert path.read_text() == artifacts.texts[name] + "\n"

        frame = pd.read_csv(tmp_path / "curve_series.csv")
        assert list(frame.columns) == ["input", "output", "sensitivity"]
        assert len(frame) == 201

        assert (tmp_path / "libinput_table.txt").read_text().startswith("|")
        assert (tmp_path / "velocity_curve.png").stat().st_size > 0
        assert (tmp_path / "sensitivity_curve.png").stat().st_size > 0

    def test_run_without_plots(self, tmp_path):
        artifacts = CurveAnalysis().run(output_dir=tmp_path, plots=False)
        assert "velocity_plot" not in artifacts.files
        assert not (tmp_path / "velocity_curve.png").exists()
        assert (tmp_path / "50-mouse-accel.conf").exists()

    def test_run_with_params(self):
        params = AccelParams(sync_speed=8.0, motivity=3.0, gamma=2.0, smooth=0.0)
        analysis = CurveAnalysis()
        artifacts = analysis.run(params=params, method="bracketing")
        assert analysis.engine.params == params
        assert artifacts.table.method == "bracketing"


class TestRunPresetBatch:
    def test_batch(self, tmp_path):
        presets = {
            "default": default_params(),
            "sharp": AccelParams(sync_speed=6.0, motivity=2.0, smooth=0.0),
        }
        results = run_preset_batch(presets, tmp_path, target_point_count=30, plot_limit=1)
        assert set(results) == {"default", "sharp"}
        assert results["sharp"].table.target_count == 30
        assert (tmp_path / "default" / "velocity_curve.png").exists()
        assert not (tmp_path / "sharp" / "velocity_curve.png").exists()
        assert (tmp_path / "sharp" / "libinput_command.sh").exists()
