"""Pytest configuration to ensure the in-repo src package is importable."""
from __future__ import annotations

import os
import sys
from pathlib import Path

# Plots are written to files only; never open a display during tests.
os.environ.setdefault("MPLBACKEND", "Agg")

SRC_PATH = Path(__file__).resolve().parent / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))
