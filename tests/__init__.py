"""Test package for playerstats."""

from __future__ import annotations

import sys
from pathlib import Path


# Make ``playerstats`` importable from src/ when the project is not installed.
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if SRC_ROOT.exists() and str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))
