"""Composition root — wires concrete implementations together.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from pathlib import Path

from hr.domain.service.employee_manager import EmployeeManager

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_ROSTER_PATH = _DATA_DIR / "roster.json"
DEFAULT_LOG_LEVEL = "WARNING"


def employee_manager() -> EmployeeManager:
    return EmployeeManager()
