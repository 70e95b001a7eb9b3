"""Load and validate battery ROI scenarios from JSON files."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from battery_roi.models.inputs import ROIInputs

# Default directory for scenario files
_CONFIG_DIR = Path(__file__).parent / "configs"

REFERENCE_SCENARIO = "reference_261kwh.json"


def load_scenario(file_path: Path | None = None) -> ROIInputs:
    """Load and validate ROIInputs from a JSON file.

    Fractional numbers are parsed straight to Decimal so no binary float rounding
    enters the engine. If no path is provided, loads the reference scenario.
    """
    if file_path is None:
        file_path = _CONFIG_DIR / REFERENCE_SCENARIO

    if not file_path.exists():
        raise FileNotFoundError(f"Scenario file not found: {file_path}")

    with open(file_path, "r") as f:
        raw = json.load(f, parse_float=Decimal)

    return ROIInputs.model_validate(raw)


def get_reference_scenario() -> ROIInputs:
    """Load the 261 kWh / 125 kW reference installation."""
    return load_scenario()
