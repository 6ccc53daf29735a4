"""Data health checks for the outcome-of-care CSV."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from .config import Config


def check_data_files(path: Path | None = None) -> Dict[str, Dict[str, Any]]:
    """
    Check if the outcome data file exists and is accessible.

    Returns:
        Dictionary with status for each data source
    """
    outcome_path = Path(path) if path is not None else Config.OUTCOME_FILE
    return {
        "outcome_of_care": {
            "exists": outcome_path.exists(),
            "path": str(outcome_path),
            "readable": outcome_path.exists() and outcome_path.is_file(),
        },
    }


def get_data_health_summary(path: Path | None = None) -> str:
    """Get a human-readable summary of data file health."""
    status = check_data_files(path)

    issues = []
    for name, info in status.items():
        if not info["exists"]:
            issues.append(f"{name}: File/directory not found at {info['path']}")
        elif not info["readable"]:
            issues.append(f"{name}: File/directory exists but is not readable")

    if not issues:
        return "All required data files are present and accessible."

    return "Data file issues:\n" + "\n".join(f"  - {issue}" for issue in issues)
