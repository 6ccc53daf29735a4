from __future__ import annotations

import os
from pathlib import Path


class Config:
    # Project root = folder containing this file's parent (outcome_app/..)
    PROJECT_ROOT = Path(__file__).resolve().parents[1]

    # Raw Hospital Compare download; treated read-only.
    DATA_DIR = Path(os.environ.get("OUTCOME_DATA_DIR", str(PROJECT_ROOT)))

    OUTCOME_FILENAME = "outcome-of-care-measures.csv"
    OUTCOME_FILE = DATA_DIR / OUTCOME_FILENAME

    # Placeholder the dataset uses for suppressed rates
    NOT_AVAILABLE = "Not Available"

    LOG_LEVEL = os.environ.get("OUTCOME_LOG_LEVEL", "INFO")
