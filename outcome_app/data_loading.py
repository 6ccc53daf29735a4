from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from .config import Config
from .logger import logger
from .outcome_columns import HOSPITAL_NAME, RATE_COLUMNS, STATE, detect_outcome_columns


@dataclass(frozen=True)
class HospitalRecord:
    hospital_name: str
    state: str
    heart_attack: str
    heart_failure: str
    pneumonia: str


CANONICAL_COLUMNS = [HOSPITAL_NAME, STATE] + RATE_COLUMNS


def _require_file(path: Path, label: str) -> Path:
    if not path.exists():
        raise FileNotFoundError(f"Missing {label}: {path}")
    if not path.is_file():
        raise FileNotFoundError(f"Not a file for {label}: {path}")
    return path


def discover_outcome_file(base_dir: Path) -> Path:
    """Find the outcome-of-care CSV without renaming the raw download."""
    base_dir = Path(base_dir)

    exact = base_dir / Config.OUTCOME_FILENAME
    if exact.exists():
        return _require_file(exact, "outcome of care measures")

    # Fallback heuristic: e.g. "Outcome of Care Measures.csv"
    for p in sorted(base_dir.glob("*.csv")):
        name = p.name.lower()
        if "outcome" in name and "care" in name:
            return _require_file(p, "outcome of care measures")

    raise FileNotFoundError(
        f"Could not find outcome of care CSV in {base_dir}. "
        f"Expected {Config.OUTCOME_FILENAME} (or similar)."
    )


def _read_columns(path: Path) -> list[str]:
    return list(pd.read_csv(path, nrows=0, dtype=str).columns)


def load_outcomes(path: Path | None = None) -> pd.DataFrame:
    """Load the outcome-of-care dataset with every value kept as text.

    Rates are left unparsed ("Not Available" stays a string); numeric
    coercion happens when a view is sorted.
    """
    path = _require_file(Path(path) if path is not None else Config.OUTCOME_FILE, "outcome of care measures")

    raw_cols = _read_columns(path)
    found = detect_outcome_columns(raw_cols)

    df = pd.read_csv(path, dtype=str, keep_default_na=False, low_memory=False)
    df = df.rename(columns={raw: canonical for canonical, raw in found.items()})

    df[STATE] = df[STATE].astype(str).str.strip()
    df[HOSPITAL_NAME] = df[HOSPITAL_NAME].astype(str)

    rest = [c for c in df.columns if c not in CANONICAL_COLUMNS]
    df = df[CANONICAL_COLUMNS + rest].reset_index(drop=True)

    logger.info(f"Loaded {len(df):,} hospital rows from {path}")
    return df


def to_records(df: pd.DataFrame) -> list[HospitalRecord]:
    """Typed records for the canonical columns of a loaded dataset."""
    return [
        HospitalRecord(*(str(v) for v in row))
        for row in df[CANONICAL_COLUMNS].itertuples(index=False, name=None)
    ]
