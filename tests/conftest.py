"""Shared fixtures: a small outcome-of-care CSV in the published column layout."""

from pathlib import Path

import pandas as pd
import pytest

from outcome_app.config import Config

NA = Config.NOT_AVAILABLE


def _rate_headers(label):
    base = f"Hospital 30-Day Death (Mortality) Rates from {label}"
    return [
        base,
        f"Comparison to U.S. Rate - {base}",
        f"Lower Mortality Estimate - {base}",
        f"Upper Mortality Estimate - {base}",
        f"Number of Patients - {base}",
        f"Footnote - {base}",
    ]


HEADERS = (
    [
        "Provider Number",
        "Hospital Name",
        "Address 1",
        "Address 2",
        "Address 3",
        "City",
        "State",
        "ZIP Code",
        "County Name",
        "Phone Number",
    ]
    + _rate_headers("Heart Attack")
    + _rate_headers("Heart Failure")
    + _rate_headers("Pneumonia")
)

# (name, state, heart attack, heart failure, pneumonia)
ROWS = [
    ("B", "TX", "3.0", "10.0", "12.0"),
    ("C", "TX", "1.0", NA, "11.0"),
    ("A", "TX", NA, "9.5", NA),
    ("A2", "TX", "1.0", "9.5", "13.0"),
    ("X", "NY", "11.3", "12.0", "15.0"),
    ("Y", "NY", NA, "11.0", NA),
    ("Z CLINIC", "AK", NA, NA, NA),
]


def _build_outcome_frame(rows=ROWS, headers=HEADERS) -> pd.DataFrame:
    records = []
    for i, (name, state, ha, hf, pn) in enumerate(rows, start=1):
        values = [""] * len(headers)
        values[0] = f"{i:06d}"
        values[1] = name
        values[5] = "SOMEWHERE"
        values[6] = state
        values[10] = ha
        values[11] = "No Different than U.S. National Rate" if ha != NA else "Number of Cases Too Small"
        values[16] = hf
        values[22] = pn
        records.append(values)
    return pd.DataFrame(records, columns=headers, dtype=str)


@pytest.fixture
def outcome_headers() -> list[str]:
    return list(HEADERS)


@pytest.fixture
def outcome_rows() -> list[tuple[str, ...]]:
    return list(ROWS)


@pytest.fixture
def write_outcome_csv(tmp_path):
    """Write rows in the published layout and return the CSV path."""

    def _write(rows=ROWS, name="outcome-of-care-measures.csv") -> Path:
        path = tmp_path / name
        _build_outcome_frame(rows=rows).to_csv(path, index=False)
        return path

    return _write


@pytest.fixture
def outcome_csv(write_outcome_csv) -> Path:
    return write_outcome_csv()


@pytest.fixture
def outcomes_df(outcome_csv) -> pd.DataFrame:
    from outcome_app.data_loading import load_outcomes

    return load_outcomes(outcome_csv)
