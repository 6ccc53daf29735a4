"""
Tests for outcome name resolution and CSV header detection.
"""

import pytest

from outcome_app.errors import InvalidOutcome
from outcome_app.outcome_columns import (
    Outcome,
    detect_outcome_columns,
    get_mortality_column,
    parse_outcome,
)

class TestGetMortalityColumn:
    """Outcome name -> rate column."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("heart attack", "heart_attack"),
            ("heart failure", "heart_failure"),
            ("pneumonia", "pneumonia"),
        ],
    )
    def test_known_outcomes(self, name, expected):
        assert get_mortality_column(name) == expected

    def test_columns_are_distinct_and_stable(self):
        first = [get_mortality_column(o.value) for o in Outcome]
        second = [get_mortality_column(o.value) for o in Outcome]
        assert first == second
        assert len(set(first)) == 3

    def test_accepts_enum_member(self):
        assert get_mortality_column(Outcome.PNEUMONIA) == "pneumonia"

    def test_ignores_case_and_whitespace(self):
        assert parse_outcome("  Heart Attack ") is Outcome.HEART_ATTACK

    @pytest.mark.parametrize("name", ["stroke", "heart_attack", "", None, 11])
    def test_unknown_outcome_raises(self, name):
        with pytest.raises(InvalidOutcome) as exc:
            get_mortality_column(name)
        assert str(exc.value) == "invalid outcome"
        assert exc.value.value == name

    def test_invalid_outcome_is_value_error(self):
        with pytest.raises(ValueError):
            parse_outcome("asthma")

class TestDetectOutcomeColumns:
    """Raw header detection."""

    def test_detects_published_headers(self, outcome_headers):
        found = detect_outcome_columns(outcome_headers)
        assert found["hospital_name"] == "Hospital Name"
        assert found["state"] == "State"
        assert found["heart_attack"] == "Hospital 30-Day Death (Mortality) Rates from Heart Attack"
        assert found["heart_failure"] == "Hospital 30-Day Death (Mortality) Rates from Heart Failure"
        assert found["pneumonia"] == "Hospital 30-Day Death (Mortality) Rates from Pneumonia"

    def test_detects_r_style_dotted_headers(self, outcome_headers):
        cols = [h.replace(" ", ".").replace("-", ".").replace("(", ".").replace(")", ".") for h in outcome_headers]
        found = detect_outcome_columns(cols)
        assert found["hospital_name"] == "Hospital.Name"
        assert found["heart_attack"] == cols[10]
        assert found["heart_failure"] == cols[16]
        assert found["pneumonia"] == cols[22]

    def test_falls_back_to_fixed_positions(self):
        cols = [f"col{i}" for i in range(1, 25)]
        found = detect_outcome_columns(cols)
        assert found == {
            "hospital_name": "col2",
            "state": "col7",
            "heart_attack": "col11",
            "heart_failure": "col17",
            "pneumonia": "col23",
        }

    def test_missing_columns_raise_key_error(self):
        with pytest.raises(KeyError, match="pneumonia"):
            detect_outcome_columns([f"col{i}" for i in range(1, 18)])
