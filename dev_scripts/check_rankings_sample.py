from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from outcome_app import best, load_outcomes, rankall, rankhospital, to_records
from outcome_app.data_loading import discover_outcome_file
from outcome_app.data_validation import get_data_health_summary


def main() -> None:
    root = Path(__file__).resolve().parents[1]
    print(get_data_health_summary())

    path = discover_outcome_file(root)

    for record in to_records(load_outcomes(path))[:5]:
        print(record)

    print("best(TX, heart attack):", best("TX", "heart attack", path=path))
    print("rankhospital(MD, heart attack, worst):", rankhospital("MD", "heart attack", "worst", path=path))
    print("rankhospital(MN, heart attack, 5000):", rankhospital("MN", "heart attack", 5000, path=path))

    df = rankall("heart failure", 10, path=path)
    print(df.head(10).to_string(index=False))


if __name__ == "__main__":
    main()
