from __future__ import annotations

import re

import pandas as pd


def to_num(s: pd.Series) -> pd.Series:
    return pd.to_numeric(s, errors="coerce")


def pick_column(
    cols,
    preferred_exact=(),
    contains_any=(),
    regexes=(),
) -> str | None:
    cl = list(cols)
    cl_lower = [str(c).lower() for c in cl]
    for p in preferred_exact:
        p = p.lower()
        for i, c in enumerate(cl_lower):
            if c == p:
                return cl[i]
    for frag in contains_any:
        frag = frag.lower()
        for i, c in enumerate(cl_lower):
            if frag in c:
                return cl[i]
    for pat in regexes:
        rx = re.compile(pat, re.I)
        for c in cl:
            if rx.search(str(c)):
                return c
    return None


def column_at(cols, position: int) -> str | None:
    """Return the header at a 1-based position, or None when out of range."""
    cl = list(cols)
    if 1 <= position <= len(cl):
        return cl[position - 1]
    return None
