"""
Regex vocabulary shared by the rule-based parsers.

Patterns are compiled from the constants in config so the month list and
the institution signals can be swapped without touching the parsers.
"""

from __future__ import annotations
import re
from typing import Iterable

from resume2draft.config import INSTITUTION_SIGNALS, MONTH_NAMES

DASH = r"[–-]"
BULLET_RE = re.compile(r"^[•\-]\s+")
YEAR_RANGE_RE = re.compile(rf"(\d{{4}})\s*{DASH}\s*(\d{{4}}|Present)", re.I)
TRAILING_YEAR_RANGE_RE = re.compile(rf"\s*\d{{4}}\s*{DASH}\s*(?:\d{{4}}|Present)\s*$", re.I)


def month_alternation(months: Iterable[str]) -> str:
    """Every 3+ letter prefix of each month, longest first ("Sept" included)."""
    forms = {"Sept"}
    for name in months:
        forms.update(name[:n] for n in range(3, len(name) + 1))
    return "|".join(sorted(forms, key=len, reverse=True))


def _month_year(months: Iterable[str]) -> str:
    return rf"\b(?:{month_alternation(months)})\.?\s+\d{{4}}\b"


def build_date_range_re(months: Iterable[str] = MONTH_NAMES) -> re.Pattern:
    """`<Month> <year> – <Month> <year>|Present` with named start/end groups."""
    one = _month_year(tuple(months))
    return re.compile(rf"(?P<start>{one})\s*{DASH}\s*(?P<end>Present\b|{one})", re.I)


def build_single_date_re(months: Iterable[str] = MONTH_NAMES) -> re.Pattern:
    return re.compile(_month_year(tuple(months)), re.I)


def build_institution_re(tokens: Iterable[str] = INSTITUTION_SIGNALS) -> re.Pattern:
    alts = "|".join(re.escape(t) for t in sorted(tokens, key=len, reverse=True) if t)
    if not alts:
        return re.compile(r"(?!)")  # no signals ⇒ nothing looks like a school
    return re.compile(rf"\b(?:{alts})\b", re.I)


DATE_RANGE_RE = build_date_range_re()
SINGLE_DATE_RE = build_single_date_re()
INSTITUTION_RE = build_institution_re()
