"""
Split résumé lines into named sections using a fixed heading vocabulary.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from resume2draft.config import HEADER_SECTION, SECTION_HEADINGS

SectionMap = Mapping[str, Tuple[str, ...]]


def split_lines(text: str) -> List[str]:
    return [ln.strip() for ln in (text or "").split("\n") if ln.strip()]


def segment(
    lines: Iterable[str],
    headings: Iterable[str] = SECTION_HEADINGS,
    header: str = HEADER_SECTION,
) -> SectionMap:
    """
    Assign every non-blank line to the section opened by the last heading.

    Lines before the first heading land in `header`. Only exact heading
    matches open a section; a repeated heading continues its earlier list.
    """
    known = frozenset(headings)
    sections: Dict[str, List[str]] = {header: []}
    current = header
    for raw in lines:
        line = (raw or "").strip()
        if not line:
            continue
        if line in known:
            current = line
            sections.setdefault(current, [])
            continue
        sections[current].append(line)
    return MappingProxyType({k: tuple(v) for k, v in sections.items()})
