"""
Shared clean-ups and schema normalisation.
"""
from __future__ import annotations
import re
from typing import Any, Dict, List

from resume2draft.patterns import BULLET_RE
from resume2draft.schema_resume import (
    EducationEntry,
    ExperienceEntry,
    ExtractedRecord,
    Profile,
    ProjectEntry,
    ResponsibilityEntry,
    SkillGroups,
)

_HSPACE = re.compile(r"[^\S\n]+")
_EDGE_SPACE = re.compile(r" ?\n ?")
_BLANK_RUN = re.compile(r"\n{3,}")

# ───────────────────────────────────────── text ──
def normalize(raw: str) -> str:
    """CRs → newlines, one space max, at most one blank line in a row."""
    text = (raw or "").replace("\r\n", "\n").replace("\r", "\n")
    text = _HSPACE.sub(" ", text)
    text = _EDGE_SPACE.sub("\n", text)
    text = _BLANK_RUN.sub("\n\n", text)
    return text.strip()

def is_bullet(line: str) -> bool:
    return bool(BULLET_RE.match(line or ""))

def strip_bullet(line: str) -> str:
    return BULLET_RE.sub("", line or "", count=1).strip()

def _sentences(raw: str | list[str]) -> List[str]:
    """Turn a long description into bullet sentences."""
    if isinstance(raw, list):
        raw = " ".join(x for x in raw if isinstance(x, str))
    bits = re.split(r"•\s*|\.\s+|\n+", (raw or "").strip())
    return [x.strip().rstrip(".") for x in bits if x.strip()]

# ───────────────────────────────────────── coercion ──
def _str(v: Any) -> str:
    return v.strip() if isinstance(v, str) else ""

def _list(v: Any) -> list:
    return v if isinstance(v, list) else []

def _strs(v: Any) -> tuple:
    return tuple(s for s in (_str(x) for x in _list(v)) if s)

def _dicts(v: Any) -> List[Dict[str, Any]]:
    return [x for x in _list(v) if isinstance(x, dict)]

def _highlights(item: Dict[str, Any]) -> tuple:
    found = _strs(item.get("highlights") or item.get("bullets"))
    if not found and item.get("description"):
        found = tuple(_sentences(item["description"]))
    return found

def _skill_groups(v: Any) -> SkillGroups:
    if not isinstance(v, dict):
        return SkillGroups()
    return SkillGroups(tuple(
        (_str(cat), _strs(vals)) for cat, vals in v.items() if _str(cat) and _strs(vals)
    ))

def coerce_record(payload: Any, raw_text: str = "") -> ExtractedRecord:
    """
    Map an untyped JSON payload onto ExtractedRecord.

    Accepts the record directly or wrapped as {"all": {...}}. Anything of the
    wrong type collapses to its default so the result always has full shape.
    """
    src = payload.get("all", payload) if isinstance(payload, dict) else {}
    if not isinstance(src, dict):
        src = {}
    p = src.get("profile") if isinstance(src.get("profile"), dict) else {}

    profile = Profile(
        full_name=_str(p.get("fullName")),
        headline=_str(p.get("headline")),
        location=_str(p.get("location")),
        email=_str(p.get("email")),
        phone=_str(p.get("phone")),
        website=_str(p.get("website")),
        github=_str(p.get("github")),
        linkedin=_str(p.get("linkedin")),
        summary=_str(p.get("summary")),
    )

    # skills may come flat, grouped, or both
    raw_skills = src.get("skills")
    groups = _skill_groups(src.get("skillGroups"))
    if isinstance(raw_skills, dict):
        groups = groups if groups.groups else _skill_groups(raw_skills)
        skills = tuple(groups.flat())
    else:
        skills = _strs(raw_skills) or tuple(groups.flat())

    education = tuple(
        EducationEntry(
            school=_str(e.get("school")),
            degree=_str(e.get("degree")),
            start=_str(e.get("start")),
            end=_str(e.get("end")),
            notes=_str(e.get("notes")),
        )
        for e in _dicts(src.get("education"))
    )
    experience = tuple(
        ExperienceEntry(
            role=_str(e.get("role") or e.get("title")),
            company=_str(e.get("company")),
            location=_str(e.get("location")),
            start=_str(e.get("start")),
            end=_str(e.get("end")),
            highlights=_highlights(e),
        )
        for e in _dicts(src.get("experience"))
    )
    projects = tuple(
        ProjectEntry(
            name=_str(x.get("name") or x.get("title")),
            link=_str(x.get("link") or x.get("url")),
            tech=_strs(x.get("tech")),
            description=_str(x.get("description")),
            highlights=_strs(x.get("highlights")),
            start=_str(x.get("start")),
            end=_str(x.get("end")),
        )
        for x in _dicts(src.get("projects"))
    )
    responsibilities = []
    for r in _list(src.get("responsibilities")):
        if isinstance(r, str) and r.strip():
            responsibilities.append(ResponsibilityEntry(title=r.strip()))
        elif isinstance(r, dict):
            responsibilities.append(ResponsibilityEntry(
                title=_str(r.get("title")),
                org=_str(r.get("org")),
                start=_str(r.get("start")),
                end=_str(r.get("end")),
                highlights=_highlights(r),
            ))

    return ExtractedRecord(
        profile=profile,
        skills=skills,
        education=education,
        experience=experience,
        projects=projects,
        responsibilities=tuple(responsibilities),
        skill_groups=groups,
        raw_text=raw_text,
    )
