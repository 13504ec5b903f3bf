"""
Value records produced by one extraction call.

Every record is a frozen dataclass; sequences are tuples. `to_dict()` gives
the JSON shape the editor draft consumes: every collection present (maybe
empty) and every string defaulting to "".
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from resume2draft.config import FLAT_SKILLS_CAP


@dataclass(frozen=True)
class ContactInfo:
    email: str = ""
    phone: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    website_url: str = ""


@dataclass(frozen=True)
class EducationEntry:
    school: str = ""
    degree: str = ""
    start: str = ""
    end: str = ""
    notes: str = ""

    def to_dict(self) -> Dict:
        return {"school": self.school, "degree": self.degree,
                "start": self.start, "end": self.end, "notes": self.notes}


@dataclass(frozen=True)
class ExperienceEntry:
    role: str = ""
    company: str = ""
    location: str = ""
    start: str = ""
    end: str = ""
    highlights: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        return {"role": self.role, "company": self.company, "location": self.location,
                "start": self.start, "end": self.end, "highlights": list(self.highlights)}


@dataclass(frozen=True)
class ProjectEntry:
    name: str = ""
    link: str = ""
    tech: Tuple[str, ...] = ()
    description: str = ""
    highlights: Tuple[str, ...] = ()
    start: str = ""
    end: str = ""

    def to_dict(self) -> Dict:
        return {"name": self.name, "link": self.link, "tech": list(self.tech),
                "description": self.description, "highlights": list(self.highlights),
                "start": self.start, "end": self.end}


@dataclass(frozen=True)
class ResponsibilityEntry:
    title: str = ""
    org: str = ""
    start: str = ""
    end: str = ""
    highlights: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        return {"title": self.title, "org": self.org, "start": self.start,
                "end": self.end, "highlights": list(self.highlights)}


@dataclass(frozen=True)
class SkillGroups:
    """Ordered (category, values) pairs, e.g. ("Languages", ("Python", "Go"))."""

    groups: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()

    def as_dict(self) -> Dict[str, List[str]]:
        return {cat: list(vals) for cat, vals in self.groups}

    def flat(self, cap: int = FLAT_SKILLS_CAP) -> List[str]:
        """All values in category order, de-duplicated, at most `cap` long."""
        seen, out = set(), []
        for _, vals in self.groups:
            for v in vals:
                if v not in seen:
                    seen.add(v)
                    out.append(v)
        return out[:cap]


@dataclass(frozen=True)
class Profile:
    full_name: str = ""
    headline: str = ""
    location: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    github: str = ""
    linkedin: str = ""
    summary: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "fullName": self.full_name,
            "headline": self.headline,
            "location": self.location,
            "email": self.email,
            "phone": self.phone,
            "website": self.website,
            "github": self.github,
            "linkedin": self.linkedin,
            "summary": self.summary,
        }


@dataclass(frozen=True)
class ExtractedRecord:
    profile: Profile = field(default_factory=Profile)
    skills: Tuple[str, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    responsibilities: Tuple[ResponsibilityEntry, ...] = ()
    skill_groups: SkillGroups = field(default_factory=SkillGroups)
    raw_text: str = ""

    def to_dict(self) -> Dict:
        return {
            "profile": self.profile.to_dict(),
            "skills": list(self.skills),
            "education": [e.to_dict() for e in self.education],
            "experience": [e.to_dict() for e in self.experience],
            "projects": [p.to_dict() for p in self.projects],
            "responsibilities": [r.to_dict() for r in self.responsibilities],
            "skillGroups": self.skill_groups.as_dict(),
            "_rawText": self.raw_text,
        }


def empty_record(raw_text: str = "") -> ExtractedRecord:
    """The canonical all-default record."""
    return ExtractedRecord(raw_text=raw_text)


# canonical schema (empty lists – no placeholders)
RESUME_SCHEMA = {k: v for k, v in empty_record().to_dict().items() if k != "_rawText"}

# one template per collection item, shown to the model next to RESUME_SCHEMA
ITEM_SCHEMAS = {
    "education": EducationEntry().to_dict(),
    "experience": ExperienceEntry().to_dict(),
    "projects": ProjectEntry().to_dict(),
    "responsibilities": ResponsibilityEntry().to_dict(),
    "skills": "string",
    "skillGroups": {"<category>": ["string"]},
}
