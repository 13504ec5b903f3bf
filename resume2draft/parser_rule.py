"""
Rule-based résumé parser.

normalize → {contacts, sections} → per-section parsers → assemble.
Nothing here raises on odd input: unmatched lines are skipped and missing
sections come back as empty lists.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from resume2draft.cleaner import is_bullet, normalize, strip_bullet
from resume2draft.config import FALLBACK_FULL_NAME, FLAT_SKILLS_CAP, HEADER_SECTION
from resume2draft.contacts import extract_contacts
from resume2draft.extraction import ResumeExtractor
from resume2draft.patterns import (
    DATE_RANGE_RE,
    INSTITUTION_RE,
    SINGLE_DATE_RE,
    TRAILING_YEAR_RANGE_RE,
    YEAR_RANGE_RE,
)
from resume2draft.schema_resume import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ExtractedRecord,
    Profile,
    ProjectEntry,
    ResponsibilityEntry,
    SkillGroups,
)
from resume2draft.sections import SectionMap, segment, split_lines

logger = logging.getLogger(__name__)

Opener = Callable[[Sequence[str], int], Optional[re.Match]]
Builder = Callable[[re.Match, List[str], Tuple[str, ...]], object]


# ───────────────────────────────────────── scanner ──
def collect_bullets(lines: Sequence[str], i: int) -> Tuple[Tuple[str, ...], int]:
    """Contiguous bullet lines from `i`, stripped; returns (bullets, next i)."""
    out = []
    while i < len(lines) and is_bullet(lines[i]):
        out.append(strip_bullet(lines[i]))
        i += 1
    return tuple(out), i


def scan_entries(
    lines: Sequence[str],
    opens: Opener,
    build: Builder,
    fixed_lines: int = 1,
    with_bullets: bool = True,
) -> List:
    """
    Scan / match / consume a fixed-shape block, else skip one line.

    `opens(lines, i)` returns a match when line i starts an entry. The entry
    then takes `fixed_lines` lines (padded with "" past the end), then all
    following bullets when `with_bullets` is set.
    """
    entries = []
    i = 0
    while i < len(lines):
        m = opens(lines, i)
        if m is None:
            i += 1
            continue
        head = list(lines[i:i + fixed_lines])
        head += [""] * (fixed_lines - len(head))
        i = min(i + fixed_lines, len(lines))
        bullets: Tuple[str, ...] = ()
        if with_bullets:
            bullets, i = collect_bullets(lines, i)
        entries.append(build(m, head, bullets))
    return entries


def _without(pattern: re.Pattern, line: str) -> str:
    return " ".join(pattern.sub(" ", line).split())


def _date_range(line: str) -> Optional[re.Match]:
    return DATE_RANGE_RE.search(line)


# ───────────────────────────────────────── sections ──
def parse_education(lines: Sequence[str], institution: re.Pattern = INSTITUTION_RE) -> List[EducationEntry]:
    def opens(ls, i):
        if i + 1 >= len(ls) or not institution.search(ls[i]):
            return None
        return YEAR_RANGE_RE.search(ls[i + 1])

    def build(m, head, _):
        return EducationEntry(
            school=head[0],
            degree=TRAILING_YEAR_RANGE_RE.sub("", head[1]).strip(),
            start=m.group(1),
            end=m.group(2),
        )

    return scan_entries(lines, opens, build, fixed_lines=2, with_bullets=False)


def split_company_line(line: str) -> Tuple[str, str]:
    """'Acme Corp Remote / Pune' → ('Acme Corp', '/ Pune')."""
    if "Remote" not in line:
        return line.strip(), ""
    company, sep, rest = line.partition(" Remote")
    if not sep:
        return line.strip(), ""
    return company.strip(), rest.strip()


def parse_experience(lines: Sequence[str]) -> List[ExperienceEntry]:
    def build(m, head, bullets):
        company, location = split_company_line(head[1])
        return ExperienceEntry(
            role=_without(DATE_RANGE_RE, head[0]),
            company=company,
            location=location,
            start=m.group("start").strip(),
            end=m.group("end").strip(),
            highlights=bullets,
        )

    return scan_entries(lines, lambda ls, i: _date_range(ls[i]), build, fixed_lines=2)


def parse_responsibilities(lines: Sequence[str]) -> List[ResponsibilityEntry]:
    def build(m, head, bullets):
        return ResponsibilityEntry(
            title=_without(DATE_RANGE_RE, head[0]),
            org=head[1],
            start=m.group("start").strip(),
            end=m.group("end").strip(),
            highlights=bullets,
        )

    return scan_entries(lines, lambda ls, i: _date_range(ls[i]), build, fixed_lines=2)


def _split_csv(text: str) -> Tuple[str, ...]:
    return tuple(x.strip() for x in text.split(",") if x.strip())


def parse_projects(lines: Sequence[str]) -> List[ProjectEntry]:
    def opens(ls, i):
        return re.search(r"\|", ls[i])

    def build(_, head, bullets):
        name, _, right = head[0].partition("|")
        start = end = ""
        if m := DATE_RANGE_RE.search(right):
            start, end = m.group("start").strip(), m.group("end").strip()
            right = right[:m.start()] + " " + right[m.end():]
        elif m := SINGLE_DATE_RE.search(right):
            start = end = m.group().strip()
            right = right[:m.start()] + " " + right[m.end():]
        return ProjectEntry(
            name=name.strip(),
            tech=_split_csv(right.replace("|", ",")),
            description=bullets[0] if bullets else "",
            highlights=bullets[1:],
            start=start,
            end=end,
        )

    return scan_entries(lines, opens, build, fixed_lines=1)


def parse_skills(lines: Sequence[str]) -> SkillGroups:
    """'Languages: Python, Go' lines → ordered groups; other lines ignored."""
    groups: Dict[str, Tuple[str, ...]] = {}
    for line in lines:
        if ":" not in line:
            continue
        key, _, values = line.partition(":")
        if key.strip():
            groups[key.strip()] = _split_csv(values)
    return SkillGroups(tuple(groups.items()))


# ───────────────────────────────────────── assembly ──
@dataclass(frozen=True)
class ParsedSections:
    education: Tuple[EducationEntry, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    skills: SkillGroups = field(default_factory=SkillGroups)
    responsibilities: Tuple[ResponsibilityEntry, ...] = ()


def parse_sections(sections: SectionMap) -> ParsedSections:
    return ParsedSections(
        education=tuple(parse_education(sections.get("Education", ()))),
        experience=tuple(parse_experience(sections.get("Experience", ()))),
        projects=tuple(parse_projects(sections.get("Projects", ()))),
        skills=parse_skills(sections.get("Technical Skills", ())),
        responsibilities=tuple(parse_responsibilities(sections.get("Positions of Responsibility", ()))),
    )


def assemble(
    sections: SectionMap,
    contacts: ContactInfo,
    parsed: ParsedSections,
    raw_text: str = "",
    skills_cap: int = FLAT_SKILLS_CAP,
) -> ExtractedRecord:
    header = sections.get(HEADER_SECTION, ())
    profile = Profile(
        full_name=header[0] if header else FALLBACK_FULL_NAME,
        email=contacts.email,
        phone=contacts.phone,
        website=contacts.website_url,
        github=contacts.github_url,
        linkedin=contacts.linkedin_url,
    )
    return ExtractedRecord(
        profile=profile,
        skills=tuple(parsed.skills.flat(skills_cap)),
        education=parsed.education,
        experience=parsed.experience,
        projects=parsed.projects,
        responsibilities=parsed.responsibilities,
        skill_groups=parsed.skills,
        raw_text=raw_text,
    )


class RuleExtractor(ResumeExtractor):
    """Deterministic, side-effect free extraction."""

    def extract(self, text: str) -> ExtractedRecord:
        clean = normalize(text)
        sections = segment(split_lines(clean))
        parsed = parse_sections(sections)
        logger.debug(
            "sections=%s education=%d experience=%d projects=%d responsibilities=%d",
            list(sections), len(parsed.education), len(parsed.experience),
            len(parsed.projects), len(parsed.responsibilities),
        )
        return assemble(sections, extract_contacts(clean), parsed, raw_text=clean)


def parse_resume_rule(raw: str) -> Dict:
    return RuleExtractor().extract(raw).to_dict()
