import re

import pytest

from resume2draft.parser_rule import (
    RuleExtractor,
    parse_education,
    parse_experience,
    parse_projects,
    parse_resume_rule,
    parse_responsibilities,
    parse_skills,
    scan_entries,
    split_company_line,
)
from resume2draft.patterns import build_date_range_re, build_institution_re
from resume2draft.schema_resume import SkillGroups

COLLECTIONS = ("skills", "education", "experience", "projects", "responsibilities")
PROFILE_KEYS = ("fullName", "headline", "location", "email", "phone",
                "website", "github", "linkedin", "summary")


def test_scenario_a(scenario_a):
    d = parse_resume_rule(scenario_a)
    assert d["profile"]["fullName"] == "Jane Doe"
    assert d["education"] == [{
        "school": "XYZ University Mumbai, India",
        "degree": "B.Tech (CGPA: 9.0)",
        "start": "2020",
        "end": "2024",
        "notes": "",
    }]
    assert d["experience"] == [{
        "role": "Software Engineer",
        "company": "Acme Corp",
        "location": "/ Pune",
        "start": "June 2022",
        "end": "Present",
        "highlights": ["Reduced latency by 40%"],
    }]
    assert d["projects"] == []
    assert d["responsibilities"] == []
    assert d["skills"] == []


def test_scenario_b_project_line():
    d = parse_resume_rule("Sam\nProjects\nChat App | React, Node.js Jan 2023 – Mar 2023\n• Real-time messaging")
    assert d["projects"] == [{
        "name": "Chat App",
        "link": "",
        "tech": ["React", "Node.js"],
        "description": "Real-time messaging",
        "highlights": [],
        "start": "Jan 2023",
        "end": "Mar 2023",
    }]


def test_scenario_c_no_structure():
    text = "I build web apps and like shipping things quickly with small teams."
    d = parse_resume_rule(text)
    for key in COLLECTIONS:
        assert d[key] == []
    assert d["profile"]["fullName"] == text


def test_full_resume(full_resume):
    d = parse_resume_rule(full_resume)
    p = d["profile"]
    assert p["fullName"] == "Aarav Shah"
    assert p["email"] == "aarav@example.com"
    assert p["phone"] == "+91 8879029981"
    assert p["linkedin"] == "linkedin.com/in/aarav"
    assert p["github"] == "github.com/aarav"
    assert p["website"] == "aarav.dev"
    assert p["headline"] == p["location"] == p["summary"] == ""

    assert [(e["degree"], e["start"], e["end"]) for e in d["education"]] == [
        ("B.Tech in Computer Engineering (CGPA: 8.56)", "2022", "2026"),
        ("HSC", "2020", "2022"),
    ]

    first, second = d["experience"]
    assert (first["role"], first["company"], first["location"]) == ("SDE Intern", "Infiheal", "/ Mumbai")
    assert first["highlights"] == ["Built the booking API", "Cut page load by 30%"]
    assert (second["role"], second["start"], second["end"]) == ("Full Stack Developer (Freelance)", "May 2024", "Sept 2024")
    assert (second["company"], second["location"]) == ("Self Employed", "")

    cli, video = d["projects"]
    assert cli["tech"] == ["Node.js", "LLMs", "NPM"]
    assert (cli["start"], cli["end"]) == ("Jan 2024", "Present")
    assert cli["description"] == "Summarises files from the terminal"
    assert cli["highlights"] == ["Published on npm"]
    assert video["tech"] == ["Next.js", "Stream SDK", "Clerk"]
    assert video["start"] == video["end"] == "Jan 2024"

    assert d["skills"] == ["JavaScript", "TypeScript", "Python", "React", "Next.js", "Express"]
    assert d["skillGroups"]["Frameworks & Libraries"] == ["React", "Next.js", "Express"]

    assert d["responsibilities"] == [{
        "title": "Vice Chairperson (Tech)",
        "org": "DJS ACM Student Chapter",
        "start": "June 2024",
        "end": "June 2025",
        "highlights": ["Ran weekly workshops"],
    }]


@pytest.mark.parametrize("text", [
    "",
    "   \n\n  ",
    "Education",
    "Experience\nDev Jan 2020 – Present",
    "Projects\n|",
    "Technical Skills\n:\n: a, b",
    "• - | : – 2020\nPositions of Responsibility\nLead Jan 2020 - Feb 2021",
    "Education\nFoo University",
])
def test_every_input_gives_full_shape(text):
    d = RuleExtractor().extract(text).to_dict()
    for key in COLLECTIONS:
        assert isinstance(d[key], list)
    for key in PROFILE_KEYS:
        assert isinstance(d["profile"][key], str)
    assert d["profile"]["fullName"]


def test_empty_input_uses_placeholder_name():
    assert parse_resume_rule("")["profile"]["fullName"] == "Your Name"


def test_experience_at_end_of_section_without_company_line():
    (entry,) = parse_experience(["Dev Jan 2020 – Present"])
    assert (entry.role, entry.company, entry.location, entry.highlights) == ("Dev", "", "", ())


def test_non_bullet_lines_are_never_highlights():
    (entry,) = parse_experience([
        "Software Engineer Jan 2020 – Present",
        "Acme",
        "Not a bullet",
        "• orphan bullet",
    ])
    assert entry.company == "Acme"
    assert entry.highlights == ()


def test_split_company_line():
    assert split_company_line("Acme Corp Remote / Pune") == ("Acme Corp", "/ Pune")
    assert split_company_line("Acme Corp") == ("Acme Corp", "")
    assert split_company_line("Remote") == ("Remote", "")


def test_education_needs_year_range_on_next_line():
    lines = ["XYZ University Mumbai, India", "B.Tech (2020)", "Other College Pune, India", "BSc 2019 - Present"]
    (entry,) = parse_education(lines)
    assert (entry.school, entry.degree, entry.start, entry.end) == ("Other College Pune, India", "BSc", "2019", "Present")


def test_education_institution_signals_are_configurable():
    lines = ["Springfield Tech", "BSc 2019 – 2023"]
    assert parse_education(lines) == []
    (entry,) = parse_education(lines, institution=build_institution_re(["Springfield"]))
    assert entry.school == "Springfield Tech"
    assert parse_education(lines, institution=build_institution_re([])) == []


def test_projects_without_bullets_or_dates():
    (entry,) = parse_projects(["Toolkit | Python, Click"])
    assert entry.tech == ("Python", "Click")
    assert (entry.description, entry.highlights, entry.start, entry.end) == ("", (), "", "")


def test_projects_extra_pipes_split_tech():
    (entry,) = parse_projects(["Site | Hugo | Netlify Sep 2022"])
    assert entry.name == "Site"
    assert entry.tech == ("Hugo", "Netlify")
    assert entry.start == "Sep 2022"


def test_responsibilities_take_org_verbatim():
    (entry,) = parse_responsibilities(["Lead Jan 2020 – Dec 2020", "Coding Club Remote", "- Ran events"])
    assert entry.org == "Coding Club Remote"
    assert entry.highlights == ("Ran events",)


def test_skills_groups_and_ignored_lines():
    groups = parse_skills(["Languages: Python, Go, ", "soft skills and more", ": nameless", "Tools: Docker, Go"])
    assert groups.as_dict() == {"Languages": ["Python", "Go"], "Tools": ["Docker", "Go"]}
    assert groups.flat() == ["Python", "Go", "Docker"]


def test_flat_skills_capped_at_forty():
    lines = [f"Group {g}: " + ", ".join(f"s{g * 10 + k}" for k in range(10)) for g in range(5)]
    groups = parse_skills(lines)
    assert sum(len(v) for v in groups.as_dict().values()) == 50
    flat = groups.flat()
    assert flat == [f"s{n}" for n in range(40)]

    d = parse_resume_rule("Me\nTechnical Skills\n" + "\n".join(lines))
    assert len(d["skills"]) == 40
    assert len(d["skillGroups"]) == 5


def test_empty_skill_groups():
    assert SkillGroups().flat() == []


def test_date_range_vocabulary():
    rx = build_date_range_re()
    m = rx.search("Intern Sept. 2021 - present")
    assert (m.group("start"), m.group("end")) == ("Sept. 2021", "present")
    assert rx.search("Marketing 2020 – Present") is None
    assert rx.search("Jan 2020") is None
    assert rx.search("Dev September 2019 – Aug 2020").group("end") == "Aug 2020"


def test_scan_entries_skips_unmatched_lines():
    lines = ["noise", "# one", "• a", "• b", "noise", "# two"]
    found = scan_entries(
        lines,
        lambda ls, i: re.match(r"# (\w+)", ls[i]),
        lambda m, head, bullets: (m.group(1), bullets),
    )
    assert found == [("one", ("a", "b")), ("two", ())]


@pytest.fixture
def reload_vocabulary(monkeypatch):
    import importlib

    from resume2draft import config, patterns

    def reload_():
        importlib.reload(config)
        importlib.reload(patterns)
        return config, patterns

    yield reload_
    monkeypatch.delenv("INSTITUTION_SIGNALS", raising=False)
    reload_()


def test_institution_signals_from_environment(monkeypatch, reload_vocabulary):
    monkeypatch.setenv("INSTITUTION_SIGNALS", "Springfield, Shelbyville ,")
    config, patterns = reload_vocabulary()

    assert config.INSTITUTION_SIGNALS == ("Springfield", "Shelbyville")
    lines = ["Springfield Tech", "BSc 2019 – 2023", "XYZ University Mumbai, India", "MSc 2023 – 2025"]
    (entry,) = parse_education(lines, institution=patterns.INSTITUTION_RE)
    assert entry.school == "Springfield Tech"


def test_blank_institution_signals_fall_back_to_defaults(monkeypatch, reload_vocabulary):
    monkeypatch.setenv("INSTITUTION_SIGNALS", " , ")
    config, patterns = reload_vocabulary()
    assert "University" in config.INSTITUTION_SIGNALS
    assert patterns.INSTITUTION_RE.search("XYZ University")
