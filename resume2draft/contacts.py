"""
Email / phone / link detection over the whole text, independent of sections.

Every field is the first match in document order, never the "best" one.
"""
from __future__ import annotations
import re
from typing import List

from resume2draft.schema_resume import ContactInfo

EMAIL = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.I)
# a run starts at a "+code" or a non-digit boundary, never on a "2020 - 2024" year range
PHONE = re.compile(
    r"(?:\+\d{1,3} *|(?<!\d))"
    r"(?!(?:19|20)\d{2} *- *(?:19|20)\d{2}\b)"
    r"\d[\d \-]{8,}\d"
)
# host-like tokens; lowercase TLD keeps "B.Tech" out, the lookarounds keep
# both halves of an e-mail out
LINK = re.compile(
    r"(?<![@\w.-])(?:[Hh][Tt][Tt][Pp][Ss]?://)?(?:www\.)?"
    r"[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[a-z]{2,}\b(?!@)(?:/[^\s|,)]*)?"
)
_TRAIL = ".,;:|)"
# bare "Node.js" / "Next.js" style library names, not hosts
_JS_LIBRARY = re.compile(r"^[A-Za-z0-9-]+\.js$")


def find_email(text: str) -> str:
    m = EMAIL.search(text or "")
    return m.group() if m else ""


def find_phone(text: str) -> str:
    m = PHONE.search(text or "")
    return re.sub(r"\s+", " ", m.group()).strip() if m else ""


def find_links(text: str) -> List[str]:
    links = (m.group().rstrip(_TRAIL) for m in LINK.finditer(text or ""))
    return [l for l in links if "." in l and not _JS_LIBRARY.match(l)]


def extract_contacts(text: str) -> ContactInfo:
    links = find_links(text)

    def pick(contains: str) -> str:
        return next((l for l in links if contains in l.lower()), "")

    website = next(
        (l for l in links
         if "linkedin.com" not in l.lower()
         and "github.com" not in l.lower()
         and "@" not in l),
        "",
    )
    return ContactInfo(
        email=find_email(text),
        phone=find_phone(text),
        linkedin_url=pick("linkedin.com"),
        github_url=pick("github.com"),
        website_url=website,
    )
