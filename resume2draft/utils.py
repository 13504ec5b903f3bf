"""
Utility functions for resume2draft.
"""

import hashlib

from resume2draft.schema_resume import ExtractedRecord


def _sha(text: str) -> str:
    """Computes SHA256 hash of a string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def completion_score(record: ExtractedRecord) -> int:
    """How filled-in a draft looks, 0–100, as shown in the editor."""
    p = record.profile
    score = 0
    if p.full_name:
        score += 10
    if p.headline:
        score += 10
    if p.summary:
        score += 15
    if record.experience:
        score += 20
    if record.projects:
        score += 20
    if record.skills:
        score += 15
    if record.education:
        score += 10
    return min(100, score)
