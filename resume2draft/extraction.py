"""
Common interface for the two extraction strategies.

Both the rule-based engine and the model-backed one turn raw résumé text
into the same ExtractedRecord, so callers can swap them freely.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from resume2draft.schema_resume import ExtractedRecord


class ResumeExtractor(ABC):
    """Abstract base class for résumé extractors."""

    @abstractmethod
    def extract(self, text: str) -> ExtractedRecord:
        """Turn raw résumé text into a record. Must not raise."""
        pass


def get_extractor(name: str = "rule", **kwargs) -> ResumeExtractor:
    """Factory: "rule" for the heuristic engine, "llm" for the model one."""
    name = (name or "").lower()
    if name == "rule":
        from resume2draft.parser_rule import RuleExtractor
        return RuleExtractor(**kwargs)
    elif name == "llm":
        from resume2draft.parser_llm import LLMExtractor
        return LLMExtractor(**kwargs)
    else:
        raise ValueError(f"Unsupported extraction strategy: {name}")
