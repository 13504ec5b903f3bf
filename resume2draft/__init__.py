"""Résumé text → structured draft record → static site."""

from resume2draft.extraction import ResumeExtractor, get_extractor
from resume2draft.parser_llm import LLMExtractor, parse_resume_llm
from resume2draft.parser_rule import RuleExtractor, parse_resume_rule
from resume2draft.schema_resume import ExtractedRecord, empty_record

__all__ = [
    "ExtractedRecord",
    "LLMExtractor",
    "ResumeExtractor",
    "RuleExtractor",
    "empty_record",
    "get_extractor",
    "parse_resume_llm",
    "parse_resume_rule",
]
