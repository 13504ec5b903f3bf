"""
PDF → record → static page, the way the upload flow chains the pieces.
"""
from __future__ import annotations
from pathlib import Path
from typing import Tuple

from resume2draft.extraction import get_extractor
from resume2draft.extractor import pdf_to_text
from resume2draft.generator_rule import json_to_html
from resume2draft.schema_resume import ExtractedRecord


def resume_to_site(
    pdf_path: str | Path | bytes,
    strategy: str = "rule",
    inline: bool = True,
) -> Tuple[ExtractedRecord, str]:
    raw_text = pdf_to_text(pdf_path)
    record = get_extractor(strategy).extract(raw_text)
    return record, json_to_html(record, inline=inline)
