"""
LLM-based résumé parser.

• Supports multiple LLM providers (OpenAI, Ollama) through llm_client
• Optionally caches answers in <cache_dir>/<sha256>.json so the model is
  queried only once per unique résumé text.
• Repairs the answer into ExtractedRecord via coerce_record(); when the
  model is unreachable or talks nonsense the empty record comes back
  instead of an exception.
"""

from __future__ import annotations
import json, logging, re, textwrap
from pathlib import Path
from typing import Dict

from resume2draft import config
from resume2draft.cleaner import coerce_record
from resume2draft.extraction import ResumeExtractor
from resume2draft.llm_client import LLMClient, get_llm_client
from resume2draft.schema_resume import ExtractedRecord, ITEM_SCHEMAS, RESUME_SCHEMA, empty_record
from resume2draft.utils import _sha

logger = logging.getLogger(__name__)

_SYSTEM_PROMPT = textwrap.dedent(
    f"""
You are an expert résumé parser.
Output ONLY valid JSON conforming to this schema (no markdown fences):

{json.dumps(RESUME_SCHEMA, indent=2)}

Each list item has this shape:

{json.dumps(ITEM_SCHEMAS, indent=2)}

Use "" for unknown strings and [] for empty lists. Never invent data.
"""
)

_JSON_FINDER = re.compile(r"\{.*\}", re.S)


def _extract_json(raw: str) -> dict:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        # first "{" … last "}"
        if m := _JSON_FINDER.search(raw):
            data = json.loads(m.group())
        else:
            raise
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


class LLMExtractor(ResumeExtractor):
    """Delegates extraction to a chat model; never raises."""

    def __init__(
        self,
        client: LLMClient | None = None,
        model: str | None = None,
        cache_dir: str | Path | None = config.LLM_CACHE_DIR,
    ):
        self._client = client
        self.model = model or config.get_model_for_provider()
        self.cache_dir = Path(cache_dir) if cache_dir else None

    @property
    def client(self) -> LLMClient:
        if self._client is None:
            self._client = get_llm_client()
        return self._client

    def _cache_path(self, text: str) -> Path | None:
        return self.cache_dir / f"{_sha(text)}.json" if self.cache_dir else None

    def extract(self, text: str) -> ExtractedRecord:
        text = text or ""
        cache_path = self._cache_path(text)
        if cache_path is not None and cache_path.exists():
            try:
                return coerce_record(json.loads(cache_path.read_text()), raw_text=text)
            except (OSError, ValueError) as e:
                logger.warning("Ignoring unreadable cache file %s: %s", cache_path, e)
                cache_path.unlink(missing_ok=True)

        messages = [
            {"role": "system", "content": _SYSTEM_PROMPT},
            {"role": "user", "content": text},
        ]
        try:
            rsp = self.client.chat(model=self.model, messages=messages)
            payload = (rsp.message.content or "").strip().strip("`")
            record = coerce_record(_extract_json(payload), raw_text=text)
        except Exception as e:
            logger.warning("LLM extraction failed, returning empty record: %s", e)
            return empty_record(raw_text=text)

        if cache_path is not None:
            self._write_cache(cache_path, record)
        return record

    @staticmethod
    def _write_cache(cache_path: Path, record: ExtractedRecord) -> None:
        # write-then-replace so readers never see a half-written file
        tmp = cache_path.with_name(cache_path.name + ".tmp")
        try:
            cache_path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))
            tmp.replace(cache_path)
        except OSError as e:
            logger.warning("Could not write cache file %s: %s", cache_path, e)


def parse_resume_llm(raw_text: str, model: str | None = None) -> Dict:
    return LLMExtractor(model=model).extract(raw_text).to_dict()
