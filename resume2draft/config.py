"""
Configuration settings for resume2draft.

This file holds the LLM provider settings used by the model-backed
extractor and the static vocabulary the rule-based engine matches against.
Everything can be overridden through the environment or a local .env file.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os

# LLM Provider Configuration
# Set to "ollama" or "openai"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").lower()

# Model Configuration
# For Ollama: use models like "llama3", "deepseek-coder-v2", etc.
# For OpenAI: use models like "gpt-4o-mini", "gpt-4o", etc.
DEFAULT_MODEL = {
    "ollama": "deepseek-coder-v2",
    "openai": "gpt-4o-mini"
}

# OpenAI Configuration
# A missing key only fails when an OpenAI client is actually built.
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL_PARAMS = {
    "temperature": 0.0,   # extraction, not creative writing
    "max_tokens": 4096
}

# Ollama Configuration
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

# Seconds before an outbound model call is abandoned
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))

# Directory for cached model answers; unset disables caching
LLM_CACHE_DIR = os.getenv("LLM_CACHE_DIR") or None

# ───────────────────────────────────────── rule engine vocabulary ──
HEADER_SECTION = "Header"

SECTION_HEADINGS = (
    "Education",
    "Experience",
    "Projects",
    "Technical Skills",
    "Positions of Responsibility",
)

# Any 3+ letter prefix of these (plus "Sept") is accepted as a month
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Known heuristic limitation: a school line is only recognised when it
# carries one of these tokens as a whole word.
_DEFAULT_INSTITUTION_SIGNALS = (
    # places
    "India", "Mumbai", "Delhi", "Pune", "Bangalore", "Bengaluru", "Chennai",
    "Hyderabad", "Kolkata", "USA", "United States", "UK", "United Kingdom",
    "Canada", "Australia", "Germany", "France", "Singapore",
    # institution words
    "University", "College", "Institute", "School", "Academy",
)
INSTITUTION_SIGNALS = tuple(
    t.strip() for t in os.getenv("INSTITUTION_SIGNALS", "").split(",") if t.strip()
) or _DEFAULT_INSTITUTION_SIGNALS

FLAT_SKILLS_CAP = 40
FALLBACK_FULL_NAME = "Your Name"


def get_model_for_provider(provider: str = None) -> str:
    """Get the default model for the specified provider."""
    provider = provider or LLM_PROVIDER
    return DEFAULT_MODEL.get(provider, "gpt-4o-mini")
