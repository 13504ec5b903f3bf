"""
LLM client abstraction layer to support multiple providers.

The model-backed extractor only needs `chat(model, messages)`; this module
hides whether that goes to OpenAI or a local Ollama server. Every client
is built with the configured timeout so a dead provider cannot hang an
extraction call.
"""

from __future__ import annotations
from typing import List, Dict
from abc import ABC, abstractmethod

from resume2draft import config

try:
    import ollama
except ImportError:
    ollama = None

try:
    from openai import OpenAI
except ImportError:
    OpenAI = None


class LLMResponse:
    """Unified response object for LLM responses."""

    def __init__(self, content: str):
        self.message = MessageContent(content)


class MessageContent:
    """Message content wrapper."""

    def __init__(self, content: str):
        self.content = content


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to the LLM provider."""
        pass


class OllamaClient(LLMClient):
    """Ollama client implementation."""

    def __init__(self, host: str | None = None, timeout: float | None = None):
        if ollama is None:
            raise ImportError("ollama package is required for OllamaClient")
        self.client = ollama.Client(
            host=host or config.OLLAMA_BASE_URL,
            timeout=timeout or config.LLM_TIMEOUT,
        )

    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to Ollama."""
        response = self.client.chat(model=model, messages=messages, format="json")
        return LLMResponse(response.message.content or "")


class OpenAIClient(LLMClient):
    """OpenAI client implementation."""

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        if OpenAI is None:
            raise ImportError("openai package is required for OpenAIClient")

        # Use provided API key or get from environment
        api_key = api_key or config.OPENAI_API_KEY
        if not api_key:
            raise ValueError("OpenAI API key is required. Set OPENAI_API_KEY environment variable or pass api_key parameter.")

        self.client = OpenAI(api_key=api_key, timeout=timeout or config.LLM_TIMEOUT)

    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to OpenAI."""
        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=config.OPENAI_MODEL_PARAMS.get("temperature", 0.0),
            max_tokens=config.OPENAI_MODEL_PARAMS.get("max_tokens", 4096),
            response_format={"type": "json_object"},
        )
        return LLMResponse(response.choices[0].message.content or "")


def get_llm_client(provider: str | None = None) -> LLMClient:
    """Factory function to get the appropriate LLM client based on configuration."""
    provider = (provider or config.LLM_PROVIDER).lower()

    if provider == "openai":
        return OpenAIClient()
    elif provider == "ollama":
        return OllamaClient()
    else:
        raise ValueError(f"Unsupported LLM provider: {provider}")
