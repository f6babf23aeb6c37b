"""
Generation Client Adapter
- submit a CompiledPrompt, get raw text back or a GenerationServiceError
- transport and credentials only; no retries, no parsing
"""
from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Optional

from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI
from loguru import logger

from ..configuration import Settings
from ..errors import GenerationServiceError
from ..quiz.models import CompiledPrompt

_KEY_HINTS = {
    "google": "Missing GOOGLE_API_KEY (or GEMINI_API_KEY).",
    "openai": "Missing OPENAI_API_KEY.",
}


class GenerationClient(ABC):
    """Anything that can turn a CompiledPrompt into model text."""

    @abstractmethod
    async def generate(self, prompt: CompiledPrompt) -> str:
        ...


class LangChainGenerationClient(GenerationClient):
    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        provider: str = "google",
        temperature: float = 0.4,
        timeout: float = 120.0,
    ) -> None:
        if provider not in _KEY_HINTS:
            raise ValueError(f"Unsupported LLM provider {provider!r}.")
        self.api_key = api_key
        self.model = model
        self.provider = provider
        self.temperature = temperature
        self.timeout = timeout

    def _llm(self, schema: Optional[dict]):
        if not self.api_key:
            raise GenerationServiceError(_KEY_HINTS[self.provider])
        if self.provider == "openai":
            llm = ChatOpenAI(
                model=self.model,
                api_key=self.api_key,
                temperature=self.temperature,
                timeout=self.timeout,
                max_retries=0,
            )
            if schema is not None:
                return llm.bind(response_format={"type": "json_object"})
            return llm
        extra: dict[str, Any] = {}
        if schema is not None:
            extra = {"response_mime_type": "application/json", "response_schema": schema}
        return ChatGoogleGenerativeAI(
            model=self.model,
            api_key=self.api_key,
            temperature=self.temperature,
            timeout=self.timeout,
            max_retries=0,
            **extra,
        )

    async def generate(self, prompt: CompiledPrompt) -> str:
        llm = self._llm(prompt.schema)
        try:
            message = await asyncio.wait_for(llm.ainvoke(prompt.instruction), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            raise GenerationServiceError(f"Model call timed out after {self.timeout:g}s.") from exc
        except Exception as exc:
            raise GenerationServiceError(str(exc) or exc.__class__.__name__) from exc

        text = message_text(message)
        if not text.strip():
            raise GenerationServiceError("Model returned an empty response.")
        logger.debug("Model {} returned {} chars", self.model, len(text))
        return text


def message_text(message: Any) -> str:
    """Flatten an AIMessage (string or list-of-parts content) into plain text."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return ""


def build_generation_client(settings: Settings) -> LangChainGenerationClient:
    """Resolve the credential once and build the shared client."""
    if not settings.api_key:
        logger.warning(_KEY_HINTS.get(settings.llm_provider, "Missing LLM API key.") + " Generation calls will fail.")
    return LangChainGenerationClient(
        api_key=settings.api_key,
        model=settings.llm_model,
        provider=settings.llm_provider,
        temperature=settings.llm_temperature,
        timeout=settings.llm_timeout_seconds,
    )
