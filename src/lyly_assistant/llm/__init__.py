"""Narrow adapter over the external chat model."""

from .client import GenerationClient, LangChainGenerationClient, build_generation_client

__all__ = ["GenerationClient", "LangChainGenerationClient", "build_generation_client"]
