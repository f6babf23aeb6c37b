"""Lyly Assistant backend: Gemini-backed study tools with a structured quiz pipeline."""

__version__ = "0.1.0"
