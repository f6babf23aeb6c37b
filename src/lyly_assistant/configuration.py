

import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel
from dotenv import load_dotenv

# Load environment variables from .env file, if present
_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(_ROOT / ".env")

def _first(*keys: str) -> Optional[str]:
    """
    Return the value of the first environment variable found in keys.
    """
    for key in keys:
        val = os.getenv(key)
        if val:
            return val
    return None

def _flag(key: str, default: str = "false") -> bool:
    return os.getenv(key, default).lower() in ("1", "true", "yes")

class Settings(BaseModel):
    llm_provider: str = os.getenv("LLM_PROVIDER", "google")
    llm_model: str = os.getenv("LLM_MODEL", "gemini-2.5-flash")
    google_api_key: Optional[str] = _first("GOOGLE_API_KEY", "GEMINI_API_KEY", "API_KEY")
    openai_api_key: Optional[str] = os.getenv("OPENAI_API_KEY")
    llm_temperature: float = float(os.getenv("LLM_TEMPERATURE", "0.4"))
    llm_timeout_seconds: float = float(os.getenv("LLM_TIMEOUT_SECONDS", "120"))
    # Fixed per deployment; never taken from the request.
    output_language: str = os.getenv("OUTPUT_LANGUAGE", "Vietnamese (Tiếng Việt)")
    quiz_max_questions: int = int(os.getenv("QUIZ_MAX_QUESTIONS", "50"))
    quiz_strict_level_counts: bool = _flag("QUIZ_STRICT_LEVEL_COUNTS")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    debug: bool = _flag("DEBUG")
    port: int = int(os.getenv("PORT", "3001"))

    @property
    def api_key(self) -> Optional[str]:
        """Credential for the configured provider."""
        if self.llm_provider == "openai":
            return self.openai_api_key
        return self.google_api_key


# Singleton instance for app-wide settings
settings = Settings()
