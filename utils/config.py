from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
import os

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"


def _float_env(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Runtime configuration. ``api_key=None`` means no credential is configured."""
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    api_url: str = DEFAULT_API_URL
    max_input_chars: int = 12000
    max_extract_chars: int = 150000
    request_timeout: float = 60.0
    fetch_timeout: float = 10.0

    @property
    def has_credential(self) -> bool:
        return self.api_key is not None

    @classmethod
    def from_env(cls, env_file: Union[str, Path, None] = None) -> "Settings":
        load_dotenv(env_file or PROJECT_ROOT / ".env")  # OPENAI_API_KEY, OPENAI_MODEL, etc.
        api_key = (os.getenv("OPENAI_API_KEY") or "").strip() or None
        return cls(
            api_key=api_key,
            model=(os.getenv("OPENAI_MODEL") or "").strip() or DEFAULT_MODEL,
            api_url=(os.getenv("OPENAI_API_URL") or "").strip() or DEFAULT_API_URL,
            request_timeout=_float_env("REQUEST_TIMEOUT", 60.0),
            fetch_timeout=_float_env("FETCH_TIMEOUT", 10.0),
        )
