"""
Purpose: Runtime settings read from the process environment (and `.env`).
One place for the API key, model name, endpoint and output options.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_COUNT = 5


def _first(*keys: str) -> Optional[str]:
    """Return the value of the first environment variable found in keys."""
    for key in keys:
        val = os.getenv(key)
        if val:
            return val
    return None


def _flag(key: str, default: bool = False) -> bool:
    val = os.getenv(key)
    if val is None:
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    base_url: str = GEMINI_OPENAI_BASE_URL
    output_dir: Path = field(default_factory=Path.cwd)
    escape_html: bool = False
    log_level: str = "WARNING"
    default_count: int = DEFAULT_COUNT


def load_settings(*, dotenv: bool = True) -> Settings:
    """Build Settings from the environment, loading `.env` first if present."""
    if dotenv:
        load_dotenv()
    output_dir = os.getenv("QUESTGEN_OUTPUT_DIR")
    return Settings(
        api_key=_first("GEMINI_API_KEY", "GOOGLE_API_KEY") or "",
        model=os.getenv("QUESTGEN_MODEL") or DEFAULT_MODEL,
        base_url=os.getenv("QUESTGEN_BASE_URL") or GEMINI_OPENAI_BASE_URL,
        output_dir=Path(output_dir) if output_dir else Path.cwd(),
        escape_html=_flag("QUESTGEN_ESCAPE_HTML"),
        log_level=(os.getenv("LOG_LEVEL") or "WARNING").upper(),
    )
