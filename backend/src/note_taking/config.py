"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import os
from pathlib import Path

_BACKEND_DIR = Path(__file__).resolve().parents[2]  # backend/

# Load .env from repo root if present
_env_path = _BACKEND_DIR.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(key) or "").strip() or default


def _int(key: str, default: int) -> int:
    try:
        return int(_str(key))
    except ValueError:
        return default


def _float(key: str, default: float) -> float:
    try:
        return float(_str(key))
    except ValueError:
        return default


# Storage
UPLOAD_DIR = Path(_str("NOTE_TAKING_UPLOAD_DIR") or str(_BACKEND_DIR / ".data" / "uploads"))

# LanguageTool
GRAMMAR_CHECK_API_URL = _str("GRAMMAR_CHECK_API_URL", "https://api.languagetool.org/v2/check")
GRAMMAR_CHECK_LANGUAGE = _str("GRAMMAR_CHECK_LANGUAGE", "en-US")
GRAMMAR_CHECK_TIMEOUT = _float("GRAMMAR_CHECK_TIMEOUT", 30.0)

# Server
HOST = _str("NOTE_TAKING_HOST", "0.0.0.0")
PORT = _int("NOTE_TAKING_PORT", 8080)
LOG_LEVEL = _str("NOTE_TAKING_LOG_LEVEL", "INFO").upper()
if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
    LOG_LEVEL = "INFO"
