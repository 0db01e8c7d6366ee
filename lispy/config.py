from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_PROMPT = "lispy> "
_DEFAULT_HISTORY_FILE = Path.home() / ".lispy_history"
_DEFAULT_HISTORY_LENGTH = 1000
_DEFAULT_LOG_LEVEL = "WARNING"


def get_prompt() -> str:
    return os.environ.get("LISPY_PROMPT", _DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    """History file for the REPL; an empty LISPY_HISTORY_FILE disables history."""
    raw = os.environ.get("LISPY_HISTORY_FILE")
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_history_length() -> int:
    raw = os.environ.get("LISPY_HISTORY_LENGTH")
    if not raw:
        return _DEFAULT_HISTORY_LENGTH
    try:
        return int(raw)
    except ValueError:
        return _DEFAULT_HISTORY_LENGTH


def get_log_level() -> str:
    return os.environ.get("LISPY_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
