from __future__ import annotations
import os
import sys
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_PROMPT = "user> "
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_MAX_DEPTH = 200
_DEFAULT_HISTORY_FILE = Path.home() / ".mola_history"


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    # non-positive limits make no sense; keep the default
    return value if value > 0 else default


def get_prompt() -> str:
    # the prompt keeps its trailing space, so it is not stripped
    return str_from_env('MOLA_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return str_from_env('MOLA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()


def get_max_depth() -> int:
    """Deepest list nesting the reader accepts.

    Reading, evaluating and printing each recurse about two frames per level,
    so the limit never exceeds a quarter of the interpreter recursion limit.
    """
    ceiling = sys.getrecursionlimit() // 4
    return min(int_from_env('MOLA_MAX_DEPTH', _DEFAULT_MAX_DEPTH), ceiling)


def get_history_file() -> Optional[Path]:
    raw = os.environ.get('MOLA_HISTORY_FILE')
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    # explicitly blank disables history
    if not raw.strip():
        return None
    return Path(raw.strip()).expanduser()
