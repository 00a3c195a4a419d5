from __future__ import annotations
import logging
import os
from typing import Optional


DEFAULT_PROMPT = ";;; Input Eval:"
DEFAULT_OUTPUT_PROMPT = ";;; Output Eval:"
DEFAULT_LOG_LEVEL = "WARNING"


def _from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> int:
    name = _from_env('CLOJETTE_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName hands back "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> Optional[int]:
    raw = _from_env('CLOJETTE_RECURSION_LIMIT', '')
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None


def get_prompt() -> str:
    return _from_env('CLOJETTE_PROMPT', DEFAULT_PROMPT)


def get_output_prompt() -> str:
    return _from_env('CLOJETTE_OUTPUT_PROMPT', DEFAULT_OUTPUT_PROMPT)
