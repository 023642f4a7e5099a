from __future__ import annotations
import logging
import os
import sys


DEFAULT_MAX_DEPTH = 200
DEFAULT_PROMPT = "risp >"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_REPL_HOST = "127.0.0.1"
DEFAULT_REPL_PORT = 8765


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    # limits must be positive
    return value if value > 0 else default


def max_depth_ceiling() -> int:
    # each nesting level costs a few interpreter frames while evaluating
    return max(1, sys.getrecursionlimit() // 4)


def clamp_max_depth(value: int) -> int:
    if value <= 0:
        raise ValueError(f"max_depth must be positive, got {value}")
    return min(value, max_depth_ceiling())


def get_max_depth() -> int:
    return clamp_max_depth(int_from_env('RISP_MAX_DEPTH', DEFAULT_MAX_DEPTH))


def get_prompt() -> str:
    # kept verbatim, trailing spaces included
    return os.environ.get('RISP_PROMPT') or DEFAULT_PROMPT


def get_log_level() -> str:
    level = str_from_env('RISP_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    # unknown level names map back to a string, not a number
    return level if isinstance(logging.getLevelName(level), int) else DEFAULT_LOG_LEVEL


def get_repl_address() -> tuple[str, int]:
    return (
        str_from_env('RISP_REPL_HOST', DEFAULT_REPL_HOST),
        int_from_env('RISP_REPL_PORT', DEFAULT_REPL_PORT),
    )
