from __future__ import annotations
import os
from pathlib import Path
from typing import List

_TRUTHY = {"1", "true", "yes", "on"}

# Defaults
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_PROMPT = "scheme> "
_CONTINUATION_PROMPT = "... "


def paths_from_env(var: str) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return []
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_path() -> List[Path]:
    return paths_from_env('TINYSCHEME_LOAD_PATH')


def get_strict() -> bool:
    return os.environ.get('TINYSCHEME_STRICT', '').strip().lower() in _TRUTHY


def get_recursion_limit() -> int:
    raw = os.environ.get('TINYSCHEME_RECURSION_LIMIT')
    try:
        return int(raw) if raw else _DEFAULT_RECURSION_LIMIT
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT


def get_prompt() -> str:
    return os.environ.get('TINYSCHEME_PROMPT', _DEFAULT_PROMPT)


def get_continuation_prompt() -> str:
    return _CONTINUATION_PROMPT
