"""Run a whole source file against one environment.

Relative paths resolve against the working directory first, then against each
directory listed in TINYSCHEME_LOAD_PATH.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from tinyscheme import LispValue
from tinyscheme.config import get_load_path
from tinyscheme.errors import FileNotFound
from tinyscheme.evaluation.evaluator import evaluate
from tinyscheme.reader.parser import parse_all
from tinyscheme.types.environment import Environment
from tinyscheme.types.nil import Nil

logger = logging.getLogger(__name__)


def resolve_path(name: str) -> Optional[Path]:
    path = Path(name)
    if path.is_file():
        return path
    if not path.is_absolute():
        for root in get_load_path():
            candidate = root / path
            if candidate.is_file():
                return candidate
    return None


def eval_source(code: str, env: Environment) -> LispValue:
    """Evaluate every top-level form in `code`; the last value wins."""
    last: LispValue = Nil
    for expr in parse_all(code):
        last = evaluate(expr, env)
    return last


def load_file(name: str | Path, env: Environment) -> LispValue:
    """Read and evaluate a file; raises FileNotFound if it cannot be read."""
    path = resolve_path(str(name))
    if path is None:
        raise FileNotFound(f"load: cannot open file: {name}")
    try:
        code = path.read_text(encoding='utf-8')
    except OSError as e:
        raise FileNotFound(f"load: cannot open file: {name}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise FileNotFound(f"load: cannot read file: {name}: not UTF-8 text") from e
    logger.debug("loading %s", path)
    return eval_source(code, env)

