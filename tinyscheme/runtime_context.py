from __future__ import annotations

from tinyscheme.config import get_strict

# NOTE: For now this is process-global, like the global environment it guards.
# If threading is introduced, consider switching to contextvars.
_strict: bool = get_strict()


def set_strict(flag: bool) -> None:
    global _strict
    _strict = flag


def is_strict() -> bool:
    return _strict
