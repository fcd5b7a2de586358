"""Error kinds raised by the interpreter and the single place they are reported.

Every failure is raised where it is detected and contained by the step that
failed: the evaluator hands it to `report`, which writes it to the diagnostic
channel (the ``tinyscheme.errors`` logger) and returns Nil so evaluation
carries on. In strict mode `report` re-raises instead.
"""

from __future__ import annotations

import logging

from tinyscheme.runtime_context import is_strict

logger = logging.getLogger(__name__)


class SchemeError(Exception):
    """ Base class for all tinyscheme errors"""
    pass

class UnboundSymbol(SchemeError):
    """ Raised when a symbol is used before it is bound"""
    pass

class NotAProcedure(SchemeError):
    """ Raised when the head of an application is not a procedure"""

class WrongArgumentCount(SchemeError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class WrongArgumentType(SchemeError):
    """ Raised when an argument or special-form operand has the wrong type or shape"""

class FileNotFound(SchemeError):
    """ Raised by the loader when a file cannot be opened"""


def report(err: SchemeError):
    """Write `err` to the diagnostic channel and return the placeholder Nil."""
    from tinyscheme.types.nil import Nil

    if is_strict():
        raise err
    logger.error("%s", err)
    return Nil
