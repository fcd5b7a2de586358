"""Line-based read-eval-print loop.

Input lines are accumulated until they hold a complete form: either the
parentheses balance, or a non-empty buffer contains no '(' at all. The buffer
is then read as exactly one form and evaluated against the interpreter's
global environment.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from tinyscheme.config import get_continuation_prompt, get_prompt
from tinyscheme.errors import SchemeError
from tinyscheme.interpreter import Interpreter
from tinyscheme.printer import to_string

logger = logging.getLogger(__name__)

BANNER = "tinyscheme interpreter Ctrl-D to exit."


def is_complete(buffer: str) -> bool:
    opened = buffer.count("(")
    closed = buffer.count(")")
    if opened == 0:
        return bool(buffer.strip())
    return opened == closed


class Repl:
    def __init__(
        self,
        interp: Interpreter | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.interp = interp if interp is not None else Interpreter()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.interactive = self.stdin is sys.stdin and sys.stdin.isatty()
        if self.interactive:
            # line editing and history for input()
            import readline  # noqa: F401

    def _readline(self, prompt: str) -> Optional[str]:
        if self.interactive:
            try:
                return input(prompt) + "\n"
            except EOFError:
                return None
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        return line or None

    def read_form(self) -> Optional[str]:
        """Collect lines until a complete form is buffered; None at end of input."""
        buffer = ""
        prompt = get_prompt()
        while True:
            line = self._readline(prompt)
            if line is None:
                # evaluate whatever complete text was left without a newline
                return buffer if is_complete(buffer) else None
            buffer += line
            if is_complete(buffer):
                return buffer
            if not buffer.strip():
                buffer = ""
                continue
            prompt = get_continuation_prompt()

    def run(self) -> None:
        self.stdout.write(BANNER + "\n")
        while True:
            text = self.read_form()
            if text is None:
                break
            try:
                result = self.interp.eval_one(text)
            except RecursionError:
                logger.error("recursion too deep: native stack exhausted")
                continue
            except SchemeError as err:
                # only reachable in strict mode
                logger.error("%s", err)
                continue
            self.stdout.write(to_string(result) + "\n")
        self.stdout.write("\n")
        self.stdout.flush()
