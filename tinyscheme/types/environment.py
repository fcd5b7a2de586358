"""Runtime environment for tinyscheme.

An Environment is one frame of the scope chain: a mapping of Symbols to values
plus an `outer` link to the enclosing frame (None for the global frame).
Frames are shared by reference between closures and child frames, so a define
in a frame is visible to every holder immediately.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from tinyscheme import LispValue
from tinyscheme.errors import UnboundSymbol, WrongArgumentType
from tinyscheme.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        A second define of the same name shadows the first; the earlier
        binding is unreachable from then on. Never touches parent frames.
        """
        if not isinstance(name, Symbol):
            from tinyscheme.printer import to_string
            raise WrongArgumentType(f"define: first arg must be symbol, got {to_string(name)}")
        # Re-insert so iteration order reflects the most recent binding
        self.vars.pop(name, None)
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises UnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbol(f"Unbound symbol: {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        from tinyscheme.printer import to_string

        buffer.write("{")
        buffer.write(", ".join(f"{k}: {to_string(v)}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
