"""Procedure values: user closures and native primitives."""

from __future__ import annotations

from typing import Callable

from tinyscheme import SExpression, LispValue
from tinyscheme.errors import WrongArgumentCount, WrongArgumentType
from tinyscheme.types.environment import Environment
from tinyscheme.types.pair import Pair, list_length
from tinyscheme.types.symbol import Symbol


class Procedure:
    """Common base so the evaluator can test `isinstance(x, Procedure)`."""

    __slots__ = ()

    def __str__(self) -> str:
        from tinyscheme.printer import to_string
        return to_string(self)


class Closure(Procedure):
    """A first-class lambda with formal parameters, one body, and its defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        # params is the parameter list exactly as written: a Pair chain or Nil
        self.params: SExpression = params
        self.body: SExpression = body
        # Held by reference: later defines in this frame stay visible
        self.env: Environment = env

    def __repr__(self) -> str:
        return f"<Closure params={self.params!s} body={self.body!s}>"

    # --- Evaluation helpers ---
    def extend_env(self, args: LispValue) -> Environment:
        """
        Bind the given argument values to this closure's parameters and
        return a new frame, chained to the captured env, for the body.

        Parameters and arguments are walked in lockstep; any count mismatch
        raises WrongArgumentCount rather than binding partially.
        """
        new_env = Environment(outer=self.env)
        params, cur = self.params, args
        while isinstance(params, Pair):
            if not isinstance(cur, Pair):
                raise WrongArgumentCount(
                    f"wrong number of args: expected {list_length(self.params)}, "
                    f"got {list_length(args)}"
                )
            sym = params.car
            if not isinstance(sym, Symbol):
                from tinyscheme.printer import to_string
                raise WrongArgumentType(f"param not symbol: {to_string(sym)}")
            new_env.define(sym, cur.car)
            params, cur = params.cdr, cur.cdr
        if isinstance(cur, Pair):
            raise WrongArgumentCount(
                f"wrong number of args: expected {list_length(self.params)}, "
                f"got {list_length(args)}"
            )
        return new_env


PrimitiveFn = Callable[[Environment, LispValue], LispValue]


class Primitive(Procedure):
    """A native operation. `fn(env, args)` receives the evaluated argument list."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: LispValue) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<Primitive {self.name}>"
