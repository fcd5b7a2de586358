"""Built-in procedures for the tinyscheme runtime environment.

Every primitive has the signature fn(env, args) where `args` is the evaluated
argument list as a Pair chain (Nil when empty). Type and count errors are
raised as SchemeError subclasses and reported by the apply engine.
"""
from __future__ import annotations

import math
import operator
from typing import Callable

from tinyscheme import LispValue
from tinyscheme.errors import WrongArgumentCount, WrongArgumentType
from tinyscheme.evaluation.evaluator import evaluate
from tinyscheme.printer import to_string
from tinyscheme.types.environment import Environment
from tinyscheme.types.nil import Nil
from tinyscheme.types.pair import Pair, to_list
from tinyscheme.types.procedure import Primitive
from tinyscheme.types.symbol import TRUE, Symbol


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def exactly(args: LispValue, count: int, name: str) -> list[LispValue]:
    values = to_list(args)
    if len(values) != count:
        raise WrongArgumentCount(
            f"{name} requires exactly {count} argument(s), got {len(values)}"
        )
    return values


def truth(flag: bool) -> LispValue:
    return TRUE if flag else Nil


# -------------------------------
# Arithmetic
# -------------------------------
def ieee_div(a: float, b: float) -> float:
    """Float division with IEEE-754 results for a zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def arith(name: str, op: Callable[[float, float], float]):
    """Left fold: the first argument seeds the accumulator, so (- 5) is 5."""

    def fold(env: Environment, args: LispValue) -> LispValue:
        values = to_list(args)
        if not values:
            return 0.0
        for v in values:
            if not is_number(v):
                raise WrongArgumentType(f"arith: {name}: arg not number: {to_string(v)}")
        acc = float(values[0])
        for x in values[1:]:
            acc = op(acc, float(x))
        return acc

    return fold


add = arith("+", operator.add)
sub = arith("-", operator.sub)
mul = arith("*", operator.mul)
div = arith("/", ieee_div)


# -------------------------------
# Comparison
# -------------------------------
def compare(name: str, op: Callable[[float, float], bool]):
    """Strictly binary numeric comparison returning #t or Nil."""

    def cmp(env: Environment, args: LispValue) -> LispValue:
        a, b = exactly(args, 2, name)
        if not (is_number(a) and is_number(b)):
            raise WrongArgumentType(f"cmp: {name}: args must be numbers")
        return truth(op(a, b))

    return cmp


num_eq = compare("=", operator.eq)
lt = compare("<", operator.lt)
gt = compare(">", operator.gt)


# -------------------------------
# Lists
# -------------------------------
def cons(env: Environment, args: LispValue) -> Pair:
    head, tail = exactly(args, 2, "cons")
    return Pair(head, tail)


def car(env: Environment, args: LispValue) -> LispValue:
    (xs,) = exactly(args, 1, "car")
    if not isinstance(xs, Pair):
        raise WrongArgumentType(f"car on non-cons: {to_string(xs)}")
    return xs.car


def cdr(env: Environment, args: LispValue) -> LispValue:
    (xs,) = exactly(args, 1, "cdr")
    if not isinstance(xs, Pair):
        raise WrongArgumentType(f"cdr on non-cons: {to_string(xs)}")
    return xs.cdr


def list_builtin(env: Environment, args: LispValue) -> LispValue:
    # the evaluated argument list is already a fresh list
    return args


def is_null(env: Environment, args: LispValue) -> LispValue:
    (value,) = exactly(args, 1, "null?")
    return truth(value is Nil)


# -------------------------------
# Output and reflection
# -------------------------------
def display(env: Environment, args: LispValue) -> LispValue:
    (value,) = exactly(args, 1, "display")
    print(to_string(value))
    return Nil


def eval_builtin(env: Environment, args: LispValue) -> LispValue:
    """Evaluate the (already evaluated) argument once more in the caller's env."""
    (form,) = exactly(args, 1, "eval")
    return evaluate(form, env)


PRIMITIVES = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '=': num_eq,
    '<': lt,
    '>': gt,
    'cons': cons,
    'car': car,
    'cdr': cdr,
    'list': list_builtin,
    'display': display,
    'eval': eval_builtin,
    'null?': is_null,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment):
    env.update({Symbol(name): Primitive(name, fn) for name, fn in PRIMITIVES.items()})
    # `#t` evaluates to itself when used as a bare symbol
    env.define(TRUE, TRUE)
