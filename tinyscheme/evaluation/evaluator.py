"""Core evaluator for the tinyscheme interpreter.

A direct recursive tree walk: special forms are dispatched from
SPECIAL_FORMS, everything else headed by a Pair is an application. There is no
tail-call handling, so very deep user recursion ends in RecursionError.
"""

from __future__ import annotations

from tinyscheme import SExpression, LispValue
from tinyscheme.errors import SchemeError, report
from tinyscheme.types.environment import Environment
from tinyscheme.types.pair import Pair, from_list, to_list
from tinyscheme.types.symbol import Symbol
from tinyscheme.evaluation.apply import apply
from tinyscheme.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    if isinstance(expr, Symbol):
        try:
            return env.lookup(expr)
        except SchemeError as err:
            return report(err)

    if isinstance(expr, Pair):
        head, tail = expr.car, expr.cdr
        if isinstance(head, Symbol):
            form = SPECIAL_FORMS.get(head)
            if form is not None:
                try:
                    return form(tail, env, evaluate)
                except SchemeError as err:
                    return report(err)

        proc = evaluate(head, env)
        args = evaluate_list(tail, env)
        return apply(proc, args, env, evaluate)

    # --- Nil, numbers and procedures evaluate to themselves ---
    return expr


def evaluate_list(exprs: SExpression, env: Environment) -> LispValue:
    """Evaluate each element left to right into a fresh list."""
    return from_list([evaluate(e, env) for e in to_list(exprs)])
