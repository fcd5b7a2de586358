"""Application engine for tinyscheme.

Applies either a user Closure or a native Primitive to an already-evaluated
argument list. Failures (not a procedure, wrong argument count) are reported
and the application yields Nil.
"""

from tinyscheme import LispValue, EvaluatorFn
from tinyscheme.errors import SchemeError, NotAProcedure, report
from tinyscheme.printer import to_string
from tinyscheme.types.environment import Environment
from tinyscheme.types.procedure import Closure, Primitive


def apply_closure(
    fn: Closure,
    args: LispValue,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind `args` to the closure's parameters in a child of its captured
    frame, then evaluate the body there."""
    try:
        new_env = fn.extend_env(args)
    except SchemeError as err:
        return report(err)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    args: LispValue,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Primitive.

    - Closures bind lexically; `env` (the caller's frame) is not consulted.
    - Primitives receive the caller's env for uniformity (`eval`, `load`).
    - Anything else is reported as not a procedure.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    try:
        if isinstance(head, Primitive):
            return head(env, args)
        raise NotAProcedure(f"Attempt to apply non-procedure: {to_string(head)}")
    except SchemeError as err:
        return report(err)
