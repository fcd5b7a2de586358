from tinyscheme import EvaluatorFn
from tinyscheme import SExpression, LispValue
from tinyscheme.types.environment import Environment
from tinyscheme.evaluation.special_forms.operands import required


def define_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The value is evaluated first, then bound in the current frame. The result
    is the name itself, not the value.
    """
    name, val_expr = required(tail, 2, "define")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return name
