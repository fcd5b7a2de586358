from tinyscheme import EvaluatorFn
from tinyscheme import SExpression, LispValue
from tinyscheme.types.environment import Environment
from tinyscheme.evaluation.special_forms.operands import required


def quote_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote x) -> x, unevaluated."""
    (datum,) = required(tail, 1, "quote")
    return datum
