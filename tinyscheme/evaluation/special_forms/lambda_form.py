from tinyscheme import EvaluatorFn
from tinyscheme import SExpression, LispValue
from tinyscheme.errors import WrongArgumentType
from tinyscheme.printer import to_string
from tinyscheme.types.environment import Environment
from tinyscheme.types.nil import Nil
from tinyscheme.types.pair import Pair
from tinyscheme.types.procedure import Closure
from tinyscheme.evaluation.special_forms.operands import required


def lambda_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body form, there is no implicit
    # sequencing. Forms after the first body are ignored.
    params, body = required(tail, 2, "lambda")
    if params is not Nil and not isinstance(params, Pair):
        raise WrongArgumentType(f"lambda: parameter list must be a list, got {to_string(params)}")
    return Closure(params, body, env)
