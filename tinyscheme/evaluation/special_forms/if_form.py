from tinyscheme import EvaluatorFn
from tinyscheme import SExpression, LispValue
from tinyscheme.types.nil import Nil
from tinyscheme.types.pair import Pair
from tinyscheme.types.environment import Environment
from tinyscheme.evaluation.special_forms.operands import required


def if_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    test, consequent = required(tail, 2, "if")
    rest = tail.cdr.cdr
    alternate = rest.car if isinstance(rest, Pair) else Nil

    # Only Nil is false; the number 0 counts as true
    if evaluate_fn(test, env) is not Nil:
        return evaluate_fn(consequent, env)
    return evaluate_fn(alternate, env)
