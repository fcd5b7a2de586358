from tinyscheme import EvaluatorFn
from tinyscheme import SExpression, LispValue
from tinyscheme.errors import WrongArgumentType
from tinyscheme.types.environment import Environment
from tinyscheme.types.symbol import Symbol
from tinyscheme.evaluation.special_forms.operands import required


def load_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (load example.scm)
    The file name is the bare symbol itself and is not looked up. Any other
    operand is evaluated first and must produce a symbol, so (load (quote f))
    also works. Forms in the file are evaluated in the caller's env.
    """
    (target,) = required(tail, 1, "load")
    if not isinstance(target, Symbol):
        target = evaluate_fn(target, env)
    if not isinstance(target, Symbol):
        raise WrongArgumentType(
            "load: expected symbol as filename (e.g. (load example.scm))"
        )
    # imported here: the loader depends on the evaluator, which imports this table
    from tinyscheme.modules.loader import load_file
    return load_file(target.id, env)
