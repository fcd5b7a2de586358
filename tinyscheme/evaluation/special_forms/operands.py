from tinyscheme import SExpression
from tinyscheme.errors import WrongArgumentType
from tinyscheme.types.pair import Pair


def required(tail: SExpression, count: int, form: str) -> list[SExpression]:
    """Return the first `count` operands of a special form.

    Extra operands are ignored; too few is a malformed form.
    """
    found = []
    cur = tail
    while len(found) < count:
        if not isinstance(cur, Pair):
            raise WrongArgumentType(
                f"{form}: expected {count} operand(s), got {len(found)}"
            )
        found.append(cur.car)
        cur = cur.cdr
    return found
