"""External text form of runtime values.

`to_string` never fails: any object it does not recognise falls back to `str`.
"""

from __future__ import annotations

import math
from io import StringIO

from tinyscheme import LispValue
from tinyscheme.types.nil import NilType
from tinyscheme.types.pair import Pair
from tinyscheme.types.procedure import Closure, Primitive
from tinyscheme.types.symbol import Symbol


def format_number(n: float) -> str:
    if not math.isfinite(n):
        return "%g" % n
    if float(n).is_integer():
        return str(int(n))
    return "%g" % n


def write(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, NilType):
        buffer.write("()")
    elif isinstance(value, (int, float)):
        buffer.write(format_number(value))
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, Pair):
        buffer.write("(")
        cur: LispValue = value
        first = True
        while isinstance(cur, Pair):
            if not first:
                buffer.write(" ")
            write(cur.car, buffer)
            first = False
            cur = cur.cdr
        if not isinstance(cur, NilType):
            buffer.write(" . ")
            write(cur, buffer)
        buffer.write(")")
    elif isinstance(value, Primitive):
        buffer.write("<primitive>")
    elif isinstance(value, Closure):
        buffer.write("<lambda>")
    elif value is None:
        buffer.write("<null>")
    else:
        buffer.write(str(value))


def to_string(value: LispValue) -> str:
    with StringIO() as buffer:
        write(value, buffer)
        return buffer.getvalue()
