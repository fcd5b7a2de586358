from tinyscheme.types.nil import Nil, NilType
from tinyscheme.types.symbol import Symbol, TRUE
from tinyscheme.types.pair import Pair, from_list, to_list, list_length
from tinyscheme.types.environment import Environment
from tinyscheme.types.procedure import Procedure, Closure, Primitive

__all__ = (
    "Nil",
    "NilType",
    "Symbol",
    "TRUE",
    "Pair",
    "from_list",
    "to_list",
    "list_length",
    "Environment",
    "Procedure",
    "Closure",
    "Primitive",
)
