from risp.types.symbol import Symbol
from risp.types.nil import Nil, is_list
from risp.types.environment import Environment
from risp.types.bind import ParamList, bind_arguments, match_arguments
from risp.types.lambda_fn import Lambda, Closure, Macro, Primitive

__all__ = [
    "Symbol",
    "Nil",
    "is_list",
    "Environment",
    "ParamList",
    "bind_arguments",
    "match_arguments",
    "Lambda",
    "Closure",
    "Macro",
    "Primitive",
]
