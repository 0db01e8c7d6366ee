"""Runtime data for Lispy: the Value variants and the Environment."""

from lispy.types.value import (
    Builtin,
    Error,
    Expr,
    Number,
    QExpr,
    SExpr,
    Symbol,
    Value,
    clone,
)
from lispy.types.environment import Environment
