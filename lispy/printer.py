"""Rendering of values as display text."""

from __future__ import annotations

from lispy.types.environment import Environment
from lispy.types.value import Builtin, Error, Expr, Number, QExpr, SExpr, Symbol, Value

BUILTIN_PLACEHOLDER = "<builtin>"


def _render_expr(expr: Expr, env: Environment, open_: str, close: str) -> str:
    return open_ + " ".join(render(cell, env) for cell in expr) + close


def render(value: Value, env: Environment) -> str:
    """Text form of `value`; builtins are shown under the name `env` binds them to."""
    match value:
        case Number():
            return str(value.value)
        case Error():
            return f"Error: {value.message}"
        case Symbol():
            return value.name
        case Builtin():
            name = env.name_of(value)
            return name if name is not None else BUILTIN_PLACEHOLDER
        case SExpr():
            return _render_expr(value, env, "(", ")")
        case QExpr():
            return _render_expr(value, env, "{", "}")
    raise TypeError(f"Cannot render {value!r}")
