"""Core evaluator for the Lispy interpreter.

Reduces a Value tree to a single Value. Symbols resolve through the
environment, S-expressions are evaluated child by child and applied, and
everything else evaluates to itself. Failures are Error values that replace
the whole enclosing S-expression; nothing here raises for a language error.

Evaluation is plainly recursive, so nesting depth is bounded by the host
stack. A RecursionError is a fatal resource error and is left to propagate.
"""

from __future__ import annotations

from lispy.builtin.ops import EFFECTFUL
from lispy.errors import ErrorKind
from lispy.evaluation.apply import apply
from lispy.types.environment import Environment
from lispy.types.value import Builtin, Error, SExpr, Symbol, Value


def evaluate(value: Value, env: Environment) -> Value:
    """Evaluate `value` in `env`, consuming it."""
    match value:
        case Symbol():
            return env.get(value.name)
        case SExpr():
            return evaluate_sexpr(value, env)
    # Numbers, errors, builtins and Q-expressions evaluate to themselves.
    return value


def evaluate_sexpr(expr: SExpr, env: Environment) -> Value:
    if not expr.cells:
        return expr

    # Left to right: a `def` early in the list is visible to later children.
    for i, cell in enumerate(expr.cells):
        expr.cells[i] = evaluate(cell, env)

    for i, cell in enumerate(expr.cells):
        if isinstance(cell, Error):
            return expr.take(i)

    if len(expr.cells) == 1 and not _runs_alone(expr.cells[0]):
        return expr.take(0)

    head = expr.pop(0)
    if not isinstance(head, Builtin):
        return Error("S-expression does not start with a function!", ErrorKind.BAD_FUNCTION)

    return apply(head, expr, env)


def _runs_alone(value: Value) -> bool:
    return isinstance(value, Builtin) and value.op in EFFECTFUL
