"""Built-in functions for the Lispy runtime environment.

This module defines list manipulation, binding, arithmetic and control
operations, plus `register` which binds them into an Environment.

Every builtin has the signature `fn(env, args) -> Value`. `args` is the
already-evaluated argument list; the builtin owns it and may reuse its cells
in the result. Failures are returned as Error values.
"""
from __future__ import annotations

from typing import Callable

from lispy.builtin.ops import NAMES, Op
from lispy.errors import ErrorKind
from lispy.types.environment import Environment
from lispy.types.value import (
    Builtin,
    Error,
    Number,
    QExpr,
    SExpr,
    Symbol,
    Value,
    wrap_int64,
)

BuiltinFn = Callable[[Environment, SExpr], Value]


# -------------------------------
# Argument checks
# -------------------------------
def _assert_count(name: str, args: SExpr, expected: int) -> Error | None:
    if len(args) != expected:
        return Error(
            f"Function '{name}' passed incorrect number of arguments. "
            f"Got {len(args)}, Expected {expected}",
            ErrorKind.ARITY,
        )
    return None


def _assert_some(name: str, args: SExpr) -> Error | None:
    if not args.cells:
        return Error(f"Function '{name}' passed no arguments!", ErrorKind.ARITY)
    return None


def _assert_type(name: str, args: SExpr, index: int, expected: type[Value]) -> Error | None:
    got = args[index]
    if not isinstance(got, expected):
        return Error(
            f"Function '{name}' passed incorrect type for argument {index}. "
            f"Got {got.type_name}, expected {expected.type_name}",
            ErrorKind.TYPE,
        )
    return None


def _assert_not_empty(name: str, args: SExpr, index: int) -> Error | None:
    if not args[index].cells:
        return Error(f"Function '{name}' passed {{}}!", ErrorKind.TYPE)
    return None


def _check_single_list(name: str, args: SExpr, non_empty: bool = False) -> Error | None:
    """Exactly one argument, a Q-expression, optionally non-empty."""
    error = _assert_count(name, args, 1) or _assert_type(name, args, 0, QExpr)
    if error is None and non_empty:
        error = _assert_not_empty(name, args, 0)
    return error


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: SExpr) -> Value:
    """Turn the argument list itself into a Q-expression."""
    return args.to_qexpr()


def head(env: Environment, args: SExpr) -> Value:
    """Q-expression holding only the first element of the argument."""
    if error := _check_single_list("head", args, non_empty=True):
        return error
    x = args.take(0)
    del x.cells[1:]
    return x


def tail(env: Environment, args: SExpr) -> Value:
    """The argument without its first element."""
    if error := _check_single_list("tail", args, non_empty=True):
        return error
    x = args.take(0)
    x.pop(0)
    return x


def init(env: Environment, args: SExpr) -> Value:
    """The argument without its last element."""
    if error := _check_single_list("init", args, non_empty=True):
        return error
    x = args.take(0)
    x.pop(len(x) - 1)
    return x


def length(env: Environment, args: SExpr) -> Value:
    if error := _check_single_list("len", args):
        return error
    return Number(len(args[0]))


def join(env: Environment, args: SExpr) -> Value:
    """Concatenate Q-expressions, in argument order."""
    if error := _assert_some("join", args):
        return error
    for i in range(len(args)):
        if error := _assert_type("join", args, i, QExpr):
            return error
    x = args.pop(0)
    while args.cells:
        x.join(args.pop(0))
    return x


def cons(env: Environment, args: SExpr) -> Value:
    """Prepend the first argument to the Q-expression given as the second."""
    if error := _assert_count("cons", args, 2) or _assert_type("cons", args, 1, QExpr):
        return error
    x = args.pop(0)
    y = args.take(0)
    return QExpr([x]).join(y)


def eval_builtin(env: Environment, args: SExpr) -> Value:
    """Evaluate a Q-expression as if it were an S-expression."""
    if error := _check_single_list("eval", args):
        return error
    # Deferred: the evaluator imports this module through apply
    from lispy.evaluation.evaluator import evaluate

    x = args.take(0)
    return evaluate(x.to_sexpr(), env)


# -------------------------------
# Binding
# -------------------------------
def define(env: Environment, args: SExpr) -> Value:
    """(def {a b} 1 2): bind each symbol to the value in the same position."""
    if error := _assert_some("def", args) or _assert_type("def", args, 0, QExpr):
        return error
    syms = args[0]
    for i, sym in enumerate(syms):
        if not isinstance(sym, Symbol):
            return Error(
                f"Function 'def' cannot define non-symbol. "
                f"Argument {i + 1} was a {sym.type_name}, expected {Symbol.type_name}",
                ErrorKind.TYPE,
            )
    if len(syms) != len(args) - 1:
        return Error(
            f"Function 'def' the amount of symbols passed don't match the amount of values. "
            f"Got {len(syms)} symbols and {len(args) - 1} values",
            ErrorKind.ARITY,
        )
    for sym, value in zip(syms, args.cells[1:]):
        env.put(sym.name, value)
    return SExpr()


# -------------------------------
# Arithmetic
# -------------------------------
def _divide(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _remainder(a: int, b: int) -> int:
    """Remainder of truncating division; takes the sign of the dividend."""
    return a - b * _divide(a, b)


def _arith(op: Op, args: SExpr) -> Value:
    """Fold `args` left to right, seeded with the first operand."""
    name = NAMES[op]
    if error := _assert_some(name, args):
        return error
    for cell in args:
        if not isinstance(cell, Number):
            return Error("Not a number!", ErrorKind.TYPE)

    x = args.pop(0).value
    if op is Op.SUB and not args.cells:
        x = -x

    while args.cells:
        y = args.pop(0).value
        match op:
            case Op.ADD:
                x += y
            case Op.SUB:
                x -= y
            case Op.MUL:
                x *= y
            case Op.DIV | Op.MOD:
                if y == 0:
                    return Error("Divide by zero", ErrorKind.DIVIDE_BY_ZERO)
                x = _divide(x, y) if op is Op.DIV else _remainder(x, y)
            case Op.POW:
                if y < 0:
                    return Error(f"Function '{name}' passed negative exponent {y}", ErrorKind.TYPE)
                x = pow(x, y, 1 << 64)
            case Op.MIN:
                x = min(x, y)
            case Op.MAX:
                x = max(x, y)
        x = wrap_int64(x)
    return Number(x)


def add(env: Environment, args: SExpr) -> Value:
    return _arith(Op.ADD, args)


def sub(env: Environment, args: SExpr) -> Value:
    """Subtract the rest from the first; a single operand is negated."""
    return _arith(Op.SUB, args)


def mul(env: Environment, args: SExpr) -> Value:
    return _arith(Op.MUL, args)


def div(env: Environment, args: SExpr) -> Value:
    return _arith(Op.DIV, args)


def mod(env: Environment, args: SExpr) -> Value:
    return _arith(Op.MOD, args)


def power(env: Environment, args: SExpr) -> Value:
    """Repeated exponentiation; an exponent of 0 gives 1, a negative one is an error."""
    return _arith(Op.POW, args)


def maximum(env: Environment, args: SExpr) -> Value:
    return _arith(Op.MAX, args)


def minimum(env: Environment, args: SExpr) -> Value:
    return _arith(Op.MIN, args)


# -------------------------------
# Control
# -------------------------------
def exit_builtin(env: Environment, args: SExpr) -> Value:
    """Clear the run flag so the read loop stops after this input."""
    env.stop()
    return Symbol("Exiting")


def printenv(env: Environment, args: SExpr) -> Value:
    """Print every bound name, one per line, in binding order."""
    for name in env.enumerate():
        print(name)
    return SExpr()


BUILTINS: dict[Op, BuiltinFn] = {
    Op.LIST: list_builtin,
    Op.HEAD: head,
    Op.TAIL: tail,
    Op.EVAL: eval_builtin,
    Op.JOIN: join,
    Op.CONS: cons,
    Op.INIT: init,
    Op.LEN: length,
    Op.DEF: define,
    Op.ADD: add,
    Op.SUB: sub,
    Op.MUL: mul,
    Op.DIV: div,
    Op.MOD: mod,
    Op.POW: power,
    Op.MAX: maximum,
    Op.MIN: minimum,
    Op.EXIT: exit_builtin,
    Op.PRINTENV: printenv,
}


def register(env: Environment) -> None:
    """Bind every builtin under its canonical name into the given environment."""
    env.update({name: Builtin(op) for op, name in NAMES.items()})
