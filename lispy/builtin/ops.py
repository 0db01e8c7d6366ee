"""Stable identifiers for the builtin operations and their canonical names."""

from __future__ import annotations

from enum import Enum, auto


class Op(Enum):
    LIST = auto()
    HEAD = auto()
    TAIL = auto()
    EVAL = auto()
    JOIN = auto()
    CONS = auto()
    INIT = auto()
    LEN = auto()
    DEF = auto()
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    MOD = auto()
    POW = auto()
    MAX = auto()
    MIN = auto()
    EXIT = auto()
    PRINTENV = auto()


# Registration order into a fresh environment follows this mapping.
NAMES: dict[Op, str] = {
    Op.LIST: "list",
    Op.HEAD: "head",
    Op.TAIL: "tail",
    Op.EVAL: "eval",
    Op.JOIN: "join",
    Op.CONS: "cons",
    Op.INIT: "init",
    Op.LEN: "len",
    Op.DEF: "def",
    Op.ADD: "+",
    Op.SUB: "-",
    Op.MUL: "*",
    Op.DIV: "/",
    Op.MOD: "%",
    Op.POW: "^",
    Op.MAX: "max",
    Op.MIN: "min",
    Op.EXIT: "exit",
    Op.PRINTENV: "printenv",
}

# Zero-argument operations that still run when they are alone in an S-expression
EFFECTFUL: frozenset[Op] = frozenset({Op.EXIT, Op.PRINTENV})
