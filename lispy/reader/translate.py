"""Translation of parse trees into Value trees."""

from __future__ import annotations

from lispy.errors import ErrorKind, LispySyntaxError
from lispy.reader.ast import ROOT_TAG, AstNode
from lispy.types.value import INT64_MAX, INT64_MIN, Error, Expr, Number, QExpr, SExpr, Symbol, Value

# Bracket leaves carry no value
PUNCTUATION = frozenset({"(", ")", "{", "}"})


def read_number(node: AstNode) -> Value:
    try:
        n = int(node.contents, 10)
    except ValueError:
        return Error("Invalid number", ErrorKind.BAD_NUMBER)
    if not INT64_MIN <= n <= INT64_MAX:
        return Error("Invalid number", ErrorKind.BAD_NUMBER)
    return Number(n)


def read(node: AstNode) -> Value:
    """Build the Value tree for `node`; the root becomes an S-expression."""
    if "number" in node.tag:
        return read_number(node)
    if "symbol" in node.tag:
        return Symbol(node.contents)

    expr: Expr
    if node.tag == ROOT_TAG or "sexpr" in node.tag:
        expr = SExpr()
    elif "qexpr" in node.tag:
        expr = QExpr()
    else:
        raise LispySyntaxError(f"unexpected node {node.tag!r}", line=node.line, column=node.column)

    for child in node.children:
        if child.contents in PUNCTUATION or child.tag == "regex":
            continue
        expr.add(read(child))
    return expr
