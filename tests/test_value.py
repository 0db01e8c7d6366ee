import pytest

from lispy.builtin.ops import Op
from lispy.errors import ErrorKind
from lispy.types.value import (
    INT64_MAX,
    INT64_MIN,
    Builtin,
    Error,
    Number,
    QExpr,
    SExpr,
    Symbol,
    clone,
    wrap_int64,
)


def test_clone_is_deep_and_independent():
    original = QExpr([Number(1), SExpr([Symbol("x"), QExpr([Number(2)])])])
    copy = clone(original)
    assert copy == original
    assert copy is not original

    copy.cells[1].cells[1].add(Number(3))
    copy.cells[0] = Number(99)
    assert original == QExpr([Number(1), SExpr([Symbol("x"), QExpr([Number(2)])])])


def test_clone_keeps_builtin_id():
    b = Builtin(Op.HEAD)
    c = b.clone()
    assert c.op is Op.HEAD
    assert c == b and c is not b


def test_clone_keeps_error_kind():
    e = Error("Divide by zero", ErrorKind.DIVIDE_BY_ZERO)
    assert e.clone() == e


def test_sexpr_and_qexpr_are_distinct():
    assert SExpr([Number(1)]) != QExpr([Number(1)])
    assert QExpr() == QExpr()


@pytest.mark.parametrize(
    "n,expected",
    [
        (0, 0),
        (INT64_MAX, INT64_MAX),
        (INT64_MIN, INT64_MIN),
        (INT64_MAX + 1, INT64_MIN),
        (INT64_MIN - 1, INT64_MAX),
        (1 << 64, 0),
        (-1, -1),
    ],
)
def test_wrap_int64(n, expected):
    assert wrap_int64(n) == expected
    assert Number(n).value == expected


def test_pop_and_take():
    expr = SExpr([Number(1), Number(2), Number(3)])
    assert expr.pop(1) == Number(2)
    assert expr == SExpr([Number(1), Number(3)])
    assert expr.take(1) == Number(3)
    assert len(expr) == 0


def test_out_of_bounds_is_internal_error():
    expr = SExpr([Number(1)])
    err = expr.pop(5)
    assert isinstance(err, Error)
    assert err.kind is ErrorKind.INTERNAL
    err = expr.take(-1)
    assert isinstance(err, Error)
    assert err.kind is ErrorKind.INTERNAL


def test_join_moves_children():
    x = QExpr([Number(1)])
    y = QExpr([Number(2), Number(3)])
    x.join(y)
    assert x == QExpr([Number(1), Number(2), Number(3)])
    assert len(y) == 0


def test_retag_moves_cells():
    s = SExpr([Number(1), Symbol("a")])
    q = s.to_qexpr()
    assert q == QExpr([Number(1), Symbol("a")])
    assert len(s) == 0
    assert q.to_sexpr() == SExpr([Number(1), Symbol("a")])


def test_type_names():
    assert Number(1).type_name == "Number"
    assert Error("x").type_name == "Error"
    assert Symbol("x").type_name == "Symbol"
    assert Builtin(Op.ADD).type_name == "Function"
    assert SExpr().type_name == "S-Expression"
    assert QExpr().type_name == "Q-Expression"
