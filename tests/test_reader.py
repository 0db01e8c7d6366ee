import pytest

from lispy.errors import ErrorKind, LispySyntaxError
from lispy.reader.ast import AstNode, count_nodes
from lispy.reader.parser import lex, parse
from lispy.reader.translate import read
from lispy.types.value import Error, Number, QExpr, SExpr, Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("42", [("number", "42")]),
        ("-42", [("number", "-42")]),
        ("-", [("symbol", "-")]),
        ("+1", [("symbol", "+1")]),
        ("1+", [("number", "1"), ("symbol", "+")]),
        ("x-1", [("symbol", "x-1")]),
        ("(+ 1 2)", [("lparen", "("), ("symbol", "+"), ("number", "1"), ("number", "2"), ("rparen", ")")]),
        ("{a}", [("lbrace", "{"), ("symbol", "a"), ("rbrace", "}")]),
        ("  printenv\t\n", [("symbol", "printenv")]),
        ("^ % \\ == <> !&", [("symbol", "^"), ("symbol", "%"), ("symbol", "\\"), ("symbol", "=="),
                             ("symbol", "<>"), ("symbol", "!&")]),
    ],
)
def test_lexer_basic(source, expected):
    tokens = [(t.kind, t.text) for t in lex(source)]
    assert tokens == expected


def test_lexer_positions():
    tokens = list(lex("a\n  (b)"))
    assert [(t.line, t.column) for t in tokens] == [(1, 1), (2, 3), (2, 4), (2, 5)]


def test_lexer_rejects_unknown_characters():
    with pytest.raises(LispySyntaxError) as exc:
        list(lex("+ 1 ?", filename="<test>"))
    assert exc.value.column == 5
    assert str(exc.value) == "<test>:1:5: error: unexpected '?'"


def test_parse_shape():
    root = parse("+ 1 {a (b)}")
    assert root.tag == ">"
    assert [c.tag for c in root.children] == [
        "regex", "expr|symbol|regex", "expr|number|regex", "expr|qexpr|>", "regex",
    ]
    qexpr = root.children[3]
    assert [(c.tag, c.contents) for c in qexpr.children] == [
        ("char", "{"), ("expr|symbol|regex", "a"), ("expr|sexpr|>", ""), ("char", "}"),
    ]
    assert [c.contents for c in qexpr.children[2].children] == ["(", "b", ")"]


def test_parse_empty_input():
    root = parse("   ")
    assert [c.tag for c in root.children] == ["regex", "regex"]
    assert read(root) == SExpr()


@pytest.mark.parametrize(
    "source,message",
    [
        ("(+ 1 2", "expected ')' before end of input"),
        ("{1 2", "expected '}' before end of input"),
        ("(1 2}", "expected ')' but found '}'"),
        (")", "unexpected ')'"),
        ("+ 1 }", "unexpected '}'"),
    ],
)
def test_parse_errors(source, message):
    with pytest.raises(LispySyntaxError) as exc:
        parse(source)
    assert exc.value.message == message


def test_parse_error_position_at_end_of_input():
    with pytest.raises(LispySyntaxError) as exc:
        parse("(+ 12")
    assert (exc.value.line, exc.value.column) == (1, 6)


def test_count_nodes():
    assert count_nodes(AstNode("expr|number|regex", "1")) == 1
    # root, 2 regex markers, sexpr with 2 chars and 2 leaves
    assert count_nodes(parse("(a 1)")) == 8


def test_read_translates_tree():
    value = read(parse("+ 1 {a (b -2)}"))
    assert value == SExpr([
        Symbol("+"),
        Number(1),
        QExpr([Symbol("a"), SExpr([Symbol("b"), Number(-2)])]),
    ])


@pytest.mark.parametrize(
    "contents,expected",
    [
        ("9223372036854775807", Number(9223372036854775807)),
        ("-9223372036854775808", Number(-9223372036854775808)),
        ("9223372036854775808", Error("Invalid number", ErrorKind.BAD_NUMBER)),
        ("-9223372036854775809", Error("Invalid number", ErrorKind.BAD_NUMBER)),
        ("12abc", Error("Invalid number", ErrorKind.BAD_NUMBER)),
    ],
)
def test_read_number(contents, expected):
    assert read(AstNode("expr|number|regex", contents)) == expected


def test_read_skips_punctuation_and_regex():
    node = AstNode(">", children=[
        AstNode("regex"),
        AstNode("expr|qexpr|>", children=[
            AstNode("char", "{"),
            AstNode("expr|symbol|regex", "x"),
            AstNode("char", "}"),
        ]),
        AstNode("regex"),
    ])
    assert read(node) == SExpr([QExpr([Symbol("x")])])


def test_read_sexpr_tag_without_root():
    node = AstNode("sexpr", children=[AstNode("char", "("), AstNode("number", "3"), AstNode("char", ")")])
    assert read(node) == SExpr([Number(3)])


def test_read_unknown_tag():
    with pytest.raises(LispySyntaxError):
        read(AstNode("string", "hello"))
