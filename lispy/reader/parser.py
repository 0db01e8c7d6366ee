"""
  Lispy Lexer and Parser

Grammar:

    number : /-?[0-9]+/ ;
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&%^]+/ ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    lispy  : /^/ <expr>* /$/ ;

Alternatives are tried in order, so `-5` is a number and `-` a symbol, and
`1+` reads as the number `1` followed by the symbol `+`.

The parser emits AstNode trees rather than values:

    - root          -> tag '>' : [regex '^', expr..., regex '$']
    - number/symbol -> tag 'expr|number|regex' / 'expr|symbol|regex'
    - ( ... )       -> tag 'expr|sexpr|>' : [char '(', expr..., char ')']
    - { ... }       -> tag 'expr|qexpr|>' : [char '{', expr..., char '}']
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from lispy.errors import LispySyntaxError
from lispy.reader.ast import ROOT_TAG, AstNode


TOKEN_RE = re.compile(
    r"(?P<number>-?[0-9]+)"
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&%^]+)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<lbrace>\{)"
    r"|(?P<rbrace>\})"
)

WHITESPACE_RE = re.compile(r"\s+")

CLOSERS = {"lparen": "rparen", "lbrace": "rbrace"}
LIST_TAGS = {"lparen": "expr|sexpr|>", "lbrace": "expr|qexpr|>"}


class Token(NamedTuple):
    kind: str
    text: str
    line: int
    column: int


def lex(source: str, filename: str = "<stdin>") -> Iterator[Token]:
    """Token generator: yields Token(kind, text, line, column)."""
    pos = 0
    line, line_start = 1, 0
    n = len(source)
    while pos < n:
        ws = WHITESPACE_RE.match(source, pos)
        if ws:
            for m in re.finditer("\n", ws.group()):
                line += 1
                line_start = pos + m.end()
            pos = ws.end()
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise LispySyntaxError(
                f"unexpected {source[pos]!r}", filename, line, pos - line_start + 1
            )
        yield Token(m.lastgroup, m.group(), line, pos - line_start + 1)
        pos = m.end()


class TokenStream:
    def __init__(self, tokens: Iterator[Token], filename: str = "<stdin>"):
        self.tokens = iter(tokens)
        self.filename = filename
        self.buffer: list[Token] = []
        self.last: Optional[Token] = None

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        tok = self.buffer.pop(0) if self.buffer else next(self.tokens, None)
        if tok is not None:
            self.last = tok
        return tok

    def error(self, message: str, tok: Optional[Token]) -> LispySyntaxError:
        """Syntax error at `tok`, or just past the last token read at end of input."""
        if tok is not None:
            return LispySyntaxError(message, self.filename, tok.line, tok.column)
        if self.last is None:
            return LispySyntaxError(message, self.filename)
        return LispySyntaxError(
            message, self.filename, self.last.line, self.last.column + len(self.last.text)
        )

    def parse_expr(self) -> AstNode:
        tok = self.advance()
        if tok is None:
            raise self.error("unexpected end of input", None)

        if tok.kind in ("number", "symbol"):
            return AstNode(f"expr|{tok.kind}|regex", tok.text, line=tok.line, column=tok.column)

        if tok.kind in CLOSERS:
            closer = CLOSERS[tok.kind]
            node = AstNode(LIST_TAGS[tok.kind], line=tok.line, column=tok.column)
            node.children.append(AstNode("char", tok.text, line=tok.line, column=tok.column))
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise self.error(f"expected '{_text_of(closer)}' before end of input", None)
                if nxt.kind == closer:
                    self.advance()
                    node.children.append(AstNode("char", nxt.text, line=nxt.line, column=nxt.column))
                    return node
                if nxt.kind in ("rparen", "rbrace"):
                    raise self.error(
                        f"expected '{_text_of(closer)}' but found '{nxt.text}'", nxt
                    )
                node.children.append(self.parse_expr())

        raise self.error(f"unexpected '{tok.text}'", tok)

    def parse_all(self) -> Iterator[AstNode]:
        while self.peek() is not None:
            yield self.parse_expr()


def _text_of(kind: str) -> str:
    return {"rparen": ")", "rbrace": "}"}[kind]


def parse(source: str, filename: str = "<stdin>") -> AstNode:
    """Parse a whole input into a root node holding one child per expression."""
    stream = TokenStream(lex(source, filename), filename)
    root = AstNode(ROOT_TAG)
    root.children.append(AstNode("regex"))
    root.children.extend(stream.parse_all())
    root.children.append(AstNode("regex"))
    return root
