"""Parse tree nodes.

A node records which grammar rule produced it (`tag`), the raw token text
for leaves (`contents`) and its children. Tags are `|`-joined rule paths in
the style of parser-combinator output, e.g. `expr|number|regex` for a number
literal or `expr|qexpr|>` for a braced list; the root is tagged `>`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

ROOT_TAG = ">"


@dataclass
class AstNode:
    tag: str
    contents: str = ""
    children: list[AstNode] = field(default_factory=list)
    line: int = 1
    column: int = 1


def count_nodes(node: AstNode) -> int:
    """Number of nodes in the tree rooted at `node`, the root included."""
    return 1 + sum(count_nodes(child) for child in node.children)
