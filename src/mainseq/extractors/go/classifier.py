"""Count abstract and concrete declarations in Go source via tree-sitter."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import cache
from pathlib import Path

import tree_sitter_go as tsgo
from tree_sitter import Language, Node, Parser

from mainseq.errors import ParseError

# tree-sitter node types that count as concretions.
_FUNC_DECL_TYPES = {"function_declaration", "method_declaration"}

# tree-sitter node types that count as abstractions. Struct types are
# included because receivers are not resolved to their interfaces.
_ABSTRACT_TYPES = {"interface_type", "struct_type"}

# Longest snippet of unexpected source quoted in a parse error.
_SNIPPET_LIMIT = 40


@dataclass(frozen=True)
class DeclarationCounts:
    """Concretion and abstraction units found in one or more files."""

    concretions: int = 0
    abstractions: int = 0

    def __add__(self, other: DeclarationCounts) -> DeclarationCounts:
        return DeclarationCounts(
            concretions=self.concretions + other.concretions,
            abstractions=self.abstractions + other.abstractions,
        )


@cache
def _go_language() -> Language:
    return Language(tsgo.language())


def classify_source(source: bytes, path: Path | str = "<source>") -> DeclarationCounts:
    """Classify every declaration in a single Go file.

    Raises :class:`ParseError` if the file contains a syntax error.
    """
    parser = Parser(_go_language())
    tree = parser.parse(source)
    root = tree.root_node

    if root.has_error:
        raise ParseError(path, _describe_error(root))

    concretions = 0
    abstractions = 0
    for node in _walk(root):
        if node.type in _FUNC_DECL_TYPES:
            concretions += 1
        elif node.type in _ABSTRACT_TYPES:
            abstractions += 1

    return DeclarationCounts(concretions=concretions, abstractions=abstractions)


def _walk(root: Node) -> Iterator[Node]:
    """Yield *root* and all of its descendants in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _describe_error(root: Node) -> str:
    """Describe the first error or missing node below *root*."""
    for node in _walk(root):
        if not (node.is_error or node.is_missing):
            continue
        row, column = node.start_point[0] + 1, node.start_point[1] + 1
        if node.is_missing:
            return f"{row}:{column}: missing {node.type}"
        text = (node.text or b"").decode("utf-8", errors="replace").strip()
        if len(text) > _SNIPPET_LIMIT:
            text = text[:_SNIPPET_LIMIT] + "..."
        return f"{row}:{column}: syntax error near {text!r}"
    return "syntax error"
