"""Pre-order listing of a parse tree."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from tinycomp.tokens import Node

_INDENT = 4


def _lines(node: Node, level: int) -> Iterator[str]:
    # The first column always holds at least one space, even at the root.
    indent = " " * max(1, level * _INDENT)
    text = node.token.text if node.token is not None else ""
    line = f"{indent}{node.label} "
    if text:
        line += f"{text} "
    yield line
    for child in node.children():
        yield from _lines(child, level + 1)


def format_preorder(root: Node | None) -> str:
    """Return the tree as one line per node, children indented under parents."""
    if root is None:
        return ""
    return "".join(f"{line}\n" for line in _lines(root, 0))


def write_preorder(root: Node | None, base: str) -> Path:
    """Write the pre-order listing to ``<base>.preorder`` and return its path."""
    path = Path(f"{base}.preorder")
    path.write_text(format_preorder(root), encoding="utf-8")
    return path