"""Static semantic checks: identifier declaration and use."""

from __future__ import annotations

from collections.abc import Iterator

from tinycomp.tokens import Node, SemanticError, Token, TokenType

# Nonterminals that declare the identifier in their second child when the
# first child is this symbol.
_DECLARERS = {"A": '"', "C": "#"}


class SymbolTable:
    """The set of declared identifiers, iterated in sorted order."""

    def __init__(self) -> None:
        self._names: set[str] = set()

    def declare(self, token: Token) -> None:
        """Add the token's identifier; raise SemanticError if already present."""
        if token.text in self._names:
            raise SemanticError(f"{token.text} already declared. Line {token.line}")
        self._names.add(token.text)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)


def _search(node: Node, table: SymbolTable) -> None:
    kids = node.children()
    symbol = _DECLARERS.get(node.label)
    if (
        symbol is not None
        and kids
        and kids[0].token is not None
        and kids[0].token.text == symbol
    ):
        declared = kids[1].token
        if declared is not None:
            table.declare(declared)
        return
    tk = node.token
    if tk is not None and tk.type is TokenType.T2 and tk.text not in table:
        raise SemanticError(f"{tk.text} is not declared. Line {tk.line}")
    for child in kids:
        _search(child, table)


def check_semantics(root: Node | None) -> SymbolTable:
    """Walk the tree in pre-order, building and checking the symbol table."""
    table = SymbolTable()
    if root is not None:
        _search(root, table)
    return table