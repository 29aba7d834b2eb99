"""Tokens, parse-tree nodes and the compiler's exception hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of token produced by the scanner."""

    EOF = 0
    T1 = 1
    T2 = 2
    T3 = 3

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    TokenType.EOF: "End of File Token",
    TokenType.T1: "t1 token",
    TokenType.T2: "t2 token",
    TokenType.T3: "t3 token",
}


@dataclass(frozen=True)
class Token:
    """A scanned token: its kind, its text and the line it ended on."""

    type: TokenType
    text: str
    line: int


@dataclass
class Node:
    """A parse-tree node labelled by nonterminal or terminal kind."""

    label: str
    token: Token | None = None
    nodes: list[Node] = field(default_factory=list)

    def children(self) -> tuple[Node, ...]:
        """Return the node's children in order."""
        return tuple(self.nodes)


class CompilerError(Exception):
    """Base class for every error the compiler reports."""


class ScannerError(CompilerError):
    """Raised when the input cannot be split into tokens."""


class ParserError(CompilerError):
    """Raised when the token stream does not match the grammar."""


class SemanticError(CompilerError):
    """Raised when identifiers are redeclared or used undeclared."""


class CodeGenError(CompilerError):
    """Raised when the tree holds a token that cannot become assembly."""