"""Comment stripping and recursive-descent parsing into a tree of nodes."""

from __future__ import annotations

from tinycomp.scanner import Scanner
from tinycomp.tokens import Node, ParserError, Token, TokenType

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _is_allowed(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch in _WHITESPACE or "!" <= ch <= "+"


def preprocess(text: str) -> str:
    """Blank out ``*...*`` comments and reject characters outside the language.

    Comment characters become spaces, newlines inside comments are kept, so
    the result has the same length and line structure as ``text``.
    """
    out: list[str] = []
    in_comment = False
    for ch in text:
        if in_comment:
            if ch == "*":
                in_comment = False
            out.append("\n" if ch == "\n" else " ")
        elif ch == "*":
            in_comment = True
            out.append(" ")
        elif _is_allowed(ch):
            out.append(ch)
        else:
            raise ParserError(f"Processing Error: Invalid Character Found {ch!r}")
    return "".join(out)


class Parser:
    """Recursive-descent parser for the S/A/B/C/D/E/F/G grammar."""

    def __init__(self, text: str) -> None:
        self._scanner = Scanner(preprocess(text))
        self._tk: Token = Token(TokenType.EOF, "", 1)

    def parse(self) -> Node:
        """Parse the whole input and return the root ``S`` node."""
        self._tk = self._scanner.next_token()
        root = self._s()
        if self._tk.type is not TokenType.EOF:
            raise ParserError("EOF Token Expected")
        return root

    def _advance(self) -> Token:
        current = self._tk
        self._tk = self._scanner.next_token()
        return current

    def _leaf(self, label: str) -> Node:
        return Node(label, self._advance())

    def _is_symbol(self, symbol: str) -> bool:
        return self._tk.type is TokenType.T1 and self._tk.text[:1] == symbol

    def _found(self) -> str:
        return f"found '{self._tk.text}' (line {self._tk.line})"

    def _expect_symbol(self, symbol: str) -> Node:
        if not self._is_symbol(symbol):
            raise ParserError(f"Expected '{symbol}', {self._found()}")
        return self._leaf("t1")

    def _expect_t2(self) -> Node:
        if self._tk.type is not TokenType.T2:
            raise ParserError(f"Expected t2 token, {self._found()}")
        return self._leaf("t2")

    def _s(self) -> Node:
        a = self._a()
        opening = self._expect_symbol("(")
        first = self._b()
        second = self._b()
        closing = self._expect_symbol(")")
        return Node("S", nodes=[a, opening, first, second, closing])

    def _a(self) -> Node:
        if self._is_symbol('"'):
            quote = self._leaf("t1")
            return Node("A", nodes=[quote, self._expect_t2()])
        return Node("A", nodes=[Node("empty")])

    def _b(self) -> Node:
        first = self._tk.text[:1]
        if first == '"':
            child = self._a()
        elif first in ("#", "!"):
            child = self._c()
        elif first == "$":
            child = self._d()
        elif first == "'":
            child = self._e()
        elif self._tk.type is TokenType.T2:
            child = self._g()
        elif self._is_symbol("("):
            child = self._s()
        else:
            raise ParserError(f"No valid entry for B nonterminal, {self._found()}")
        return Node("B", nodes=[child])

    def _c(self) -> Node:
        if self._is_symbol("#"):
            hash_node = self._leaf("t1")
            return Node("C", nodes=[hash_node, self._expect_t2()])
        if self._is_symbol("!"):
            bang = self._leaf("t1")
            return Node("C", nodes=[bang, self._f()])
        raise ParserError(f"Expected # or !, {self._found()}")

    def _d(self) -> Node:
        if not self._is_symbol("$"):
            raise ParserError(f"Expected $, {self._found()}")
        dollar = self._leaf("t1")
        return Node("D", nodes=[dollar, self._f()])

    def _e(self) -> Node:
        if not self._is_symbol("'"):
            raise ParserError(f"Expected ', {self._found()}")
        tick = self._leaf("t1")
        low = self._f()
        high = self._f()
        count = self._f()
        body = self._b()
        return Node("E", nodes=[tick, low, high, count, body])

    def _f(self) -> Node:
        if self._is_symbol("&"):
            amp = self._leaf("t1")
            left = self._f()
            right = self._f()
            return Node("F", nodes=[amp, left, right])
        if self._tk.type is TokenType.T2:
            return Node("F", nodes=[self._leaf("t2")])
        if self._tk.type is TokenType.T3:
            return Node("F", nodes=[self._leaf("t3")])
        raise ParserError(f"Expected t2 token, t3 token, or &, {self._found()}")

    def _g(self) -> Node:
        target = self._expect_t2()
        if not self._is_symbol("%"):
            raise ParserError(f"Expected %, {self._found()}")
        percent = self._leaf("t1")
        return Node("G", nodes=[target, percent, self._f()])


def parse(text: str) -> Node:
    """Parse ``text`` and return its tree."""
    return Parser(text).parse()