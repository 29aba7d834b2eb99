"""Finite-state scanner turning source text into tokens."""

from __future__ import annotations

from tinycomp.tokens import ScannerError, Token, TokenType

_EOF, _ALPHA, _DIGIT, _PLUS, _SYMBOL, _SPACE = range(6)
_INVALID = -1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")

_FINAL = 1000

# Rows are states, columns are character classes. Negative entries are
# errors, entries of 1000 and above are accepting states for a token kind.
_TABLE = (
    (1000, 1, -1, 3, 5, 0),
    (-2, -2, 2, -2, -2, -2),
    (1003, 1003, 2, 1003, 1003, 1003),
    (-3, -3, 4, -3, -3, -3),
    (1002, 1002, 4, 1002, 1002, 1002),
    (1001, 1001, 1001, 1001, 1001, 1001),
)

_ERRORS = {
    -1: "Number not expected at beginning of token",
    -2: "Digit Expected after Alpha Char",
    -3: "Digit Expected after +",
}


def resolve_char(ch: str | None) -> int:
    """Return the character class column for ``ch``; empty or None is EOF."""
    if not ch:
        return _EOF
    if ch.isascii() and ch.isalpha():
        return _ALPHA
    if ch in _DIGITS:
        return _DIGIT
    if ch == "+":
        return _PLUS
    if "!" <= ch <= ")":
        return _SYMBOL
    if ch in _WHITESPACE:
        return _SPACE
    return _INVALID


class Scanner:
    """Produces tokens one at a time from a piece of text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._line = 1

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def next_token(self) -> Token:
        """Scan and return the next token; EOF is returned repeatedly at the end."""
        state = 0
        chars: list[str] = []
        while True:
            ch = self._peek()
            column = resolve_char(ch)
            if column == _INVALID:
                raise ScannerError(
                    f"Unknown Error Encountered: invalid character {ch!r} "
                    f"(line {self._line})"
                )
            next_state = _TABLE[state][column]
            if next_state < 0:
                message = _ERRORS.get(next_state, "Unknown Error Encountered")
                raise ScannerError(f"{message} (line {self._line})")
            if next_state >= _FINAL:
                return Token(TokenType(next_state - _FINAL), "".join(chars), self._line)
            state = next_state
            if ch not in _WHITESPACE:
                chars.append(ch)
            if ch == "\n":
                self._line += 1
            self._pos += 1


def tokenize(text: str) -> list[Token]:
    """Return every token of ``text``, ending with the EOF token."""
    scanner = Scanner(text)
    tokens = []
    while True:
        tk = scanner.next_token()
        tokens.append(tk)
        if tk.type is TokenType.EOF:
            return tokens