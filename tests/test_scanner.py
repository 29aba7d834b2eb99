import pytest

from tinycomp.scanner import Scanner, resolve_char, tokenize
from tinycomp.tokens import CompilerError, ScannerError, TokenType


def test_tokenize_all_kinds():
    tokens = tokenize("( +1 A23 )")
    assert [t.type for t in tokens] == [
        TokenType.T1,
        TokenType.T2,
        TokenType.T3,
        TokenType.T1,
        TokenType.EOF,
    ]
    assert [t.text for t in tokens] == ["(", "+1", "A23", ")", ""]


def test_adjacent_tokens_without_spaces():
    tokens = tokenize("a1($+77")
    assert [t.text for t in tokens] == ["a1", "(", "$", "+77", ""]
    assert [t.type for t in tokens][:2] == [TokenType.T3, TokenType.T1]


def test_symbols_are_single_character_tokens():
    tokens = tokenize("&&%")
    assert [t.text for t in tokens[:-1]] == ["&", "&", "%"]
    assert all(t.type is TokenType.T1 for t in tokens[:-1])


def test_line_numbers_follow_newlines():
    text = "(\n\n\n+5"
    tokens = tokenize(text)
    assert tokens[0].line == 1
    assert tokens[1].line == text.count("\n") + 1


def test_eof_repeats():
    scanner = Scanner("#")
    assert scanner.next_token().text == "#"
    first = scanner.next_token()
    second = scanner.next_token()
    assert first.type is TokenType.EOF
    assert first == second


def test_empty_input_is_only_eof():
    tokens = tokenize("  \n\t ")
    assert len(tokens) == 1
    assert tokens[0].type is TokenType.EOF


def test_letter_without_digit():
    with pytest.raises(ScannerError, match="Digit Expected after Alpha Char"):
        tokenize("A ")


def test_plus_without_digit():
    with pytest.raises(ScannerError, match=r"Digit Expected after \+"):
        tokenize("+x")


def test_plus_at_end_of_input():
    with pytest.raises(ScannerError, match=r"Digit Expected after \+"):
        tokenize("(+")


def test_number_at_token_start():
    with pytest.raises(ScannerError, match="Number not expected at beginning of token"):
        tokenize("12")


def test_invalid_character_is_compiler_error():
    with pytest.raises(CompilerError):
        tokenize("~")


def test_resolve_char_classes_are_distinct():
    samples = ["", "a", "5", "+", "$", " "]
    classes = [resolve_char(c) for c in samples]
    assert len(set(classes)) == len(samples)
    assert resolve_char("a") == resolve_char("Z")
    assert resolve_char("!") == resolve_char(")")
    assert resolve_char("\n") == resolve_char(" ")
    assert resolve_char(None) == resolve_char("")


def test_resolve_char_rejects_non_ascii_and_others():
    assert resolve_char("é") == -1
    assert resolve_char("~") == resolve_char("é")
    assert resolve_char(",") == resolve_char("é")