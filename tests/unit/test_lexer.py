"""
Tests for the lexical analyzer.

Tests cover tokenization of parentheses, strings and command keywords,
paren depth tracking with its error-kind tokens, source locations,
single-slot lookahead, and end-of-stream behavior.
"""

from typing import List, Tuple

import pytest

from wffrewrite.parser.lexer import Lexer, Location, Token, TokenKind


def _tokens(text: str) -> List[Tuple[TokenKind, str]]:
    """Helper: return list of (kind, text) pairs from lexing text."""
    return [(tok.kind, tok.text) for tok in Lexer(text)]


def _kinds(text: str) -> List[TokenKind]:
    """Helper: return list of token kinds from lexing text."""
    return [tok.kind for tok in Lexer(text)]


class TestStrings:
    """Test plain string tokenization."""

    def test_single_word(self) -> None:
        assert _tokens("p") == [(TokenKind.STRING, "p"), (TokenKind.END, "")]

    def test_symbols_are_strings(self) -> None:
        toks = _tokens("/\\ [*] => ~")
        assert [t for _, t in toks[:-1]] == ["/\\", "[*]", "=>", "~"]
        assert all(kind is TokenKind.STRING for kind, _ in toks[:-1])

    def test_string_stops_at_paren(self) -> None:
        assert _kinds("a(b)c") == [
            TokenKind.STRING,
            TokenKind.LPAREN,
            TokenKind.STRING,
            TokenKind.RPAREN,
            TokenKind.STRING,
            TokenKind.END,
        ]

    def test_asymmetric_bracket_is_one_string(self) -> None:
        assert _tokens("[+}")[0] == (TokenKind.STRING, "[+}")


class TestCommands:
    """Test command keyword classification."""

    @pytest.mark.parametrize(
        "text, kind",
        [
            (":rule", TokenKind.RULE),
            (":delete", TokenKind.DELETE),
            (":apply", TokenKind.APPLY),
            (":quit", TokenKind.QUIT),
            (":load", TokenKind.LOAD),
            (":save", TokenKind.SAVE),
        ],
    )
    def test_keyword(self, text: str, kind: TokenKind) -> None:
        assert _tokens(text)[0] == (kind, text)

    def test_unknown_command_is_string(self) -> None:
        assert _tokens(":frobnicate")[0] == (TokenKind.STRING, ":frobnicate")

    def test_lone_colon_is_string(self) -> None:
        assert _tokens(":")[0] == (TokenKind.STRING, ":")

    def test_keyword_prefix_is_string(self) -> None:
        assert _tokens(":rules")[0] == (TokenKind.STRING, ":rules")

    def test_command_stops_at_paren(self) -> None:
        assert _kinds(":quit)")[:2] == [TokenKind.QUIT, TokenKind.PAREN_OVERFLOW]


class TestParenDepth:
    """Test paren depth tracking and the terminal token."""

    def test_balanced_ends_with_end(self) -> None:
        assert _kinds("(and p q)")[-1] is TokenKind.END

    def test_unclosed_paren(self) -> None:
        kinds = _kinds("(and p (not q)")
        assert kinds[-1] is TokenKind.UNCLOSED_PAREN
        assert TokenKind.END not in kinds

    def test_extra_close_paren(self) -> None:
        assert _kinds("p)") == [TokenKind.STRING, TokenKind.PAREN_OVERFLOW, TokenKind.END]

    def test_overflow_leaves_depth_unchanged(self) -> None:
        lexer = Lexer("( ) ) (")
        kinds = [tok.kind for tok in lexer]
        assert kinds == [
            TokenKind.LPAREN,
            TokenKind.RPAREN,
            TokenKind.PAREN_OVERFLOW,
            TokenKind.LPAREN,
            TokenKind.UNCLOSED_PAREN,
        ]
        assert lexer.depth == 1

    def test_error_kinds(self) -> None:
        assert TokenKind.UNCLOSED_PAREN.is_error
        assert TokenKind.PAREN_OVERFLOW.is_error
        assert not TokenKind.END.is_error


class TestWhitespace:
    """Test whitespace handling."""

    def test_tabs_and_newlines(self) -> None:
        assert _tokens("a\tb\nc")[:-1] == [
            (TokenKind.STRING, "a"),
            (TokenKind.STRING, "b"),
            (TokenKind.STRING, "c"),
        ]

    def test_carriage_return(self) -> None:
        assert _tokens("a\r\nb")[:-1] == [(TokenKind.STRING, "a"), (TokenKind.STRING, "b")]

    def test_empty_input(self) -> None:
        assert _tokens("") == [(TokenKind.END, "")]

    def test_only_whitespace(self) -> None:
        assert _tokens("   \t  \n  ") == [(TokenKind.END, "")]


class TestLocations:
    """Test source location tracking."""

    def test_columns_without_file(self) -> None:
        toks = list(Lexer("(not p)"))
        assert [t.location.column for t in toks] == [1, 2, 6, 7, 8]
        assert all(t.location.file_path is None for t in toks)

    def test_rows_with_file(self) -> None:
        toks = list(Lexer("a\n  b\n\nc", file_path="rules.wff"))
        assert [(t.location.row, t.location.column) for t in toks] == [
            (1, 1),
            (2, 3),
            (4, 1),
            (4, 2),
        ]
        assert toks[0].location.file_path == "rules.wff"

    def test_rows_never_decrease(self) -> None:
        text = "(and p\n  q)\n(or\n r\n s)"
        rows = [t.location.row for t in Lexer(text)]
        assert rows == sorted(rows)

    def test_column_resets_on_new_row(self) -> None:
        toks = list(Lexer("abc def\nx"))
        assert toks[2].location == Location(row=2, column=1)

    def test_location_str_with_file(self) -> None:
        assert str(Location(3, 7, "a.wff")) == "a.wff:3:7"

    def test_location_str_without_file(self) -> None:
        assert str(Location(1, 5)) == "column 5"


class TestLookahead:
    """Test peek/next behavior."""

    def test_peek_then_next_same_token(self) -> None:
        peeking = Lexer("(and p q)")
        direct = Lexer("(and p q)")
        while not direct.complete:
            peeked = peeking.peek()
            assert peeking.next() == peeked
            assert peeked == direct.next()

    def test_peek_is_idempotent(self) -> None:
        lexer = Lexer("p q")
        first = lexer.peek()
        assert lexer.peek() is first
        assert lexer.next() is first
        assert lexer.next().text == "q"

    def test_nothing_after_completion(self) -> None:
        lexer = Lexer("p")
        assert lexer.next().kind is TokenKind.STRING
        assert lexer.next().kind is TokenKind.END
        assert lexer.complete
        assert lexer.next() is None
        assert lexer.peek() is None


class TestTokenEquality:
    """Tokens compare by kind and text only."""

    def test_location_ignored(self) -> None:
        a = Token(TokenKind.STRING, "p", Location(1, 1))
        b = Token(TokenKind.STRING, "p", Location(9, 4, "x.wff"))
        assert a == b
        assert hash(a) == hash(b)

    def test_kind_matters(self) -> None:
        assert Token(TokenKind.STRING, ":rule") != Token(TokenKind.RULE, ":rule")
