"""
Lexical analyzer for formulas and commands.

Tokenizes input text into parentheses, command keywords (``:rule``,
``:apply``, ...) and plain strings, tracking paren depth and the source
location of every token. Lexical problems (an unmatched close paren,
parens still open at end of input) are reported as error-kind tokens
rather than exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

import sly


class TokenKind(Enum):
    """Kinds of tokens produced by the lexer."""

    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    STRING = "STRING"
    RULE = "RULE"
    DELETE = "DELETE"
    APPLY = "APPLY"
    QUIT = "QUIT"
    LOAD = "LOAD"
    SAVE = "SAVE"
    END = "END"
    UNCLOSED_PAREN = "UNCLOSED_PAREN"
    PAREN_OVERFLOW = "PAREN_OVERFLOW"

    @property
    def is_error(self) -> bool:
        """Whether this kind reports a lexical error."""
        return self in (TokenKind.UNCLOSED_PAREN, TokenKind.PAREN_OVERFLOW)


# Command keywords, matched against the whole ":word" run.
_COMMANDS = {
    ":rule": "RULE",
    ":delete": "DELETE",
    ":apply": "APPLY",
    ":quit": "QUIT",
    ":load": "LOAD",
    ":save": "SAVE",
}


@dataclass(frozen=True)
class Location:
    """
    Source location of a token.

    Rows and columns are 1-based. Interactive input has no file path
    and renders as the column alone.

    Attributes:
        row: Line number within the lexed text.
        column: Column within that line.
        file_path: Originating file, if any.
    """

    row: int
    column: int
    file_path: Optional[str] = None

    def __str__(self) -> str:
        if self.file_path is None:
            return f"column {self.column}"
        return f"{self.file_path}:{self.row}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    A lexed token.

    Tokens compare and hash by kind and text only; the location is
    carried along for error reporting.
    """

    kind: TokenKind
    text: str
    location: Optional[Location] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.text


class _WffScanner(sly.Lexer):
    """
    Raw scanner for wffrewrite input.

    Token Types:
        LPAREN, RPAREN      - Delimiters (RPAREN at depth 0 becomes PAREN_OVERFLOW)
        STRING              - Any run of non-whitespace, non-paren characters
        RULE, DELETE, APPLY,
        QUIT, LOAD, SAVE    - Command keywords
    """

    tokens = {
        LPAREN, RPAREN, PAREN_OVERFLOW,
        STRING,
        RULE, DELETE, APPLY, QUIT, LOAD, SAVE,
    }

    # Ignored characters
    ignore = " \t"

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    # Remaining whitespace (\r, \f, unicode spaces)
    ignore_whitespace = r"[^\S\n]+"

    def __init__(self) -> None:
        self.depth = 0

    @_(r"\(")
    def LPAREN(self, t):
        self.depth += 1
        return t

    @_(r"\)")
    def RPAREN(self, t):
        if self.depth == 0:
            t.type = "PAREN_OVERFLOW"
        else:
            self.depth -= 1
        return t

    # Command words are plain strings unless they are an exact keyword.
    @_(r"[^\s()]+")
    def STRING(self, t):
        t.type = _COMMANDS.get(t.value, "STRING")
        return t


class Lexer:
    """
    Forward-only token cursor over one input text.

    Wraps the scanner with a single-slot lookahead and location tracking.
    The stream ends with exactly one END token, or UNCLOSED_PAREN when
    parentheses are still open; after that ``complete`` is set and both
    ``peek`` and ``next`` return None.

    Attributes:
        text: The text being lexed.
        file_path: Originating file path, if any (affects locations only).
        complete: Whether the terminal token has been produced.
    """

    def __init__(self, text: str, file_path: Optional[str] = None) -> None:
        self.text: str = text
        self.file_path: Optional[str] = file_path
        self.complete: bool = False

        self._scanner = _WffScanner()
        self._raw = self._scanner.tokenize(text)
        self._lookahead: Optional[Token] = None

        self._row = 1
        self._line_start = 0
        self._offset = 0

    @property
    def depth(self) -> int:
        """Current open-paren depth."""
        return self._scanner.depth

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it."""
        if self._lookahead is None:
            self._lookahead = self._lex()
        return self._lookahead

    def next(self) -> Optional[Token]:
        """Consume and return the next token."""
        if self._lookahead is not None:
            token, self._lookahead = self._lookahead, None
            return token
        return self._lex()

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            if token is None:
                return
            yield token

    def _lex(self) -> Optional[Token]:
        if self.complete:
            return None
        raw = next(self._raw, None)
        if raw is None:
            self.complete = True
            kind = TokenKind.END if self.depth == 0 else TokenKind.UNCLOSED_PAREN
            return Token(kind, "", self._locate(len(self.text)))
        return Token(TokenKind(raw.type), raw.value, self._locate(raw.index))

    def _locate(self, index: int) -> Location:
        """Advance the row/line-start counters to ``index``."""
        newlines = self.text.count("\n", self._offset, index)
        if newlines:
            self._row += newlines
            self._line_start = self.text.rfind("\n", self._offset, index) + 1
        self._offset = index
        return Location(
            row=self._row,
            column=index - self._line_start + 1,
            file_path=self.file_path,
        )
