"""
Recursive-descent parser for formulas and commands.

Formulas are written in prefix form: ``(op operand ...)`` for
connectives, bare words for atoms, variables and boolean literals.
Commands are a keyword token followed by their arguments. Parsing
reads from a Lexer with one token of lookahead and consumes exactly
one formula or command per call.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from wffrewrite.parser.ast_nodes import (
    Atom,
    BinaryOp,
    FalseConstant,
    LogExpr,
    Operator,
    TrueConstant,
    UnaryOp,
    Var,
)
from wffrewrite.parser.commands import (
    ApplyRule,
    Command,
    DefineRule,
    DeleteRule,
    Eval,
    LoadFile,
    QuitRepl,
    SaveFile,
)
from wffrewrite.parser.lexer import Lexer, Location, Token, TokenKind


class ParseErrorKind(Enum):
    """Reasons a command failed to parse."""

    UNEXPECTED_END_OF_INPUT = "unexpected end of input"
    EXPECTED_FILE_PATH = "expected a file path"
    EXPECTED_RULE_NAME = "expected a rule name"
    EXPECTED_EXPRESSION = "expected an expression"


class ParseError(Exception):
    """
    Exception raised for parsing errors.

    Attributes:
        kind: What the parser was expecting.
        location: Where the failure was detected, if known.
    """

    def __init__(self, kind: ParseErrorKind, location: Optional[Location] = None) -> None:
        self.kind = kind
        self.location = location
        if location is None:
            super().__init__(kind.value)
        else:
            super().__init__(f"{location}: {kind.value}")


_TRUE_WORDS = frozenset({"1", "t", "true"})
_FALSE_WORDS = frozenset({"0", "f", "false"})


def parse_expr(lexer: Lexer) -> Optional[LogExpr]:
    """
    Parse one formula from the lexer.

    Args:
        lexer: Token source, positioned at the start of a formula.

    Returns:
        The parsed formula, or None if the tokens do not form one.
    """
    token = lexer.next()
    if token is None:
        return None
    if token.kind is TokenKind.LPAREN:
        return _parse_compound(lexer)
    if token.kind is TokenKind.STRING:
        return _parse_leaf(token)
    return None


def _parse_compound(lexer: Lexer) -> Optional[LogExpr]:
    """Parse the rest of ``(op operand ...)`` after the open paren."""
    head = lexer.next()
    if head is None or head.kind is not TokenKind.STRING:
        return None
    operator = Operator.from_symbol(head.text)
    if operator is None:
        return None

    operands: List[LogExpr] = []
    while True:
        token = lexer.peek()
        if token is None:
            return None
        if token.kind is TokenKind.RPAREN:
            break
        operand = parse_expr(lexer)
        if operand is None:
            return None
        operands.append(operand)
    lexer.next()

    if operator is Operator.NOT:
        if len(operands) != 1:
            return None
        return UnaryOp(operator, operands[0])
    if not operands:
        return None
    return BinaryOp(operator, operands)


def _parse_leaf(token: Token) -> Optional[LogExpr]:
    """Classify a bare word as a boolean literal, atom or variable."""
    lowered = token.text.lower()
    if lowered in _TRUE_WORDS:
        return TrueConstant()
    if lowered in _FALSE_WORDS:
        return FalseConstant()

    first = token.text[0]
    if first.islower() or first.isdigit():
        return Atom(token)
    if first.isupper():
        return Var(token)
    return None


def parse_command(lexer: Lexer) -> Command:
    """
    Parse exactly one command from the lexer.

    Args:
        lexer: Token source, positioned at the start of a command.

    Returns:
        The parsed command.

    Raises:
        ParseError: On the first missing piece of the command; no
            partial command is ever returned.
    """
    token = lexer.peek()
    if token is None or token.kind is TokenKind.END:
        lexer.next()
        raise ParseError(ParseErrorKind.UNEXPECTED_END_OF_INPUT, _location(token))

    kind = token.kind
    if kind is TokenKind.QUIT:
        lexer.next()
        return QuitRepl()

    if kind is TokenKind.LOAD:
        lexer.next()
        return LoadFile(_expect_string(lexer, ParseErrorKind.EXPECTED_FILE_PATH))

    if kind is TokenKind.SAVE:
        lexer.next()
        return SaveFile(_expect_string(lexer, ParseErrorKind.EXPECTED_FILE_PATH))

    if kind is TokenKind.RULE:
        lexer.next()
        name = _expect_string(lexer, ParseErrorKind.EXPECTED_RULE_NAME)
        lhs = _expect_expr(lexer)
        rhs = _expect_expr(lexer)
        return DefineRule(name, lhs, rhs)

    if kind is TokenKind.DELETE:
        lexer.next()
        return DeleteRule(_expect_string(lexer, ParseErrorKind.EXPECTED_RULE_NAME))

    if kind is TokenKind.APPLY:
        lexer.next()
        name = _expect_string(lexer, ParseErrorKind.EXPECTED_RULE_NAME)
        return ApplyRule(name, _expect_expr(lexer))

    return Eval(_expect_expr(lexer))


def _expect_string(lexer: Lexer, failure: ParseErrorKind) -> str:
    token = lexer.next()
    if token is None or token.kind is not TokenKind.STRING:
        raise ParseError(failure, _location(token))
    return token.text


def _expect_expr(lexer: Lexer) -> LogExpr:
    start = lexer.peek()
    expr = parse_expr(lexer)
    if expr is None:
        raise ParseError(ParseErrorKind.EXPECTED_EXPRESSION, _location(start))
    return expr


def _location(token: Optional[Token]) -> Optional[Location]:
    return token.location if token is not None else None
