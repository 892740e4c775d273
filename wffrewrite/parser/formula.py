"""
Formula utilities.

Provides convenience functions for parsing formulas and command
streams from text, and for inspecting formulas: subexpression
extraction, variable and atom listing, and canonical string conversion.
"""

from __future__ import annotations

from typing import FrozenSet, Iterator, Optional

from wffrewrite.parser.ast_nodes import Atom, LogExpr, Var
from wffrewrite.parser.commands import Command
from wffrewrite.parser.grammar import ParseError, ParseErrorKind, parse_command, parse_expr
from wffrewrite.parser.lexer import Lexer, TokenKind


def parse_formula(text: str, file_path: Optional[str] = None) -> LogExpr:
    """
    Parse the first formula in a string.

    Args:
        text: The formula text, e.g. ``"(and p (not q))"``.
        file_path: Originating file, used only in error locations.

    Returns:
        The root LogExpr node.

    Raises:
        ParseError: If the text does not start with a formula.
    """
    lexer = Lexer(text, file_path)
    start = lexer.peek()
    expr = parse_expr(lexer)
    if expr is None:
        raise ParseError(ParseErrorKind.EXPECTED_EXPRESSION, start.location)
    return expr


def parse_commands(text: str, file_path: Optional[str] = None) -> Iterator[Command]:
    """
    Parse every command in a string, in order.

    Args:
        text: Command text; several commands may share a line.
        file_path: Originating file, used only in error locations.

    Yields:
        Commands until the end of the text.

    Raises:
        ParseError: On the first malformed command.
    """
    lexer = Lexer(text, file_path)
    while True:
        token = lexer.peek()
        if token is None or token.kind is TokenKind.END:
            return
        yield parse_command(lexer)


def subexpressions(expr: LogExpr) -> FrozenSet[LogExpr]:
    """Return all subexpressions of ``expr``, including itself."""
    return expr.subexpressions()


def variables(expr: LogExpr) -> FrozenSet[str]:
    """Return the names of all pattern variables in ``expr``."""
    return frozenset(sub.name for sub in expr.subexpressions() if isinstance(sub, Var))


def atoms(expr: LogExpr) -> FrozenSet[str]:
    """Return the names of all atoms in ``expr``."""
    return frozenset(sub.name for sub in expr.subexpressions() if isinstance(sub, Atom))


def to_string(expr: LogExpr) -> str:
    """
    Convert a formula to its canonical prefix representation.

    The result parses back to an equal formula.
    """
    return str(expr)
