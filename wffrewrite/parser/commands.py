"""
Command values produced by the command grammar.

Each command is an immutable record consumed by the session
dispatcher. Commands render back to the source syntax they were
parsed from, which is also the on-disk format of rule files.
"""

from __future__ import annotations

from dataclasses import dataclass

from wffrewrite.parser.ast_nodes import LogExpr


class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class QuitRepl(Command):
    """Stop the session."""

    def __str__(self) -> str:
        return ":quit"


@dataclass(frozen=True)
class DefineRule(Command):
    """
    Define (or redefine) a named rule.

    Attributes:
        name: Rule name.
        lhs: Pattern expression.
        rhs: Template expression.
    """

    name: str
    lhs: LogExpr
    rhs: LogExpr

    def __str__(self) -> str:
        return f":rule {self.name} {self.lhs} {self.rhs}"


@dataclass(frozen=True)
class DeleteRule(Command):
    """Remove a named rule."""

    name: str

    def __str__(self) -> str:
        return f":delete {self.name}"


@dataclass(frozen=True)
class ApplyRule(Command):
    """
    Apply a named rule to an expression.

    Attributes:
        name: Rule name.
        expr: Target expression.
    """

    name: str
    expr: LogExpr

    def __str__(self) -> str:
        return f":apply {self.name} {self.expr}"


@dataclass(frozen=True)
class LoadFile(Command):
    """Load rules from a file."""

    path: str

    def __str__(self) -> str:
        return f":load {self.path}"


@dataclass(frozen=True)
class SaveFile(Command):
    """Save the current rules to a file."""

    path: str

    def __str__(self) -> str:
        return f":save {self.path}"


@dataclass(frozen=True)
class Eval(Command):
    """Echo an expression."""

    expr: LogExpr

    def __str__(self) -> str:
        return str(self.expr)
