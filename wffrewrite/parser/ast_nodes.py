"""
Abstract syntax tree node definitions for propositional formulas.

Defines immutable, hashable AST nodes: boolean constants, atoms
(fixed propositional constants), pattern variables, the unary Not
operator, and the n-ary And, Or and Imp operators. Rewriting never
mutates a tree; every operation builds new nodes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple

from wffrewrite.parser.lexer import Token, TokenKind


class Operator(Enum):
    """Logical connectives, valued by their canonical spelling."""

    NOT = "not"
    AND = "and"
    OR = "or"
    IMP = "imp"

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional[Operator]:
        """
        Look up a connective by any of its accepted spellings.

        Args:
            symbol: Operator text exactly as written (case-sensitive).

        Returns:
            The matching Operator, or None for an unknown spelling.
        """
        return _SYNONYMS.get(symbol)

    def __str__(self) -> str:
        return self.value


# "[+}" is the historical spelling of the bracketed Or and is kept as-is.
_SYNONYMS = {
    **dict.fromkeys(("not", "~", "N", "[-]", "!"), Operator.NOT),
    **dict.fromkeys(("and", "&", "K", "[*]", "/\\"), Operator.AND),
    **dict.fromkeys(("or", "||", "A", "[+}", "\\/"), Operator.OR),
    **dict.fromkeys(("imp", "=>", "C"), Operator.IMP),
}


class LogExpr(ABC):
    """
    Base class for all formula nodes.

    All nodes are immutable and support structural equality and
    hashing for use in sets and dictionaries.
    """

    @abstractmethod
    def subexpressions(self) -> FrozenSet[LogExpr]:
        """Return set of all subexpressions including self."""

    @abstractmethod
    def __str__(self) -> str:
        """Return the prefix rendering of the expression."""

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        """Check structural equality with another expression."""

    @abstractmethod
    def __hash__(self) -> int:
        """Return hash for use in sets and dicts."""

    def __repr__(self) -> str:
        return str(self)


# === Constants ===


class TrueConstant(LogExpr):
    """Represents the boolean literal true."""

    def subexpressions(self) -> FrozenSet[LogExpr]:
        return frozenset({self})

    def __str__(self) -> str:
        return "true"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrueConstant):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(("TrueConstant",))


class FalseConstant(LogExpr):
    """Represents the boolean literal false."""

    def subexpressions(self) -> FrozenSet[LogExpr]:
        return frozenset({self})

    def __str__(self) -> str:
        return "false"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FalseConstant):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(("FalseConstant",))


# === Leaves ===


class _Leaf(LogExpr):
    """Base class for token-backed leaves (not part of public API)."""

    __slots__ = ("token",)

    def __init__(self, token: Token) -> None:
        self.token = token

    @classmethod
    def named(cls, name: str):
        """Build a leaf from bare text, without a source location."""
        return cls(Token(TokenKind.STRING, name))

    @property
    def name(self) -> str:
        return self.token.text

    def subexpressions(self) -> FrozenSet[LogExpr]:
        return frozenset({self})

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.token == other.token

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))


class Atom(_Leaf):
    """
    A fixed propositional constant (lowercase- or digit-leading text).

    Attributes:
        token: The token the atom was parsed from.
    """


class Var(_Leaf):
    """
    A pattern variable (uppercase-leading text), bindable during matching.

    Attributes:
        token: The token the variable was parsed from.
    """


# === Operators ===


class UnaryOp(LogExpr):
    """
    Represents (not phi).

    Attributes:
        operator: Always Operator.NOT.
        operand: The negated expression.
    """

    __slots__ = ("operator", "operand")

    def __init__(self, operator: Operator, operand: LogExpr) -> None:
        if operator is not Operator.NOT:
            raise ValueError(f"'{operator}' is not a unary operator")
        self.operator = operator
        self.operand = operand

    def subexpressions(self) -> FrozenSet[LogExpr]:
        return frozenset({self}) | self.operand.subexpressions()

    def __str__(self) -> str:
        return f"({self.operator} {self.operand})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnaryOp):
            return NotImplemented
        return self.operator is other.operator and self.operand == other.operand

    def __hash__(self) -> int:
        return hash(("UnaryOp", self.operator, self.operand))


class BinaryOp(LogExpr):
    """
    Represents (op phi1 phi2 ...) for And, Or and Imp.

    Operands are ordered and order is significant; a single operand
    is allowed.

    Attributes:
        operator: One of Operator.AND, Operator.OR, Operator.IMP.
        operands: Tuple of one or more operand expressions.
    """

    __slots__ = ("operator", "operands")

    def __init__(self, operator: Operator, operands: Iterable[LogExpr]) -> None:
        if operator is Operator.NOT:
            raise ValueError("'not' takes exactly one operand")
        self.operator = operator
        self.operands: Tuple[LogExpr, ...] = tuple(operands)
        if not self.operands:
            raise ValueError(f"'{operator}' needs at least one operand")

    def replace_operand(self, position: int, operand: LogExpr) -> BinaryOp:
        """Return a copy with the operand at ``position`` replaced."""
        operands = list(self.operands)
        operands[position] = operand
        return BinaryOp(self.operator, operands)

    def subexpressions(self) -> FrozenSet[LogExpr]:
        result = frozenset({self})
        for operand in self.operands:
            result |= operand.subexpressions()
        return result

    def __str__(self) -> str:
        return f"({self.operator} {' '.join(str(o) for o in self.operands)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryOp):
            return NotImplemented
        return self.operator is other.operator and self.operands == other.operands

    def __hash__(self) -> int:
        return hash(("BinaryOp", self.operator, self.operands))
