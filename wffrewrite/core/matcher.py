"""
Structural pattern matching with variable capture.

A pattern matches a candidate when both trees have the same shape,
atoms and constants agree, and every pattern variable captures a
subtree consistently: the first occurrence binds, later occurrences
must be structurally equal to the captured subtree. Operands are
matched strictly in order; there is no backtracking and no
commutative or associative matching.
"""

from __future__ import annotations

from typing import Dict, Optional

from wffrewrite.parser.ast_nodes import (
    Atom,
    BinaryOp,
    FalseConstant,
    LogExpr,
    TrueConstant,
    UnaryOp,
    Var,
)

Bindings = Dict[str, LogExpr]


def match_with(pattern: LogExpr, candidate: LogExpr, bindings: Bindings) -> bool:
    """
    Match ``pattern`` against ``candidate``, extending ``bindings``.

    On failure ``bindings`` may hold partial captures and should be
    discarded.

    Args:
        pattern: Expression that may contain variables.
        candidate: Concrete expression to match.
        bindings: Variable captures so far; updated in place.

    Returns:
        True if the candidate matches.
    """
    if isinstance(pattern, Var):
        bound = bindings.get(pattern.name)
        if bound is None:
            bindings[pattern.name] = candidate
            return True
        return bound == candidate

    if isinstance(pattern, Atom):
        return isinstance(candidate, Atom) and pattern.name == candidate.name

    if isinstance(pattern, UnaryOp):
        return (
            isinstance(candidate, UnaryOp)
            and pattern.operator is candidate.operator
            and match_with(pattern.operand, candidate.operand, bindings)
        )

    if isinstance(pattern, BinaryOp):
        if not isinstance(candidate, BinaryOp):
            return False
        if pattern.operator is not candidate.operator:
            return False
        if len(pattern.operands) != len(candidate.operands):
            return False
        return all(
            match_with(p, c, bindings)
            for p, c in zip(pattern.operands, candidate.operands)
        )

    if isinstance(pattern, (TrueConstant, FalseConstant)):
        return type(pattern) is type(candidate)

    return False  # pragma: no cover


def match(pattern: LogExpr, candidate: LogExpr) -> Optional[Bindings]:
    """
    Match with fresh bindings.

    Returns:
        The captured bindings, or None if the candidate does not match.
    """
    bindings: Bindings = {}
    if match_with(pattern, candidate, bindings):
        return bindings
    return None
