"""
Template instantiation.

Replaces every leaf whose text is bound with the captured subtree and
rebuilds the operators around it. The template is never modified.
"""

from __future__ import annotations

from typing import Mapping

from wffrewrite.parser.ast_nodes import (
    Atom,
    BinaryOp,
    LogExpr,
    UnaryOp,
    Var,
)


def substitute(template: LogExpr, bindings: Mapping[str, LogExpr]) -> LogExpr:
    """
    Instantiate ``template`` with ``bindings``.

    Args:
        template: Expression to instantiate.
        bindings: Mapping from leaf text to replacement subtree.

    Returns:
        A new expression; unbound leaves and constants are kept.
    """
    if isinstance(template, (Atom, Var)):
        return bindings.get(template.name, template)

    if isinstance(template, UnaryOp):
        return UnaryOp(template.operator, substitute(template.operand, bindings))

    if isinstance(template, BinaryOp):
        return BinaryOp(
            template.operator,
            [substitute(operand, bindings) for operand in template.operands],
        )

    # true / false
    return template
