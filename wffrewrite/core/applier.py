"""
Rule application over every position of a formula.

Given a target formula and a named rule, enumerates the distinct
rewrites obtained by matching the rule's pattern at the root or inside
any operand, splicing the instantiated template back into place. For
n-ary operators each spliced candidate is rewritten once more, which
also surfaces results that need two rewrites. When several results
exist a combined entry is appended, built from the template with each
result's captures renamed by its 1-based index (``X`` -> ``X_2``).

This is a single enumeration pass, not a fixpoint rewriter: rewriting
a result again requires another call.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Set

from wffrewrite.core.matcher import Bindings, match
from wffrewrite.core.rules import Rule, RuleSet
from wffrewrite.core.substitution import substitute
from wffrewrite.parser.ast_nodes import BinaryOp, LogExpr, UnaryOp
from wffrewrite.utils.logger import LogLevel, SessionLogger


class Rewrite(NamedTuple):
    """
    One rewrite of a target expression.

    Attributes:
        expr: The rewritten expression.
        bindings: Captures of the match that produced it.
    """

    expr: LogExpr
    bindings: Bindings


class _Collector:
    """Ordered, duplicate-free accumulator of rewrites."""

    def __init__(self) -> None:
        self.rewrites: List[Rewrite] = []
        self._seen: Set[LogExpr] = set()

    def add(self, expr: LogExpr, bindings: Bindings) -> bool:
        if expr in self._seen:
            return False
        self._seen.add(expr)
        self.rewrites.append(Rewrite(expr, bindings))
        return True


class RuleApplier:
    """
    Applies named rules from a RuleSet.

    The rule set is only read. Unknown rule names and targets the
    rule does not match produce an empty result, never an error.

    Attributes:
        logger: Logger for per-candidate debug output.
    """

    def __init__(self, logger: Optional[SessionLogger] = None) -> None:
        self.logger: SessionLogger = logger or SessionLogger(LogLevel.SILENT)

    def apply_rule(
        self, target: LogExpr, rule_set: RuleSet, rule_name: str,
    ) -> List[Rewrite]:
        """
        Enumerate the rewrites of ``target`` under rule ``rule_name``.

        Args:
            target: Expression to rewrite.
            rule_set: Rules to look the name up in.
            rule_name: Name of the rule to apply.

        Returns:
            Distinct rewrites in discovery order (root match first),
            followed by the combined entry when there are two or more.
        """
        rule = rule_set.get_rule(rule_name)
        if rule is None:
            self.logger.debug(f"No rule named '{rule_name}'")
            return []

        rewrites = self._rewrite(target, rule, compose=True)
        if len(rewrites) >= 2:
            rewrites.append(self._combine(rule, rewrites))
        self.logger.rule_applied(rule_name, len(rewrites))
        return rewrites

    def _rewrite(self, target: LogExpr, rule: Rule, compose: bool) -> List[Rewrite]:
        """
        Rewrites of ``target`` at the root and inside its operands.

        With ``compose`` set, every candidate spliced into an n-ary
        operator is rewritten once more (without further composition).
        """
        found = _Collector()

        bindings = match(rule.lhs, target)
        if bindings is not None:
            self._record(found, substitute(rule.rhs, bindings), bindings)

        if isinstance(target, UnaryOp):
            for sub in self._rewrite(target.operand, rule, compose):
                self._record(found, UnaryOp(target.operator, sub.expr), sub.bindings)

        elif isinstance(target, BinaryOp):
            for position, operand in enumerate(target.operands):
                for sub in self._rewrite(operand, rule, compose):
                    candidate = target.replace_operand(position, sub.expr)
                    self._record(found, candidate, sub.bindings)
                    if compose:
                        for again in self._rewrite(candidate, rule, compose=False):
                            self._record(found, again.expr, again.bindings)

        return found.rewrites

    def _record(self, found: _Collector, expr: LogExpr, bindings: Bindings) -> None:
        if found.add(expr, bindings):
            self.logger.candidate(expr)

    @staticmethod
    def _combine(rule: Rule, rewrites: List[Rewrite]) -> Rewrite:
        """Fold every result's renamed captures into the rule template."""
        combined = rule.rhs
        accumulated: Bindings = {}
        for index, rewrite in enumerate(rewrites, start=1):
            for name, value in rewrite.bindings.items():
                accumulated[f"{name}_{index}"] = value
            combined = substitute(combined, accumulated)
        return Rewrite(combined, accumulated)


def apply_rule(target: LogExpr, rule_set: RuleSet, rule_name: str) -> List[Rewrite]:
    """Apply ``rule_name`` to ``target`` with a silent applier."""
    return RuleApplier().apply_rule(target, rule_set, rule_name)
