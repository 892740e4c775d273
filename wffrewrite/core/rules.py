"""
Named rewrite rules.

A rule pairs a pattern (lhs) with a template (rhs); uppercase-leading
words in either side are pattern variables. Rules are stored by name
with last-define-wins semantics. No well-formedness checks are made:
a template may mention variables the pattern never binds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from wffrewrite.parser.ast_nodes import LogExpr


@dataclass(frozen=True)
class Rule:
    """
    A rewrite rule.

    Attributes:
        lhs: Pattern matched against candidate expressions.
        rhs: Template instantiated with the pattern's bindings.
    """

    lhs: LogExpr
    rhs: LogExpr


class RuleSet:
    """
    Mapping from rule name to Rule.

    Owned by the caller and passed explicitly into rule application;
    iteration follows definition order.
    """

    def __init__(self) -> None:
        self._rules: Dict[str, Rule] = {}

    def add_rule(self, name: str, lhs: LogExpr, rhs: LogExpr) -> Rule:
        """Insert a rule, replacing any rule with the same name."""
        rule = Rule(lhs, rhs)
        self._rules[name] = rule
        return rule

    def get_rule(self, name: str) -> Optional[Rule]:
        return self._rules.get(name)

    def delete_rule(self, name: str) -> Optional[Rule]:
        """Remove a rule, returning it (or None if it was not defined)."""
        return self._rules.pop(name, None)

    def items(self) -> Iterator[Tuple[str, Rule]]:
        return iter(list(self._rules.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._rules))

    def __len__(self) -> int:
        return len(self._rules)
