"""
Rule file persistence.

Rule files are plain text holding ``:rule`` commands, one per line
when written by ``save``. Loading accepts ``:rule`` and ``:delete``
commands in any layout and applies them in order; anything else in
the file is an error.

Expected format::

    :rule demorgan (not (and P Q)) (or (not P) (not Q))
    :rule dneg (not (not X)) X
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from wffrewrite.core.rules import RuleSet
from wffrewrite.parser.commands import Command, DefineRule, DeleteRule
from wffrewrite.parser.formula import parse_commands
from wffrewrite.parser.grammar import ParseError


class RuleFileError(Exception):
    """Exception raised when a rule file cannot be read or written."""


class RuleFile:
    """
    Reads and writes rule sets.

    Attributes:
        path: Path to the rule file.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path: Path = Path(path)

    def read(self) -> List[Command]:
        """
        Parse the file into rule commands.

        Returns:
            DefineRule and DeleteRule commands in file order.

        Raises:
            RuleFileError: If the file cannot be read, does not parse,
                or holds any other kind of command.
        """
        try:
            text = self.path.read_text()
        except OSError as exc:
            raise RuleFileError(f"Cannot read rule file {self.path}: {exc}") from exc

        commands: List[Command] = []
        try:
            for command in parse_commands(text, file_path=str(self.path)):
                if not isinstance(command, (DefineRule, DeleteRule)):
                    raise RuleFileError(
                        f"{self.path}: unexpected command '{command}' in rule file"
                    )
                commands.append(command)
        except ParseError as exc:
            raise RuleFileError(str(exc)) from exc
        return commands

    def load_into(self, rule_set: RuleSet) -> int:
        """
        Apply the file's commands to ``rule_set``.

        The file is parsed completely before the rule set is touched.

        Returns:
            Number of rules defined.
        """
        defined = 0
        for command in self.read():
            if isinstance(command, DefineRule):
                rule_set.add_rule(command.name, command.lhs, command.rhs)
                defined += 1
            else:
                rule_set.delete_rule(command.name)
        return defined

    def write(self, rule_set: RuleSet) -> int:
        """
        Write every rule in ``rule_set``, one ``:rule`` line each.

        Returns:
            Number of rules written.
        """
        lines = [
            f"{DefineRule(name, rule.lhs, rule.rhs)}\n"
            for name, rule in rule_set.items()
        ]
        try:
            self.path.write_text("".join(lines))
        except OSError as exc:
            raise RuleFileError(f"Cannot write rule file {self.path}: {exc}") from exc
        return len(lines)
