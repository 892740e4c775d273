"""
Command dispatch for interactive and scripted sessions.

A session owns a RuleSet and executes parsed commands against it,
writing human-readable results to an output stream. Text is lexed once
per call to ``run_text``; a malformed command is reported and the rest
of that text is abandoned, but the session keeps running.
"""

from __future__ import annotations

import sys
from typing import Any, Dict, Optional, TextIO

from wffrewrite.core.applier import RuleApplier
from wffrewrite.core.rules import RuleSet
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
from wffrewrite.parser.formula import parse_commands
from wffrewrite.parser.grammar import ParseError
from wffrewrite.utils.logger import LogLevel, SessionLogger
from wffrewrite.utils.rule_file import RuleFile, RuleFileError


class Session:
    """
    Executes commands against a rule set.

    Attributes:
        rule_set: Rules defined so far.
        logger: Logger for warnings and progress.
        stream: Where command results are written.
        running: False once a quit command has been executed.
    """

    def __init__(
        self,
        rule_set: Optional[RuleSet] = None,
        logger: Optional[SessionLogger] = None,
        stream: TextIO = sys.stdout,
    ) -> None:
        self.rule_set: RuleSet = rule_set if rule_set is not None else RuleSet()
        self.logger: SessionLogger = logger or SessionLogger(LogLevel.SILENT)
        self.stream: TextIO = stream
        self.running: bool = True

        self._applier = RuleApplier(self.logger)
        self._stats: Dict[str, int] = {
            "commands": 0,
            "rules_defined": 0,
            "rewrites": 0,
            "errors": 0,
        }

    def run_text(self, text: str, file_path: Optional[str] = None) -> bool:
        """
        Execute every command in ``text``.

        Args:
            text: One input line or a whole script.
            file_path: Originating file, used in error locations.

        Returns:
            Whether the session is still running.
        """
        try:
            for command in parse_commands(text, file_path):
                self.execute(command)
                if not self.running:
                    break
        except ParseError as exc:
            self._error(str(exc))
        return self.running

    def execute(self, command: Command) -> None:
        """Execute a single command."""
        self._stats["commands"] += 1

        if isinstance(command, Eval):
            self._write(str(command.expr))

        elif isinstance(command, DefineRule):
            self.rule_set.add_rule(command.name, command.lhs, command.rhs)
            self._stats["rules_defined"] += 1
            self.logger.rule_defined(command.name)
            self._write(f"Rule '{command.name}' defined.")

        elif isinstance(command, DeleteRule):
            if self.rule_set.delete_rule(command.name) is None:
                self._write(f"No rule named '{command.name}'.")
            else:
                self._write(f"Rule '{command.name}' deleted.")

        elif isinstance(command, ApplyRule):
            self._apply(command)

        elif isinstance(command, LoadFile):
            try:
                count = RuleFile(command.path).load_into(self.rule_set)
            except RuleFileError as exc:
                self._error(str(exc))
            else:
                self._stats["rules_defined"] += count
                self._write(f"Loaded {count} rule(s) from {command.path}")

        elif isinstance(command, SaveFile):
            try:
                count = RuleFile(command.path).write(self.rule_set)
            except RuleFileError as exc:
                self._error(str(exc))
            else:
                self._write(f"Saved {count} rule(s) to {command.path}")

        elif isinstance(command, QuitRepl):
            self.running = False
            self._write("Exiting...")

    def statistics(self) -> Dict[str, Any]:
        """Return counters for commands, definitions, rewrites and errors."""
        return dict(self._stats)

    def _apply(self, command: ApplyRule) -> None:
        if command.name not in self.rule_set:
            self.logger.warning(f"No rule named '{command.name}'")

        rewrites = self._applier.apply_rule(command.expr, self.rule_set, command.name)
        self._stats["rewrites"] += len(rewrites)
        if not rewrites:
            self._write("No rewrites.")
            return

        for index, rewrite in enumerate(rewrites, start=1):
            self._write(f"Result {index}: {rewrite.expr}")
            if rewrite.bindings:
                captures = ", ".join(
                    f"{name} = {value}" for name, value in rewrite.bindings.items()
                )
                self._write(f"  with {captures}")

    def _error(self, message: str) -> None:
        self._stats["errors"] += 1
        self._write(f"Error: {message}")

    def _write(self, message: str) -> None:
        self.stream.write(message + "\n")
