"""
Command-line interface for wffrewrite.

Runs command scripts in batch mode, or reads commands interactively
from standard input, against a single rewriting session.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import wffrewrite
from wffrewrite.core.session import Session
from wffrewrite.utils.logger import LogLevel, SessionLogger
from wffrewrite.utils.rule_file import RuleFile

PROMPT = "wff> "


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the wffrewrite CLI."""
    parser = argparse.ArgumentParser(
        prog="wffrewrite",
        description=(
            "wffrewrite - define rewrite rules over propositional "
            "formulas and enumerate their one-step rewrites"
        ),
    )

    parser.add_argument(
        "scripts",
        nargs="*",
        type=Path,
        metavar="SCRIPT",
        help="Command files to run (default: read commands interactively)",
    )
    parser.add_argument(
        "-r",
        "--rules",
        type=Path,
        default=None,
        help="Rule file to load before running",
    )
    parser.add_argument(
        "-o",
        "--output",
        choices=["silent", "normal", "verbose"],
        default="normal",
        help="Output level (default: normal)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        type=int,
        choices=[0, 1, 2, 3],
        default=0,
        help="Debug level 0-3 (default: 0)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print session statistics when done",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"wffrewrite {wffrewrite.__version__}",
    )

    return parser


def _resolve_log_level(output: str, debug: int) -> LogLevel:
    """Determine the effective log level from output and debug settings."""
    if debug >= 3:
        return LogLevel.DEBUG
    if output == "verbose" or debug >= 1:
        return LogLevel.VERBOSE
    if output == "silent":
        return LogLevel.SILENT
    return LogLevel.NORMAL


def main() -> None:
    """Entry point for the ``wffrewrite`` CLI command."""
    parser = _build_parser()
    args = parser.parse_args()

    try:
        _run(args)
    except SystemExit:
        raise
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)


def _run(args: argparse.Namespace) -> None:
    """Set up the session and feed it scripts or interactive input."""
    for script in args.scripts:
        if not script.exists():
            print(f"Error: Script file not found: {script}", file=sys.stderr)
            sys.exit(2)

    log_level = _resolve_log_level(args.output, args.debug)
    stream = sys.stdout if args.output != "silent" else open(os.devnull, "w")
    logger = SessionLogger(level=log_level, stream=stream)
    session = Session(logger=logger, stream=stream)

    if args.rules is not None:
        count = RuleFile(args.rules).load_into(session.rule_set)
        logger.info(f"Loaded {count} rule(s) from {args.rules}")

    if args.scripts:
        for script in args.scripts:
            logger.info(f"Running {script}")
            if not session.run_text(script.read_text(), file_path=str(script)):
                break
    else:
        _repl(session)

    stats = session.statistics()
    if args.stats:
        if log_level.value >= LogLevel.VERBOSE.value:
            logger.statistics(stats)
        else:
            print()
            print("=== Statistics ===")
            for key, value in stats.items():
                label = key.replace("_", " ").title()
                print(f"  {label}: {value}")

    if args.scripts and stats["errors"]:
        sys.exit(2)
    sys.exit(0)


def _repl(session: Session) -> None:
    """Read and execute one line at a time until quit or end of input."""
    while session.running:
        try:
            line = input(PROMPT)
        except EOFError:
            session.stream.write("\n")
            break
        session.run_text(line)
