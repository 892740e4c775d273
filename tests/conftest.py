"""
Shared pytest fixtures for the wffrewrite test suite.

Provides reusable fixtures for output buffers, sessions, and
temporary rule and script file paths used across unit and
integration tests.
"""

from io import StringIO
from pathlib import Path

import pytest

from wffrewrite.core.session import Session


@pytest.fixture
def output() -> StringIO:
    """Buffer capturing session output."""
    return StringIO()


@pytest.fixture
def session(output: StringIO) -> Session:
    """A fresh session writing to the output buffer."""
    return Session(stream=output)


@pytest.fixture
def tmp_rule_file(tmp_path: Path) -> Path:
    """Path for a temporary rule file."""
    return tmp_path / "rules.wff"


@pytest.fixture
def tmp_script_file(tmp_path: Path) -> Path:
    """Path for a temporary command script."""
    return tmp_path / "script.wff"


@pytest.fixture
def demorgan_rules(tmp_rule_file: Path) -> Path:
    """A rule file holding De Morgan's laws and double negation."""
    tmp_rule_file.write_text(
        ":rule demorgan-and (not (and P Q)) (or (not P) (not Q))\n"
        ":rule demorgan-or (not (or P Q)) (and (not P) (not Q))\n"
        ":rule dneg (not (not X)) X\n"
    )
    return tmp_rule_file
