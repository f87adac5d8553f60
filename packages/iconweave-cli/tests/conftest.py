"""Shared test fixtures for iconweave-cli tests.

Provides CliRunner fixtures and a small icon project inside the
isolated filesystem.
"""

from __future__ import annotations

import logging
import shlex
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

ARROW_UP_SVG = """\
<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" \
fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" \
stroke-linejoin="round">
  <path d="m5 12 7-7 7 7" />
  <path d="M12 19V5" />
</svg>
"""


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo the logging setup done by commands under test."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def echo_formatter() -> str:
    """Formatter command line that echoes stdin, as passed to --formatter."""
    return shlex.join([sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read())"])


@pytest.fixture
def icon_project(isolated_runner: CliRunner) -> Path:
    """Create icons/ with two valid icons in the isolated filesystem.

    Returns:
        Path to the icon directory.
    """
    icons = Path("icons")
    icons.mkdir()
    (icons / "arrow-up.svg").write_text(ARROW_UP_SVG)
    (icons / "arrow-down.svg").write_text(ARROW_UP_SVG.replace("m5 12", "m19 12"))
    return icons
