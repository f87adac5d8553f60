"""Shared pytest fixtures for iconweave-core tests.

Provides structlog setup, icon tree builders and a stand-in external
formatter that echoes its input.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

# Formatter command that copies stdin to stdout unchanged
ECHO_FORMATTER = (sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read())")

# Formatter command that always exits non-zero
FAILING_FORMATTER = (sys.executable, "-c", "import sys; sys.exit(3)")

LUCIDE_HEADER = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" '
    'stroke-linejoin="round">'
)


def lucide_svg(body: str) -> str:
    """Wrap markup in a Lucide style <svg> document."""
    return f"{LUCIDE_HEADER}\n  {body}\n</svg>\n"


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def echo_formatter() -> tuple[str, ...]:
    """Return a formatter command that echoes stdin unchanged."""
    return ECHO_FORMATTER


@pytest.fixture
def failing_formatter() -> tuple[str, ...]:
    """Return a formatter command that always exits with status 3."""
    return FAILING_FORMATTER


@pytest.fixture
def icons_dir(tmp_path: Path) -> Path:
    """Return an empty icon root directory."""
    path = tmp_path / "icons"
    path.mkdir()
    return path


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Return an empty output directory."""
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def write_icon(icons_dir: Path) -> Callable[..., Path]:
    """Factory fixture writing an icon file under icons_dir.

    Returns:
        Function taking a relative name and the <svg> body (or a full
        document with raw=True).
    """

    def _write(name: str, body: str = '<path d="M5 12h14" />', *, raw: bool = False) -> Path:
        path = icons_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body if raw else lucide_svg(body), encoding="utf-8")
        return path

    return _write
