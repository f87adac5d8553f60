"""Unit tests for external formatter processes."""

from __future__ import annotations

import sys

import pytest

from iconweave_core.errors import FormatterError, FormatterNotFoundError
from iconweave_core.formatting.process import ProcessFormatter

UPPERCASE = (sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read().upper())")

NOT_UTF8 = (sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'\\xff\\xfe')")


class TestProcessFormatter:
    """Tests for ProcessFormatter."""

    def test_pipes_through_process(self, echo_formatter: tuple[str, ...]) -> None:
        """Source goes in on stdin and comes back from stdout."""
        formatter = ProcessFormatter(echo_formatter)

        assert formatter.format("fn a() {}\n") == "fn a() {}\n"

    def test_uses_process_output(self) -> None:
        """The process output replaces the input."""
        assert ProcessFormatter(UPPERCASE).format("view!") == "VIEW!"

    def test_nonzero_exit(self, failing_formatter: tuple[str, ...]) -> None:
        """A non-zero exit status is a formatter error."""
        formatter = ProcessFormatter(failing_formatter)

        with pytest.raises(FormatterError, match="exited with status 3") as exc_info:
            formatter.format("fn a() {}")

        assert not isinstance(exc_info.value, FormatterNotFoundError)
        assert exc_info.value.command == list(failing_formatter)

    def test_invalid_utf8_output(self) -> None:
        """Output that is not UTF-8 is a formatter error."""
        with pytest.raises(FormatterError, match="not valid UTF-8"):
            ProcessFormatter(NOT_UTF8).format("x")

    def test_missing_program(self) -> None:
        """A program that cannot be spawned raises FormatterNotFoundError."""
        formatter = ProcessFormatter(["iconweave-no-such-formatter"])

        with pytest.raises(FormatterNotFoundError, match="iconweave-no-such-formatter not found"):
            formatter.format("x")

    def test_install_hint(self) -> None:
        """Known formatters come with an install hint."""
        formatter = ProcessFormatter(["leptosfmt", "--stdin"])

        assert formatter.not_found_message() == (
            "leptosfmt not found. Please install it with: cargo install leptosfmt"
        )

    def test_version_command(self) -> None:
        """The version probe reuses the program with --version."""
        formatter = ProcessFormatter(["leptosfmt", "--stdin"])

        assert formatter.version_command() == ["leptosfmt", "--version"]
        assert formatter.program == "leptosfmt"

    def test_empty_command(self) -> None:
        """An empty command line is rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            ProcessFormatter([])
