"""External formatter processes.

Second formatting stage: pipe source text through a formatter that
reads stdin and writes stdout, such as `leptosfmt --stdin`, which knows
how to lay out view! macro bodies. Calls are synchronous and have no
timeout; a hung formatter hangs the build.
"""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

import structlog

from iconweave_core.errors import FormatterError, FormatterNotFoundError

logger = structlog.get_logger(__name__)

INSTALL_HINTS = {
    "leptosfmt": "cargo install leptosfmt",
}


class TextFormatter(ABC):
    """Text in, formatted text out.

    Implementations raise FormatterError when they cannot format.
    """

    @abstractmethod
    def format(self, source: str) -> str:
        """Format source text.

        Args:
            source: Text to format.

        Returns:
            Formatted text.

        Raises:
            FormatterError: If formatting fails.
        """


class ProcessFormatter(TextFormatter):
    """Formatter backed by an external process reading stdin.

    Attributes:
        command: Command line, e.g. ["leptosfmt", "--stdin"].

    Example:
        >>> formatter = ProcessFormatter(["leptosfmt", "--stdin"])
        >>> formatted = formatter.format(source)
    """

    def __init__(self, command: Sequence[str]) -> None:
        """Initialize the formatter.

        Args:
            command: Command line of the formatter process.
        """
        if not command:
            raise ValueError("Formatter command must not be empty")
        self.command = list(command)
        self._log = logger.bind(formatter=self.command[0])

    @property
    def program(self) -> str:
        """Executable name of the formatter."""
        return self.command[0]

    def format(self, source: str) -> str:
        """Pipe source through the formatter process.

        Args:
            source: Text written to the process's stdin.

        Returns:
            The process's stdout decoded as UTF-8.

        Raises:
            FormatterNotFoundError: If the process cannot be spawned.
            FormatterError: If it exits non-zero or writes invalid UTF-8.
        """
        try:
            completed = subprocess.run(
                self.command,
                input=source.encode("utf-8"),
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise FormatterNotFoundError(
                self.not_found_message(),
                command=self.command,
                internal_details=str(e),
            ) from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            self._log.debug("formatter_failed", returncode=completed.returncode, stderr=stderr)
            raise FormatterError(
                f"{self.program} exited with status {completed.returncode}",
                command=self.command,
            )

        try:
            return completed.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatterError(
                f"{self.program} produced output that is not valid UTF-8",
                command=self.command,
            ) from e

    def version_command(self) -> list[str]:
        """Command used to probe that the formatter is installed."""
        return [self.program, "--version"]

    def not_found_message(self) -> str:
        """User message for a formatter that cannot be executed."""
        message = f"{self.program} not found."
        hint = INSTALL_HINTS.get(Path(self.program).name)
        if hint:
            message += f" Please install it with: {hint}"
        return message
