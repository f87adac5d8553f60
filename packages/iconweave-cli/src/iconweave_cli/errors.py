"""Exit codes and error presentation for iconweave-cli."""

from __future__ import annotations

from typing import IO, Any, NoReturn

import click

from iconweave_cli.output import error
from iconweave_core.errors import (
    ConfigurationError,
    FormatterNotFoundError,
    IconweaveError,
)

EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # bad configuration or a broken icon
EXIT_SYSTEM_ERROR = 2  # missing tools, permissions, write failures

# Errors caused by the environment rather than the project
_SYSTEM_ERRORS: tuple[type[IconweaveError], ...] = (FormatterNotFoundError,)

_OUT_DIR_HINT = "Run from a Cargo build script, or use --out-dir to choose a directory."


class CLIError(click.ClickException):
    """A click exception carrying its own exit code, shown as `✗ message`."""

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: IO[Any] | None = None) -> None:
        error(self.format_message())


def exit_code_for(err: IconweaveError) -> int:
    """Return EXIT_SYSTEM_ERROR for environment problems, else EXIT_USER_ERROR."""
    return EXIT_SYSTEM_ERROR if isinstance(err, _SYSTEM_ERRORS) else EXIT_USER_ERROR


def handle_iconweave_error(err: IconweaveError) -> NoReturn:
    """Re-raise an iconweave error as a CLIError with its user message.

    A missing output directory gets a hint on how to provide one.
    """
    message = err.user_message
    if isinstance(err, ConfigurationError) and err.field_path == "out_dir":
        message = f"{message}\n\n{_OUT_DIR_HINT}"
    raise CLIError(message, exit_code=exit_code_for(err)) from err


def handle_permission_error(path: str, operation: str = "access") -> NoReturn:
    """Raise a CLIError for a filesystem permission failure."""
    raise CLIError(f"Permission denied: Cannot {operation} {path}", exit_code=EXIT_SYSTEM_ERROR)


def handle_os_error(err: OSError, operation: str = "write") -> NoReturn:
    """Raise a CLIError for a filesystem failure other than permissions."""
    target = err.filename or "output"
    reason = err.strerror or str(err)
    raise CLIError(f"Cannot {operation} {target}: {reason}", exit_code=EXIT_SYSTEM_ERROR) from err
