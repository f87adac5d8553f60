"""Output file writer.

The output file is truncated on open, starts with the prelude statement
and then receives each formatted component followed by a newline. There
is no partial-write recovery: a failure midway leaves a truncated file
that fails to compile downstream.
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import TextIO

import structlog

from iconweave_core.errors import ConfigurationError

logger = structlog.get_logger(__name__)


class OutputWriter:
    """Context manager writing the generated source file.

    Example:
        >>> with OutputWriter(Path("out/icons.rs"), "use leptos::prelude::*;") as writer:
        ...     writer.write_component(source)
    """

    def __init__(self, path: Path, prelude: str) -> None:
        """Initialize the writer.

        Args:
            path: Output file path.
            prelude: Statement written first, followed by a blank line.
        """
        self.path = path
        self.prelude = prelude
        self.components_written = 0
        self._file: TextIO | None = None

    def __enter__(self) -> OutputWriter:
        if not self.path.parent.is_dir():
            raise ConfigurationError(
                f"Output directory does not exist: {self.path.parent}",
                field_path="out_dir",
            )
        # newline="" keeps "\n" line endings on every platform
        self._file = self.path.open("w", encoding="utf-8", newline="")
        self._file.write(f"{self.prelude}\n\n")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        logger.debug(
            "output_closed",
            path=str(self.path),
            components=self.components_written,
            complete=exc_type is None,
        )

    def write_component(self, source: str) -> None:
        """Append one formatted component followed by a newline."""
        if self._file is None:
            raise RuntimeError("OutputWriter is not open")
        self._file.write(f"{source}\n")
        self.components_written += 1
