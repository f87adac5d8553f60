"""Logging and tracing helpers.

Log events are rendered by structlog through a stdlib handler on stderr.
When iconweave runs inside a Cargo build script, stdout is read by Cargo
for `cargo:` directives and must not carry log lines.

Spans go through the OpenTelemetry API only; without an SDK configured
by the host process they are no-ops.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from typing import IO, TYPE_CHECKING, Any

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

if TYPE_CHECKING:
    from opentelemetry.trace import Span, Tracer

TRACER_NAME = "iconweave"

_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


@lru_cache(maxsize=1)
def get_tracer() -> Tracer:
    """Return the process-wide iconweave tracer."""
    return trace.get_tracer(TRACER_NAME)


def configure_logging(
    *,
    log_level: str = "WARNING",
    json_format: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Route structlog events to a single stderr handler on the root logger.

    Build tools usually surface everything a build script writes, so the
    default level only lets warnings and errors through.

    Args:
        log_level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Render JSON lines instead of the console format.
        stream: Destination; defaults to the current sys.stderr.

    Example:
        >>> configure_logging(log_level="DEBUG")
    """
    renderer: list[Any] = (
        [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        if json_format
        else [structlog.dev.ConsoleRenderer()]
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level.upper())


@contextmanager
def span(
    name: str,
    *,
    attributes: dict[str, Any] | None = None,
    log_end: bool = True,
) -> Iterator[Span]:
    """Run a block inside an OpenTelemetry span, logging its start and end.

    Events are named `<name>_started`, `<name>_completed` and
    `<name>_failed`, and carry the span attributes.

    Example:
        >>> with span("generate", attributes={"icons_dir": "lucide/icons"}):
        ...     generator.run()
    """
    attrs = attributes or {}
    log = structlog.get_logger(__name__).bind(**attrs)

    with get_tracer().start_as_current_span(name, attributes=attrs) as current:
        log.debug(f"{name}_started")
        try:
            yield current
        except Exception as exc:
            current.record_exception(exc)
            current.set_status(Status(StatusCode.ERROR, str(exc)))
            log.debug(f"{name}_failed", error=str(exc))
            raise
        current.set_status(Status(StatusCode.OK))
        if log_end:
            log.debug(f"{name}_completed")
