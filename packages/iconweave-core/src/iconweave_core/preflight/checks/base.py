"""Common behaviour of preflight checks."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

import structlog

from iconweave_core.preflight.models import CheckResult, CheckStatus

logger = structlog.get_logger(__name__)


class BaseCheck(ABC):
    """A single environment probe.

    Subclasses implement _execute(). run() adds timing and turns
    timeouts and unexpected exceptions into ERROR results, so one broken
    check never hides the others.

    Attributes:
        name: Check identifier used in results and logs.
        timeout_seconds: Time budget handed to the probe.
    """

    def __init__(self, name: str, timeout_seconds: int = 30) -> None:
        self.name = name
        self.timeout_seconds = timeout_seconds
        self._log = logger.bind(check=name)

    def run(self) -> CheckResult:
        """Run the probe and return its timed result."""
        started = time.perf_counter()
        try:
            result = self._execute()
        except TimeoutError as e:
            self._log.error("check_timeout", timeout_seconds=self.timeout_seconds)
            result = self._result(
                CheckStatus.ERROR,
                f"Check timed out after {self.timeout_seconds}s",
                error=str(e),
            )
        except Exception as e:
            self._log.error("check_error", error=str(e), error_type=type(e).__name__)
            result = self._result(
                CheckStatus.ERROR,
                f"Check failed with error: {type(e).__name__}",
                error=str(e),
                error_type=type(e).__name__,
            )

        duration_ms = int((time.perf_counter() - started) * 1000)
        self._log.debug("check_finished", status=result.status.value, duration_ms=duration_ms)
        return result.model_copy(update={"duration_ms": duration_ms})

    @abstractmethod
    def _execute(self) -> CheckResult:
        """Probe the environment.

        Raises:
            TimeoutError: If the probe exceeds timeout_seconds.
        """

    def _result(self, status: CheckStatus, message: str = "", **details: str) -> CheckResult:
        return CheckResult(name=self.name, status=status, message=message, details=details)
