"""Preflight check runner."""

from __future__ import annotations

import time
from collections.abc import Sequence

import structlog

from iconweave_core.preflight.checks import BaseCheck, FormatterCheck
from iconweave_core.preflight.models import CheckResult, PreflightResult

logger = structlog.get_logger(__name__)


class PreflightRunner:
    """Run checks in order and collect their results.

    Attributes:
        checks: Checks to run.
        fail_fast: Stop after the first failing check.

    Example:
        >>> result = PreflightRunner([FormatterCheck(["leptosfmt", "--stdin"])]).run()
        >>> result.overall_status
        <CheckStatus.PASSED: 'passed'>
    """

    def __init__(self, checks: Sequence[BaseCheck], fail_fast: bool = False) -> None:
        self.checks = list(checks)
        self.fail_fast = fail_fast

    def run(self) -> PreflightResult:
        """Run the checks.

        Returns:
            PreflightResult holding every result produced.
        """
        started = time.perf_counter()
        results: list[CheckResult] = []

        for check in self.checks:
            result = check.run()
            results.append(result)
            if self.fail_fast and result.failed:
                logger.debug("preflight_stopped", check=check.name, status=result.status.value)
                break

        preflight = PreflightResult(
            checks=tuple(results),
            duration_ms=int((time.perf_counter() - started) * 1000),
        )
        logger.debug(
            "preflight_finished",
            status=preflight.overall_status.value,
            passed=preflight.passed_count,
            failed=preflight.failed_count,
        )
        return preflight


def run_preflight(
    formatter_command: Sequence[str] | None,
    timeout_seconds: int = 30,
) -> PreflightResult:
    """Check the tools a generation run depends on.

    Args:
        formatter_command: External formatter command line, or None when
            the run does not use one.
        timeout_seconds: Per-check timeout.

    Returns:
        PreflightResult; empty (and passing) when there is nothing to check.
    """
    checks: list[BaseCheck] = []
    if formatter_command:
        checks.append(FormatterCheck(formatter_command, timeout_seconds=timeout_seconds))
    return PreflightRunner(checks).run()
