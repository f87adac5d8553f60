"""Preflight result models.

A preflight run is a handful of checks on the build environment (today:
is the external formatter installed?). Each check yields a CheckResult;
the run's status is the most severe of them.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class CheckStatus(str, Enum):
    """Outcome of a preflight check, from least to most severe."""

    SKIPPED = "skipped"
    PASSED = "passed"
    WARNING = "warning"
    FAILED = "failed"
    ERROR = "error"


_SEVERITY = {status: rank for rank, status in enumerate(CheckStatus)}
_FAILING = frozenset({CheckStatus.FAILED, CheckStatus.ERROR})


class CheckResult(BaseModel):
    """Result of one check.

    Attributes:
        name: Check identifier, e.g. "formatter_leptosfmt".
        status: Outcome.
        message: One-line summary shown to the user.
        details: Extra context (probed command, raw output, error text).
        duration_ms: Wall time spent in the check.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    status: CheckStatus
    message: str = ""
    details: dict[str, str] = Field(default_factory=dict)
    duration_ms: int = Field(default=0, ge=0)

    @property
    def failed(self) -> bool:
        """Whether this result should stop a build."""
        return self.status in _FAILING

    @property
    def passed(self) -> bool:
        """Warnings and skips do not stop a build."""
        return not self.failed


class PreflightResult(BaseModel):
    """All check results of one preflight run, in execution order.

    Example:
        >>> result = PreflightRunner([FormatterCheck(["leptosfmt", "--stdin"])]).run()
        >>> if not result.passed:
        ...     print(result.first_failure().message)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    checks: tuple[CheckResult, ...] = ()
    duration_ms: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overall_status(self) -> CheckStatus:
        """Most severe status among the checks; SKIPPED when nothing ran."""
        if not self.checks:
            return CheckStatus.SKIPPED
        return max((c.status for c in self.checks), key=_SEVERITY.__getitem__)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        """Whether the build may proceed."""
        return self.overall_status not in _FAILING

    @property
    def failed(self) -> bool:
        return not self.passed

    @property
    def passed_count(self) -> int:
        return sum(1 for c in self.checks if c.passed)

    @property
    def failed_count(self) -> int:
        return sum(1 for c in self.checks if c.failed)

    def first_failure(self) -> CheckResult | None:
        """Return the first failing check, if any."""
        return next((c for c in self.checks if c.failed), None)
