"""Preflight validation module.

Checks that the tools a generation run depends on are available
before any icon is processed.
"""

from __future__ import annotations

from iconweave_core.preflight.checks import BaseCheck, FormatterCheck
from iconweave_core.preflight.models import CheckResult, CheckStatus, PreflightResult
from iconweave_core.preflight.output import (
    print_result,
    render_json,
    render_table,
)
from iconweave_core.preflight.runner import PreflightRunner, run_preflight

__all__ = [
    "BaseCheck",
    "CheckResult",
    "CheckStatus",
    "FormatterCheck",
    "PreflightResult",
    "PreflightRunner",
    "print_result",
    "render_json",
    "render_table",
    "run_preflight",
]
