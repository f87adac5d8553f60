"""Preflight check implementations."""

from __future__ import annotations

from iconweave_core.preflight.checks.base import BaseCheck
from iconweave_core.preflight.checks.formatter import FormatterCheck

__all__ = [
    "BaseCheck",
    "FormatterCheck",
]
