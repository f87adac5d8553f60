"""Formatting stages for generated components."""

from __future__ import annotations

from iconweave_core.formatting.pipeline import FormattingPipeline
from iconweave_core.formatting.printer import RustPrinter, rust_string
from iconweave_core.formatting.process import ProcessFormatter, TextFormatter

__all__ = [
    "FormattingPipeline",
    "ProcessFormatter",
    "RustPrinter",
    "TextFormatter",
    "rust_string",
]
