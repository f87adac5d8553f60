"""Console output for iconweave-cli.

All user-facing text goes through the module-level rich console, which
honours NO_COLOR and is rebuilt by the --no-color flag.
"""

from __future__ import annotations

import os
from typing import Any

from rich.console import Console
from rich.table import Table

from iconweave_core.models import AssetStatus, GenerationReport

# Message kind -> (prefix, style)
_MARKS: dict[str, tuple[str, str]] = {
    "success": ("✓", "green"),
    "error": ("✗", "red"),
    "warning": ("⚠", "yellow"),
}


def create_console(no_color: bool = False) -> Console:
    """Build a console; NO_COLOR in the environment also disables colors."""
    plain = no_color or "NO_COLOR" in os.environ
    return Console(no_color=plain, force_terminal=False if plain else None)


console = create_console()


def set_no_color(no_color: bool) -> None:
    """Replace the module console."""
    global console
    console = create_console(no_color=no_color)


def _emit(kind: str, message: str, **kwargs: Any) -> None:
    mark, style = _MARKS[kind]
    console.print(f"[{style}]{mark}[/{style}] {message}", **kwargs)


def success(message: str, **kwargs: Any) -> None:
    """Print `✓ message`.

    Example:
        >>> success("Generated 1542 icons")
        ✓ Generated 1542 icons
    """
    _emit("success", message, **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print `✗ message`."""
    _emit("error", message, **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Print `⚠ message`."""
    _emit("warning", message, **kwargs)


def info(message: str, **kwargs: Any) -> None:
    console.print(message, **kwargs)


def print_report(report: GenerationReport, verbose: bool = False) -> None:
    """Print the outcome of a generation run.

    Dropped icons are always listed; icons excluded by the feature gate
    only with verbose output.

    Args:
        report: Report returned by the generator.
        verbose: Also list skipped icons.
    """
    success(
        f"Generated {report.generated_count} icons to {report.output_path} "
        f"in {report.duration_ms}ms"
    )
    if report.skipped_count:
        info(f"  {report.skipped_count} icons not enabled by features")
    if report.dropped_count:
        warning(f"{report.dropped_count} icons dropped")

    shown = {AssetStatus.DROPPED, AssetStatus.SKIPPED} if verbose else {AssetStatus.DROPPED}
    rows = [o for o in report.outcomes if o.status in shown]
    if not rows:
        return

    table = Table("Asset", "Status", "Reason", header_style="bold", expand=False)
    for outcome in rows:
        style = "red" if outcome.status == AssetStatus.DROPPED else "dim"
        table.add_row(str(outcome.path), outcome.status.value, outcome.reason, style=style)
    console.print(table)
