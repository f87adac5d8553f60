"""Rendering of preflight results as a rich table or JSON."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from iconweave_core.preflight.models import CheckStatus, PreflightResult

# Icon and rich style per status
_STYLES: dict[CheckStatus, tuple[str, str]] = {
    CheckStatus.PASSED: ("✓", "green"),
    CheckStatus.WARNING: ("⚠", "yellow"),
    CheckStatus.SKIPPED: ("-", "dim"),
    CheckStatus.FAILED: ("✗", "red"),
    CheckStatus.ERROR: ("✗", "bold red"),
}


def render_table(result: PreflightResult, console: Console | None = None) -> None:
    """Print one row per check under a status title."""
    console = console or Console()
    icon, style = _STYLES[result.overall_status]

    table = Table(
        title=Text(f"Preflight {icon} {result.overall_status.value.upper()}", style=style),
        title_justify="left",
        header_style="bold",
    )
    table.add_column("", width=2)
    table.add_column("Check", min_width=20)
    table.add_column("Result", min_width=30)
    table.add_column("Time", justify="right")

    for check in result.checks:
        check_icon, check_style = _STYLES[check.status]
        table.add_row(
            Text(check_icon, style=check_style),
            Text(check.name, style=check_style),
            Text(check.message or "-"),
            f"{check.duration_ms}ms",
        )

    console.print(table)
    console.print(f"{result.passed_count} passed, {result.failed_count} failed")


def render_json(result: PreflightResult, pretty: bool = True) -> str:
    """Serialize a result, including its overall status, as JSON."""
    return result.model_dump_json(indent=2 if pretty else None)


def print_result(
    result: PreflightResult,
    output_format: str = "table",
    console: Console | None = None,
) -> None:
    """Print a result as "table" or "json"."""
    console = console or Console()
    if output_format == "json":
        # Bypass rich markup so the document stays parseable
        console.file.write(render_json(result) + "\n")
    else:
        render_table(result, console)
