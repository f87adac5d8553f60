"""iconweave preflight command - Check the external formatter before a build."""

from __future__ import annotations

import shlex

import click

from iconweave_cli import output
from iconweave_cli.output import error, info, success

DEFAULT_FORMATTER = "leptosfmt --stdin"


@click.command()
@click.option(
    "--formatter",
    "formatter",
    type=str,
    default=DEFAULT_FORMATTER,
    help=f"Formatter command to probe [default: {DEFAULT_FORMATTER}]",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option(
    "--timeout",
    type=click.IntRange(1, 300),
    default=30,
    help="Per-check timeout in seconds",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Show the probed command",
)
def preflight(formatter: str, output_format: str, timeout: int, verbose: bool) -> None:
    """Run preflight checks for icon generation.

    Verifies that the formatter used for best-effort builds can be
    executed. Exits 0 when every check passes, 1 otherwise.

    Examples:

        iconweave preflight

        iconweave preflight --format json

        iconweave preflight --formatter "leptosfmt --stdin --max-width 80"
    """
    from iconweave_core.observability import configure_logging
    from iconweave_core.preflight import print_result, run_preflight

    configure_logging()

    command = shlex.split(formatter)
    if not command:
        error("Formatter command must not be empty")
        raise SystemExit(1)

    if verbose:
        info(f"Probing formatter: {' '.join(command)}")

    result = run_preflight(command, timeout_seconds=timeout)
    print_result(result, output_format=output_format, console=output.console)

    if result.passed:
        if output_format == "table":
            success("Preflight checks passed")
        raise SystemExit(0)
    if output_format == "table":
        error("Preflight checks failed")
    raise SystemExit(1)
