"""iconweave generate command - Write the Leptos icon components file."""

from __future__ import annotations

from pathlib import Path

import click

from iconweave_cli.errors import (
    CLIError,
    handle_iconweave_error,
    handle_os_error,
    handle_permission_error,
)
from iconweave_cli.output import print_report

DEFAULT_CONFIG_FILE = "iconweave.yaml"


@click.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Path to iconweave.yaml [default: ./{DEFAULT_CONFIG_FILE} if present]",
)
@click.option(
    "--icons-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Icon root directory [default: lucide/icons]",
)
@click.option(
    "-o",
    "--out-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Output directory [default: $OUT_DIR]",
)
@click.option(
    "--output-name",
    type=str,
    default=None,
    help="Output file name [default: icons.rs]",
)
@click.option(
    "--strict/--best-effort",
    "strict",
    default=None,
    help="Abort on the first broken icon, or drop it and continue",
)
@click.option(
    "-j",
    "--workers",
    type=click.IntRange(1, 256),
    default=None,
    help="Worker threads for best-effort runs [default: CPU count]",
)
@click.option(
    "--formatter",
    "formatter",
    type=str,
    default=None,
    help="Formatter command reading stdin, e.g. 'leptosfmt --stdin'",
)
@click.option(
    "--no-formatter",
    is_flag=True,
    default=False,
    help="Skip the external formatter stage",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Log level [default: WARNING]",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="List icons excluded by features",
)
def generate(
    config_path: str | None,
    icons_dir: str | None,
    out_dir: str | None,
    output_name: str | None,
    strict: bool | None,
    workers: int | None,
    formatter: str | None,
    no_formatter: bool,
    log_level: str,
    verbose: bool,
) -> None:
    """Generate Leptos components from an SVG icon set.

    Scans the icon directory, turns every SVG into a `#[component]`
    function and writes them all to one Rust file. Meant to be run
    from a Cargo build script, where OUT_DIR and CARGO_FEATURE_*
    variables are already set.

    Examples:

        iconweave generate

        iconweave generate --icons-dir assets/icons --out-dir target/icons

        iconweave generate --strict --no-formatter
    """
    if formatter is not None and no_formatter:
        raise CLIError("--formatter and --no-formatter are mutually exclusive")

    # Import here to avoid heavy imports at CLI startup
    from iconweave_core import FailurePolicy, GeneratorConfig, IconGenerator, IconweaveError
    from iconweave_core.observability import configure_logging

    configure_logging(log_level=log_level.upper())

    overrides: dict[str, object] = {
        "icons_dir": Path(icons_dir) if icons_dir else None,
        "out_dir": Path(out_dir) if out_dir else None,
        "output_name": output_name,
        "workers": workers,
        "formatter_command": () if no_formatter else formatter,
    }
    if strict is not None:
        overrides["policy"] = FailurePolicy.STRICT if strict else FailurePolicy.BEST_EFFORT

    path = Path(config_path) if config_path else Path(DEFAULT_CONFIG_FILE)
    if config_path and not path.exists():
        raise CLIError(f"File not found: {config_path}")

    try:
        if path.exists():
            config = GeneratorConfig.from_yaml(path, **overrides)
        else:
            config = GeneratorConfig.from_env(**overrides)

        config.out_dir.mkdir(parents=True, exist_ok=True)
        report = IconGenerator(config).run()

    except PermissionError as e:
        handle_permission_error(str(e.filename or out_dir or "output directory"), "write")

    except IconweaveError as e:
        handle_iconweave_error(e)

    except OSError as e:
        handle_os_error(e, "write")

    print_report(report, verbose=verbose)
