"""iconweave init command - Write a starter iconweave.yaml."""

from __future__ import annotations

from pathlib import Path

import click

from iconweave_cli.output import error, info, success, warning

CONFIG_HEADER = """\
# iconweave configuration
#
# out_dir is normally taken from $OUT_DIR, set by Cargo for build scripts.
# Set it here only when running iconweave outside a build script.

"""


@click.command()
@click.option(
    "--icons-dir",
    type=str,
    default="lucide/icons",
    help="Icon root directory [default: lucide/icons]",
)
@click.option(
    "--policy",
    type=click.Choice(["best-effort", "strict"]),
    default="best-effort",
    help="What to do with a broken icon [default: best-effort]",
)
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite an existing iconweave.yaml",
)
def init(icons_dir: str, policy: str, force: bool) -> None:
    """Create an iconweave.yaml in the current directory.

    Examples:

        iconweave init

        iconweave init --icons-dir assets/icons --policy strict

        iconweave init --force
    """
    import yaml

    from iconweave_core.config import (
        DEFAULT_FORMATTER_COMMAND,
        DEFAULT_OUTPUT_NAME,
        FailurePolicy,
    )

    config_path = Path("iconweave.yaml")
    existed = config_path.exists()
    if existed and not force:
        error("iconweave.yaml already exists.")
        error("Use --force to overwrite.")
        raise SystemExit(1)

    settings: dict[str, object] = {
        "icons_dir": icons_dir,
        "output_name": DEFAULT_OUTPUT_NAME,
        "policy": policy,
    }
    if policy == FailurePolicy.BEST_EFFORT.value:
        settings["formatter_command"] = list(DEFAULT_FORMATTER_COMMAND)
    else:
        settings["feature_gating"] = True

    try:
        config_path.write_text(
            CONFIG_HEADER + yaml.safe_dump(settings, sort_keys=False),
            encoding="utf-8",
        )
    except PermissionError:
        error("Cannot write to current directory.")
        raise SystemExit(2) from None

    if existed:
        warning("Overwrote existing iconweave.yaml")
    success(f"Created {config_path}")
    if not Path(icons_dir).is_dir():
        info(f"  Icon directory {icons_dir} does not exist yet")
