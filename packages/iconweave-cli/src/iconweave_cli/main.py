"""CLI entry point for iconweave.

Subcommands are registered by import path and resolved on first use,
so `iconweave --help` does not import the generator or its formatters.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from typing import Any

import click
import rich_click as rclick

from iconweave_cli import __version__
from iconweave_cli.output import set_no_color

rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True

# Command name -> "module:attribute"
LAZY_COMMANDS: dict[str, str] = {
    "generate": "iconweave_cli.commands.generate:generate",
    "init": "iconweave_cli.commands.init:init",
    "preflight": "iconweave_cli.commands.preflight:preflight",
}


class LazyGroup(rclick.RichGroup):
    """Rich click group whose subcommands are imported when looked up.

    Attributes:
        lazy_subcommands: Command name to "module:attribute" import path.
    """

    def __init__(
        self,
        *args: Any,
        lazy_subcommands: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.lazy_subcommands = dict(lazy_subcommands or {})
        self._resolved: dict[str, click.Command] = {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted({*super().list_commands(ctx), *self.lazy_subcommands})

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        eager = super().get_command(ctx, cmd_name)  # type: ignore[arg-type]
        if eager is not None:
            return eager
        if cmd_name in self._resolved:
            return self._resolved[cmd_name]

        target = self.lazy_subcommands.get(cmd_name)
        if target is None:
            return None

        command = _load_command(target)
        self._resolved[cmd_name] = command
        return command


def _load_command(target: str) -> click.Command:
    """Import "module:attribute" and check it is a click command."""
    module_name, _, attr_name = target.partition(":")
    command = getattr(importlib.import_module(module_name), attr_name)
    if not isinstance(command, click.Command):
        raise TypeError(f"{target} is not a click command")
    return command


def _disable_color(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if value:
        set_no_color(True)


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="iconweave")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=_disable_color,
)
def cli() -> None:
    """iconweave - SVG icon sets to Leptos components.

    Turns a directory of SVG icons into one Rust source file with a
    `#[component]` per icon, ready to `include!` from a build script.

    **Typical flow:**

    - `iconweave init` - write an iconweave.yaml
    - `iconweave preflight` - check that leptosfmt can be run
    - `iconweave generate` - write `$OUT_DIR/icons.rs`
    """


if __name__ == "__main__":
    cli()
