"""Settings store CLI application.

This module provides the command-line interface for the settings store:
one-shot ``get``/``set``/``delete``/``settings`` commands and an
interactive ``shell`` with tab completion.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Coroutine
from pathlib import Path
from typing import Any, Final, List, Optional, TypeVar

import typer
import yaml

from shellsettings.commands import delete_command, get_command, set_command, settings_command
from shellsettings.config import ShellConfig, configure_logging
from shellsettings.errors import SettingsError
from shellsettings.shell import SettingsShell, format_result
from shellsettings.store.tree import SettingsStore

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Persisted settings for interactive commands", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "shellsettings.cli"

T = TypeVar("T")

FILE_OPTION = typer.Option(None, "--file", "-f", dir_okay=False, help="Settings file to use")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
COMMAND_ARGUMENT = typer.Argument(..., help="Command name")
PROPERTY_ARGUMENT = typer.Argument(None, help="Property name")
REQUIRED_PROPERTY_ARGUMENT = typer.Argument(..., help="Property name")
VALUE_ARGUMENT = typer.Argument(..., help="Value tokens, stored as a list")
YAML_OPTION = typer.Option(False, "--yaml", help="Print as YAML instead of JSON")


def _config(ctx: typer.Context) -> ShellConfig:
    return ctx.ensure_object(ShellConfig)


def _run(ctx: typer.Context, handler: Any, **args: Any) -> Any:
    """Open the store and run one command handler against it."""

    async def _main() -> Any:
        store = await SettingsStore.open(_config(ctx).settings_file)
        return await handler(store, args)

    return _guard(_main())


def _guard(coro: Coroutine[Any, Any, T]) -> T:
    try:
        return asyncio.run(coro)
    except SettingsError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _echo(result: Any) -> None:
    output = format_result(result)
    if output:
        typer.echo(output)


@app.callback()
def main(
    ctx: typer.Context,
    file: Optional[Path] = FILE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Manage the settings of interactive commands."""
    configure_logging(debug)
    ctx.obj = ShellConfig.from_options(file, debug)
    logger.debug("Using settings file %s", ctx.obj.settings_file)


@app.command()
def get(
    ctx: typer.Context,
    command: str = COMMAND_ARGUMENT,
    property: Optional[str] = PROPERTY_ARGUMENT,
) -> None:
    """Get the value for a property of the various commands."""
    _echo(_run(ctx, get_command, command=command, property=property))


@app.command("set")
def set_(
    ctx: typer.Context,
    command: str = COMMAND_ARGUMENT,
    property: str = REQUIRED_PROPERTY_ARGUMENT,
    value: List[str] = VALUE_ARGUMENT,
) -> None:
    """Set values for the various commands."""
    _run(ctx, set_command, command=command, property=property, value=value)


@app.command()
def delete(
    ctx: typer.Context,
    command: str = COMMAND_ARGUMENT,
    property: Optional[str] = PROPERTY_ARGUMENT,
) -> None:
    """Delete values for the various commands."""
    _echo(_run(ctx, delete_command, command=command, property=property))


@app.command()
def settings(ctx: typer.Context, as_yaml: bool = YAML_OPTION) -> None:
    """Show current settings."""
    tree = _run(ctx, settings_command)
    if as_yaml:
        typer.echo(yaml.safe_dump(tree, sort_keys=False), nl=False)
    else:
        _echo(tree)


# Aliases kept out of --help
app.command("del", hidden=True)(delete)
app.command("config", hidden=True)(settings)


@app.command()
def shell(ctx: typer.Context) -> None:
    """Start an interactive settings shell with tab completion."""
    config = _config(ctx)
    store = _guard(SettingsStore.open(config.settings_file))
    SettingsShell(store, config).run()


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
