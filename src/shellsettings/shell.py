"""Interactive settings shell with readline tab completion."""

from __future__ import annotations

import asyncio
import json
import logging
import readline
from typing import Any, Final

import typer

from shellsettings.autocomplete import resolve_completions
from shellsettings.commands import COMMANDS, dispatch, find_command
from shellsettings.config import ShellConfig
from shellsettings.errors import SettingsError
from shellsettings.parsing import split_input
from shellsettings.store.tree import SettingsStore

logger: Final = logging.getLogger(__name__)

EXIT_WORDS: Final = frozenset({"exit", "quit"})


def format_result(result: Any) -> str:
    """Render a command result for the terminal."""
    if result is None:
        return ""
    return json.dumps(result, indent=2)


def help_text() -> str:
    lines = ["Commands:"]
    for spec in COMMANDS:
        aliases = f" (alias: {', '.join(spec.aliases)})" if spec.aliases else ""
        lines.append(f"  {spec.usage:<38} {spec.description}{aliases}")
    lines.append(f"  {'exit':<38} leave the shell")
    return "\n".join(lines)


class SettingsShell:
    """Read-eval-print loop over the settings commands.

    Completion is delegated to the autocomplete resolver. Readline only lets
    a completer replace the word under the cursor, so a rewritten line is
    offered as the single completion of that word.
    """

    def __init__(self, store: SettingsStore, config: ShellConfig) -> None:
        self.store = store
        self.config = config
        self._matches: list[str] = []

    def completion_matches(self, buffer: str, begidx: int, text: str) -> list[str]:
        """Return readline completions for the word *text* starting at *begidx*."""
        stripped = buffer.lstrip()
        begidx -= len(buffer) - len(stripped)
        buffer = stripped

        if begidx <= 0:
            names = [name for spec in COMMANDS for name in spec.names]
            return [name + " " for name in names if name.startswith(text.lower())]

        if find_command(split_input(buffer)[0]) is None:
            return []

        completion = resolve_completions(buffer, self.store)
        if completion.buffer is not None and completion.buffer != buffer:
            return [completion.buffer[begidx:]]
        return [c for c in completion.candidates if c.startswith(text.lower())]

    def complete(self, text: str, state: int) -> str | None:
        """Readline completer entry point."""
        if state == 0:
            self._matches = self.completion_matches(
                readline.get_line_buffer(), readline.get_begidx(), text
            )
        if state < len(self._matches):
            return self._matches[state]
        return None

    def handle(self, runner: asyncio.Runner, line: str) -> None:
        """Run one input line, reporting failures without leaving the loop."""
        if line in ("help", "?"):
            typer.echo(help_text())
            return
        try:
            result = runner.run(dispatch(self.store, line))
        except SettingsError as exc:
            typer.secho(str(exc), fg=typer.colors.RED, err=True)
            return
        output = format_result(result)
        if output:
            typer.echo(output)

    def _setup_readline(self) -> None:
        readline.set_completer(self.complete)
        readline.parse_and_bind("tab: complete")
        try:
            readline.read_history_file(self.config.history_path)
        except FileNotFoundError:
            pass

    def run(self) -> None:
        """Read lines until EOF or ``exit``."""
        self._setup_readline()
        typer.echo(f"Settings file: {self.store.path} - type 'help' for commands")
        try:
            with asyncio.Runner() as runner:
                while True:
                    try:
                        line = input(self.config.prompt)
                    except EOFError:
                        typer.echo()
                        break
                    except KeyboardInterrupt:
                        typer.echo()
                        continue
                    line = line.strip()
                    if not line:
                        continue
                    if line in EXIT_WORDS:
                        break
                    self.handle(runner, line)
        finally:
            readline.write_history_file(self.config.history_path)
            logger.debug("Saved shell history to %s", self.config.history_path)
