"""The settings commands exposed to the host shell.

Each command is described by a ``CommandSpec``: its usage line, its
aliases and the coroutine that runs it against a settings store. Input
lines are canonicalized before their arguments are bound. Both the
interactive shell and the Typer application dispatch through this table.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Final

from shellsettings.constants import QUOTE_CHARS
from shellsettings.errors import SettingsUsageError
from shellsettings.parsing import canonicalize, split_input
from shellsettings.store.tree import SettingsStore

logger: Final = logging.getLogger(__name__)

CommandArgs = dict[str, Any]
CommandHandler = Callable[[SettingsStore, CommandArgs], Awaitable[Any]]


async def delete_command(store: SettingsStore, args: CommandArgs) -> Any:
    """Delete a property, or a whole command, and return what remains of it."""
    await store.delete(args["command"], args.get("property"))
    return await store.get(args["command"])


async def get_command(store: SettingsStore, args: CommandArgs) -> Any:
    """Return a property value, a command's properties or an empty map."""
    return await store.get(args["command"], args.get("property"))


async def set_command(store: SettingsStore, args: CommandArgs) -> None:
    """Store the value tokens under ``command.property``."""
    await store.set(args["command"], args["property"], list(args["value"]))


async def settings_command(store: SettingsStore, args: CommandArgs) -> dict[str, Any]:
    """Return the entire settings tree."""
    return store.snapshot()


@dataclass(frozen=True)
class Parameter:
    """One positional parameter parsed from a usage line."""

    name: str
    required: bool
    variadic: bool = False

    @classmethod
    def parse(cls, token: str) -> Parameter:
        required = token.startswith("<")
        name = token[1:-1]
        variadic = name.endswith("...")
        return cls(name.removesuffix("..."), required, variadic)


@dataclass(frozen=True)
class CommandSpec:
    """A settings command as registered with the host shell."""

    usage: str
    description: str
    handler: CommandHandler
    aliases: tuple[str, ...] = ()

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        return tuple(Parameter.parse(token) for token in self.usage.split(" ")[1:])

    @property
    def name(self) -> str:
        return self.usage.split(" ")[0]

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)

    def bind(self, tokens: list[str]) -> CommandArgs:
        """Map argument tokens (verb excluded) onto the usage parameters.

        Raises:
            SettingsUsageError: If a required argument is missing or extra
                arguments are given
        """
        args: CommandArgs = {}
        remaining = list(tokens)
        for param in self.parameters:
            if param.variadic:
                args[param.name], remaining = remaining, []
                if param.required and not args[param.name]:
                    raise self._usage_error(f"Missing required argument {param.name}.")
            elif remaining:
                args[param.name] = remaining.pop(0)
            elif param.required:
                raise self._usage_error(f"Missing required argument {param.name}.")
        if remaining:
            raise self._usage_error("Too many arguments.")
        return args

    def _usage_error(self, message: str) -> SettingsUsageError:
        return SettingsUsageError(f"{message} Usage: {self.usage}")


COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        "delete <command> [property]",
        "use this to delete values for the various commands",
        delete_command,
        aliases=("del",),
    ),
    CommandSpec(
        "get <command> [property]",
        "use this to get the value for a property of the various commands",
        get_command,
    ),
    CommandSpec(
        "set <command> <property> <value...>",
        "use this to set values for the various commands",
        set_command,
    ),
    CommandSpec(
        "settings",
        "show current settings",
        settings_command,
        aliases=("config",),
    ),
)


def find_command(verb: str) -> CommandSpec | None:
    """Return the command named *verb* (or one of its aliases)."""
    verb = verb.lower()
    for spec in COMMANDS:
        if verb in spec.names:
            return spec
    return None


def _unquote(token: str) -> str:
    if len(token) >= 2 and token[0] in QUOTE_CHARS and token[-1] == token[0]:
        return token[1:-1]
    return token


def parse_line(line: str) -> tuple[CommandSpec, CommandArgs] | None:
    """Resolve a raw input line to a command and its arguments.

    Returns:
        None when the verb is not a settings command

    Raises:
        SettingsUsageError: If the arguments do not match the usage line
    """
    line = line.strip()
    verb = line.split(" ")[0]
    spec = find_command(verb)
    if spec is None:
        return None

    tokens = [_unquote(token) for token in split_input(canonicalize(line)) if token]
    return spec, spec.bind(tokens[1:])


async def dispatch(store: SettingsStore, line: str) -> Any:
    """Run the settings command on *line* against *store*.

    Raises:
        SettingsUsageError: For unknown commands or bad arguments
        SettingsIOError: If persisting the change fails
    """
    parsed = parse_line(line)
    if parsed is None:
        raise SettingsUsageError(f"Unknown command: {line.split(' ')[0]}")
    spec, args = parsed
    logger.debug("Running %s with %s", spec.name, args)
    return await spec.handler(store, args)
