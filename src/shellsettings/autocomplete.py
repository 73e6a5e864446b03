"""Tab completion for the settings commands.

The resolver walks the settings tree against the partially typed line:
the second token completes to a command key, the third to one of that
command's property keys. When exactly one key matches, the line is
rewritten to include it so the user can continue typing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Optional, Protocol, runtime_checkable

from shellsettings.parsing import split_input
from shellsettings.store.tree import SettingsStore

logger: Final = logging.getLogger(__name__)


@dataclass
class Completion:
    """Result of resolving completions for an input buffer."""

    candidates: list[str] = field(default_factory=list)
    buffer: Optional[str] = None  # replacement text, None when unchanged


@runtime_checkable
class InputBuffer(Protocol):
    """Protocol for the host shell's live input line."""

    def input(self) -> str:
        """Return the current input text."""
        ...

    def set_input(self, text: str) -> None:
        """Replace the current input text."""
        ...


def _prefixed(keys: list[str], partial: str) -> list[str]:
    return [key for key in keys if key.startswith(partial)]


def resolve_completions(buffer: str, store: SettingsStore) -> Completion:
    """Resolve completion candidates for *buffer*.

    Args:
        buffer: The line typed so far, verb included
        store: Settings store to complete against

    Returns:
        Candidates and, when a single key matched, the rewritten line
    """
    tokens = split_input(buffer)
    commands = store.commands()

    if len(tokens) == 2:
        verb, partial = tokens
        matches = _prefixed(commands, partial.lower())
        if len(matches) == 1:
            match = matches[0]
            return Completion(store.properties(match), f"{verb} {match} ")
        if matches:
            return Completion(matches)

    elif len(tokens) == 3:
        verb, command, partial = tokens
        if store.has_command(command):
            matches = _prefixed(store.properties(command), partial.lower())
            if len(matches) == 1:
                return Completion([], f"{verb} {command} {matches[0]} ")
            if matches:
                return Completion(matches)

    return Completion(commands)


def autocomplete(ui: InputBuffer, store: SettingsStore) -> list[str]:
    """Resolve completions for the host's input line and apply any rewrite.

    Args:
        ui: The host shell's input accessor
        store: Settings store to complete against

    Returns:
        Candidates to offer the user
    """
    completion = resolve_completions(ui.input(), store)
    if completion.buffer is not None:
        logger.debug("Completed input to %r", completion.buffer)
        ui.set_input(completion.buffer)
    return completion.candidates
