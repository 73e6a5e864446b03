"""Input line parsing for the settings commands.

Two helpers turn raw interactive input into stable lookup keys:

- ``split_input`` splits a line into tokens, keeping quoted runs together.
- ``canonicalize`` lower-cases the command and property slots of a
  ``<verb> <command> <property> <value...>`` line.
"""

from __future__ import annotations

from shellsettings.constants import QUOTE_CHARS


def split_input(line: str) -> list[str]:
    """Split a command line into tokens on unquoted spaces.

    A single- or double-quoted run is returned as one token with its quotes
    included. The character following a closing quote is treated as the
    separator and skipped. Quotes cannot be escaped.

    Args:
        line: Raw input line

    Returns:
        Tokens in order. An empty line yields ``[""]``.
    """
    tokens: list[str] = []
    start = 0
    quote: str | None = None
    i = 0

    while i < len(line):
        ch = line[i]
        if quote is None:
            if ch == " ":
                tokens.append(line[start:i])
                start = i + 1
            elif ch in QUOTE_CHARS:
                quote = ch
                start = i
        elif ch == quote:
            tokens.append(line[start : i + 1])
            quote = None
            start = i + 2
            i += 1
        i += 1

    # Flush whatever is left, unless the line ended on a separator
    if start < len(line) or not tokens:
        tokens.append(line[start:])

    return tokens


def canonicalize(line: str) -> str:
    """Lower-case the lookup keys of a settings command line.

    With four or more space-separated tokens only the command and property
    positions are folded so that value text keeps its casing. Shorter lines
    carry no value and are folded entirely.

    Args:
        line: Full command line, verb included

    Returns:
        The canonical line
    """
    parts = line.split(" ")
    if len(parts) > 3:
        parts[1] = parts[1].lower()
        parts[2] = parts[2].lower()
        return " ".join(parts)
    return line.lower()
