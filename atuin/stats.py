"""Statistics over command history: the most used commands."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

__all__ = ["interesting_command", "compute_stats"]

COMMON_COMMAND_PREFIX = ("sudo",)
COMMON_SUBCOMMAND_PREFIX = ("cargo", "go", "git", "npm", "yarn", "pnpm")

_ASCII_WHITESPACE = " \t\n\x0c\r"

_RED = "\x1b[38;5;9m"
_YELLOW = "\x1b[38;5;11m"
_GREEN = "\x1b[38;5;10m"
_GRAY = "\x1b[38;5;7m"
_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"


def _first_non_whitespace(s: str) -> int | None:
    return next((i for i, c in enumerate(s) if c not in _ASCII_WHITESPACE), None)


def _first_whitespace(s: str) -> int:
    return next((i for i, c in enumerate(s) if c in _ASCII_WHITESPACE), len(s))


def interesting_command(command: str) -> str:
    """The part of ``command`` worth counting: the program, plus a subcommand for
    tools such as git or cargo, ignoring a leading ``sudo``."""
    while True:
        i = _first_whitespace(command)
        prefix = command[:i]
        if prefix not in COMMON_COMMAND_PREFIX:
            break
        command = command[i:].lstrip()
        if not command:
            return prefix

    j = _first_non_whitespace(command[i:])
    if j is not None and prefix in COMMON_SUBCOMMAND_PREFIX:
        end = i + j + _first_whitespace(command[i + j :])
        return command[:end]
    return prefix


def _bar(count: int, maximum: int) -> str:
    filled = 10 * count // maximum
    parts = [_RED]
    for i in range(filled):
        if i == 2:
            parts.append(_YELLOW)
        if i == 5:
            parts.append(_GREEN)
        parts.append("▮")
    parts.append(" " * (10 - filled))
    return "".join(parts)


def compute_stats(commands: Iterable[str], count: int) -> str:
    """Render a report of the ``count`` most used commands with totals.

    Raises ValueError when there is nothing to report.
    """
    commands = [command.strip() for command in commands]
    unique = len(set(commands))
    prefixes = Counter(interesting_command(command) for command in commands)

    top = sorted(prefixes.items(), key=lambda item: -item[1])[:count]
    if not top:
        raise ValueError("No commands found")

    maximum = max(n for _, n in top)
    pad = len(str(maximum))

    lines = [
        f"[{_bar(n, maximum)}{_RESET}] {_GRAY}{n:>{pad}}{_RESET} {_BOLD}{name}{_RESET}"
        for name, n in top
    ]
    lines.append(f"Total commands:   {len(commands)}")
    lines.append(f"Unique commands:  {unique}")
    return "\n".join(lines)