"""Interactive command loop of the task manager."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from taskmanager.commands import help_text
from taskmanager.config import Config

PROMPT = "$Taskmaster>"
_GREEN = "\033[32m"
_RESET = "\033[0m"
_UNKNOWN = "TaskMaster: {}: This function does not exist. Use help to see commands\n"

# Recognised commands that currently have no effect.
_ACCEPTED_WITHOUT_EFFECT = frozenset(
    {"load", "reload", "start", "restart", "stop", "info", "list"}
)


class ExitRequested(Exception):
    """Raised by the ``exit`` command to end the session."""


class Controller:
    """Dispatches command lines typed at the prompt."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.config = Config()
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "help": self.help,
            "exit": self.exit,
        }

    def execute(self, line: str) -> None:
        """Run one command line; words are separated by spaces."""
        words = [word for word in line.split(" ") if word]
        if not words:
            return
        name, *args = words
        handler = self._handlers.get(name)
        if handler is not None:
            handler(args)
        elif name not in _ACCEPTED_WITHOUT_EFFECT:
            self.out.write(_UNKNOWN.format(name))

    def help(self, args: list[str]) -> None:
        """Print the overview, or the help of the first named command."""
        self.out.write(help_text(args[0] if args else None))

    def exit(self, args: list[str]) -> None:
        """End the session."""
        raise ExitRequested


def prompt(text: str, stdin: TextIO | None = None, out: TextIO | None = None) -> str | None:
    """Show the prompt and read a line; None once input is exhausted.

    A final line that is not terminated by a newline counts as end of input.
    """
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    out.write(f"{_GREEN}{text}{_RESET}")
    out.flush()
    line = stdin.readline()
    if not line.endswith("\n"):
        return None
    return line[:-1]


def main(argv: list[str] | None = None) -> int:
    """Run the interactive loop until ``exit`` or end of input."""
    controller = Controller()
    while (line := prompt(PROMPT, sys.stdin, sys.stdout)) is not None:
        try:
            controller.execute(line)
        except ExitRequested:
            break
    sys.stdout.write("Exiting...\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())