"""Command-line tokenising, error formatting and the registry of shell commands."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

SHELL_MAX_BUFFER_SIZE = 1024
SHELL_MAX_TOKENS = 128
SHELL_MAX_TOKEN_LENGTH = 256
MAX_INTERNAL_COMMANDS = 256

_ARGC_LIMIT = 0xFF

Output = Callable[[str], None]
Entry = Callable[[list[str], Output], int]

logger = logging.getLogger(__name__)


def parse_command(text: str) -> list[str]:
    """Split a command line on spaces; double quotes group words into one token.

    The quote characters themselves are dropped, empty tokens are never
    produced and each token keeps at most ``SHELL_MAX_TOKEN_LENGTH - 1``
    characters.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in text:
        if char == '"':
            in_quotes = not in_quotes
        elif char == " " and not in_quotes:
            if current:
                tokens.append("".join(current))
                current = []
        elif len(current) < SHELL_MAX_TOKEN_LENGTH - 1:
            current.append(char)
    if current:
        tokens.append("".join(current))
    if len(tokens) > SHELL_MAX_TOKENS:
        raise ValueError(f"too many tokens: {len(tokens)} > {SHELL_MAX_TOKENS}")
    logger.debug("parsed command line into %r", tokens)
    return tokens


def format_error(kind: str, message: str, start: int, end: int) -> str:
    """Render an error message, underlined with carets when ``end`` is not 0."""
    text = ""
    if end != 0:
        indent = " " * (start + 2)
        text = indent + "^" * (end + 2) + "\n" + indent
    return f"{text}{kind}: {message}"


@dataclass(frozen=True)
class ShellCommand:
    """A named command with argument-count limits; a limit of 0 means none."""

    name: str
    entry: Entry
    argc_min: int = 0
    argc_max: int = 0

    def __post_init__(self) -> None:
        for limit in (self.argc_min, self.argc_max):
            if not 0 <= limit <= _ARGC_LIMIT:
                raise ValueError(f"argument limit out of range: {limit}")


class CommandRegistry:
    """The commands a shell knows, in registration order.

    Errors found while handling a command go to ``stderr`` when given,
    otherwise to the output passed to :meth:`handle`.
    """

    def __init__(self, stderr: Output | None = None) -> None:
        self._commands: list[ShellCommand] = []
        self._stderr = stderr

    def __len__(self) -> int:
        return len(self._commands)

    def register(self, command: ShellCommand) -> None:
        """Add a command; raise when it has no entry or the registry is full."""
        if not callable(command.entry):
            raise TypeError(f"command {command.name!r} has no callable entry")
        if len(self._commands) >= MAX_INTERNAL_COMMANDS - 1:
            raise OverflowError(
                f"could not register {command.name!r}: registry is full"
            )
        self._commands.append(command)
        logger.debug("registered command %s at %#x", command.name, len(self._commands) - 1)

    def find(self, name: str) -> ShellCommand | None:
        """Return the first command registered under ``name``, or ``None``."""
        return next((cmd for cmd in self._commands if cmd.name == name), None)

    def names(self) -> list[str]:
        """Names of the registered commands, in registration order."""
        return [command.name for command in self._commands]

    def handle(self, tokens: Sequence[str], stdout: Output) -> int:
        """Run the command named by the first token and return its exit code.

        An empty line or one starting with ``#`` does nothing and returns 0;
        an unknown command or a wrong number of arguments returns 1.
        """
        tokens = list(tokens)
        if not tokens:
            logger.debug("empty command not handled")
            return 0
        name = tokens[0]
        if name.startswith("#"):
            return 0
        report = self._stderr or stdout
        argc = len(tokens) - 1
        logger.debug("executing %s with argc=%d", name, argc)

        command = self.find(name)
        if command is None:
            report(
                format_error(
                    "ParseError",
                    "Command not registered or not present in search path "
                    "or working directory.",
                    0,
                    len(name) - 1,
                )
            )
            return 1
        if command.argc_max != 0 and argc > command.argc_max:
            report(format_error("CommandError", "Too much arguments in call", 0, 0))
            return 1
        if argc < command.argc_min:
            report(format_error("CommandError", "Too few arguments in call", 5, 8))
            return 1
        return command.entry(tokens, stdout)