"""The built-in shell commands and the registry holding them."""

from __future__ import annotations

from dataclasses import dataclass

from cubeshell.command import CommandRegistry, Output, ShellCommand, format_error

MAX_PATH_LENGTH = 128


@dataclass
class ShellState:
    """Mutable state shared by the built-in commands."""

    workdir: str = "/"


def change_directory(workdir: str, target: str) -> str:
    """Return the working directory after changing from ``workdir`` to ``target``.

    The target replaces the working directory exactly as given, relative or
    absolute. A target of ``MAX_PATH_LENGTH`` characters or more is rejected.
    """
    if len(target) >= MAX_PATH_LENGTH:
        raise ValueError(f"Filename too long: cannot leave {workdir!r}")
    return target


def _test(tokens: list[str], stdout: Output) -> int:
    stdout("Hello world.")
    return 0


def _echo(tokens: list[str], stdout: Output) -> int:
    stdout(tokens[1] if len(tokens) > 1 else "")
    stdout("\n")
    return 0


def build_registry(state: ShellState) -> CommandRegistry:
    """Create a registry holding the built-in commands bound to ``state``."""
    registry = CommandRegistry()

    def cd(tokens: list[str], stdout: Output) -> int:
        if len(tokens) == 1:
            stdout(state.workdir)
            return 0
        try:
            state.workdir = change_directory(state.workdir, tokens[1])
        except ValueError:
            stdout(format_error("Fs-Error", "Filename too long", 0, 0))
            return 1
        return 0

    def help_(tokens: list[str], stdout: Output) -> int:
        stdout("available commands:\n")
        for name in registry.names():
            stdout(name)
            stdout(" ")
        return 0

    for name, entry in (("test", _test), ("echo", _echo), ("cd", cd), ("help", help_)):
        registry.register(ShellCommand(name, entry))
    return registry