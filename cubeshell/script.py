"""Shell scripts: a ``#sh`` signature line followed by one command per line."""

from __future__ import annotations

from cubeshell.command import CommandRegistry, Output, parse_command

SIGNATURE = "#sh\n"
_QUOTES = "\"'"


class ScriptError(ValueError):
    """A script that cannot be run."""


def parse_script(script: str) -> list[str]:
    """Split a script into its non-empty command lines.

    ``#`` outside quotes starts a comment running to the end of the line, and
    a backslash at the end of a line outside quotes joins it with the next.
    """
    commands: list[str] = []
    current: list[str] = []
    quoted = False
    in_comment = False
    for char in script:
        if in_comment:
            if char != "\n":
                continue
            in_comment = False
        elif char in _QUOTES:
            quoted = not quoted
        elif char == "#" and not quoted:
            in_comment = True
            continue

        if char == "\n":
            if current and current[-1] == "\\" and not quoted:
                current.pop()
                continue
            if current:
                commands.append("".join(current))
                current = []
            continue
        current.append(char)

    if current:
        commands.append("".join(current))
    return commands


def verify_script(script: str) -> bool:
    """Tell whether ``script`` starts with the ``#sh`` signature line."""
    return script.startswith(SIGNATURE)


def run_script(script: str, registry: CommandRegistry, stdout: Output) -> int:
    """Run every command of ``script`` and return the exit code of the last one."""
    if not verify_script(script):
        raise ScriptError("invalid signature")
    exit_code = 0
    for command in parse_script(script):
        exit_code = registry.handle(parse_command(command), stdout)
    return exit_code