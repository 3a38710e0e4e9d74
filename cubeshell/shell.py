"""The interactive shell: prompt, line dispatch and startup script."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path

from cubeshell.command import (
    SHELL_MAX_BUFFER_SIZE,
    Output,
    format_error,
    parse_command,
)
from cubeshell.commands import ShellState, build_registry
from cubeshell.script import ScriptError, run_script

PROMPT = " >"
AUTORUN_PATH = "etc/shrc"
EXIT_COMMAND = "exit"


def _write(text: str) -> None:
    sys.stdout.write(text)


def _first_token(line: str) -> str | None:
    try:
        tokens = parse_command(line)
    except ValueError:
        return None
    return tokens[0] if tokens else None


class Shell:
    """A command shell over a set of named script files.

    A line naming a non-empty file in ``files`` runs that file as a script;
    any other line is parsed and handed to the command registry.
    """

    def __init__(
        self,
        files: Mapping[str, str] | None = None,
        stdout: Output | None = None,
        state: ShellState | None = None,
    ) -> None:
        self.state = state if state is not None else ShellState()
        self.files = dict(files or {})
        self._stdout = stdout or _write
        self.registry = build_registry(self.state)

    def prompt(self) -> str:
        """The prompt shown before each line of input."""
        return f"{self.state.workdir}{PROMPT} "

    def _run_file(self, script: str) -> int:
        try:
            return run_script(script, self.registry, self._stdout)
        except ScriptError:
            self._stdout("invalid signature.\n")
            return -1

    def run_line(self, line: str) -> int:
        """Execute one line of input and return its exit code."""
        line = line[: SHELL_MAX_BUFFER_SIZE - 1]
        script = self.files.get(line)
        if script:
            return self._run_file(script)
        try:
            tokens = parse_command(line)
        except ValueError as exc:
            self._stdout(format_error("ParseError", str(exc), 0, 0))
            return 1
        return self.registry.handle(tokens, self._stdout)

    def run(self, lines: Iterable[str]) -> int:
        """Run the startup script, then each line until ``exit``.

        Returns the exit code of the last line run.
        """
        autorun = self.files.get(AUTORUN_PATH)
        if autorun:
            try:
                run_script(autorun, self.registry, self._stdout)
            except ScriptError:
                pass

        exit_code = 0
        for raw in lines:
            line = raw.rstrip("\r\n")
            self._stdout("\n")
            self._stdout(self.prompt())
            exit_code = self.run_line(line)
            if _first_token(line) == EXIT_COMMAND:
                break
        return exit_code


def main(argv: list[str] | None = None) -> int:
    """Run the shell on standard input."""
    parser = argparse.ArgumentParser(prog="cubeshell", description="A small command shell.")
    parser.add_argument(
        "scripts", nargs="*", help="script files that can be run by typing their path"
    )
    parser.add_argument("--shrc", help="script to run at startup")
    args = parser.parse_args(argv)

    files = {path: Path(path).read_text(encoding="utf-8") for path in args.scripts}
    if args.shrc:
        files[AUTORUN_PATH] = Path(args.shrc).read_text(encoding="utf-8")

    Shell(files=files).run(sys.stdin)
    _write("\n")
    return 0