# cubeshell

A small command shell with a registry of built-in commands and a script
runner, together with a handful of supporting utilities: string helpers,
an fstab parser, a bounded call cache, ARP/IPv4 structures, a FAT boot
sector parameter block decoder and PS/2 scan codes.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running the shell

```
cubeshell [--shrc FILE] [SCRIPT ...]
```

The shell reads lines from standard input. Before each line it writes a
newline and a prompt made of the working directory followed by ` > `
(the working directory starts as `/`).

- A line that is exactly the path of one of the `SCRIPT` files given on the
  command line runs that file as a script. A file without the `#sh`
  signature prints `invalid signature.`.
- Any other line is split on spaces into tokens (double quotes group words
  into one token and are dropped) and the first token names the command.
- A line whose first token starts with `#` does nothing.
- An unknown command prints a `ParseError` underlined with carets.
- A line whose first token is `exit` ends the session.

`--shrc FILE` names a script that runs once at startup.

### Built-in commands

| Command | What it does |
| --- | --- |
| `test` | prints `Hello world.` |
| `echo WORD` | prints its first argument and a newline |
| `cd` | with no argument prints the working directory; with one, sets the working directory to it as given (no path resolution). Targets of 128 characters or more print `Fs-Error: Filename too long`. |
| `help` | lists the names of every registered command |

## Scripts

A script is text whose first line is exactly `#sh`. Each following
non-empty line is one command. Outside quotes (either `"` or `'`), `#`
starts a comment that runs to the end of the line, and a backslash at the
end of a line joins it with the next.

```python
from cubeshell.commands import ShellState, build_registry
from cubeshell.script import parse_script, run_script, verify_script

registry = build_registry(ShellState())
script = "#sh\necho hello\n"
assert verify_script(script)
exit_code = run_script(script, registry, print)
```

`run_script` returns the exit code of the last command and raises
`cubeshell.script.ScriptError` when the signature is missing.

## Embedding the shell

```python
from cubeshell.shell import Shell

out = []
shell = Shell(files={"hello.sh": "#sh\necho hi\n"}, stdout=out.append)
shell.run_line("hello.sh")
shell.run(["cd /home", "cd", "exit"])
```

`Shell.prompt()` returns the current prompt; `Shell.run(lines)` first runs
the file stored under `etc/shrc` in `files`, if any, then each line until
`exit`.

## Library pieces

- `cubeshell.command` — `ShellCommand` (name, entry, `argc_min`,
  `argc_max`; 0 means no limit), `CommandRegistry` (`register`, `find`,
  `names`, `handle`), `parse_command` and `format_error`. A command entry
  is called as `entry(tokens, stdout)` and returns an exit code.
- `cubeshell.commands` — `ShellState`, `change_directory` and
  `build_registry`, which registers the built-in commands above.
- `cubeshell.script` — `parse_script`, `verify_script`, `run_script` and
  `ScriptError`.
- `cubeshell.strings` — `atoi`, `itoa` (`"d"` signed decimal, `"x"`
  hexadecimal), `strsep`, `strtok` (a generator of tokens), `string_split`
  (path splitting that drops `.` and resolves `..`) and `join_tokens`.
- `cubeshell.fstab` — `FstabEntry`, `parse_fstab_line`, `mount_line` and
  `mount_all`. Mounting is done through two callables you supply:
  `resolve_device(device_id)` and `mount(device, mountpoint, fs_type,
  permissions)`. Failures raise `FstabError`, whose `code` is 101 for an
  unknown device, 103 for a line too long and 200 plus the mount result
  for a failed mount.
- `cubeshell.cache` — `FunctionCache(capacity)` with `call(func, *args)`,
  `len()` and `clear()`; arguments must be bytes-like or `str`.
  `hash_data` is the djb2 hash it uses.
- `cubeshell.net` — `IPAddress` (with `parse` and `str`), `ArpPacket`
  (`to_bytes` / `from_bytes`), `ArpOpcode`, `ntohs` and `htons`.
- `cubeshell.bpb` — `BiosParameterBlock` with `from_bytes` and
  `to_bytes` for the parameter block at the start of a FAT boot sector.
- `cubeshell.keys` — the `KbdScan` enum of PS/2 set-1 make codes and
  `key_for_scan_code`.

## What it does not do

The shell has no file system or device layer of its own. It does not
offer commands for mounting, unmounting or listing storage devices, nor
for hardware information or debugging; `cd` only records the path it is
given and does not check that it exists. The fstab module parses mount
tables but mounts nothing by itself: the mounting is left to the callables
you pass in. The network, boot sector and keyboard modules encode and
decode data only; they do not send packets, read disks or read keyboards.