"""Parsing of fstab text and mounting of the devices it lists.

Each line holds, separated by spaces, a device id, a mount point, a
file-system type and optional decimal permissions.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

MAX_LINE_LENGTH = 512

ERROR_DEVICE_NOT_FOUND = 101
ERROR_LINE_TOO_LONG = 103
ERROR_MOUNT_BASE = 200

ResolveDevice = Callable[[str], Any]
Mount = Callable[[Any, str, str, int], int]


class FstabError(Exception):
    """A failure while mounting from fstab, carrying a numeric status code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class FstabEntry:
    """One mount described by an fstab line."""

    device: str
    mountpoint: str
    fs_type: str
    permissions: int = 0


def _leading_number(text: str) -> int:
    value = 0
    for char in text:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return value


def parse_fstab_line(line: str) -> FstabEntry | None:
    """Parse one line; return ``None`` when device, mount point or type is missing."""
    if len(line) >= MAX_LINE_LENGTH:
        raise FstabError(ERROR_LINE_TOO_LONG, "line too long")
    fields = [part for part in line.split(" ") if part]
    if len(fields) < 3:
        return None
    device, mountpoint, fs_type = fields[:3]
    permissions = _leading_number(fields[3]) if len(fields) > 3 else 0
    return FstabEntry(device, mountpoint, fs_type, permissions)


def mount_line(
    line: str, resolve_device: ResolveDevice, mount: Mount
) -> FstabEntry | None:
    """Mount the first complete entry in ``line``.

    ``resolve_device`` maps a device id to a device, or ``None`` when unknown;
    ``mount(device, mountpoint, fs_type, permissions)`` returns 0 on success.
    Returns the mounted entry, or ``None`` when no line held a complete entry.
    """
    for text in line.split("\n"):
        entry = parse_fstab_line(text)
        if entry is None:
            continue
        device = resolve_device(entry.device)
        if device is None:
            raise FstabError(
                ERROR_DEVICE_NOT_FOUND, f"device not found: {entry.device}"
            )
        result = mount(device, entry.mountpoint, entry.fs_type, entry.permissions)
        if result != 0:
            raise FstabError(
                ERROR_MOUNT_BASE + result,
                f"failed to mount {entry.device} on {entry.mountpoint}: {result}",
            )
        return entry
    return None


def mount_all(
    text: str, resolve_device: ResolveDevice, mount: Mount
) -> list[FstabEntry]:
    """Mount every entry in ``text``, going on past failures.

    Returns the mounted entries. If any line failed, the last failure is
    raised after all lines were tried; the mounted entries are then on its
    ``mounted`` attribute.
    """
    mounted: list[FstabEntry] = []
    failure: FstabError | None = None
    for line in text.split("\n"):
        if not line:
            continue
        try:
            entry = mount_line(line, resolve_device, mount)
        except FstabError as exc:
            failure = exc
            continue
        if entry is not None:
            mounted.append(entry)
    if failure is not None:
        failure.mounted = mounted  # type: ignore[attr-defined]
        raise failure
    return mounted