"""Memoisation of function calls keyed by the raw bytes of their arguments.

A call made through :class:`FunctionCache` first looks for an earlier call
with the same arguments. On a hit a copy of the stored result is returned;
otherwise the function runs and, while the cache has room, its result is kept.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

DJB2_SEED = 5381
_UNSIGNED_LONG_MASK = (1 << 64) - 1

BytesLike = bytes | bytearray | memoryview | str


def hash_data(data: bytes | bytearray | memoryview) -> int:
    """Return the djb2 hash of ``data`` as a 64-bit unsigned value."""
    digest = DJB2_SEED
    for byte in bytes(data):
        digest = (digest * 33 + byte) & _UNSIGNED_LONG_MASK
    return digest


def _as_bytes(value: Any) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(
        f"cached arguments must be bytes-like or str, not {type(value).__name__}"
    )


@dataclass(frozen=True)
class _Entry:
    digest: int
    args: tuple[bytes, ...]
    result: Any


class FunctionCache:
    """A fixed-capacity cache of function results.

    Once ``capacity`` results are stored, further new calls still run but
    their results are not kept.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"cache capacity must not be negative: {capacity}")
        self._capacity = capacity
        self._entries: list[_Entry] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Drop every stored result."""
        self._entries.clear()

    def call(self, func: Callable[..., Any], *args: BytesLike) -> Any:
        """Return ``func(*args)``, from the cache when the same arguments were seen."""
        if not callable(func):
            raise TypeError("func must be callable")

        key = tuple(_as_bytes(arg) for arg in args)
        digest = DJB2_SEED
        for raw in key:
            digest ^= hash_data(raw)

        for entry in self._entries:
            if entry.digest == digest and entry.args == key:
                return copy.deepcopy(entry.result)

        result = func(*args)
        if len(self._entries) < self._capacity:
            self._entries.append(_Entry(digest, key, copy.deepcopy(result)))
        return result