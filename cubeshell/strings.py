"""String helpers used by the shell: number conversion, tokenising and path splitting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_WHITESPACE = " \t\n\r\v\f"
_DIGITS = "0123456789abcdef"
_UNSIGNED_LONG = 1 << 64


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def atoi(text: str | None) -> int:
    """Parse a leading decimal integer, skipping whitespace; stops at the first non-digit.

    ``None`` and text without digits yield 0.
    """
    if text is None:
        return 0
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]

    result = 0
    for char in rest:
        if not _is_digit(char):
            break
        result = result * 10 + (ord(char) - ord("0"))
    return sign * result


def _render(value: int, divisor: int) -> str:
    digits = []
    while True:
        value, remainder = divmod(value, divisor)
        digits.append(_DIGITS[remainder])
        if value == 0:
            break
    return "".join(reversed(digits))


def itoa(value: int, base: str | int) -> str:
    """Render ``value`` as text.

    ``base`` is ``"d"`` for signed decimal or ``"x"`` for lower-case hexadecimal;
    anything else renders unsigned decimal. Negative values outside signed
    decimal are shown as their 64-bit unsigned counterpart.
    """
    code = ord(base) if isinstance(base, str) else base
    if code == ord("d") and value < 0:
        return "-" + _render(-value, 10)
    divisor = 16 if code == ord("x") else 10
    return _render(value % _UNSIGNED_LONG, divisor)


def strsep(text: str | None, delimiters: str) -> tuple[str | None, str | None]:
    """Split off the first token of ``text``.

    Returns ``(token, rest)``; ``rest`` is ``None`` once no delimiter remains,
    and both are ``None`` when ``text`` is ``None``.
    """
    if text is None:
        return None, None
    for position, char in enumerate(text):
        if char in delimiters:
            return text[:position], text[position + 1:]
    return text, None


def strtok(text: str, delimiters: str) -> Iterator[str]:
    """Yield the non-empty tokens of ``text`` separated by runs of delimiters."""
    token: list[str] = []
    for char in text:
        if char in delimiters:
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(char)
    if token:
        yield "".join(token)


def string_split(path: str, delimiters: str) -> list[str]:
    """Split a path into components, dropping ``.`` and resolving ``..``.

    Empty components (such as the one before a leading slash) are kept.
    """
    components: list[str] = []
    rest: str | None = path
    while rest is not None:
        token, rest = strsep(rest, delimiters)
        if token == ".":
            continue
        if token == "..":
            if components:
                components.pop()
            continue
        components.append(token)
    return components


def join_tokens(tokens: Iterable[str], delimiter: str) -> str:
    """Join tokens, placing ``delimiter`` before each of them."""
    return "".join(delimiter + token for token in tokens)