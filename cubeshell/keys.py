"""PS/2 set-1 keyboard scan codes."""

from __future__ import annotations

from enum import IntEnum

LEFT_SHIFT_RELEASE = 0xAA
RIGHT_SHIFT_RELEASE = 0xB6


class KbdScan(IntEnum):
    """Make codes of a QWERTY keyboard."""

    ESC = 0x01
    DIGIT_1 = 0x02
    DIGIT_2 = 0x03
    DIGIT_3 = 0x04
    DIGIT_4 = 0x05
    DIGIT_5 = 0x06
    DIGIT_6 = 0x07
    DIGIT_7 = 0x08
    DIGIT_8 = 0x09
    DIGIT_9 = 0x0A
    DIGIT_0 = 0x0B
    MINUS = 0x0C
    EQUAL = 0x0D
    BACKSPACE = 0x0E
    TAB = 0x0F
    Q = 0x10
    W = 0x11
    E = 0x12
    R = 0x13
    T = 0x14
    Y = 0x15
    U = 0x16
    I = 0x17  # noqa: E741
    O = 0x18  # noqa: E741
    P = 0x19
    LEFT_BRACE = 0x1A
    RIGHT_BRACE = 0x1B
    ENTER = 0x1C
    LEFT_CTRL = 0x1D
    A = 0x1E
    S = 0x1F
    D = 0x20
    F = 0x21
    G = 0x22
    H = 0x23
    J = 0x24
    K = 0x25
    L = 0x26
    SEMICOLON = 0x27
    SINGLE_QUOTE = 0x28
    GRAVE = 0x29
    LEFT_SHIFT = 0x2A
    BACKSLASH = 0x2B
    Z = 0x2C
    X = 0x2D
    C = 0x2E
    V = 0x2F
    B = 0x30
    N = 0x31
    M = 0x32
    COMMA = 0x33
    PERIOD = 0x34
    SLASH = 0x35
    RIGHT_SHIFT = 0x36
    PRINT_SCREEN = 0x37
    LEFT_ALT = 0x38
    SPACE = 0x39
    CAPS_LOCK = 0x3A
    F1 = 0x3B
    F2 = 0x3C
    F3 = 0x3D
    F4 = 0x3E
    F5 = 0x3F
    F6 = 0x40
    F7 = 0x41
    F8 = 0x42
    F9 = 0x43
    F10 = 0x44
    NUM_LOCK = 0x45
    SCROLL_LOCK = 0x46
    HOME = 0x47
    UP_ARROW = 0x48
    PAGE_UP = 0x49
    MINUS_PAD = 0x4A
    LEFT_ARROW = 0x4B
    CENTER_PAD = 0x4C
    RIGHT_ARROW = 0x4D
    PLUS_PAD = 0x4E
    END = 0x4F
    DOWN_ARROW = 0x50
    PAGE_DOWN = 0x51
    INSERT = 0x52
    DELETE = 0x53
    F11 = 0x57
    F12 = 0x58


def key_for_scan_code(code: int) -> KbdScan:
    """Return the key for a make code; raise ValueError for an unknown code."""
    try:
        return KbdScan(code)
    except ValueError:
        raise ValueError(f"unknown scan code: {code:#04x}") from None