# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import logging
from enum import IntEnum

logger = logging.getLogger(__name__)

# Key files store DirectInput scan codes. These are set 1 scan codes, with the
# extended (E0-prefixed) keys folded into the upper half by setting bit 7.

# Key files use both of these to mean "nothing bound here".
SENTINEL_CODES = frozenset({0, 0xFFFF})


# Keys that are used in Falcon BMS key files
class Key(IntEnum):
    Unknown = 0
    Escape = 1
    Num1 = 2
    Num2 = 3
    Num3 = 4
    Num4 = 5
    Num5 = 6
    Num6 = 7
    Num7 = 8
    Num8 = 9
    Num9 = 10
    Num0 = 11
    Minus = 12
    Equals = 13
    Backspace = 14
    Tab = 15
    Q = 16
    W = 17
    E = 18
    R = 19
    T = 20
    Y = 21
    U = 22
    I = 23  # noqa: E741
    O = 24  # noqa: E741
    P = 25
    LeftBracket = 26
    RightBracket = 27
    Return = 28
    LControl = 29
    A = 30
    S = 31
    D = 32
    F = 33
    G = 34
    H = 35
    J = 36
    K = 37
    L = 38
    Semicolon = 39
    Apostrophe = 40
    BackQuote = 41
    LShift = 42
    Backslash = 43
    Z = 44
    X = 45
    C = 46
    V = 47
    B = 48
    N = 49
    M = 50
    Comma = 51
    Period = 52
    Slash = 53
    # numpad asterisk
    Multiply = 55
    Space = 57
    CapsLock = 58
    F1 = 59
    F2 = 60
    F3 = 61
    F4 = 62
    F5 = 63
    F6 = 64
    F7 = 65
    F8 = 66
    F9 = 67
    F10 = 68
    Numlock = 69
    ScrollLock = 70
    Numpad7 = 71
    Numpad8 = 72
    Numpad9 = 73
    Subtract = 74
    Numpad4 = 75
    Numpad5 = 76
    Numpad6 = 77
    Add = 78
    Numpad1 = 79
    Numpad2 = 80
    Numpad3 = 81
    Numpad0 = 82
    Decimal = 83
    F11 = 87
    F12 = 88
    F13 = 100
    F14 = 101
    F15 = 102
    NumpadEnter = 156
    RControl = 157
    Divide = 181
    PrintScr = 183
    Home = 199
    UpArrow = 200
    PageUp = 201
    LeftArrow = 203
    RightArrow = 205
    End = 207
    DownArrow = 208
    PageDown = 209
    Insert = 210
    Delete = 211
    LWin = 219
    RWin = 220
    Apps = 221


def resolve_key_code(code: int) -> Key:
    """Resolve a raw scan code to a Key.

    Every code resolves to something; codes with no entry come back as Key.Unknown.
    A warning is logged for those, unless the code is one of the sentinels.
    """
    if code in SENTINEL_CODES:
        return Key.Unknown
    try:
        return Key(code)
    except ValueError:
        logger.warning("Unmatched keycode in keyfile: %d", code)
        return Key.Unknown
