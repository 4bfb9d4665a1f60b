# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Numeric fields of a key file: decimal, or hexadecimal with a 0x prefix."""
import re

DECIMAL_MATCHER = re.compile(r"^[0-9]+$")
HEX_MATCHER = re.compile(r"^0[xX]([0-9A-Fa-f]+)$")

U16_MAX = 0xFFFF
# Key files write "no key" as 0XFFFFFFFF, so hex fields may use the full 32 bits.
U32_MAX = 0xFFFFFFFF


def normalize_number(token: str) -> int:
    if hex_match := HEX_MATCHER.match(token):
        value = int(hex_match.group(1), base=16)
        if value > U32_MAX:
            raise ValueError(f"Expected hex key code to fit in 32 bits but was {token!r}")
        return value & U16_MAX
    if DECIMAL_MATCHER.match(token):
        value = int(token, base=10)
        if value > U16_MAX:
            raise ValueError(f"Expected key code number to fit in 16 bits but was {token!r}")
        return value
    raise ValueError(f"Expected key code number but was {token!r}")


def parse_record_kind(token: str) -> int:
    "Record kinds are signed: 0 is a key binding, negative values mark headers and device buttons."
    sign = 1
    digits = token
    if token.startswith("-"):
        sign = -1
        digits = token[1:]
    if hex_match := HEX_MATCHER.match(digits):
        return sign * int(hex_match.group(1), base=16)
    if DECIMAL_MATCHER.match(digits):
        return sign * int(digits, base=10)
    raise ValueError(f"Expected record kind to be an integer but was {token!r}")
