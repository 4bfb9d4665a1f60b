# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import typing

import msgspec

from .keycodes import Key


class Modifier(enum.IntEnum):
    # values are the bits used in a key file's modifier mask
    LSHIFT = 1
    LCONTROL = 2
    LALT = 4


def decode_modifiers(mask: int) -> tuple[Modifier, ...]:
    # iteration order of the enum is the canonical modifier order
    return tuple(modifier for modifier in Modifier if mask & modifier)


def format_binding(key: Key, modifiers: typing.Iterable[Modifier]) -> str:
    return "+".join([m.name for m in modifiers] + [key.name])


class Callback(msgspec.Struct, frozen=True, kw_only=True):
    name: str
    key_code: int
    readable_key_code: Key
    modifiers: tuple[Modifier, ...]
    combo_key_code: int
    readable_combo_key_code: Key
    combo_modifiers: tuple[Modifier, ...]
    line_number: int = 0

    @property
    def binding(self):
        return format_binding(self.readable_key_code, self.modifiers)

    @property
    def combo_binding(self) -> typing.Optional[str]:
        if self.readable_combo_key_code is Key.Unknown:
            return None
        return format_binding(self.readable_combo_key_code, self.combo_modifiers)
