# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Parsing stages, one line at a time:
# stage 1: tokenize and classify the line (records)
# stage 2: normalize the numeric fields of key-binding lines (literals)
# stage 3: resolve scan codes and modifier masks into symbols (keycodes, keytypes)
# stage 4: collect the resulting callbacks into an immutable KeyFile (keyfile)

from .commontypes import (
    EmptyKeyFileError,
    KeyFileError,
    KeyFileReadError,
    SchemaPolicy,
    SchemaViolation,
)
from .keycodes import Key, resolve_key_code
from .keyfile import KeyFile, load, make_callback, parse
from .keytypes import Callback, Modifier, decode_modifiers
from .literals import normalize_number

__all__ = [
    "Callback",
    "EmptyKeyFileError",
    "Key",
    "KeyFile",
    "KeyFileError",
    "KeyFileReadError",
    "Modifier",
    "SchemaPolicy",
    "SchemaViolation",
    "decode_modifiers",
    "load",
    "make_callback",
    "normalize_number",
    "parse",
    "resolve_key_code",
]
