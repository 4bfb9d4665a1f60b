# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Line level parsing of key files.

A key-binding line looks like this:

    SimPilotToggle 0 0 0X19 0 0X2E 4 1 "Autopilot"

That is, NAME SOUND RECORD_KIND KEY MODMASK COMBO_KEY COMBO_MODMASK, followed by
a visibility flag and a quoted description which we don't care about. Only lines
with a RECORD_KIND of 0 bind keyboard keys; the other kinds describe headers and
device buttons.
"""
import enum
import logging
import typing

import msgspec

from .commontypes import SchemaViolation
from .literals import normalize_number, parse_record_kind

logger = logging.getLogger(__name__)

NO_OP_CALLBACK = "SimDoNothing"
KEY_RECORD_KIND = 0

NAME_FIELD = 0
RECORD_KIND_FIELD = 2
KEY_FIELDS = ("key code", "modifier mask", "combo key code", "combo modifier mask")
FIRST_KEY_FIELD = 3
MIN_TOKENS = RECORD_KIND_FIELD + 1
MIN_KEY_RECORD_TOKENS = FIRST_KEY_FIELD + len(KEY_FIELDS)


class LineKind(enum.Enum):
    BLANK = enum.auto()
    COMMENT = enum.auto()
    NO_OP = enum.auto()
    BINDING = enum.auto()
    # a record kind we don't model
    OTHER = enum.auto()


class KeyRecord(msgspec.Struct, frozen=True, kw_only=True):
    line_number: int
    name: str
    key_code: int
    modifier_mask: int
    combo_key_code: int
    combo_modifier_mask: int


def tokenize(line: str) -> list[str]:
    return line.split()


def _require_tokens(tokens: list[str], count: int, line_number: int):
    if len(tokens) < count:
        raise SchemaViolation(line_number, None, f"Expected at least {count} fields but found {len(tokens)}")


def classify_tokens(tokens: list[str], line_number: int = 0) -> LineKind:
    if not tokens:
        return LineKind.BLANK
    if tokens[0].startswith("#"):
        return LineKind.COMMENT
    if tokens[NAME_FIELD] == NO_OP_CALLBACK:
        return LineKind.NO_OP
    _require_tokens(tokens, MIN_TOKENS, line_number)
    token = tokens[RECORD_KIND_FIELD]
    try:
        record_kind = parse_record_kind(token)
    except ValueError as exc:
        raise SchemaViolation(line_number, token, str(exc)) from exc
    return LineKind.BINDING if record_kind == KEY_RECORD_KIND else LineKind.OTHER


def classify_line(line: str, line_number: int = 0) -> LineKind:
    return classify_tokens(tokenize(line), line_number)


def parse_record(line_number: int, line: str) -> typing.Optional[KeyRecord]:
    """Parse one line of a key file.

    Returns None for lines that don't bind a key, and raises SchemaViolation for a
    key-binding line that is missing fields or has a malformed number.
    """
    tokens = tokenize(line)
    kind = classify_tokens(tokens, line_number)
    if kind is not LineKind.BINDING:
        return None
    logger.debug("Parsing line %d, tokens: %r", line_number, tokens)
    _require_tokens(tokens, MIN_KEY_RECORD_TOKENS, line_number)
    values = []
    for offset, field in enumerate(KEY_FIELDS):
        token = tokens[FIRST_KEY_FIELD + offset]
        try:
            values.append(normalize_number(token))
        except ValueError as exc:
            raise SchemaViolation(line_number, token, f"Invalid {field}: {exc}") from exc
    key_code, modifier_mask, combo_key_code, combo_modifier_mask = values
    return KeyRecord(
        line_number=line_number,
        name=tokens[NAME_FIELD],
        key_code=key_code,
        modifier_mask=modifier_mask,
        combo_key_code=combo_key_code,
        combo_modifier_mask=combo_modifier_mask,
    )
