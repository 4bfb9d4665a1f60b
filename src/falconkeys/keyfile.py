# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import pathlib
import types
import typing

from rapidfuzz.distance import Levenshtein

from .commontypes import EmptyKeyFileError, KeyFileReadError, SchemaPolicy, SchemaViolation
from .keycodes import resolve_key_code
from .keytypes import Callback, decode_modifiers
from .records import KeyRecord, parse_record

logger = logging.getLogger(__name__)


def make_callback(record: KeyRecord) -> Callback:
    callback = Callback(
        name=record.name,
        key_code=record.key_code,
        readable_key_code=resolve_key_code(record.key_code),
        modifiers=decode_modifiers(record.modifier_mask),
        combo_key_code=record.combo_key_code,
        readable_combo_key_code=resolve_key_code(record.combo_key_code),
        combo_modifiers=decode_modifiers(record.combo_modifier_mask),
        line_number=record.line_number,
    )
    logger.debug("Parsed callback: %r", callback)
    return callback


class KeyFile:
    def __init__(
        self,
        name: str,
        callbacks: collections.abc.Mapping[str, Callback],
        schema_violations: collections.abc.Iterable[SchemaViolation] = (),
    ):
        self.name = name
        self.callbacks = types.MappingProxyType(dict(callbacks))
        self.schema_violations = tuple(schema_violations)

    def __repr__(self):
        return f"<KeyFile {self.name!r} with {len(self.callbacks)} callbacks>"

    def __len__(self):
        return len(self.callbacks)

    def __contains__(self, callback_name):
        return callback_name in self.callbacks

    def __iter__(self):
        return iter(self.callbacks)

    @property
    def callback_names(self) -> tuple[str, ...]:
        return tuple(self.callbacks)

    def callback(self, callback_name: str) -> typing.Optional[Callback]:
        return self.callbacks.get(callback_name)

    def describe(self) -> str:
        return f"{self.name} with {len(self.callbacks)} callbacks."

    def propose_callback_names(self, query: str, count: int) -> list[str]:
        """Return up to count callback names, closest to query first.

        Closeness is Levenshtein distance; names at the same distance keep the
        order in which they were registered.
        """
        if count <= 0:
            return []
        names = sorted(self.callbacks, key=lambda name: Levenshtein.distance(query, name))
        return names[:count]


def _numbered_lines(stream: collections.abc.Iterable[str]) -> collections.abc.Iterator[tuple[int, str]]:
    lines = iter(stream)
    line_number = 0
    while True:
        line_number += 1
        try:
            line = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise KeyFileReadError(line_number, exc) from exc
        yield line_number, line


def parse(
    name: str,
    stream: collections.abc.Iterable[str],
    *,
    policy: SchemaPolicy = SchemaPolicy.ABORT,
) -> KeyFile:
    """Parse a key file from an iterable of text lines, such as an open text file.

    Raises EmptyKeyFileError if there are no lines at all, KeyFileReadError if the
    stream fails, and (under SchemaPolicy.ABORT) the first SchemaViolation found.
    """
    callbacks_by_name: dict[str, Callback] = {}
    violations: list[SchemaViolation] = []
    empty = True

    for line_number, line in _numbered_lines(stream):
        empty = False
        try:
            record = parse_record(line_number, line)
        except SchemaViolation as violation:
            if policy is SchemaPolicy.ABORT:
                raise
            logger.warning("Skipping line %d of %s: %s", line_number, name, violation.message)
            violations.append(violation)
            continue
        if record is None:
            continue
        callbacks_by_name[record.name] = make_callback(record)

    if empty:
        raise EmptyKeyFileError()

    logger.debug("Parsed key file with %d callbacks.", len(callbacks_by_name))
    return KeyFile(name, callbacks_by_name, violations)


def load(
    path: pathlib.Path,
    *,
    policy: SchemaPolicy = SchemaPolicy.ABORT,
    encoding: str = "utf-8",
) -> KeyFile:
    path = pathlib.Path(path)
    try:
        handle = path.open(encoding=encoding)
    except OSError as exc:
        raise KeyFileReadError(0, exc) from exc
    with handle:
        return parse(path.name, handle, policy=policy)
