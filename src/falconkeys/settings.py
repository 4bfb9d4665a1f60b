# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses
import json
import operator
import pathlib
import typing

import cattrs

from .commontypes import SchemaPolicy

DEFAULT_SUGGESTION_COUNT = 5

settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(SchemaPolicy, operator.attrgetter("name"))
settings_converter.register_structure_hook(SchemaPolicy, lambda v, _: SchemaPolicy[v.upper()])


@dataclasses.dataclass(kw_only=True)
class Settings:
    schema_policy: SchemaPolicy = SchemaPolicy.ABORT
    encoding: str = "utf-8"
    suggestion_count: int = DEFAULT_SUGGESTION_COUNT
    log_level: str = "WARNING"

    def save(self, dest: pathlib.Path):
        raw = settings_converter.unstructure(self)
        with dest.open("w") as f:
            json.dump(raw, f, indent=2)

    @classmethod
    def load(cls, src: typing.Optional[pathlib.Path]):
        if src is None:
            return cls()
        with src.open() as f:
            raw = json.load(f)
        return settings_converter.structure(raw, cls)

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "schema_policy": "SKIP",
                "encoding": "utf-8",
                "suggestion_count": 3,
                "log_level": "DEBUG",
            },
            cls,
        )
