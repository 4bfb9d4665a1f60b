# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse
import logging
import pathlib
import sys

from .commontypes import KeyFileError, SchemaPolicy
from .keyfile import KeyFile, load
from .settings import Settings

EXIT_UNKNOWN_CALLBACK = 1
EXIT_KEYFILE_ERROR = 2


def _load_keyfile(path: pathlib.Path, settings: Settings) -> KeyFile:
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    return load(path, policy=settings.schema_policy, encoding=settings.encoding)


describe_parser = argparse.ArgumentParser(description="Summarize a Falcon BMS key file.")
describe_parser.add_argument("keyfile", type=pathlib.Path)
describe_parser.add_argument("--settings", type=pathlib.Path)
describe_parser.add_argument("--skip-invalid", action="store_true", help="skip malformed lines instead of failing")


def describe_cli(argv=None):
    args = describe_parser.parse_args(argv)
    settings = Settings.load(args.settings)
    if args.skip_invalid:
        settings.schema_policy = SchemaPolicy.SKIP
    try:
        keyfile = _load_keyfile(args.keyfile, settings)
    except KeyFileError as exc:
        print(exc, file=sys.stderr)
        return EXIT_KEYFILE_ERROR
    print(keyfile.describe())
    for violation in keyfile.schema_violations:
        print(f"skipped: {violation}")
    return 0


lookup_parser = argparse.ArgumentParser(description="Show the keys bound to a callback in a Falcon BMS key file.")
lookup_parser.add_argument("keyfile", type=pathlib.Path)
lookup_parser.add_argument("callback")
lookup_parser.add_argument("--settings", type=pathlib.Path)
lookup_parser.add_argument("--count", type=int, help="how many similar callback names to suggest")


def lookup_cli(argv=None):
    args = lookup_parser.parse_args(argv)
    settings = Settings.load(args.settings)
    count = args.count if args.count is not None else settings.suggestion_count
    try:
        keyfile = _load_keyfile(args.keyfile, settings)
    except KeyFileError as exc:
        print(exc, file=sys.stderr)
        return EXIT_KEYFILE_ERROR

    callback = keyfile.callback(args.callback)
    if callback is None:
        print(f"No callback named {args.callback} in {keyfile.name}.", file=sys.stderr)
        suggestions = keyfile.propose_callback_names(args.callback, count)
        if suggestions:
            print("Did you mean: " + ", ".join(suggestions), file=sys.stderr)
        return EXIT_UNKNOWN_CALLBACK

    print(f"{callback.name}: {callback.binding}")
    if callback.combo_binding is not None:
        print(f"  combo: {callback.combo_binding}")
    return 0


def describe_main():
    sys.exit(describe_cli())


def lookup_main():
    sys.exit(lookup_cli())
