# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum
import typing


class SchemaPolicy(enum.Enum):
    # raise the first schema violation and discard the partial parse
    ABORT = enum.auto()
    # log the violation, drop that line, and keep going
    SKIP = enum.auto()


class KeyFileError(Exception):
    pass


class EmptyKeyFileError(KeyFileError):
    def __init__(self):
        return super().__init__("Key file is empty")


class KeyFileReadError(KeyFileError):
    def __init__(self, line_number: int, cause: BaseException):
        self.line_number = line_number
        self.cause = cause
        if line_number == 0:
            super().__init__(f"Unable to open key file: {cause}")
        else:
            super().__init__(f"Unable to read line {line_number} of key file: {cause}")


class SchemaViolation(KeyFileError):
    """A key-binding line that does not match the key file schema.

    line_number is 1-based. token is the offending token, or None when the line
    simply ran out of tokens.
    """

    def __init__(self, line_number: int, token: typing.Optional[str], message: str):
        self.line_number = line_number
        self.token = token
        self.message = message
        super().__init__(f"Line {line_number}: {message}")

    def __eq__(self, other):
        if not isinstance(other, SchemaViolation):
            return NotImplemented
        return (self.line_number, self.token, self.message) == (other.line_number, other.token, other.message)

    def __hash__(self):
        return hash((self.line_number, self.token, self.message))
