# SPDX-License-Identifier: Apache-2.0
"""Exceptions raised while building and querying the support matrix."""

from __future__ import annotations


class GccArchError(Exception):
    """Base class for every error raised by gccarch."""


class TableError(GccArchError):
    """Raised when the support table itself cannot be turned into a matrix.

    These are structural problems with the input and are never recovered from:
    a misparsed table would give wrong answers about architecture support.
    """


class MalformedTableError(TableError, ValueError):
    """Raised when the table layout or one of its cells cannot be understood."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class DuplicateNameError(TableError, ValueError):
    """Raised when an architecture or feature name appears more than once."""

    def __init__(self, name: str, kind: str) -> None:
        self.name = name
        self.kind = kind
        super().__init__(f"duplicate {kind} name {name!r}")


class IndexOutOfRangeError(GccArchError, IndexError):
    """Raised when a matrix accessor is given an index outside its axis."""

    def __init__(self, axis: str, index: int, size: int) -> None:
        self.axis = axis
        self.index = index
        self.size = size
        super().__init__(f"{axis} index {index} out of range for {size} {axis}s")


class UnknownNameError(GccArchError, LookupError):
    """Raised when a query names something that is not in the table."""

    kind = "name"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name!r} is not a known {self.kind}")


class UnknownArchitectureError(UnknownNameError):
    kind = "architecture"


class UnknownFeatureError(UnknownNameError):
    kind = "feature"
