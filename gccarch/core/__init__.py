# SPDX-License-Identifier: Apache-2.0
"""Support table ingestion and queries."""

from __future__ import annotations

from .errors import (
    DuplicateNameError,
    GccArchError,
    IndexOutOfRangeError,
    MalformedTableError,
    TableError,
    UnknownArchitectureError,
    UnknownFeatureError,
    UnknownNameError,
)
from .lexer import Line, LineKind, TableLexer
from .loader import default_support_matrix, load_support_matrix, parse_support_table, read_embedded_table
from .query import QueryEngine
from .support_matrix import SupportMatrix
from .table_parser import ParsedRow, ParsedTable, SupportMarker, TableParser

__all__ = [
    "DuplicateNameError",
    "GccArchError",
    "IndexOutOfRangeError",
    "Line",
    "LineKind",
    "MalformedTableError",
    "ParsedRow",
    "ParsedTable",
    "QueryEngine",
    "SupportMarker",
    "SupportMatrix",
    "TableError",
    "TableLexer",
    "TableParser",
    "UnknownArchitectureError",
    "UnknownFeatureError",
    "UnknownNameError",
    "default_support_matrix",
    "load_support_matrix",
    "parse_support_table",
    "read_embedded_table",
]
