# SPDX-License-Identifier: Apache-2.0
"""Turns classified table lines into feature names, row labels and markers."""

from __future__ import annotations

import dataclasses
import enum
import logging
from typing import TYPE_CHECKING

from ..config import MarkerLegend
from .errors import MalformedTableError
from .lexer import LineKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .lexer import Line

logger = logging.getLogger(__name__)


@enum.unique
class SupportMarker(enum.Enum):
    """Support status of one cell as written in the table."""

    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"
    AMBIGUOUS = "ambiguous"


@dataclasses.dataclass(frozen=True)
class ParsedRow:
    name: str
    markers: tuple[SupportMarker, ...]
    line_number: int


@dataclasses.dataclass(frozen=True)
class ParsedTable:
    """Parser output, in source order."""

    label: str
    features: tuple[str, ...]
    rows: tuple[ParsedRow, ...]

    @property
    def architectures(self) -> tuple[str, ...]:
        return tuple(row.name for row in self.rows)


class TableParser:

    def __init__(self, legend: MarkerLegend | None = None):
        self.legend = legend or MarkerLegend()

    def parse(self, lines: Iterable[Line]) -> ParsedTable:
        """Build a ParsedTable from the lexer's output.

        Raises:
            MalformedTableError: On an empty feature header, an empty row label,
                a column count mismatch or an unrecognized marker.
        """
        label: str | None = None
        features: tuple[str, ...] = ()
        rows: list[ParsedRow] = []

        for line in lines:
            if line.kind is LineKind.HEADER:
                label, features = self._parse_header(line)
            elif line.kind is LineKind.DATA:
                if label is None:
                    raise MalformedTableError("data row appears before the header", line.number)
                rows.append(self._parse_row(line, features))

        if label is None:
            raise MalformedTableError("table has no header line")
        logger.debug("Parsed header with %d features and %d data rows", len(features), len(rows))
        return ParsedTable(label=label, features=features, rows=tuple(rows))

    def marker(self, cell: str, feature: str) -> SupportMarker | None:
        """Interpret one cell of the given feature column.

        Returns None when the cell content is not part of the legend.
        """
        text = cell.strip()
        if not text:
            return SupportMarker.UNSUPPORTED
        if text == self.legend.ambiguous:
            return SupportMarker.AMBIGUOUS
        if text in self.legend.supported or (self.legend.header_echo and text == feature):
            return SupportMarker.SUPPORTED
        return None

    def _parse_header(self, line: Line) -> tuple[str, tuple[str, ...]]:
        label, *names = (cell.strip() for cell in line.cells)
        for position, name in enumerate(names, start=2):
            if not name:
                raise MalformedTableError(f"column {position} has no feature name", line.number)
        return label, tuple(names)

    def _parse_row(self, line: Line, features: tuple[str, ...]) -> ParsedRow:
        name, *cells = line.cells
        name = name.strip()
        if not name:
            raise MalformedTableError("data row has no architecture name", line.number)
        if len(cells) != len(features):
            raise MalformedTableError(
                f"row {name!r} has {len(cells)} feature cells, expected {len(features)}", line.number
            )

        markers = []
        for feature, cell in zip(features, cells):
            marker = self.marker(cell, feature)
            if marker is None:
                raise MalformedTableError(
                    f"row {name!r}, feature {feature!r}: unrecognized marker {cell.strip()!r}", line.number
                )
            markers.append(marker)
        return ParsedRow(name=name, markers=tuple(markers), line_number=line.number)
