# SPDX-License-Identifier: Apache-2.0
"""Line classification and column slicing for ASCII-art tables.

Column boundaries are read from a separator line such as::

    +--------------+---+---+
    | Architecture | H | M |
    +==============+===+===+
    | aarch64      |   | M |

rather than from runs of whitespace, because names in the label column may
themselves contain spaces.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
from typing import TYPE_CHECKING

from .errors import MalformedTableError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


@enum.unique
class LineKind(enum.Enum):
    HEADER = "header"
    SEPARATOR = "separator"
    DATA = "data"
    BLANK = "blank"


@dataclasses.dataclass(frozen=True)
class Line:
    """One classified source line."""

    kind: LineKind
    number: int
    text: str
    cells: tuple[str, ...] = ()
    """Raw column slices, not trimmed; empty for separators and blanks."""


@dataclasses.dataclass(frozen=True)
class ColumnLayout:
    """Column spans taken from the reference separator line.

    ``cuts`` holds the positions of the boundary characters. A table is open on
    the left when the separator does not begin with a boundary character, and
    open on the right when it does not end with one.
    """

    cuts: tuple[int, ...]
    open_left: bool
    open_right: bool

    @property
    def spans(self) -> list[tuple[int, int | None]]:
        edges: list[int | None] = list(self.cuts)
        if self.open_left:
            edges.insert(0, -1)
        if self.open_right:
            edges.append(None)
        return [(start + 1, end) for start, end in zip(edges, edges[1:])]


class TableLexer:
    """Splits raw table text into classified lines with column cells."""

    def __init__(self, boundary_chars: str = "|+", rule_chars: str = "-="):
        self.boundary_chars = boundary_chars
        self.rule_chars = rule_chars
        self._separator_chars = set(boundary_chars) | set(rule_chars) | {":", " "}

    def is_separator(self, text: str) -> bool:
        return (
            bool(text.strip())
            and set(text) <= self._separator_chars
            and any(ch in self.rule_chars for ch in text)
        )

    def layout(self, text: str) -> ColumnLayout:
        """Compute the column layout described by a separator line."""
        cuts = tuple(i for i, ch in enumerate(text) if ch in self.boundary_chars)
        stripped = text.strip()
        return ColumnLayout(
            cuts=cuts,
            open_left=not stripped.startswith(tuple(self.boundary_chars)),
            open_right=not stripped.endswith(tuple(self.boundary_chars)),
        )

    def tokenize(self, text: str) -> list[Line]:
        """Classify every line of ``text`` and slice header and data lines.

        The column reference is the first separator line yielding at least two
        columns (the row label plus one feature), counting an open left or
        right edge as a column edge. So ``----+----`` qualifies while a lone
        ``+----+`` does not.

        A data row that stops short of a boundary keeps only the cells closed
        on both sides, so the parser reports it as a column count mismatch.

        Raises:
            MalformedTableError: If no usable separator precedes the first data
                line, the table has no header, or a line does not line up with
                the column boundaries.
        """
        raw_lines = [raw.expandtabs().rstrip() for raw in text.splitlines()]

        # first pass: kinds and the reference layout
        kinds: list[LineKind] = []
        reference: ColumnLayout | None = None
        reference_at = 0
        header_seen = False
        for number, line in enumerate(raw_lines, start=1):
            if not line:
                kinds.append(LineKind.BLANK)
            elif self.is_separator(line):
                kinds.append(LineKind.SEPARATOR)
                if reference is None:
                    layout = self.layout(line)
                    if len(layout.spans) >= 2:
                        reference, reference_at = layout, number
            elif not header_seen:
                kinds.append(LineKind.HEADER)
                header_seen = True
            else:
                if reference is None:
                    raise MalformedTableError("no column separator line before the first data row", number)
                kinds.append(LineKind.DATA)

        if not header_seen:
            raise MalformedTableError("table has no header line")
        if reference is None:
            raise MalformedTableError("table has no column separator line")
        logger.debug("Using line %d as column reference: %s", reference_at, reference)

        return list(self._slice_lines(raw_lines, kinds, reference))

    def _slice_lines(
        self, raw_lines: list[str], kinds: list[LineKind], reference: ColumnLayout
    ) -> Iterator[Line]:
        for number, (line, kind) in enumerate(zip(raw_lines, kinds), start=1):
            if kind is LineKind.SEPARATOR:
                layout = self.layout(line)
                if layout.cuts and layout.cuts != reference.cuts:
                    raise MalformedTableError("separator line does not match the column layout", number)
                yield Line(kind, number, line)
            elif kind is LineKind.BLANK:
                yield Line(kind, number, line)
            else:
                cells = self._cells(line, number, reference)
                if kind is LineKind.HEADER and len(cells) != len(reference.spans):
                    raise MalformedTableError("header does not line up with the column boundaries", number)
                yield Line(kind, number, line, cells)

    def _cells(self, line: str, number: int, reference: ColumnLayout) -> tuple[str, ...]:
        for cut in reference.cuts:
            if cut < len(line) and line[cut] not in self.boundary_chars and line[cut] != " ":
                raise MalformedTableError(f"text crosses the column boundary at position {cut + 1}", number)

        if not reference.open_left and line[: reference.cuts[0]].strip():
            raise MalformedTableError("text before the left edge of the table", number)

        # only cells closed by a boundary character on both sides count
        cells = []
        for start, end in reference.spans:
            if start > 0 and not self._boundary_at(line, start - 1):
                break
            if end is not None and not self._boundary_at(line, end):
                break
            cells.append(line[start:end])
        else:
            if not reference.open_right:
                cells.extend(self._overflow(line[reference.cuts[-1] + 1 :]))
            return tuple(cells)

        if not cells:
            words = line.strip(self.boundary_chars + " ").split()
            name = words[0] if words else line.strip()
            raise MalformedTableError(f"row {name!r} does not line up with the column boundaries", number)
        return tuple(cells)

    def _boundary_at(self, line: str, position: int) -> bool:
        return position < len(line) and line[position] in self.boundary_chars

    def _overflow(self, text: str) -> list[str]:
        """Split text right of a closed table into extra cells."""
        if not text.strip():
            return []
        # keep the extra cells so the row can be reported by name
        for ch in self.boundary_chars:
            text = text.replace(ch, self.boundary_chars[0])
        extra = text.split(self.boundary_chars[0])
        while extra and not extra[-1].strip():
            extra.pop()
        return extra
