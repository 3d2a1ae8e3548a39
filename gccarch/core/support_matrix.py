# SPDX-License-Identifier: Apache-2.0
"""Bit-packed architecture x feature support matrix."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from .errors import DuplicateNameError, IndexOutOfRangeError, MalformedTableError
from .table_parser import SupportMarker

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .table_parser import ParsedTable

logger = logging.getLogger(__name__)


class SupportMatrix:
    """Immutable boolean relation between architectures (rows) and features (columns).

    Each row is stored with ``numpy.packbits``, so the backing array has shape
    ``(len(architectures), ceil(len(features) / 8))``. Only SUPPORTED markers
    set a bit; UNSUPPORTED and AMBIGUOUS both read back as False.
    """

    def __init__(
        self,
        architectures: Sequence[str],
        features: Sequence[str],
        rows: Sequence[Sequence[SupportMarker]],
    ):
        self._architectures = tuple(architectures)
        self._features = tuple(features)
        self._feature_index = _index(self._features, "feature")
        self._architecture_index = _index(self._architectures, "architecture")

        if len(rows) != len(self._architectures):
            raise MalformedTableError(
                f"{len(rows)} marker rows given for {len(self._architectures)} architectures"
            )

        dense = np.zeros((len(self._architectures), len(self._features)), dtype=bool)
        for row_idx, (name, markers) in enumerate(zip(self._architectures, rows)):
            if len(markers) != len(self._features):
                raise MalformedTableError(
                    f"row {name!r} has {len(markers)} markers, expected {len(self._features)}"
                )
            dense[row_idx] = [marker is SupportMarker.SUPPORTED for marker in markers]

        self._bits = np.packbits(dense, axis=1)
        self._bits.flags.writeable = False
        logger.debug(
            "Built %dx%d support matrix (%d bytes packed)",
            len(self._architectures), len(self._features), self._bits.nbytes,
        )

    @classmethod
    def from_parsed(cls, table: ParsedTable) -> SupportMatrix:
        return cls(table.architectures, table.features, [row.markers for row in table.rows])

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._architectures), len(self._features)

    def features(self) -> tuple[str, ...]:
        return self._features

    def architectures(self) -> tuple[str, ...]:
        return self._architectures

    def feature_index(self, name: str) -> int | None:
        return self._feature_index.get(name)

    def architecture_index(self, name: str) -> int | None:
        return self._architecture_index.get(name)

    def supports(self, arch_index: int, feature_index: int) -> bool:
        """Whether the architecture at ``arch_index`` has the feature at ``feature_index``.

        Raises:
            IndexOutOfRangeError: If either index is negative or past the end of its axis.
        """
        self._check(arch_index, len(self._architectures), "architecture")
        self._check(feature_index, len(self._features), "feature")
        byte, bit = divmod(feature_index, 8)
        return bool((self._bits[arch_index, byte] >> (7 - bit)) & 1)

    def row(self, arch_index: int) -> np.ndarray:
        """Support bits of one architecture, one per feature."""
        self._check(arch_index, len(self._architectures), "architecture")
        bits = np.unpackbits(self._bits[arch_index], count=len(self._features)).astype(bool)
        bits.flags.writeable = False
        return bits

    def column(self, feature_index: int) -> np.ndarray:
        """Support bits of one feature, one per architecture."""
        self._check(feature_index, len(self._features), "feature")
        byte, bit = divmod(feature_index, 8)
        bits = ((self._bits[:, byte] >> (7 - bit)) & 1).astype(bool)
        bits.flags.writeable = False
        return bits

    def __repr__(self) -> str:
        return f"<SupportMatrix {len(self._architectures)} architectures x {len(self._features)} features>"

    @staticmethod
    def _check(index: int, size: int, axis: str) -> None:
        if not 0 <= index < size:
            raise IndexOutOfRangeError(axis, index, size)


def _index(names: tuple[str, ...], kind: str) -> dict[str, int]:
    index: dict[str, int] = {}
    for position, name in enumerate(names):
        if name in index:
            raise DuplicateNameError(name, kind)
        index[name] = position
    return index
