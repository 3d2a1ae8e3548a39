# SPDX-License-Identifier: Apache-2.0
"""The four queries answered over a SupportMatrix."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from .errors import UnknownArchitectureError, UnknownFeatureError

if TYPE_CHECKING:
    from .support_matrix import SupportMatrix


@dataclasses.dataclass(frozen=True)
class QueryEngine:
    """Read-only queries; names are matched exactly and case-sensitively.

    Results keep the table's own row and column order.
    """

    matrix: SupportMatrix

    def features_of(self, arch_name: str) -> tuple[str, ...]:
        arch_index = self.matrix.architecture_index(arch_name)
        if arch_index is None:
            raise UnknownArchitectureError(arch_name)
        row = self.matrix.row(arch_index)
        return tuple(name for name, supported in zip(self.matrix.features(), row) if supported)

    def architectures_with(self, feature_name: str) -> tuple[str, ...]:
        feature_index = self.matrix.feature_index(feature_name)
        if feature_index is None:
            raise UnknownFeatureError(feature_name)
        column = self.matrix.column(feature_index)
        return tuple(name for name, supported in zip(self.matrix.architectures(), column) if supported)

    def all_architectures(self) -> tuple[str, ...]:
        return self.matrix.architectures()

    def all_features(self) -> tuple[str, ...]:
        return self.matrix.features()
