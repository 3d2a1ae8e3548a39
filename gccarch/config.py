# SPDX-License-Identifier: Apache-2.0
"""Pydantic models describing how a support table is drawn and marked up."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

# The GCC legend writes the feature letter itself into a cell (see
# MarkerLegend.header_echo); "*" is accepted as an explicit checkmark.
DEFAULT_SUPPORTED_MARKERS = frozenset({"*"})
DEFAULT_AMBIGUOUS_MARKER = "?"


class MarkerLegend(BaseModel):
    """Symbols a table cell may contain, and what each one means."""

    supported: frozenset[str] = Field(
        default=DEFAULT_SUPPORTED_MARKERS,
        description="Cell contents meaning the architecture has the feature",
    )
    ambiguous: str = Field(
        default=DEFAULT_AMBIGUOUS_MARKER,
        description="Cell contents meaning the status is unknown or not applicable",
    )
    header_echo: bool = Field(
        default=True,
        description="Treat a cell repeating its own column header (e.g. 'Q' under 'Q') as supported",
    )

    model_config = {"frozen": True}

    @field_validator("supported")
    @classmethod
    def check_supported(cls, value: frozenset[str]) -> frozenset[str]:
        for marker in value:
            _check_marker(marker)
        return value

    @field_validator("ambiguous")
    @classmethod
    def check_ambiguous(cls, value: str) -> str:
        return _check_marker(value)

    @model_validator(mode="after")
    def check_disjoint(self) -> MarkerLegend:
        if self.ambiguous in self.supported:
            msg = f"marker {self.ambiguous!r} cannot mean both supported and ambiguous"
            raise ValueError(msg)
        return self


class TableConfig(BaseModel):
    """Where the table comes from and how its box drawing is laid out."""

    table_path: Path | None = Field(
        default=None,
        description="Read the table from this file instead of the copy shipped with the package",
    )
    legend: MarkerLegend = Field(default_factory=MarkerLegend)
    boundary_chars: str = Field(
        default="|+",
        description="Characters marking column boundaries in separator and content lines",
    )
    rule_chars: str = Field(
        default="-=",
        description="Characters drawing horizontal rules in separator lines",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_drawing_chars(self) -> TableConfig:
        if not self.boundary_chars or not self.rule_chars:
            raise ValueError("boundary_chars and rule_chars must not be empty")
        if set(self.boundary_chars) & set(self.rule_chars):
            raise ValueError("boundary_chars and rule_chars must not share characters")
        if any(ch.isspace() for ch in self.boundary_chars + self.rule_chars):
            raise ValueError("boundary_chars and rule_chars must not contain whitespace")
        return self


def _check_marker(marker: str) -> str:
    if not marker:
        raise ValueError("markers must not be empty")
    if marker != marker.strip():
        raise ValueError(f"marker {marker!r} must not have surrounding whitespace")
    return marker


def load_config(path: Path | None = None) -> TableConfig:
    """Load and validate a YAML config file.

    Args:
        path: Path to the YAML file, or None for the built-in defaults.

    Returns:
        Validated TableConfig. An empty file yields the defaults.
    """
    if path is None:
        return TableConfig()
    logger.debug("Loading config from %s", path)
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    return TableConfig.model_validate(raw or {})
