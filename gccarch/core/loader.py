# SPDX-License-Identifier: Apache-2.0
"""Runs the lexer, parser and matrix construction over a table blob."""

from __future__ import annotations

import functools
import logging
from importlib import resources

from ..config import TableConfig
from .errors import MalformedTableError
from .lexer import TableLexer
from .support_matrix import SupportMatrix
from .table_parser import TableParser

logger = logging.getLogger(__name__)

EMBEDDED_TABLE = "backends.txt"


def parse_support_table(blob: str | bytes, config: TableConfig | None = None) -> SupportMatrix:
    """Parse the raw text of a support table into a SupportMatrix.

    Args:
        blob: The table text, or its UTF-8 encoded bytes.
        config: Drawing characters and marker legend; defaults when omitted.

    Raises:
        MalformedTableError: If the table cannot be parsed.
        DuplicateNameError: If an architecture or feature is listed twice.
    """
    config = config or TableConfig()
    if isinstance(blob, bytes):
        try:
            blob = blob.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedTableError(f"table is not valid UTF-8: {e}") from e

    lexer = TableLexer(boundary_chars=config.boundary_chars, rule_chars=config.rule_chars)
    parsed = TableParser(legend=config.legend).parse(lexer.tokenize(blob))
    matrix = SupportMatrix.from_parsed(parsed)
    logger.debug("Loaded %d architectures and %d features", *matrix.shape)
    return matrix


def read_embedded_table() -> str:
    """Text of the architecture table shipped with the package."""
    return (resources.files("gccarch") / "data" / EMBEDDED_TABLE).read_text(encoding="utf-8")


@functools.cache
def default_support_matrix() -> SupportMatrix:
    """The embedded table parsed with the default config, built once per process."""
    return parse_support_table(read_embedded_table())


def load_support_matrix(config: TableConfig | None = None) -> SupportMatrix:
    """Load the table named by ``config.table_path``, or the embedded one."""
    if config is None or config == TableConfig():
        return default_support_matrix()
    if config.table_path is None:
        return parse_support_table(read_embedded_table(), config)
    logger.debug("Reading support table from %s", config.table_path)
    return parse_support_table(config.table_path.read_bytes(), config)
