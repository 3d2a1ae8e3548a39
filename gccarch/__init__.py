# SPDX-License-Identifier: Apache-2.0
"""Queries over GCC's table of supported architectures."""

from __future__ import annotations

__version__ = "0.1.0"
