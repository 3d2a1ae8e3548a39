from __future__ import annotations

import textwrap

import pytest

from gccarch.core import SupportMatrix, parse_support_table

# features [X, Y]; alpha supports X (Y unknown), beta supports Y
ALPHA_BETA_TABLE = textwrap.dedent("""\
    +-------+---+---+
    | arch  | X | Y |
    +=======+===+===+
    | alpha | * | ? |
    | beta  |   | * |
    +-------+---+---+
    """)


@pytest.fixture
def alpha_beta_table() -> str:
    return ALPHA_BETA_TABLE


@pytest.fixture
def alpha_beta_matrix() -> SupportMatrix:
    return parse_support_table(ALPHA_BETA_TABLE)
