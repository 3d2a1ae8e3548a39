from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest

from gccarch.config import MarkerLegend
from gccarch.core import MalformedTableError, SupportMarker, TableLexer, TableParser

if TYPE_CHECKING:
    import pytest_subtests

S = SupportMarker.SUPPORTED
U = SupportMarker.UNSUPPORTED
A = SupportMarker.AMBIGUOUS


def parse(text: str, legend: MarkerLegend | None = None):
    return TableParser(legend).parse(TableLexer().tokenize(textwrap.dedent(text)))


def test_alpha_beta(alpha_beta_table: str):
    table = TableParser().parse(TableLexer().tokenize(alpha_beta_table))

    assert table.label == "arch"
    assert table.features == ("X", "Y")
    assert table.architectures == ("alpha", "beta")
    assert table.rows[0].markers == (S, A)
    assert table.rows[1].markers == (U, S)
    assert [row.line_number for row in table.rows] == [4, 5]


def test_source_order_is_kept():
    table = parse("""\
        +------+---+---+---+
        |      | z | a | m |
        +------+---+---+---+
        | zeta |   |   |   |
        | beta |   |   |   |
        | eta  |   |   |   |
        """)

    assert table.label == ""
    assert table.features == ("z", "a", "m")
    assert table.architectures == ("zeta", "beta", "eta")


def test_blank_lines_between_header_and_data_are_skipped():
    table = parse("""\
        +-------+---+
        | arch  | X |
        +-------+---+


        | alpha | * |

        | beta  |   |
        """)

    assert table.architectures == ("alpha", "beta")


def test_no_data_rows():
    table = parse("""\
        +-------+---+
        | arch  | X |
        +-------+---+
        """)

    assert table.features == ("X",)
    assert table.rows == ()


class TestMarkers:
    def test_marker_derivation(self, subtests: pytest_subtests.plugin.SubTests):
        parser = TableParser()
        cases = [
            ("", U, "empty cell"),
            ("   ", U, "whitespace only"),
            ("?", A, "question mark"),
            (" ? ", A, "padded question mark"),
            ("*", S, "checkmark"),
            ("Q", S, "cell repeats its column header"),
            ("q", None, "header echo is case-sensitive"),
            ("x", None, "unrecognized symbol"),
        ]
        for cell, expected, description in cases:
            with subtests.test(description, cell=cell):
                assert parser.marker(cell, "Q") is expected

    def test_header_echo_can_be_disabled(self):
        parser = TableParser(MarkerLegend(header_echo=False))

        assert parser.marker("Q", "Q") is None
        assert parser.marker("*", "Q") is S

    def test_custom_legend(self):
        legend = MarkerLegend(supported=frozenset({"yes", "Y"}), ambiguous="maybe", header_echo=False)
        table = parse("""\
            +-------+-------+-----+-------+
            | arch  | wide  | odd | deep  |
            +-------+-------+-----+-------+
            | alpha | yes   |  Y  | maybe |
            """, legend)

        assert table.rows[0].markers == (S, S, A)

    def test_unrecognized_marker_is_fatal(self):
        with pytest.raises(MalformedTableError) as excinfo:
            parse("""\
                +-------+---+---+
                | arch  | X | Y |
                +-------+---+---+
                | alpha | * | ! |
                """)

        message = str(excinfo.value)
        assert "'alpha'" in message, f"row name missing from {message=}"
        assert "'Y'" in message, f"feature name missing from {message=}"
        assert "'!'" in message, f"marker missing from {message=}"
        assert excinfo.value.line_number == 4


class TestMalformed:
    def test_row_with_too_many_cells(self):
        """A 3-cell data row against a 2-feature header names the offending row."""
        with pytest.raises(MalformedTableError, match="row 'alpha' has 3 feature cells, expected 2"):
            parse("""\
                +-------+---+---+
                | arch  | X | Y |
                +-------+---+---+
                | alpha | * | ? | * |
                | beta  |   | * |
                """)

    def test_empty_feature_header(self):
        with pytest.raises(MalformedTableError, match="column 3 has no feature name"):
            parse("""\
                +-------+---+---+
                | arch  | X |   |
                +-------+---+---+
                | alpha | * |   |
                """)

    def test_empty_row_label(self):
        with pytest.raises(MalformedTableError, match="no architecture name") as excinfo:
            parse("""\
                +-------+---+
                | arch  | X |
                +-------+---+
                |       | * |
                """)

        assert excinfo.value.line_number == 4

    def test_row_with_too_few_cells(self):
        with pytest.raises(MalformedTableError, match="row 'alpha' has 1 feature cells, expected 2") as excinfo:
            parse("""\
                +-------+---+---+
                | arch  | X | Y |
                +-------+---+---+
                | alpha | * |
                | beta  |   | * |
                """)

        assert excinfo.value.line_number == 4

    def test_row_missing_its_closing_boundary(self):
        """The marker after the last drawn boundary does not count as a cell."""
        with pytest.raises(MalformedTableError, match="row 'beta' has 1 feature cells, expected 2") as excinfo:
            parse("""\
                +-------+---+---+
                | arch  | X | Y |
                +-------+---+---+
                | alpha | * | ? |
                | beta  | * | *
                """)

        assert excinfo.value.line_number == 5

    def test_row_without_boundaries_in_a_boxed_table(self):
        with pytest.raises(MalformedTableError, match="row 'alpha' does not line up") as excinfo:
            parse("""\
                +-------+---+---+
                | arch  | X | Y |
                +-------+---+---+
                  alpha   *   *
                """)

        assert excinfo.value.line_number == 4
