# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Tables, Styles and Messages

This module contains unit tests for render_table, the plain and ANSI
styles, style selection, and the rates/conversion formatters.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- curconv.adapters.formatting (all formatting functions for testing)
- curconv.application.service (Conversion for test data)
- curconv.domain.models (RateRecord for test data)
- pytest (testing framework)
"""
import io
import re

import pytest  # Testing framework for writing and running tests

from curconv.adapters.formatting import (
    AnsiStyle,
    PlainStyle,
    choose_style,
    conversion_summary,
    conversion_table,
    error_line,
    farewell,
    format_price,
    rates_table,
    render_table,
)
from curconv.adapters.formatting.formatter import RATES_COLUMN_COLORS, RATES_HEADER_COLORS
from curconv.application.service import Conversion
from curconv.domain.models import RateRecord

ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")


def _strip(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


class _Tty(io.StringIO):
    def isatty(self):
        return True


class TestRenderTable:
    def test_basic_layout(self):
        result = render_table(("Code", "Price"), [("USD", "41.25"), ("EUR", "7.00")])

        expected_lines = [
            "+------+-------+",
            "| Code | Price |",
            "+------+-------+",
            "| USD  | 41.25 |",
            "| EUR  | 7.00  |",
            "+------+-------+",
        ]
        assert result == "\n".join(expected_lines)

    def test_headers_only_when_no_rows(self):
        result = render_table(("Currency", "Code"), [])
        assert result.splitlines() == [
            "+----------+------+",
            "| Currency | Code |",
            "+----------+------+",
        ]

    def test_short_rows_padded(self):
        result = render_table(("A", "B"), [("x",)])
        assert "| x |   |" in result

    def test_long_cells_widen_column(self):
        result = render_table(("A",), [("wide cell",)])
        assert result.splitlines()[1] == "| A         |"

    def test_all_lines_same_width(self):
        result = render_table(("Currency", "Price"), [("Pound Sterling", "55.14"), ("Yen", "0.27")])
        assert len({len(line) for line in result.splitlines()}) == 1

    def test_no_trailing_newline(self):
        assert not render_table(("A",), [("1",)]).endswith("\n")

    def test_style_does_not_change_layout(self):
        headers = ("Amount", "Code")
        rows = [("10.00", "USD")]
        style = AnsiStyle(header_colors=("97", "96"), column_colors=("93", "95"))

        styled = render_table(headers, rows, style)

        assert styled != render_table(headers, rows)
        assert _strip(styled) == render_table(headers, rows)


class TestStyles:
    def test_plain_style_is_identity(self):
        style = PlainStyle()
        assert style.header("A", 0) == "A"
        assert style.cell("B", 3) == "B"
        assert style.message("C", "error") == "C"

    def test_plain_style_ignores_palettes(self):
        style = PlainStyle()
        assert style.with_palette(("31",), ("32",)) is style

    def test_ansi_with_palette_returns_new_style(self):
        base = AnsiStyle()
        styled = base.with_palette(("31",), ("32",))
        assert styled is not base
        assert styled.header_colors == ("31",)
        assert styled.column_colors == ("32",)

    def test_ansi_header_is_bold_and_colored(self):
        style = AnsiStyle(header_colors=("31",))
        assert style.header("A", 0) == "\033[31;1mA\033[0m"

    def test_ansi_header_past_palette_is_bold_only(self):
        assert AnsiStyle().header("A", 5) == "\033[1mA\033[0m"

    def test_ansi_cell_past_palette_is_plain(self):
        style = AnsiStyle(column_colors=("32",))
        assert style.cell("x", 0) == "\033[32mx\033[0m"
        assert style.cell("y", 1) == "y"

    def test_ansi_messages(self):
        style = AnsiStyle()
        assert style.message("boom", "error") == "\033[31mboom\033[0m"
        assert style.message("bye", "info") == "\033[36mbye\033[0m"
        assert style.message("plain", "other") == "plain"


class TestChooseStyle:
    def test_always(self):
        assert isinstance(choose_style("always", io.StringIO()), AnsiStyle)

    def test_never(self):
        assert isinstance(choose_style("never", _Tty()), PlainStyle)

    def test_auto_without_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert isinstance(choose_style("auto", io.StringIO()), PlainStyle)

    def test_auto_with_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert isinstance(choose_style("auto", _Tty()), AnsiStyle)

    def test_auto_respects_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert isinstance(choose_style("auto", _Tty()), PlainStyle)


@pytest.fixture
def rates():
    return (
        RateRecord(title="US Dollar", code="USD", reference_price=41.2512, date="2026-10-19"),
        RateRecord(title="Euro", code="EUR", reference_price=47.98, date="2026-10-19"),
    )


@pytest.fixture
def conversion():
    return Conversion(amount=10, from_code="USD", to_code="EUR", result=10 * 13000 / 12000)


class TestRatesTable:
    def test_rows_in_source_order(self, rates):
        lines = rates_table(rates).splitlines()
        assert lines[1].split("|")[1:5] == [
            " Currency  ",
            " Central Bank Price ",
            " Code ",
            " Date       ",
        ]
        assert "US Dollar" in lines[3]
        assert "41.25" in lines[3]
        assert "USD" in lines[3]
        assert "Euro" in lines[4]
        assert "47.98" in lines[4]

    def test_each_record_once(self, rates):
        result = rates_table(rates)
        assert result.count("USD") == 1
        assert result.count("EUR") == 1

    def test_empty_snapshot(self):
        lines = rates_table(()).splitlines()
        assert len(lines) == 3
        assert "Central Bank Price" in lines[1]

    def test_ansi_palette_applied(self, rates):
        styled = rates_table(rates, AnsiStyle())
        assert "\033[" in styled
        assert _strip(styled) == rates_table(rates)

    def test_custom_style_receives_palettes(self, rates):
        class _Recording(PlainStyle):
            palettes = None

            def with_palette(self, header_colors, column_colors):
                self.palettes = (tuple(header_colors), tuple(column_colors))
                return self

        style = _Recording()
        rates_table(rates, style)
        assert style.palettes == (tuple(RATES_HEADER_COLORS), tuple(RATES_COLUMN_COLORS))


class TestConversionOutput:
    def test_format_price(self):
        assert format_price(10.8333) == "10.83"
        assert format_price(2) == "2.00"
        assert format_price(1234.5678) == "1234.57"

    def test_summary(self, conversion):
        assert conversion_summary(conversion) == "Conversion result: 10.00 USD to EUR"

    def test_table(self, conversion):
        lines = conversion_table(conversion).splitlines()
        assert "Converted Amount" in lines[1]
        assert lines[3] == "| 10.00  | USD           | EUR         | 10.83            |"

    def test_farewell(self):
        assert farewell() == "Thank you for using the Currency Converter!"
        assert farewell(AnsiStyle()).startswith("\033[36m")

    def test_error_line(self):
        assert error_line("Invalid amount: x") == "Invalid amount: x"
        assert error_line("oops", AnsiStyle()) == "\033[31moops\033[0m"
