# src/curconv/adapters/formatting/formatter.py
"""
Output Formatter - Rates and Conversion Presentation

This module turns rate snapshots and conversion results into the text the
CLI prints: the rates listing, the conversion summary and table, and the
closing and error lines.

Files that USE this module:
- curconv.app (prints everything through these functions)
- tests.test_formatter (unit tests)

Files that this module USES:
- curconv.adapters.formatting.table (render_table)
- curconv.adapters.formatting.styles (palettes and PlainStyle)
- curconv.application.service (Conversion)
- curconv.domain.models (RateRecord)
"""
from __future__ import annotations

from typing import Optional, Sequence

from curconv.adapters.formatting import styles
from curconv.adapters.formatting.styles import PlainStyle, TableStyle
from curconv.adapters.formatting.table import render_table
from curconv.application.service import Conversion
from curconv.domain.models import RateRecord

RATES_HEADERS = ("Currency", "Central Bank Price", "Code", "Date")
RATES_HEADER_COLORS = (styles.HI_WHITE, styles.HI_CYAN, styles.HI_BLUE, styles.HI_GREEN)
RATES_COLUMN_COLORS = (styles.HI_WHITE, styles.CYAN, styles.HI_BLUE, styles.HI_GREEN)

CONVERSION_HEADERS = ("Amount", "From Currency", "To Currency", "Converted Amount")
CONVERSION_HEADER_COLORS = (styles.HI_WHITE, styles.HI_CYAN, styles.HI_CYAN, styles.HI_GREEN)
CONVERSION_COLUMN_COLORS = (styles.HI_YELLOW, styles.HI_MAGENTA, styles.HI_BLUE, styles.HI_RED)

FAREWELL = "Thank you for using the Currency Converter!"


def _with_palette(style: Optional[TableStyle], header_colors, column_colors) -> TableStyle:
    return (style or PlainStyle()).with_palette(header_colors, column_colors)


def format_price(value: float) -> str:
    """Format a price or amount with two decimals."""
    return f"{value:.2f}"


def rates_table(rates: Sequence[RateRecord], style: Optional[TableStyle] = None) -> str:
    """
    Format the whole snapshot, one row per record in source order.

    Args:
        rates: Rate snapshot
        style: Optional coloring strategy

    Returns:
        Table with Currency, Central Bank Price, Code and Date columns
    """
    rows = [
        (rate.title, format_price(rate.reference_price), rate.code, rate.date)
        for rate in rates
    ]
    style = _with_palette(style, RATES_HEADER_COLORS, RATES_COLUMN_COLORS)
    return render_table(RATES_HEADERS, rows, style)


def conversion_summary(conversion: Conversion) -> str:
    return (
        f"Conversion result: {format_price(conversion.amount)} "
        f"{conversion.from_code} to {conversion.to_code}"
    )


def conversion_table(conversion: Conversion, style: Optional[TableStyle] = None) -> str:
    row = (
        format_price(conversion.amount),
        conversion.from_code,
        conversion.to_code,
        format_price(conversion.result),
    )
    style = _with_palette(style, CONVERSION_HEADER_COLORS, CONVERSION_COLUMN_COLORS)
    return render_table(CONVERSION_HEADERS, [row], style)


def farewell(style: Optional[TableStyle] = None) -> str:
    return (style or PlainStyle()).message(FAREWELL, "info")


def error_line(message: str, style: Optional[TableStyle] = None) -> str:
    return (style or PlainStyle()).message(message, "error")
