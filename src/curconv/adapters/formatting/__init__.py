# src/curconv/adapters/formatting/__init__.py
"""
Formatting Adapters - Terminal Output

This package renders rate snapshots and conversion results as text
tables, with optional ANSI colors.
"""

from curconv.adapters.formatting.formatter import (
    conversion_summary,
    conversion_table,
    error_line,
    farewell,
    format_price,
    rates_table,
)
from curconv.adapters.formatting.styles import AnsiStyle, PlainStyle, TableStyle, choose_style
from curconv.adapters.formatting.table import render_table

__all__ = [
    "render_table",
    "TableStyle",
    "PlainStyle",
    "AnsiStyle",
    "choose_style",
    "format_price",
    "rates_table",
    "conversion_summary",
    "conversion_table",
    "farewell",
    "error_line",
]
