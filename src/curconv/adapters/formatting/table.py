# src/curconv/adapters/formatting/table.py
"""
Text Table Rendering

render_table lays out a bordered, column-aligned table:

    +----------+-------+
    | Currency | Code  |
    +----------+-------+
    | Euro     | EUR   |
    +----------+-------+

Files that USE this module:
- curconv.adapters.formatting.formatter (rates and conversion tables)
- tests.test_formatter (unit tests)

Files that this module USES:
- curconv.adapters.formatting.styles (PlainStyle default)
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from curconv.adapters.formatting.styles import PlainStyle, TableStyle


def render_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    style: Optional[TableStyle] = None,
) -> str:
    """
    Render headers and rows as a bordered text table.

    Column widths are measured on the unstyled text. Short rows are padded
    with empty cells; cells beyond the header count are dropped.

    Args:
        headers: Column titles
        rows: Table body, one sequence of cell strings per row
        style: Optional coloring strategy (default: no colors)

    Returns:
        The table without a trailing newline
    """
    style = style or PlainStyle()
    ncols = len(headers)
    body = [[str(c) for c in row][:ncols] + [""] * (ncols - len(row)) for row in rows]

    widths = [len(h) for h in headers]
    for row in body:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(cells: Sequence[str], paint) -> str:
        parts = [f" {paint(cell.ljust(widths[i]), i)} " for i, cell in enumerate(cells)]
        return "|" + "|".join(parts) + "|"

    out: List[str] = [border, line(list(headers), style.header), border]
    for row in body:
        out.append(line(row, style.cell))
    if body:
        out.append(border)
    return "\n".join(out)
