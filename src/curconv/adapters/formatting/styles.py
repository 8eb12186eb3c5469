# src/curconv/adapters/formatting/styles.py
"""
Table Styles - Pluggable Coloring Strategies

Coloring is cosmetic and never changes the layout of a table: styles
receive text that is already padded to the column width and may only
wrap it.

Files that USE this module:
- curconv.adapters.formatting.table (render_table applies a style)
- curconv.adapters.formatting.formatter (palettes for each table)
- curconv.app (choose_style from the color mode)
- tests.test_formatter (unit tests)

Files that this module USES:
- None (pure presentation module)
"""
from __future__ import annotations

import os
from typing import Optional, Protocol, Sequence, TextIO

RESET = "\033[0m"
BOLD = "1"

# SGR foreground codes
WHITE = "37"
RED = "31"
GREEN = "32"
YELLOW = "33"
BLUE = "34"
MAGENTA = "35"
CYAN = "36"
HI_WHITE = "97"
HI_RED = "91"
HI_GREEN = "92"
HI_YELLOW = "93"
HI_BLUE = "94"
HI_MAGENTA = "95"
HI_CYAN = "96"

MESSAGE_COLORS = {
    "error": RED,
    "info": CYAN,
}


class TableStyle(Protocol):
    def header(self, text: str, column: int) -> str: ...

    def cell(self, text: str, column: int) -> str: ...

    def message(self, text: str, kind: str) -> str: ...

    def with_palette(self, header_colors: Sequence[str], column_colors: Sequence[str]) -> "TableStyle": ...


class PlainStyle:
    """No styling at all."""

    def header(self, text: str, column: int) -> str:
        return text

    def cell(self, text: str, column: int) -> str:
        return text

    def message(self, text: str, kind: str) -> str:
        return text

    def with_palette(self, header_colors: Sequence[str], column_colors: Sequence[str]) -> "PlainStyle":
        return self


def _sgr(text: str, *codes: str) -> str:
    if not codes:
        return text
    return f"\033[{';'.join(codes)}m{text}{RESET}"


class AnsiStyle:
    """
    ANSI escape-code colors.

    Args:
        header_colors: SGR color per column for header cells (rendered bold)
        column_colors: SGR color per column for data cells

    Columns past the end of a palette are left uncolored.
    """

    def __init__(
        self,
        header_colors: Sequence[str] = (),
        column_colors: Sequence[str] = (),
    ):
        self.header_colors = tuple(header_colors)
        self.column_colors = tuple(column_colors)

    def header(self, text: str, column: int) -> str:
        color = self.header_colors[column] if column < len(self.header_colors) else None
        return _sgr(text, *([color, BOLD] if color else [BOLD]))

    def cell(self, text: str, column: int) -> str:
        color = self.column_colors[column] if column < len(self.column_colors) else None
        return _sgr(text, color) if color else text

    def message(self, text: str, kind: str) -> str:
        color = MESSAGE_COLORS.get(kind)
        return _sgr(text, color) if color else text

    def with_palette(self, header_colors: Sequence[str], column_colors: Sequence[str]) -> "AnsiStyle":
        """Return a copy using another pair of palettes."""
        return AnsiStyle(header_colors, column_colors)


def choose_style(mode: str, stream: Optional[TextIO] = None) -> TableStyle:
    """
    Pick a style for a color mode.

    Args:
        mode: "always", "never" or "auto"
        stream: Output stream checked for a TTY in "auto" mode

    Returns:
        AnsiStyle or PlainStyle
    """
    if mode == "always":
        return AnsiStyle()
    if mode == "never":
        return PlainStyle()
    if os.environ.get("NO_COLOR"):
        return PlainStyle()
    isatty = getattr(stream, "isatty", None)
    if isatty is not None and isatty():
        return AnsiStyle()
    return PlainStyle()
