"""Box-drawing text tables"""
import unicodedata
from typing import List, Sequence


def _display_width(text: str) -> int:
    """Terminal columns taken by text; wide East Asian characters take two"""
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def _pad(text: str, width: int) -> str:
    return text + " " * (width - _display_width(text))


def _cell_lines(cell: str) -> List[str]:
    return str(cell).split("\n")


def _border(widths: Sequence[int], left: str, middle: str, right: str) -> str:
    return left + middle.join("─" * (width + 2) for width in widths) + right


def _row_lines(cells: Sequence[str], widths: Sequence[int]) -> List[str]:
    """Render one logical row, which spans as many lines as its tallest cell"""
    split = [_cell_lines(cell) for cell in cells]
    height = max(len(lines) for lines in split)

    rendered = []
    for index in range(height):
        parts = []
        for lines, width in zip(split, widths):
            text = lines[index] if index < len(lines) else ""
            parts.append(f" {_pad(text, width)} ")
        rendered.append("│" + "│".join(parts) + "│")
    return rendered


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """
    Render rows as a table in the 'modern' box-drawing style

    Every row, the header included, is separated by a horizontal rule.
    Cells may contain line breaks; columns are left-aligned.

    Args:
        headers: Column titles
        rows: Row values, one string per column

    Returns:
        Table text without a trailing newline
    """
    widths = [_display_width(header) for header in headers]
    for row in rows:
        if len(row) != len(headers):
            raise ValueError(f"Row has {len(row)} cells, expected {len(headers)}")
        for column, cell in enumerate(row):
            widths[column] = max([widths[column]] + [_display_width(line) for line in _cell_lines(cell)])

    lines = [_border(widths, "┌", "┬", "┐")]
    lines.extend(_row_lines(headers, widths))
    for row in rows:
        lines.append(_border(widths, "├", "┼", "┤"))
        lines.extend(_row_lines(row, widths))
    lines.append(_border(widths, "└", "┴", "┘"))

    return "\n".join(lines)
