"""Detection of UMD-style tables and their conversion to HTML.

UMD tables differ from GFM tables: no separator line is required, cells may
span columns (``|>``) or rows (``|^``), cells may carry decorations, and a
first row ending in ``h`` becomes the table head.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from umd.table_cells import Cell, parse_cell_content
from umd.table_spanning import process_cell_spanning

__all__ = ["is_umd_table", "parse_table", "extract_umd_tables"]

_TABLE_OPEN = '<table class="table umd-table">'
_UMD_MARKERS = (
    "|>",
    "|^",
    "COLOR(",
    "SIZE(",
    "TOP:",
    "MIDDLE:",
    "BOTTOM:",
    "CENTER:",
    "RIGHT:",
    "LEFT:",
)
_CELL_PIECE = re.compile(r"\|[>^]|\||[^|]+")


def _lines(text: str) -> list[str]:
    """Split ``text`` into lines, ignoring one trailing newline and ``\\r``."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _is_gfm_separator(line: str) -> bool:
    return all(c in "|:-" or c.isspace() for c in line.strip())


def is_umd_table(lines: Sequence[str]) -> bool:
    """Tell whether table ``lines`` are UMD rather than GFM syntax.

    A single line, a second line that is not a GFM separator, or any UMD
    marker or decoration prefix makes the table UMD.
    """
    if not lines:
        return False
    if len(lines) == 1:
        return True
    if not _is_gfm_separator(lines[1]):
        return True
    return any(marker in line for line in lines for marker in _UMD_MARKERS)


def _make_cell(raw: str) -> Cell:
    cell = Cell(raw.strip())
    parse_cell_content(cell)
    return cell


def _split_cells(line: str) -> list[Cell]:
    """Split a row (starting with ``|``) into cells, keeping span markers."""
    cells: list[Cell] = []
    current = ""
    for piece in _CELL_PIECE.findall(line[1:]):
        if piece == "|":
            cells.append(_make_cell(current))
            current = ""
        else:
            current += piece
    if current.strip() or cells:
        cells.append(_make_cell(current))
    return cells


def _render_cell(cell: Cell) -> str:
    tag = "th" if cell.is_header else "td"
    attrs: list[str] = []
    if cell.classes:
        attrs.append(f'class="{" ".join(cell.classes)}"')
    if cell.styles:
        attrs.append(f'style="{"; ".join(cell.styles)}"')
    if cell.colspan > 1:
        attrs.append(f'colspan="{cell.colspan}"')
    if cell.rowspan > 1:
        attrs.append(f'rowspan="{cell.rowspan}"')
    attr_text = "".join(f" {attr}" for attr in attrs)
    return f"<{tag}{attr_text}>{cell.content}</{tag}>"


def _render_row(row: Sequence[Cell]) -> str:
    return "<tr>" + "".join(_render_cell(cell) for cell in row) + "</tr>"


def _render_table(rows: list[list[Cell]], has_thead: bool) -> str:
    parts = [_TABLE_OPEN]
    if rows:
        body = rows
        if has_thead:
            parts.append("<thead>" + _render_row(rows[0]) + "</thead>")
            body = rows[1:]
        if body:
            parts.append("<tbody>" + "".join(_render_row(row) for row in body) + "</tbody>")
    parts.append("</table>")
    return "".join(parts)


def parse_table(table_text: str) -> str:
    """Render a UMD table as HTML.

    Text that is not a UMD table is returned unchanged; empty text yields an
    empty string.
    """
    lines = _lines(table_text)
    if not lines:
        return ""
    if not is_umd_table(lines):
        return table_text

    has_thead = lines[0].strip().endswith("h")
    rows: list[list[Cell]] = []
    for index, raw in enumerate(lines):
        line = raw.strip()
        if not line.startswith("|"):
            continue
        if index == 0 and line.endswith("h"):
            line = line[:-1]
        rows.append(_split_cells(line))

    process_cell_spanning(rows)
    return _render_table(rows, has_thead)


def extract_umd_tables(text: str) -> tuple[str, list[tuple[str, str]]]:
    """Replace UMD tables in ``text`` with block-level markers.

    Returns the rewritten text and a list of ``(marker, html)`` pairs. GFM
    tables are left in place.
    """
    result = text
    tables: list[tuple[str, str]] = []
    block: list[str] = []

    def flush() -> None:
        nonlocal result
        table_text = "\n".join(block)
        block.clear()
        if is_umd_table(_lines(table_text)):
            marker = f"\n\nUMD_TABLE_MARKER_{len(tables)}_END\n\n"
            tables.append((marker, parse_table(table_text)))
            result = result.replace(table_text, marker)

    for line in _lines(text):
        if line.strip().startswith("|"):
            block.append(line)
        elif block:
            flush()
    if block:
        flush()
    return result, tables