"""Column and row spanning for table cells marked with ``|>`` and ``|^``."""

from __future__ import annotations

from umd.table_cells import Cell

__all__ = ["process_cell_spanning"]

_COLSPAN = "|>"
_ROWSPAN = "|^"


def _strip_colspan_marker(content: str) -> str:
    while content.endswith(_COLSPAN):
        content = content[: -len(_COLSPAN)]
    return content.strip()


def _merge_columns(row: list[Cell]) -> None:
    merged: list[Cell] = []
    target: Cell | None = None
    for cell in row:
        if target is not None and cell.content in ("", _COLSPAN):
            target.colspan += 1
            continue
        target = None
        if cell.content.endswith(_COLSPAN):
            cell.content = _strip_colspan_marker(cell.content)
            cell.colspan = 1
            target = cell
        merged.append(cell)
    row[:] = merged


def _merge_rows(rows: list[list[Cell]]) -> None:
    max_cols = max((len(row) for row in rows), default=0)
    for col in range(max_cols):
        for above, row in zip(rows, rows[1:]):
            if col < len(row) and row[col].content == _ROWSPAN and col < len(above):
                above[col].rowspan += 1
                del row[col]


def process_cell_spanning(rows: list[list[Cell]]) -> None:
    """Merge cells in place: ``|>`` spans columns, ``|^`` spans rows.

    A cell ending in ``|>`` absorbs the empty or ``|>`` cells that follow it;
    a ``|^`` cell is removed and extends the cell above it by one row.
    """
    for row in rows:
        _merge_columns(row)
    _merge_rows(rows)