"""Table cells and the decorations that may prefix their content."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

__all__ = ["Cell", "parse_cell_content", "is_bootstrap_color", "bootstrap_size_class"]

_COLOR = re.compile(r"COLOR\(([^)]*)\):\s*(.*)")
_SIZE = re.compile(r"SIZE\(([^)]+)\):\s*(.*)")

_ALIGNMENTS = (
    ("TOP:", "align-top"),
    ("MIDDLE:", "align-middle"),
    ("BOTTOM:", "align-bottom"),
    ("BASELINE:", "align-baseline"),
    ("RIGHT:", "text-end"),
    ("CENTER:", "text-center"),
    ("LEFT:", "text-start"),
    ("JUSTIFY:", "text-justify"),
)

_BOOTSTRAP_COLORS = frozenset(
    {
        "primary", "secondary", "success", "danger", "warning", "info",
        "light", "dark", "blue", "indigo", "purple", "pink", "red", "orange",
        "yellow", "green", "teal", "cyan", "black", "white", "gray",
        "gray-dark", "gray-100", "gray-200", "gray-300", "gray-400",
        "gray-500", "gray-600", "gray-700", "gray-800", "gray-900",
    }
)

_SIZE_CLASSES = (
    (2.5, "fs-1"),
    (2.0, "fs-2"),
    (1.75, "fs-3"),
    (1.5, "fs-4"),
    (1.25, "fs-5"),
    (0.875, "fs-6"),
)


@dataclass
class Cell:
    """One table cell with its content, span and styling."""

    content: str
    is_header: bool = False
    colspan: int = 1
    rowspan: int = 1
    classes: list[str] = field(default_factory=list)
    styles: list[str] = field(default_factory=list)


def is_bootstrap_color(color: str) -> bool:
    """Tell whether ``color`` is a Bootstrap colour name."""
    return color in _BOOTSTRAP_COLORS


def _parse_number(value: str) -> float | None:
    if value != value.strip() or "_" in value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def bootstrap_size_class(value: str) -> str | None:
    """Map a numeric size in rem to a Bootstrap ``fs-*`` class, if one fits."""
    number = _parse_number(value)
    if number is None:
        return None
    for threshold, css_class in _SIZE_CLASSES:
        if number >= threshold:
            return css_class
    return None


def _strip_header_marker(cell: Cell, text: str) -> str:
    if text.startswith("~"):
        cell.is_header = True
        return text[1:].strip()
    return text


def _apply_color(cell: Cell, args: str) -> None:
    parts = args.split(",")
    fg = parts[0].strip()
    bg = parts[1].strip() if len(parts) > 1 else ""
    if fg and fg != "inherit":
        if is_bootstrap_color(fg):
            cell.classes.append(f"text-{fg}")
        else:
            cell.styles.append(f"color: {fg}")
    if bg and bg != "inherit":
        if is_bootstrap_color(bg):
            cell.classes.append(f"bg-{bg}")
        else:
            cell.styles.append(f"background-color: {bg}")


def _apply_size(cell: Cell, value: str) -> None:
    css_class = bootstrap_size_class(value)
    if css_class is not None:
        cell.classes.append(css_class)
        return
    if "rem" in value or "em" in value or "px" in value:
        size = value
    else:
        size = f"{value}rem"
    cell.styles.append(f"font-size: {size}")


def parse_cell_content(cell: Cell) -> None:
    """Read decoration prefixes from ``cell.content`` and apply them to ``cell``.

    Understands a leading ``~`` header marker, ``COLOR(fg,bg):``,
    ``SIZE(value):`` and alignment prefixes such as ``CENTER:``. Span
    markers (``|>`` and ``|^``) are left in place for span processing.
    """
    content = cell.content
    if content == "|>" or content.endswith(" |>") or content == "|^":
        return

    remaining = _strip_header_marker(cell, content)

    match = _COLOR.fullmatch(remaining)
    if match:
        remaining = match.group(2)
        _apply_color(cell, match.group(1))

    match = _SIZE.fullmatch(remaining)
    if match:
        remaining = match.group(2)
        _apply_size(cell, match.group(1))

    for prefix, css_class in _ALIGNMENTS:
        if remaining.startswith(prefix):
            cell.classes.append(css_class)
            remaining = remaining[len(prefix):].strip()

    cell.content = _strip_header_marker(cell, remaining)