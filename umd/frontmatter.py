"""Extraction of YAML and TOML frontmatter from the start of a document."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = ["FrontmatterFormat", "Frontmatter", "extract_frontmatter"]


class FrontmatterFormat(Enum):
    """Supported frontmatter formats."""

    YAML = "yaml"
    TOML = "toml"


@dataclass(frozen=True)
class Frontmatter:
    """Frontmatter found at the top of a document, without its delimiters."""

    format: FrontmatterFormat
    content: str


_PATTERNS = (
    (FrontmatterFormat.YAML, re.compile(r"---\s*\n([\s\S]*?)\n---\s*\n")),
    (FrontmatterFormat.TOML, re.compile(r"\+\+\+\s*\n([\s\S]*?)\n\+\+\+\s*\n")),
)


def extract_frontmatter(text: str) -> tuple[Frontmatter | None, str]:
    """Split leading frontmatter from ``text``.

    YAML (``---``) is tried before TOML (``+++``). Returns the frontmatter,
    or ``None`` when there is none, together with the remaining content.
    """
    for fmt, pattern in _PATTERNS:
        match = pattern.match(text)
        if match:
            return Frontmatter(format=fmt, content=match.group(1)), text[match.end():]
    return None, text