"""Universal Markdown building blocks: frontmatter, sanitizing, plugin syntax and extended tables."""

__version__ = "0.1.0"
__all__ = [
    "frontmatter",
    "sanitizer",
    "preprocessor",
    "plugin_markers",
    "plugins",
    "table_cells",
    "table_spanning",
    "table_parser",
]