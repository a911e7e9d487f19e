"""Text transformations applied before the Markdown parser runs."""

from __future__ import annotations

import json
import re

__all__ = [
    "remove_comments",
    "process_definition_lists",
    "preprocess_discord_underline",
    "postprocess_discord_underline",
]

_DISCORD_UNDERLINE = re.compile(r"__([^_]+)__")
_FENCES = ("```", "~~~")


def _lines(text: str) -> list[str]:
    """Split ``text`` into lines, ignoring one trailing newline and ``\\r``."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class _CommentStripper:
    """Removes ``//`` and ``/* ... */`` comments line by line."""

    def __init__(self) -> None:
        self.in_multiline_comment = False

    def strip_line(self, line: str) -> str:
        kept: list[str] = []
        in_inline_code = False
        prev = "\0"
        pos = 0
        length = len(line)
        while pos < length:
            ch = line[pos]
            nxt = line[pos + 1] if pos + 1 < length else None
            pos += 1

            if ch == "`":
                in_inline_code = not in_inline_code
                kept.append(ch)
                prev = ch
                continue
            if in_inline_code:
                kept.append(ch)
                prev = ch
                continue
            if not self.in_multiline_comment and ch == "/" and nxt == "*":
                self.in_multiline_comment = True
                pos += 1
                prev = "*"
                continue
            if self.in_multiline_comment and ch == "*" and nxt == "/":
                self.in_multiline_comment = False
                pos += 1
                prev = "/"
                continue
            if not self.in_multiline_comment and ch == "/" and nxt == "/" and prev != ":":
                break
            if not self.in_multiline_comment:
                kept.append(ch)
                prev = ch
        return "".join(kept)


def remove_comments(text: str) -> str:
    """Remove ``//`` and ``/* ... */`` comments outside code.

    Fenced code blocks and inline code spans are left untouched, and ``//``
    directly after ``:`` (as in ``https://``) is not treated as a comment.
    """
    out: list[str] = []
    in_code_block = False
    fence = ""
    stripper = _CommentStripper()

    for line in _lines(text):
        trimmed = line.lstrip()
        if trimmed.startswith(_FENCES):
            if not in_code_block:
                in_code_block = True
                fence = "```" if trimmed.startswith("```") else "~~~"
            elif fence in trimmed:
                in_code_block = False
            out.append(line + "\n")
            continue

        if in_code_block:
            out.append(line + "\n")
            continue

        processed = stripper.strip_line(line)
        if processed.strip():
            out.append(processed + "\n")
        elif not stripper.in_multiline_comment:
            out.append("\n")

    result = "".join(out)
    if not text.endswith("\n") and result.endswith("\n"):
        result = result[:-1]
    return result


def _is_definition_line(line: str) -> bool:
    return line.lstrip().startswith(":") and "|" in line


def process_definition_lists(text: str) -> str:
    """Replace runs of ``:term|definition`` lines with a single marker.

    The marker holds the items as a JSON array of ``[term, definition]`` pairs.
    """
    out: list[str] = []
    items: list[list[str]] = []

    def flush() -> None:
        if items:
            payload = json.dumps(items, ensure_ascii=False, separators=(",", ":"))
            out.append(f"{{{{DEFINITION_LIST:{payload}:DEFINITION_LIST}}}}")
            items.clear()

    for line in _lines(text):
        if _is_definition_line(line):
            term, _, definition = line.lstrip()[1:].partition("|")
            items.append([term.strip(), definition.strip()])
        else:
            flush()
            out.append(line)
    flush()
    return "\n".join(out)


def preprocess_discord_underline(text: str) -> str:
    """Turn ``__text__`` into an underline placeholder so Markdown leaves it alone."""
    return _DISCORD_UNDERLINE.sub(r"{{UNDERLINE:\1:UNDERLINE}}", text)


def postprocess_discord_underline(html: str) -> str:
    """Turn underline placeholders into ``<u>`` elements."""
    return html.replace("{{UNDERLINE:", "<u>").replace(":UNDERLINE}}", "</u>")