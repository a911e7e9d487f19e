"""Escaping of raw HTML in user input and blocking of dangerous URL schemes."""

from __future__ import annotations

import re
import string

__all__ = ["sanitize_url", "sanitize", "is_valid_entity"]

BLOCKED_URL = "#blocked-url"

_BLOCKED_SCHEMES = ("javascript:", "data:", "vbscript:", "file:")

_NAMED_ENTITIES = frozenset(
    {
        "nbsp", "lt", "gt", "amp", "quot", "apos", "copy", "reg", "trade",
        "ndash", "mdash", "lsquo", "rsquo", "ldquo", "rdquo", "hellip",
        "prime", "Prime", "euro", "yen", "pound", "cent", "times", "divide",
        "plusmn", "minus", "alpha", "beta", "gamma", "delta", "epsilon",
        "Alpha", "Beta", "Gamma", "Delta", "Epsilon",
    }
)

_MAX_ENTITY_BYTES = 10
_SPECIAL = re.compile(r"[<>&]")


def sanitize_url(url: str) -> str:
    """Return ``url`` unchanged, or ``#blocked-url`` if its scheme is dangerous.

    The scheme check ignores surrounding whitespace and case; ``javascript:``,
    ``data:``, ``vbscript:`` and ``file:`` are blocked.
    """
    if url.strip().lower().startswith(_BLOCKED_SCHEMES):
        return BLOCKED_URL
    return url


def is_valid_entity(entity: str) -> bool:
    """Tell whether ``entity`` (without ``&`` and ``;``) is a known HTML entity."""
    if not entity:
        return False
    if entity.startswith("#"):
        if len(entity) < 2:
            return False
        if entity[1] in "xX":
            if len(entity) < 3:
                return False
            return all(c in string.hexdigits for c in entity[2:])
        return all(c in string.digits for c in entity[1:])
    return entity in _NAMED_ENTITIES


def _entity_follows(text: str, start: int) -> bool:
    """Tell whether a valid entity body and ``;`` begin at ``start``."""
    name = ""
    for ch in text[start:]:
        if ch == ";":
            return is_valid_entity(name)
        if len(name.encode("utf-8")) > _MAX_ENTITY_BYTES:
            return False
        if not ch.isalnum() and ch != "#":
            return False
        name += ch
    return False


def _escape(match: re.Match[str]) -> str:
    ch = match.group()
    if ch == "<":
        return "&lt;"
    if ch == ">":
        return "&gt;"
    if _entity_follows(match.string, match.end()):
        return "&"
    return "&amp;"


def sanitize(text: str) -> str:
    """Escape ``<``, ``>`` and stray ``&`` while keeping valid HTML entities."""
    return _SPECIAL.sub(_escape, text)