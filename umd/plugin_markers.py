"""Replacement of plugin syntax by markers that survive Markdown parsing."""

from __future__ import annotations

import base64
import re

__all__ = ["HTML_ENTITY_NAMES", "protect_inline_plugins", "protect_block_plugins"]

HTML_ENTITY_NAMES = frozenset(
    """
    lt gt amp nbsp quot apos ndash mdash hellip copy reg trade times divide
    plusmn le ge ne asymp equiv forall exist empty nabla isin notin ni prod sum
    minus lowast radic prop infin ang and or cap cup int there4 sim cong sub sup
    nsub sube supe oplus otimes perp sdot lceil rceil lfloor rfloor lang rang loz
    spades clubs hearts diams alpha beta gamma delta epsilon zeta eta theta iota
    kappa lambda mu nu xi omicron pi rho sigma tau upsilon phi chi psi omega Iuml
    iuml Uuml uuml Auml auml Ouml ouml Euml euml Aring aring AElig aelig Ccedil
    ccedil Eth eth Ntilde ntilde Oslash oslash Thorn thorn szlig yuml Agrave
    agrave Aacute aacute Acirc acirc Atilde atilde Egrave egrave Eacute eacute
    Ecirc ecirc Igrave igrave Iacute iacute Icirc icirc Ograve ograve Oacute
    oacute Ocirc ocirc Otilde otilde Ugrave ugrave Uacute uacute Ucirc ucirc
    Yacute yacute cent pound curren yen brvbar sect uml ordf laquo not shy macr
    deg sup2 sup3 acute micro para middot cedil sup1 ordm raquo frac14 frac12
    frac34 iquest ensp emsp thinsp zwnj zwj lrm rlm
    """.split()
)
"""Entity names that ``&name;`` must never be taken for a plugin."""

_INLINE_CONTENT = re.compile(r"&(\w+)\{((?:[^{}]|\{[^}]*\})*)\};")
_INLINE_ARGS_CONTENT = re.compile(r"&(\w+)\(([^)]*)\)\{((?:[^{}]|\{[^}]*\})*)\};")
_INLINE_ARGS_ONLY = re.compile(r"&(\w+)\(([^)]*)\);")
_INLINE_NO_ARGS = re.compile(r"&([a-zA-Z]\w*);")

_BLOCK_MULTILINE = re.compile(r"@(\w+)\(([^)]*)\)\{\{([\s\S]*?)\}\}")
_BLOCK_SINGLELINE = re.compile(r"@(\w+)\(([^)]*)\)\{([^}]*)\}")
_BLOCK_ARGS_ONLY = re.compile(r"@(\w+)\(([^)]*)\)")


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def _inline_noargs(match: re.Match[str]) -> str:
    name = match.group(1)
    if name in HTML_ENTITY_NAMES:
        return match.group(0)
    return f"{{{{INLINE_PLUGIN_NOARGS:{name}:INLINE_PLUGIN_NOARGS}}}}"


def protect_inline_plugins(text: str) -> str:
    """Replace inline plugin calls with markers.

    Handles ``&f{content};``, ``&f(args){content};``, ``&f(args);`` and
    ``&f;``; content is Base64-encoded and HTML entity names are left alone.
    """
    text = _INLINE_CONTENT.sub(
        lambda m: f"{{{{INLINE_PLUGIN:{m[1]}::{_b64(m[2])}:INLINE_PLUGIN}}}}", text
    )
    text = _INLINE_ARGS_CONTENT.sub(
        lambda m: f"{{{{INLINE_PLUGIN:{m[1]}:{m[2]}:{_b64(m[3])}:INLINE_PLUGIN}}}}", text
    )
    text = _INLINE_ARGS_ONLY.sub(
        lambda m: f"{{{{INLINE_PLUGIN_ARGSONLY:{m[1]}:{m[2]}:INLINE_PLUGIN_ARGSONLY}}}}", text
    )
    return _INLINE_NO_ARGS.sub(_inline_noargs, text)


def protect_block_plugins(text: str) -> str:
    """Replace block plugin calls with markers.

    Handles ``@f(args){{ content }}``, ``@f(args){content}`` and ``@f(args)``;
    content, and the arguments of the last form, are Base64-encoded.
    """
    for pattern in (_BLOCK_MULTILINE, _BLOCK_SINGLELINE):
        text = pattern.sub(
            lambda m: f"{{{{BLOCK_PLUGIN:{m[1]}:{m[2]}:{_b64(m[3])}:BLOCK_PLUGIN}}}}", text
        )
    return _BLOCK_ARGS_ONLY.sub(
        lambda m: f"{{{{BLOCK_PLUGIN_ARGSONLY:{m[1]}:{_b64(m[2])}:BLOCK_PLUGIN_ARGSONLY}}}}",
        text,
    )