"""Conversion of plugin syntax into ``<template>`` containers.

Only the plugin call is recorded: the function name becomes a CSS class,
arguments become ``<data>`` children and content is kept as escaped text.
Running the plugin is left to whoever consumes the HTML. The ``@detail``
plugin is the exception and renders a ``<details>`` element directly.
"""

from __future__ import annotations

import re

from umd.plugin_markers import HTML_ENTITY_NAMES

__all__ = ["apply_plugin_syntax"]

_DETAIL = re.compile(r"@detail\(([^,)]+)(?:,\s*open)?\)\{\{([\s\S]*?)\}\}")
_DETAIL_OPEN = re.compile(r"@detail\([^,)]+,\s*open\)")

_BLOCK_MULTILINE = re.compile(r"@(\w+)\(([^)]*)\)\{\{([\s\S]*?)\}\}")
_BLOCK_SINGLELINE = re.compile(r"@(\w+)\(([^)]*)\)\{([^}]*)\}")
_BLOCK_ARGS_ONLY = re.compile(r"@(\w+)\(([^)]*)\)")
_BLOCK_NO_ARGS = re.compile(r"@(\w+)\(\)")

_INLINE = re.compile(r"&(\w+)\(([^)]*)\)\{((?:[^{}]|\{[^}]*\})*)\};")
_INLINE_ARGS_ONLY = re.compile(r"&(\w+)\(([^)]*)\);")
_INLINE_NO_ARGS = re.compile(r"&([a-zA-Z]\w*);")


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _args_as_data(args: str) -> str:
    if not args.strip():
        return ""
    return "".join(
        f'<data value="{index}">{_escape(arg.strip())}</data>'
        for index, arg in enumerate(args.split(","))
    )


def _template(function: str, body: str = "", *, block: bool) -> str:
    element = f'<template class="umd-plugin umd-plugin-{function}">{body}</template>'
    return f"\n{element}\n" if block else element


def _detail(match: re.Match[str]) -> str:
    summary = match.group(1).strip()
    content = match.group(2).strip()
    open_attr = " open" if _DETAIL_OPEN.search(match.group(0)) else ""
    return f"\n<details{open_attr}>\n  <summary>{summary}</summary>\n  {content}\n</details>\n"


def _with_content(block: bool):
    def render(match: re.Match[str]) -> str:
        body = _args_as_data(match.group(2)) + _escape(match.group(3))
        return _template(match.group(1), body, block=block)

    return render


def _args_only(block: bool):
    def render(match: re.Match[str]) -> str:
        return _template(match.group(1), _args_as_data(match.group(2)), block=block)

    return render


def _inline_no_args(match: re.Match[str]) -> str:
    name = match.group(1)
    if name in HTML_ENTITY_NAMES:
        return match.group(0)
    return _template(name, block=False)


def apply_plugin_syntax(html: str) -> str:
    """Replace plugin calls in ``html`` with their rendered containers.

    Handles ``@detail(summary[, open]){{ content }}``, block plugins
    ``@f(args){{ content }}``, ``@f(args){content}``, ``@f(args)`` and
    ``@f()``, and inline plugins ``&f(args){content};``, ``&f(args);`` and
    ``&f;``. ``&name;`` is left alone when it names a known HTML entity.
    """
    html = _DETAIL.sub(_detail, html)
    html = _BLOCK_MULTILINE.sub(_with_content(block=True), html)
    html = _BLOCK_SINGLELINE.sub(_with_content(block=True), html)
    html = _BLOCK_ARGS_ONLY.sub(_args_only(block=True), html)
    html = _BLOCK_NO_ARGS.sub(lambda m: _template(m.group(1), block=True), html)
    html = _INLINE.sub(_with_content(block=False), html)
    html = _INLINE_ARGS_ONLY.sub(_args_only(block=False), html)
    return _INLINE_NO_ARGS.sub(_inline_no_args, html)