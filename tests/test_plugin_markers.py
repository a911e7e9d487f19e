import base64
import re

import pytest

from umd.plugin_markers import protect_block_plugins, protect_inline_plugins


def _decode(encoded):
    return base64.b64decode(encoded).decode("utf-8")


def test_protect_inline_plugin_with_content():
    output = protect_inline_plugins("&test{content};")
    assert "INLINE_PLUGIN:test::" in output
    assert "&test" not in output
    assert output == "{{INLINE_PLUGIN:test::Y29udGVudA==:INLINE_PLUGIN}}"


def test_protect_inline_plugin_with_args_and_content():
    output = protect_inline_plugins("&test(arg1,arg2){content};")
    assert "INLINE_PLUGIN:test:arg1,arg2:" in output
    match = re.fullmatch(r"\{\{INLINE_PLUGIN:test:arg1,arg2:(.*):INLINE_PLUGIN\}\}", output)
    assert match is not None
    assert _decode(match.group(1)) == "content"


def test_inline_content_with_nested_braces_roundtrip():
    output = protect_inline_plugins("&box{a {b} c};")
    match = re.fullmatch(r"\{\{INLINE_PLUGIN:box::(.*):INLINE_PLUGIN\}\}", output)
    assert match is not None
    assert _decode(match.group(1)) == "a {b} c"


def test_inline_unicode_content_roundtrip():
    output = protect_inline_plugins("&ruby(Ashita){明日};")
    match = re.fullmatch(r"\{\{INLINE_PLUGIN:ruby:Ashita:(.*):INLINE_PLUGIN\}\}", output)
    assert match is not None
    assert _decode(match.group(1)) == "明日"


def test_inline_args_only():
    assert (
        protect_inline_plugins("&icon(mdi-pencil);")
        == "{{INLINE_PLUGIN_ARGSONLY:icon:mdi-pencil:INLINE_PLUGIN_ARGSONLY}}"
    )


def test_inline_no_args():
    assert protect_inline_plugins("&br;") == "{{INLINE_PLUGIN_NOARGS:br:INLINE_PLUGIN_NOARGS}}"


def test_skip_html_entities():
    text = "&lt; &gt; &amp;"
    assert protect_inline_plugins(text) == text


@pytest.mark.parametrize("text", ["&123;", "&nbsp;", "&frac12;", "plain text"])
def test_non_plugins_untouched(text):
    assert protect_inline_plugins(text) == text


@pytest.mark.parametrize("text", ["&lt;", "&nbsp;", "&rlm;", "&Aring;"])
def test_known_entities_are_not_plugins(text):
    assert protect_inline_plugins(text) == text


def test_unknown_name_becomes_plugin_among_entities():
    output = protect_inline_plugins("&Aring; &br; &rlm;")
    assert output == "&Aring; {{INLINE_PLUGIN_NOARGS:br:INLINE_PLUGIN_NOARGS}} &rlm;"


def test_protect_block_plugin_multiline():
    output = protect_block_plugins("@test(args){{ content }}")
    assert "BLOCK_PLUGIN:test:args:" in output
    match = re.fullmatch(r"\{\{BLOCK_PLUGIN:test:args:(.*):BLOCK_PLUGIN\}\}", output)
    assert match is not None
    assert _decode(match.group(1)) == " content "


def test_block_multiline_spanning_lines():
    output = protect_block_plugins("@box(){{\nline1\nline2\n}}")
    match = re.fullmatch(r"\{\{BLOCK_PLUGIN:box::(.*):BLOCK_PLUGIN\}\}", output)
    assert match is not None
    assert _decode(match.group(1)) == "\nline1\nline2\n"


def test_protect_block_plugin_single_line():
    output = protect_block_plugins("@test(args){content}")
    assert "BLOCK_PLUGIN:test:args:" in output
    assert output == "{{BLOCK_PLUGIN:test:args:Y29udGVudA==:BLOCK_PLUGIN}}"


def test_protect_block_plugin_args_only():
    output = protect_block_plugins("@test(args)")
    assert "BLOCK_PLUGIN_ARGSONLY:test:" in output
    assert output == "{{BLOCK_PLUGIN_ARGSONLY:test:YXJncw==:BLOCK_PLUGIN_ARGSONLY}}"


def test_mention_without_parens_untouched():
    text = "This is @mention without parens"
    assert protect_block_plugins(text) == text