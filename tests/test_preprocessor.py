import json

import pytest

from umd.preprocessor import (
    postprocess_discord_underline,
    preprocess_discord_underline,
    process_definition_lists,
    remove_comments,
)


def test_remove_single_line_comment():
    output = remove_comments("text // comment\nmore text")
    assert "comment" not in output
    assert "text" in output
    assert "more text" in output
    assert output == "text \nmore text"


def test_remove_multiline_comment():
    output = remove_comments("text /* comment */ more")
    assert "comment" not in output
    assert output == "text  more"


def test_preserve_url_slashes():
    assert remove_comments("https://example.com") == "https://example.com"


def test_url_with_text_preserved():
    text = "link: https://example.com/path"
    assert remove_comments(text) == text


def test_preserve_comments_in_code_block():
    text = "```\n// code comment\n```"
    output = remove_comments(text)
    assert "// code comment" in output
    assert output == text


def test_preserve_comments_in_tilde_code_block():
    text = "~~~\n/* kept */\n~~~\nafter // gone"
    assert remove_comments(text) == "~~~\n/* kept */\n~~~\nafter "


def test_preserve_comments_in_inline_code():
    text = "`a // b` c"
    assert remove_comments(text) == text


def test_multiline_comment_across_lines():
    assert remove_comments("a\n/* x\ny */\nb") == "a\n\nb"


def test_inline_single_comment_multibyte():
    assert remove_comments("前// コメント") == "前"


def test_comment_only_line_becomes_empty_line():
    assert remove_comments("// comment\ntext") == "\ntext"


def test_trailing_newline_kept():
    assert remove_comments("x\n") == "x\n"


def test_empty_input():
    assert remove_comments("") == ""


def test_definition_list():
    output = process_definition_lists(":term1|definition1\n:term2|definition2\nregular text")
    assert "{{DEFINITION_LIST:" in output
    assert "DEFINITION_LIST}}" in output
    assert "regular text" in output
    assert output == (
        '{{DEFINITION_LIST:[["term1","definition1"],["term2","definition2"]]'
        ":DEFINITION_LIST}}\nregular text"
    )


def test_definition_list_trims_and_splits_runs():
    output = process_definition_lists(" : a | b \ntext\n:c|d|e")
    first, middle, last = output.split("\n")
    assert middle == "text"
    assert json.loads(first[len("{{DEFINITION_LIST:"):-len(":DEFINITION_LIST}}")]) == [["a", "b"]]
    assert json.loads(last[len("{{DEFINITION_LIST:"):-len(":DEFINITION_LIST}}")]) == [["c", "d|e"]]


def test_definition_list_without_pipe_untouched():
    assert process_definition_lists(":no pipe here\nplain") == ":no pipe here\nplain"


def test_preprocess_discord_underline():
    output = preprocess_discord_underline("This is __underlined__ text.")
    assert "{{UNDERLINE:underlined:UNDERLINE}}" in output
    assert "__underlined__" not in output


def test_postprocess_discord_underline():
    html = "<p>This is {{UNDERLINE:underlined:UNDERLINE}} text.</p>"
    assert postprocess_discord_underline(html) == "<p>This is <u>underlined</u> text.</p>"


def test_discord_underline_roundtrip():
    preprocessed = preprocess_discord_underline("Text with __underline__ here.")
    html = "<p>" + preprocessed + "</p>"
    assert "<u>underline</u>" in postprocess_discord_underline(html)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("First __a__ and second __b__.", "First <u>a</u> and second <u>b</u>."),
        ("This is _italic_ text.", "This is _italic_ text."),
    ],
)
def test_underline_pipeline(text, expected):
    assert postprocess_discord_underline(preprocess_discord_underline(text)) == expected