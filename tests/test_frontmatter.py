import pytest

from umd.frontmatter import Frontmatter, FrontmatterFormat, extract_frontmatter


def test_yaml_frontmatter():
    text = "---\ntitle: Test\nauthor: John\n---\n\n# Content"
    fm, content = extract_frontmatter(text)
    assert fm is not None
    assert fm.format is FrontmatterFormat.YAML
    assert "title: Test" in fm.content
    assert "# Content" in content
    assert "---" not in content


def test_toml_frontmatter():
    text = '+++\ntitle = "Test"\nauthor = "John"\n+++\n\n# Content'
    fm, content = extract_frontmatter(text)
    assert fm is not None
    assert fm.format is FrontmatterFormat.TOML
    assert 'title = "Test"' in fm.content
    assert "# Content" in content
    assert "+++" not in content


def test_no_frontmatter():
    text = "# Just a heading\n\nSome content"
    fm, content = extract_frontmatter(text)
    assert fm is None
    assert content == text


def test_yaml_with_complex_content():
    text = "---\ntitle: Complex\ntags:\n  - rust\n  - wiki\ndate: 2024-01-01\n---\n\n**Bold** text"
    fm, content = extract_frontmatter(text)
    assert fm is not None
    assert "tags:" in fm.content
    assert "**Bold**" in content


def test_frontmatter_must_be_at_start():
    text = "Some text\n---\ntitle: Test\n---\n\nMore content"
    fm, content = extract_frontmatter(text)
    assert fm is None
    assert content == text


def test_exact_split():
    fm, content = extract_frontmatter("---\na: 1\nb: 2\n---\nbody")
    assert fm == Frontmatter(FrontmatterFormat.YAML, "a: 1\nb: 2")
    assert content == "body"


def test_unclosed_frontmatter_is_ignored():
    text = "---\ntitle: Open\n# Heading"
    fm, content = extract_frontmatter(text)
    assert fm is None
    assert content == text


@pytest.mark.parametrize(
    "text",
    ["---\nx: 1\n---\nrest\n", "+++\nx = 1\n+++\nrest\n"],
)
def test_content_plus_frontmatter_preserves_rest(text):
    fm, content = extract_frontmatter(text)
    assert fm is not None
    assert content == "rest\n"
    assert text.endswith(content)