# umd

Building blocks for Universal Markdown, a Markdown superset with wiki-style
plugins, extended tables and Bootstrap-friendly output. Each module is a
text-to-text step that can be used alone. The package has no runtime
dependencies.

## Install

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

## Modules

### `umd.frontmatter`

`extract_frontmatter(text)` splits frontmatter off the very start of a
document. YAML (`---` delimiters) is tried before TOML (`+++` delimiters).
It returns a pair: a `Frontmatter` (fields `format`, a `FrontmatterFormat`
of `YAML` or `TOML`, and `content`, the text between the delimiters) or
`None`, and the remaining text.

### `umd.sanitizer`

- `sanitize(text)` escapes `<` and `>`, and escapes `&` unless it begins a
  recognised entity: a decimal (`&#123;`) or hexadecimal (`&#x7B;`) numeric
  entity, or one of a set of common named entities such as `&nbsp;`, `&lt;`,
  `&amp;` or `&mdash;`.
- `is_valid_entity(entity)` tells whether an entity body (without `&` and
  `;`) is recognised.
- `sanitize_url(url)` returns `BLOCKED_URL` (`"#blocked-url"`) when the URL,
  ignoring case and surrounding whitespace, starts with `javascript:`,
  `data:`, `vbscript:` or `file:`; any other URL is returned unchanged.

### `umd.preprocessor`

- `remove_comments(text)` removes `// ...` and `/* ... */` comments, leaving
  fenced code blocks and inline code alone; `//` right after `:` (as in
  `https://`) is kept.
- `process_definition_lists(text)` replaces each run of `:term|definition`
  lines with one `{{DEFINITION_LIST:...:DEFINITION_LIST}}` marker holding
  the items as a JSON array of `[term, definition]` pairs.
- `preprocess_discord_underline(text)` turns `__text__` into an underline
  placeholder; `postprocess_discord_underline(html)` turns the placeholders
  into `<u>` elements.

### `umd.plugin_markers`

`protect_inline_plugins(text)` and `protect_block_plugins(text)` replace
plugin calls (`&f{...};`, `&f(args){...};`, `&f(args);`, `&f;`,
`@f(args){{...}}`, `@f(args){...}`, `@f(args)`) with `{{..._PLUGIN...}}`
markers, Base64-encoding content. `&name;` is left alone when `name` is in
`HTML_ENTITY_NAMES`.

### `umd.plugins`

`apply_plugin_syntax(html)` renders `@detail(summary[, open]){{ content }}`
as a `<details>` element and every other plugin call as
`<template class="umd-plugin umd-plugin-NAME">`, with one
`<data value="N">` child per argument followed by the escaped content.
Block plugins are surrounded by newlines; inline plugins are not.

### Tables: `umd.table_cells`, `umd.table_spanning`, `umd.table_parser`

- `Cell` is a dataclass with `content`, `is_header`, `colspan`, `rowspan`,
  `classes` and `styles`.
- `parse_cell_content(cell)` applies a `~` header marker, `COLOR(fg,bg):`,
  `SIZE(value):` and alignment prefixes (`TOP:`, `MIDDLE:`, `BOTTOM:`,
  `BASELINE:`, `RIGHT:`, `CENTER:`, `LEFT:`, `JUSTIFY:`). Bootstrap colour
  names become `text-*`/`bg-*` classes, other colours inline styles.
  `is_bootstrap_color(color)` and `bootstrap_size_class(value)` (a numeric
  rem size to `fs-1` … `fs-6`, or `None`) are the helpers it uses.
- `process_cell_spanning(rows)` merges cells in place: a cell ending in `|>`
  absorbs the empty or `|>` cells after it, and a `|^` cell extends the cell
  above it by one row.
- `is_umd_table(lines)` tells UMD tables from GFM ones; `parse_table(text)`
  renders a UMD table as `<table class="table umd-table">` (a first row
  ending in `h` becomes `<thead>`) and returns GFM tables unchanged;
  `extract_umd_tables(text)` replaces each UMD table with a
  `UMD_TABLE_MARKER_N_END` marker and returns the `(marker, html)` pairs.

## Examples

```python
from umd.frontmatter import extract_frontmatter
from umd.sanitizer import sanitize
from umd.plugins import apply_plugin_syntax
from umd.table_parser import parse_table

fm, body = extract_frontmatter("---\ntitle: Hello\n---\n\n# Content")
print(fm.content)        # title: Hello

print(sanitize("<b>A &amp; B</b>"))
# &lt;b&gt;A &amp; B&lt;/b&gt;

print(apply_plugin_syntax("&highlight(yellow){important text};"))
# <template class="umd-plugin umd-plugin-highlight"><data value="0">yellow</data>important text</template>

print(parse_table("| ~A | ~B |h\n| C | D |"))
# <table class="table umd-table"><thead><tr><th>A</th><th>B</th></tr></thead><tbody><tr><td>C</td><td>D</td></tr></tbody></table>
```

## What this package does not do

It has no Markdown renderer. There is no single function that turns a whole
document into HTML: headings, emphasis, lists, links, code blocks, GFM
tables, footnotes, heading IDs and media embedding are not rendered here.
The modules above prepare text for, or finish the output of, such a
renderer, and combining them with one is left to the caller.

## Tests

```
pytest
```