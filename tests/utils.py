"""Test utilities for the rustdoc2md test suite.

This module provides rustdoc-shaped HTML documents and assertions on the
Markdown produced from them.
"""

import re


class RustdocTestGenerator:
    """Generator for rustdoc HTML pages with the chrome the writer must drop."""

    @staticmethod
    def create_struct_page_html() -> str:
        """Create a struct page with sidebar, hidden summary and code blocks."""
        return """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>Vec in std::vec - Rust</title><script src="main.js"></script></head>
<body class="rustdoc struct">
<!-- sidebar -->
<nav class="sidebar"><a href="../index.html">std</a></nav>
<div class="sidebar-elems"><section><h3>Methods</h3><ul><li>push</li></ul></section></div>
<main>
<div class="width-limiter">
<section id="main-content" class="content">
<div class="main-heading"><h1>Struct <span class="struct">Vec</span><span class="out-of-band">1.0.0 · source</span></h1></div>
<pre class="rust item-decl"><code>pub struct Vec&lt;T&gt; { /* private fields */ }</code></pre>
<details class="toggle top-doc" open><summary class="hideme"><span>Expand description</span></summary>
<div class="docblock"><p>A contiguous growable array type, written as <code>Vec&lt;T&gt;</code>.</p>
<h2 id="examples"><a class="doc-anchor" href="#examples">§</a>Examples</h2>
<pre class="rust rust-example-rendered"><code>let mut vec = Vec::new();
vec.push(1);</code></pre>
<ul><li>fast</li><li>growable</li></ul>
</div></details>
<h2 id="modules">Modules</h2>
<ul class="item-table"><li><div class="item-name"><a href="vec/index.html">vec</a></div><div class="desc docblock-short">A contiguous growable array type.</div></li></ul>
</section></div></main></body></html>
"""

    @staticmethod
    def create_module_page_html() -> str:
        """Create a module index page listing several items."""
        return """<!DOCTYPE html>
<html lang="en">
<head><title>std::collections - Rust</title></head>
<body class="rustdoc mod">
<div class="nav-container"><span>Search</span></div>
<main>
<h1>Module <span>collections</span></h1>
<span class="out-of-band"><a href="#">source</a></span>
<h2 id="structs" class="section-header">Structs<a href="#structs" class="anchor">§</a></h2>
<ul class="item-table">
<li><div class="item-name"><a class="struct" href="struct.BTreeMap.html">BTreeMap</a></div><div class="desc docblock-short">An ordered map based on a B-Tree.</div></li>
<li><div class="item-name"><a class="struct" href="struct.HashMap.html">HashMap</a></div><div class="desc docblock-short">A hash map implemented with quadratic probing.</div></li>
</ul>
<h2 id="usage">Usage</h2>
<pre class="language-text"><code>cargo add indexmap
</code></pre>
<script>window.searchIndex = {};</script>
</main>
</body>
</html>
"""


def assert_markdown_valid(markdown: str) -> None:
    """Assert that the generated Markdown is normalized and well-formed."""
    assert markdown == markdown.strip(), "Markdown has leading or trailing whitespace"
    assert "\n\n\n" not in markdown, "Markdown has more than one consecutive blank line"

    lines = markdown.split("\n")
    for i, line in enumerate(lines):
        assert line == "" or line.strip() != "", f"Line {i + 1} contains only whitespace: {line!r}"

    fences = [line for line in lines if line.startswith("```")]
    assert len(fences) % 2 == 0, "Unbalanced code fences"

    # HTML tags outside fenced blocks would mean markup leaked through
    outside_fences = re.sub(r"```.*?```", "", markdown, flags=re.DOTALL)
    assert not re.search(r"</?(div|span|nav|script|ul|li|pre|h[1-6])\b", outside_fences)
