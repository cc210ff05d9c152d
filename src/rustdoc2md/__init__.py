"""rustdoc2md - Render rustdoc HTML pages as Markdown.

rustdoc2md walks a parsed rustdoc page and writes a compact Markdown version
of it: headings, fenced Rust code blocks, inline code, flat lists and the
`` `item`: description `` layout used by rustdoc item tables. Sidebars,
navigation, scripts and hidden summaries are dropped.

Requirements
------------
- Python 3.10+
- beautifulsoup4 and html5lib

Examples
--------
Convert an HTML string:

    >>> from rustdoc2md import html_to_markdown
    >>> html_to_markdown("<h1>Struct Vec</h1>")
    '# Struct Vec'

Parse once, render separately:

    >>> from rustdoc2md import parse_html, render_markdown
    >>> render_markdown(parse_html(page_html))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from rustdoc2md.api import html_to_markdown, parse_html, render_markdown
from rustdoc2md.exceptions import (
    DependencyError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    Rustdoc2MdError,
    ValidationError,
)
from rustdoc2md.options import RustdocOptions
from rustdoc2md.writer import MarkdownWriter

__all__ = [
    "__version__",
    "html_to_markdown",
    "parse_html",
    "render_markdown",
    "MarkdownWriter",
    "RustdocOptions",
    "Rustdoc2MdError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "DependencyError",
]
