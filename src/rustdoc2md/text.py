#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rustdoc2md/text.py
"""Text processing for the Markdown writer.

Functions
---------
render_text : Render a text node according to the open-ancestor context
normalize_markdown : Canonicalize blank lines in a finished document

Examples
--------
Text outside a ``<pre>`` block loses surrounding line breaks and anchor glyphs:

    >>> from rustdoc2md.context import TagContextStack
    >>> render_text("\\nExamples§", TagContextStack())
    'Examples'

Runs of blank lines collapse to one:

    >>> normalize_markdown("# Title\\n\\n  \\n\\n\\nBody\\n")
    '# Title\\n\\nBody'

"""

from __future__ import annotations

import re

from rustdoc2md.constants import PREFORMATTED_TAG, TEXT_TRIM_CHARS
from rustdoc2md.context import TagContextStack

# whitespace-only line contents; the line break itself is kept
_BLANK_LINE_RE = re.compile(r"^[^\S\n]+$", re.MULTILINE)
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def render_text(text: str, stack: TagContextStack) -> str:
    """Render the contents of a text node.

    Parameters
    ----------
    text : str
        Raw text node contents.
    stack : TagContextStack
        Elements currently open around the text node.

    Returns
    -------
    str
        The text unchanged when inside a ``<pre>`` block, otherwise the text
        with newlines, carriage returns and section signs stripped from both
        ends. Interior whitespace is always preserved.

    """
    if stack.is_inside(PREFORMATTED_TAG):
        return text
    return text.strip(TEXT_TRIM_CHARS)


def normalize_markdown(markdown: str) -> str:
    """Canonicalize blank lines and trim the document.

    Whitespace-only lines are emptied first so that the newline collapse that
    follows sees them as adjacent line breaks.

    Parameters
    ----------
    markdown : str
        Accumulated writer output.

    Returns
    -------
    str
        Markdown with no whitespace-only lines, at most one blank line between
        blocks and no leading or trailing whitespace.

    """
    markdown = _BLANK_LINE_RE.sub("", markdown)
    markdown = _EXCESS_NEWLINES_RE.sub("\n\n", markdown)
    return markdown.strip()
