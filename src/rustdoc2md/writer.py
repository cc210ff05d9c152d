#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rustdoc2md/writer.py
"""BeautifulSoup tree to Markdown writer.

The writer walks a parsed rustdoc page depth first. Each element is looked up
in the enter rules before its children are visited and in the exit rules
afterwards, so bracketing syntax such as heading markers, code fences and
backticks can be emitted around the children without inspecting them first.
Text nodes are emitted in place. Once the walk finishes the accumulated
output is normalized into the final document.

Examples
--------
    >>> from rustdoc2md.api import parse_html
    >>> soup = parse_html("<h1>Title</h1><ul><li>one</li></ul>")
    >>> MarkdownWriter().run(soup)
    '# Title\\n\\n- one'

"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from rustdoc2md.context import ContextElement, TagContextStack
from rustdoc2md.exceptions import RenderingError
from rustdoc2md.rules import StartTagOutcome, enter_element, exit_element
from rustdoc2md.text import normalize_markdown, render_text

logger = logging.getLogger(__name__)


class MarkdownWriter:
    """Render one BeautifulSoup tree to Markdown.

    A writer owns the ancestor stack and output buffer of a single
    conversion. Create a new instance for every document; calling
    :meth:`run` twice on the same writer raises :class:`RenderingError`.

    Class rules compare the raw ``class`` attribute. Build trees with
    :func:`rustdoc2md.api.parse_html`, or pass ``multi_valued_attributes=None``
    to ``BeautifulSoup`` yourself. With bs4 defaults the class value arrives as
    a token list that is re-joined with single spaces, so padding and repeated
    spaces are lost before the exact-match checks run.

    """

    def __init__(self) -> None:
        self._stack = TagContextStack()
        self._markdown: list[str] = []
        self._consumed = False

    def run(self, root: PageElement) -> str:
        """Render ``root`` and everything below it.

        Parameters
        ----------
        root : PageElement
            Document, element or text node to render.

        Returns
        -------
        str
            Normalized Markdown.

        Raises
        ------
        RenderingError
            If the writer was already used, the tree contains an object that
            is not a BeautifulSoup node, or the tree is nested too deeply.

        """
        if self._consumed:
            raise RenderingError(
                "MarkdownWriter has already been run; create a new writer per document", rendering_stage="run"
            )
        self._consumed = True

        try:
            self._visit_node(root)
        except RecursionError as e:
            raise RenderingError(
                "Document tree is nested too deeply to render", rendering_stage="traversal", original_error=e
            ) from e

        markdown = normalize_markdown("".join(self._markdown))
        logger.debug("Rendered %d fragments into %d characters of Markdown", len(self._markdown), len(markdown))
        return markdown

    def _push_str(self, text: str) -> None:
        if text:
            self._markdown.append(text)

    def _visit_node(self, node: PageElement) -> None:
        current_element: ContextElement | None = None

        if isinstance(node, BeautifulSoup):
            # the document itself has no element identity
            pass
        elif isinstance(node, Tag):
            if node.name:
                current_element = ContextElement.from_tag(node)
        elif isinstance(node, PreformattedString):
            # comments, doctypes, processing instructions, CDATA
            return
        elif isinstance(node, NavigableString):
            self._push_str(render_text(str(node), self._stack))
            return
        else:
            raise RenderingError(f"Cannot render object of type {type(node).__name__}", rendering_stage="traversal")

        if current_element is not None:
            text, outcome = enter_element(current_element, self._stack)
            self._push_str(text)
            if outcome is StartTagOutcome.SKIP:
                logger.debug("Skipping <%s> subtree", current_element.tag)
                return
            self._stack.push(current_element)

        for child in node.contents:
            self._visit_node(child)

        if current_element is not None:
            self._stack.pop()
            self._push_str(exit_element(current_element, self._stack))
