"""Public conversion functions for rustdoc HTML pages."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/rustdoc2md/api.py
from __future__ import annotations

import logging
from typing import Any, Union

from bs4 import BeautifulSoup
from bs4.element import PageElement
from bs4.exceptions import FeatureNotFound

from rustdoc2md.constants import HTML_PARSER_PACKAGES
from rustdoc2md.exceptions import DependencyError, InvalidOptionsError, ParsingError, ValidationError
from rustdoc2md.options import RustdocOptions
from rustdoc2md.utils.decorators import debug_timer
from rustdoc2md.writer import MarkdownWriter

logger = logging.getLogger(__name__)


def _builder_arguments(html_parser: str) -> dict[str, Any]:
    arguments: dict[str, Any] = {"multi_valued_attributes": None}
    if html_parser == "html.parser":
        # only the html.parser builder accepts this; the others keep the first value already
        arguments["on_duplicate_attribute"] = "ignore"
    return arguments


def parse_html(html: Union[str, bytes], options: RustdocOptions | None = None) -> BeautifulSoup:
    """Parse an HTML page into a BeautifulSoup tree ready for rendering.

    Attribute values are kept as written (``multi_valued_attributes=None``) so
    that class-based rules see the raw ``class`` string. When an attribute is
    repeated the first value wins with every tree builder; html5lib and lxml do
    this natively, html.parser is told to via ``on_duplicate_attribute``.

    Parameters
    ----------
    html : str or bytes
        HTML markup. Bytes are decoded by BeautifulSoup's encoding detection.
    options : RustdocOptions, optional
        Parsing options. Defaults to ``RustdocOptions()``.

    Returns
    -------
    BeautifulSoup
        Parsed document.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a RustdocOptions instance.
    ValidationError
        If ``html`` is neither str nor bytes.
    DependencyError
        If the selected tree builder is not installed.
    ParsingError
        If the tree builder fails on the input.

    """
    if options is None:
        options = RustdocOptions()
    elif not isinstance(options, RustdocOptions):
        raise InvalidOptionsError(
            converter_name="parse_html",
            expected_type=RustdocOptions,
            received_type=type(options),
        )

    if not isinstance(html, (str, bytes)):
        raise ValidationError(
            f"HTML input must be str or bytes, got {type(html).__name__}",
            parameter_name="html",
            parameter_value=type(html),
        )

    try:
        with debug_timer(logger, f"Parsing ({options.html_parser})"):
            return BeautifulSoup(html, options.html_parser, **_builder_arguments(options.html_parser))
    except FeatureNotFound as e:
        package = HTML_PARSER_PACKAGES.get(options.html_parser)
        raise DependencyError(
            converter_name="rustdoc2md",
            missing_packages=[(package, "")] if package else [],
            original_error=e,
        ) from e
    except Exception as e:
        raise ParsingError(
            f"Failed to parse HTML with {options.html_parser}: {e}", parsing_stage="tree_building", original_error=e
        ) from e


def render_markdown(root: PageElement) -> str:
    """Render an already parsed tree to Markdown.

    Parameters
    ----------
    root : PageElement
        Typically a ``BeautifulSoup`` document, but any element or text node
        can be rendered on its own.
        Trees built outside :func:`parse_html` should pass
        ``multi_valued_attributes=None`` to ``BeautifulSoup`` so the exact
        ``class`` comparisons see the attribute as written.

    Returns
    -------
    str
        Normalized Markdown.

    """
    with debug_timer(logger, "Rendering Markdown"):
        return MarkdownWriter().run(root)


def html_to_markdown(html: Union[str, bytes], options: RustdocOptions | None = None) -> str:
    """Convert a rustdoc HTML page to Markdown.

    Parameters
    ----------
    html : str or bytes
        HTML markup of the page.
    options : RustdocOptions, optional
        Parsing options.

    Returns
    -------
    str
        Markdown document.

    Examples
    --------
        >>> html_to_markdown('<div class="item-name">Vec</div>A growable array')
        '`Vec`: A growable array'

    """
    return render_markdown(parse_html(html, options))
