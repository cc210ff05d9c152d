#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for parsing rustdoc HTML.

The Markdown rendering policy itself is fixed; the options here only steer
how an HTML string is turned into the BeautifulSoup tree that gets rendered.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from rustdoc2md.constants import DEFAULT_HTML_PARSER, HTML_PARSER_CHOICES, HtmlParser


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class RustdocOptions(CloneFrozenMixin):
    """Configuration options for rustdoc HTML to Markdown conversion.

    Parameters
    ----------
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html5lib"
        BeautifulSoup tree builder used to parse the HTML input.

    Examples
    --------
    Use the built-in parser instead of html5lib:

        >>> options = RustdocOptions(html_parser="html.parser")

    """

    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": (
                "BeautifulSoup parser to use: 'html5lib' (standards-compliant, matches browser behavior), "
                "'html.parser' (built-in, fast, may differ from browsers), "
                "'lxml' (fast, requires C library)"
            ),
            "choices": list(HTML_PARSER_CHOICES),
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate the selected parser.

        Raises
        ------
        ValueError
            If html_parser is not a supported BeautifulSoup tree builder.

        """
        if self.html_parser not in HTML_PARSER_CHOICES:
            raise ValueError(
                f"html_parser must be one of {', '.join(HTML_PARSER_CHOICES)}, got {self.html_parser!r}"
            )
