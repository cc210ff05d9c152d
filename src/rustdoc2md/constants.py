#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the rustdoc2md library.

This module centralizes the fixed rendering policy used when turning rustdoc
HTML pages into Markdown: which tags are pruned, which class names mark
navigation chrome, and which glyphs are stripped from text.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Tag Policy - Tag names with special handling
3. Class Policy - Class names that change how an element renders
4. Parsing Defaults - Defaults for the parsing entry point
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html.parser", "html5lib", "lxml"]

# =============================================================================
# Tag Policy
# =============================================================================

# Elements whose entire subtree never reaches the output
SKIPPED_TAGS: frozenset[str] = frozenset({"head", "script", "nav"})

# Heading tag -> ATX heading level
HEADING_LEVELS: dict[str, int] = {f"h{level}": level for level in range(1, 7)}

LIST_TAGS: frozenset[str] = frozenset({"ul", "ol"})

PREFORMATTED_TAG = "pre"

# =============================================================================
# Class Policy
# =============================================================================

CLASS_ATTRIBUTE = "class"

# div/span containers holding rustdoc navigation chrome
SKIPPED_CONTAINER_CLASSES: frozenset[str] = frozenset({"nav-container", "sidebar-elems", "out-of-band"})

HIDDEN_SUMMARY_CLASS = "hideme"

ITEM_NAME_CLASS = "item-name"

RUST_CODE_CLASS = "rust"

RUST_FENCE_LANGUAGE = "rs"

# =============================================================================
# Text Handling
# =============================================================================

# Anchor glyph rustdoc places next to heading text
SECTION_SIGN = "§"

TEXT_TRIM_CHARS = "\n\r" + SECTION_SIGN

# =============================================================================
# Parsing Defaults
# =============================================================================

DEFAULT_HTML_PARSER: HtmlParser = "html5lib"

HTML_PARSER_CHOICES: tuple[str, ...] = ("html.parser", "html5lib", "lxml")

# install name for each BeautifulSoup tree builder that is not built in
HTML_PARSER_PACKAGES: dict[str, str] = {"html5lib": "html5lib", "lxml": "lxml"}
