#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rustdoc2md/context.py
"""Ancestor tracking for the Markdown writer.

While the writer walks a tree it keeps a stack of the elements that are
currently open. Rendering rules consult this stack to decide things such as
whether a ``<code>`` element is inline or part of a fenced block.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from rustdoc2md.constants import CLASS_ATTRIBUTE

if TYPE_CHECKING:
    from bs4.element import Tag


def _attribute_value(value: object) -> str:
    # BeautifulSoup splits multi-valued attributes such as class into lists
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


@dataclass(frozen=True)
class ContextElement:
    """An open element as seen by the rendering rules.

    Parameters
    ----------
    tag : str
        Element tag name.
    attrs : tuple of (str, str)
        Attribute name/value pairs in document order.

    """

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_tag(cls, tag: Tag) -> ContextElement:
        """Build a context element from a BeautifulSoup tag."""
        attrs = tuple((str(name), _attribute_value(value)) for name, value in (tag.attrs or {}).items())
        return cls(tag=tag.name, attrs=attrs)

    def get_attribute(self, name: str) -> str | None:
        """Return the value of the first attribute called ``name``, if any."""
        for attr_name, value in self.attrs:
            if attr_name == name:
                return value
        return None

    @property
    def class_value(self) -> str | None:
        return self.get_attribute(CLASS_ATTRIBUTE)

    def class_tokens(self) -> list[str]:
        """Split the class attribute on single spaces, trimming each token."""
        value = self.class_value
        if value is None:
            return []
        return [token.strip() for token in value.split(" ")]

    def has_class_token(self, *names: str) -> bool:
        """Return True if any space-separated class token is one of ``names``."""
        tokens = self.class_tokens()
        return any(name in tokens for name in names)

    def class_equals(self, name: str) -> bool:
        """Return True if the class attribute is exactly ``name``."""
        return self.class_value == name


class TagContextStack:
    """Open-ancestor chain, ordered outermost to innermost."""

    def __init__(self) -> None:
        self._elements: list[ContextElement] = []

    def push(self, element: ContextElement) -> None:
        self._elements.append(element)

    def pop(self) -> ContextElement:
        return self._elements.pop()

    def is_inside(self, tag: str) -> bool:
        """Return True if an element named ``tag`` is currently open."""
        return any(element.tag == tag for element in self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[ContextElement]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return f"TagContextStack({' > '.join(element.tag for element in self._elements)})"
