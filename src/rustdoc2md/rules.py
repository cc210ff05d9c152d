#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rustdoc2md/rules.py
"""Per-tag rendering rules.

Two dispatch tables drive the writer. ``ENTER_RULES`` is consulted when an
element is entered and returns the text to emit together with a
:class:`StartTagOutcome`; ``EXIT_RULES`` is consulted after the element's
children have been rendered and returns the text to emit. Tags absent from a
table are transparent: nothing is emitted and the children render in place.

Both lookups take the element being rendered and the stack of its open
ancestors. The element itself is never on that stack when its rules run.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from rustdoc2md.constants import (
    HEADING_LEVELS,
    HIDDEN_SUMMARY_CLASS,
    ITEM_NAME_CLASS,
    LIST_TAGS,
    PREFORMATTED_TAG,
    RUST_CODE_CLASS,
    RUST_FENCE_LANGUAGE,
    SKIPPED_CONTAINER_CLASSES,
    SKIPPED_TAGS,
)
from rustdoc2md.context import ContextElement, TagContextStack


class StartTagOutcome(Enum):
    """Whether the writer should descend into an element after entering it."""

    CONTINUE = "continue"
    SKIP = "skip"


EnterResult = tuple[str, StartTagOutcome]
EnterRule = Callable[[ContextElement, TagContextStack], EnterResult]
ExitRule = Callable[[ContextElement, TagContextStack], str]

_CONTINUE: EnterResult = ("", StartTagOutcome.CONTINUE)
_SKIP: EnterResult = ("", StartTagOutcome.SKIP)


# -----------------------------------------------------------------------------
# Enter rules
# -----------------------------------------------------------------------------


def _enter_skipped(element: ContextElement, stack: TagContextStack) -> EnterResult:
    return _SKIP


def _enter_heading(element: ContextElement, stack: TagContextStack) -> EnterResult:
    return f"\n\n{'#' * HEADING_LEVELS[element.tag]} ", StartTagOutcome.CONTINUE


def _enter_code(element: ContextElement, stack: TagContextStack) -> EnterResult:
    if stack.is_inside(PREFORMATTED_TAG):
        return _CONTINUE
    return "`", StartTagOutcome.CONTINUE


def _enter_pre(element: ContextElement, stack: TagContextStack) -> EnterResult:
    language = RUST_FENCE_LANGUAGE if element.has_class_token(RUST_CODE_CLASS) else ""
    return f"\n```{language}\n", StartTagOutcome.CONTINUE


def _enter_list(element: ContextElement, stack: TagContextStack) -> EnterResult:
    return "\n", StartTagOutcome.CONTINUE


def _enter_list_item(element: ContextElement, stack: TagContextStack) -> EnterResult:
    return "- ", StartTagOutcome.CONTINUE


def _enter_summary(element: ContextElement, stack: TagContextStack) -> EnterResult:
    """Drop the collapsed "hideme" summaries rustdoc adds to item docs."""
    if element.class_equals(HIDDEN_SUMMARY_CLASS):
        return _SKIP
    return _CONTINUE


def _enter_container(element: ContextElement, stack: TagContextStack) -> EnterResult:
    """Prune sidebar and navigation containers, open item-name terms."""
    if element.has_class_token(*SKIPPED_CONTAINER_CLASSES):
        return _SKIP
    if element.class_equals(ITEM_NAME_CLASS):
        return "`", StartTagOutcome.CONTINUE
    return _CONTINUE


ENTER_RULES: dict[str, EnterRule] = {
    **{tag: _enter_skipped for tag in SKIPPED_TAGS},
    **{tag: _enter_heading for tag in HEADING_LEVELS},
    "code": _enter_code,
    PREFORMATTED_TAG: _enter_pre,
    **{tag: _enter_list for tag in LIST_TAGS},
    "li": _enter_list_item,
    "summary": _enter_summary,
    "div": _enter_container,
    "span": _enter_container,
}


# -----------------------------------------------------------------------------
# Exit rules
# -----------------------------------------------------------------------------


def _exit_heading(element: ContextElement, stack: TagContextStack) -> str:
    return "\n\n"


def _exit_code(element: ContextElement, stack: TagContextStack) -> str:
    return "" if stack.is_inside(PREFORMATTED_TAG) else "`"


def _exit_pre(element: ContextElement, stack: TagContextStack) -> str:
    return "\n```\n"


def _exit_line(element: ContextElement, stack: TagContextStack) -> str:
    return "\n"


def _exit_div(element: ContextElement, stack: TagContextStack) -> str:
    # closes the term opened by _enter_container; the sibling content follows
    return "`: " if element.class_equals(ITEM_NAME_CLASS) else ""


EXIT_RULES: dict[str, ExitRule] = {
    **{tag: _exit_heading for tag in HEADING_LEVELS},
    "code": _exit_code,
    PREFORMATTED_TAG: _exit_pre,
    **{tag: _exit_line for tag in LIST_TAGS},
    "li": _exit_line,
    "div": _exit_div,
}


def enter_element(element: ContextElement, stack: TagContextStack) -> EnterResult:
    """Apply the enter rule for ``element``.

    Parameters
    ----------
    element : ContextElement
        Element being entered.
    stack : TagContextStack
        Open ancestors of ``element``.

    Returns
    -------
    tuple of (str, StartTagOutcome)
        Text to emit and whether to render the element's subtree.

    """
    rule = ENTER_RULES.get(element.tag)
    if rule is None:
        return _CONTINUE
    return rule(element, stack)


def exit_element(element: ContextElement, stack: TagContextStack) -> str:
    """Apply the exit rule for ``element`` and return the text to emit."""
    rule = EXIT_RULES.get(element.tag)
    if rule is None:
        return ""
    return rule(element, stack)
