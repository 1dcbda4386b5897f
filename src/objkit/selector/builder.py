"""Fluent builder for CSS-like selector strings.

Usage:
    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'

A handle returned by the facade is *open*: further part calls mutate it in
place. The facade itself and handles produced by ``combine`` are *closed*;
calling a part method on them starts a brand-new open handle.

``stringify`` returns the accumulated text and resets the handle, so an open
handle can be reused for an unrelated selector afterwards.
"""

from __future__ import annotations

import logging

from objkit.selector.errors import DuplicateSelectorPartError, SelectorOrderError
from objkit.selector.model import Category, SelectorState

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Chainable selector handle; a closed instance acts as the factory."""

    def __init__(self, *, _open: bool = False) -> None:
        self._open = _open
        self._state = SelectorState()

    # --- part-adding operations -----------------------------------------------

    def element(self, value: object) -> SelectorBuilder:
        return self._add(Category.ELEMENT, value)

    def id(self, value: object) -> SelectorBuilder:
        return self._add(Category.ID, value)

    def class_(self, value: object) -> SelectorBuilder:
        return self._add(Category.CLASS, value)

    def attr(self, value: object) -> SelectorBuilder:
        return self._add(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: object) -> SelectorBuilder:
        return self._add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: object) -> SelectorBuilder:
        return self._add(Category.PSEUDO_ELEMENT, value)

    def add(self, category: Category, value: object) -> SelectorBuilder:
        """Add a part by category; the named methods are shortcuts for this."""
        return self._add(category, value)

    # --- combination / output -------------------------------------------------

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with *combinator* into a new closed handle.

        Both operands are stringified, and therefore reset.
        """
        combined = SelectorBuilder()
        combined._state.text = f"{left.stringify()} {combinator} {right.stringify()}"
        return combined

    def stringify(self) -> str:
        """Return the selector text and reset this handle to empty state."""
        text = self._state.text
        self._state.reset()
        return text

    @property
    def is_open(self) -> bool:
        return self._open

    def __repr__(self) -> str:
        state = "open" if self._open else "closed"
        return f"SelectorBuilder({self._state.text!r}, {state})"

    # --- internals ------------------------------------------------------------

    def _add(self, category: Category, value: object) -> SelectorBuilder:
        target = self if self._open else SelectorBuilder(_open=True)
        target._check(category)
        state = target._state
        state.used.append(category)
        if category.limited:
            state.seen_once.add(category)
        state.text += category.render(value)
        return target

    def _check(self, category: Category) -> None:
        state = self._state
        if category.limited and category in state.seen_once:
            logger.debug("Rejected duplicate %s in %r", category.label, state.text)
            raise DuplicateSelectorPartError(category)
        if state.highest_rank > category.rank:
            logger.debug("Rejected out-of-order %s in %r", category.label, state.text)
            raise SelectorOrderError(category)


css_selector_builder = SelectorBuilder()
