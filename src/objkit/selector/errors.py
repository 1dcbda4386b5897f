"""Selector builder error types."""

from __future__ import annotations

from objkit.selector.model import Category

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base error for selector builder misuse."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class DuplicateSelectorPartError(SelectorError):
    """A single-occurrence part (element, id, pseudo-element) was added twice."""

    def __init__(self, category: Category) -> None:
        super().__init__(DUPLICATE_MESSAGE, category=category)


class SelectorOrderError(SelectorError):
    """A part was added after a part that must follow it."""

    def __init__(self, category: Category) -> None:
        super().__init__(ORDER_MESSAGE, category=category)
