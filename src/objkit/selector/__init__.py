from objkit.selector.builder import SelectorBuilder, css_selector_builder
from objkit.selector.errors import (
    DuplicateSelectorPartError,
    SelectorError,
    SelectorOrderError,
)
from objkit.selector.model import ORDER, Category, SelectorState

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "Category",
    "ORDER",
    "SelectorState",
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
]
