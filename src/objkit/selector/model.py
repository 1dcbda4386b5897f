"""Selector model: part categories and the per-selector tracking state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Category(Enum):
    """A selector part category.

    Each member carries its position in the required ordering, whether it
    may occur at most once per selector, and the template its fragment is
    rendered with.
    """

    ELEMENT = ("element", 0, True, "{}")
    ID = ("id", 1, True, "#{}")
    CLASS = ("class", 2, False, ".{}")
    ATTRIBUTE = ("attribute", 3, False, "[{}]")
    PSEUDO_CLASS = ("pseudo-class", 4, False, ":{}")
    PSEUDO_ELEMENT = ("pseudo-element", 5, True, "::{}")

    def __init__(self, label: str, rank: int, limited: bool, template: str) -> None:
        self.label = label
        self.rank = rank
        self.limited = limited
        self.template = template

    def render(self, value: object) -> str:
        """Format *value* as a fragment of this category."""
        return self.template.format(value)


ORDER: tuple[Category, ...] = tuple(sorted(Category, key=lambda c: c.rank))


@dataclass
class SelectorState:
    """Mutable state of one selector under construction."""

    used: list[Category] = field(default_factory=list)
    seen_once: set[Category] = field(default_factory=set)
    text: str = ""

    @property
    def highest_rank(self) -> int:
        """Rank of the latest-ordered category used so far, or -1."""
        return max((c.rank for c in self.used), default=-1)

    def reset(self) -> None:
        self.used.clear()
        self.seen_once.clear()
        self.text = ""
