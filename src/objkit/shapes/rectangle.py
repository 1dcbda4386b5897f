"""Rectangle model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width/height pair whose area is derived on demand."""

    width: float = 0
    height: float = 0

    def area(self) -> float:
        return self.width * self.height
