"""Shape value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """An axis-aligned rectangle."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height
