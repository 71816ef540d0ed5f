"""RGBA colours with float components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

__all__ = ["Color"]


@dataclass(frozen=True)
class Color:
    """An RGBA colour; every component defaults to 1.0 (opaque white)."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> "Color":
        """Build a colour from exactly four values: r, g, b, a."""
        components = tuple(values)
        if len(components) != 4:
            raise ValueError(f"a colour needs 4 components, got {len(components)}")
        return cls(*(float(c) for c in components))

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a