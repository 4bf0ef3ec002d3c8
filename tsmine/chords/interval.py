"""A labelled interval."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Interval:
    """An interval ``[start, end]`` carrying a symbol."""

    start: int
    end: int
    symbol: Any

    def __lt__(self, other: "Interval") -> bool:
        return (
            self.start <= other.start
            and self.end <= other.end
            and self.symbol != other.symbol
        )

    def format(self) -> str:
        """Return a two-line text rendering of the interval."""
        return (
            "------------------ Interval ------------------\n"
            f"({self.symbol} [{self.start},{self.end}])\n"
        )