"""Start and end events of labelled intervals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Event:
    """The start or end of an interval at time ``index``.

    ``symbol`` is the symbol id and ``mapping`` the symbol it stands for;
    equality ignores ``mapping``.
    """

    index: int
    started: bool
    symbol: int
    mapping: Any = field(default=None, compare=False)

    def __lt__(self, other: "Event") -> bool:
        """Order by time; at equal times an end never precedes a start."""
        diff = self.index - other.index
        if diff != 0:
            return diff < 0
        return not (not self.started and other.started)

    def format(self) -> str:
        """Return a two-line text rendering of the event."""
        flag = "1" if self.started else "0"
        return (
            "------------------ Event ------------------\n"
            f"[{self.index}\t{self.symbol}\t{flag}]\n"
        )