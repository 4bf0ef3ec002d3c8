"""Unordered collections of labelled intervals stored column-wise."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .interval import Interval

_MISSING = object()


def _check_lengths(start: list, end: list, symbols: list) -> None:
    if not len(start) == len(end) == len(symbols):
        raise ValueError("start, end and symbol columns must have equal length")


class IntervalSet:
    """Intervals ``(start[i], end[i])`` labelled by ``mapping[symbol[i]]``.

    Symbols are stored as integer ids; ``mapping`` turns an id back into the
    symbol it stands for.  Duplicates are allowed.
    """

    def __init__(
        self,
        start: Iterable[int] = (),
        end: Iterable[int] = (),
        symbols: Iterable[Any] = (),
    ):
        start, end, symbols = list(start), list(end), list(symbols)
        _check_lengths(start, end, symbols)
        self.start: list[int] = start
        self.end: list[int] = end
        self.symbol: list[int] = []
        self.mapping: dict[int, Any] = {}
        ids: dict[Any, int] = {}
        for value in symbols:
            if value not in ids:
                ids[value] = len(ids)
                self.mapping[ids[value]] = value
            self.symbol.append(ids[value])

    @classmethod
    def from_mapped(
        cls,
        start: Iterable[int],
        end: Iterable[int],
        symbols: Iterable[int],
        mapping: Mapping[int, Any],
    ) -> "IntervalSet":
        """Build a set from symbol ids and an id-to-symbol mapping."""
        result = cls()
        result.start = list(start)
        result.end = list(end)
        result.symbol = list(symbols)
        _check_lengths(result.start, result.end, result.symbol)
        result.mapping = dict(mapping)
        return result

    @classmethod
    def from_intervals(cls, intervals: Iterable[Interval]) -> "IntervalSet":
        """Build a set from intervals, dropping exact duplicates."""
        unique = list(dict.fromkeys(intervals))
        return cls(
            [iv.start for iv in unique],
            [iv.end for iv in unique],
            [iv.symbol for iv in unique],
        )

    def get(self, sid: int) -> dict[int, int]:
        """Return ``start -> end`` for symbol id ``sid``, sorted by start.

        When several intervals share a start, the first one is kept.
        """
        found: dict[int, int] = {}
        for s, e, sym in zip(self.start, self.end, self.symbol):
            if sym == sid:
                found.setdefault(s, e)
        return dict(sorted(found.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return (
            self.start == other.start
            and self.end == other.end
            and self.symbol == other.symbol
            and self.mapping == other.mapping
        )

    __hash__ = None  # type: ignore[assignment]

    def add_all(self, intervals: Iterable[Interval]) -> bool:
        """Append the intervals not yet present; return whether any was added."""
        new = [iv for iv in dict.fromkeys(intervals) if iv not in self]
        if not new:
            return False
        ids = {value: sid for sid, value in self.mapping.items()}
        for iv in new:
            if iv.symbol not in ids:
                sid = len(self.mapping)
                ids[iv.symbol] = sid
                self.mapping[sid] = iv.symbol
            self.start.append(iv.start)
            self.end.append(iv.end)
            self.symbol.append(ids[iv.symbol])
        return True

    def __len__(self) -> int:
        return len(self.start)

    def __contains__(self, interval: object) -> bool:
        if not isinstance(interval, Interval):
            return False
        return any(
            s == interval.start
            and e == interval.end
            and self.mapping.get(sym, _MISSING) == interval.symbol
            for s, e, sym in zip(self.start, self.end, self.symbol)
        )

    def contains_all(self, intervals: Iterable[Interval]) -> bool:
        """Whether every given interval is in the set."""
        return all(iv in self for iv in intervals)

    def clear(self) -> None:
        """Remove every interval and symbol."""
        self.start.clear()
        self.end.clear()
        self.symbol.clear()
        self.mapping.clear()

    def sub_set(self, start: int, stop: int) -> "IntervalSet":
        """Intervals starting at or after ``start`` and ending before ``stop``."""
        return IntervalSet.from_intervals(
            Interval(s, e, self.mapping[sym])
            for s, e, sym in zip(self.start, self.end, self.symbol)
            if s >= start and e < stop
        )

    def format(self) -> str:
        """Return a tabular text rendering of the set."""
        rule = "------------------ IntervalSet ------------------"
        lines = [rule, "Start\tEnd\tSymbol\tValue"]
        for s, e, sym in zip(self.start, self.end, self.symbol):
            lines.append(f"{s}\t{e}\t{sym}\t{self.mapping.get(sym, '')}")
        lines.append(rule)
        return "\n".join(lines) + "\n"