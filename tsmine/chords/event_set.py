"""Interval start and end events ordered in time."""

from __future__ import annotations

import warnings
from typing import Any, Iterable, Iterator, Mapping

from .events import Event
from .interval_set import IntervalSet


def _order_key(index: int, started: bool) -> tuple[int, int]:
    return index, 0 if started else 1


class IntervalEventSet:
    """Column-wise event list: time ``index``, symbol id and start flag.

    Events are expected in time order with starts before ends at equal times;
    a set that breaks this order triggers a ``RuntimeWarning``.
    """

    def __init__(
        self,
        index: Iterable[int] = (),
        symbol: Iterable[int] = (),
        is_start: Iterable[bool] = (),
        mapping: Mapping[int, Any] | None = None,
    ):
        self.index: list[int] = list(index)
        self.symbol: list[int] = list(symbol)
        self.is_start: list[bool] = [bool(flag) for flag in is_start]
        if not len(self.index) == len(self.symbol) == len(self.is_start):
            raise ValueError("index, symbol and start columns must have equal length")
        self.mapping: dict[int, Any] = dict(mapping or {})
        if not self.test_order():
            warnings.warn(
                "the given IntervalEventSet violates the internal order",
                RuntimeWarning,
                stacklevel=2,
            )

    @classmethod
    def from_events(cls, events: Iterable[Event]) -> "IntervalEventSet":
        """Build from events, renumbering symbols in order of appearance."""
        ordered = sorted(
            dict.fromkeys(events), key=lambda e: _order_key(e.index, e.started)
        )
        ids: dict[int, int] = {}
        mapping: dict[int, Any] = {}
        symbols = []
        for event in ordered:
            if event.symbol not in ids:
                ids[event.symbol] = len(ids)
                mapping[ids[event.symbol]] = event.mapping
            symbols.append(ids[event.symbol])
        return cls(
            [e.index for e in ordered],
            symbols,
            [e.started for e in ordered],
            mapping,
        )

    @classmethod
    def from_interval_set(cls, interval_set: IntervalSet) -> "IntervalEventSet":
        """Split every interval into a start and an end event, sorted by time."""
        n = len(interval_set)
        indices = list(interval_set.end) + list(interval_set.start)
        symbols = list(interval_set.symbol) * 2
        flags = [False] * n + [True] * n
        order = sorted(
            range(2 * n), key=lambda k: _order_key(indices[k], flags[k])
        )
        return cls(
            [indices[k] for k in order],
            [symbols[k] for k in order],
            [flags[k] for k in order],
            interval_set.mapping,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalEventSet):
            return NotImplemented
        return (
            self.is_start == other.is_start
            and self.symbol == other.symbol
            and self.index == other.index
        )

    __hash__ = None  # type: ignore[assignment]

    def clear(self) -> None:
        """Remove every event and symbol."""
        self.index.clear()
        self.symbol.clear()
        self.is_start.clear()
        self.mapping.clear()

    def __contains__(self, event: object) -> bool:
        if not isinstance(event, Event):
            return False
        return any(
            i == event.index and s == event.symbol and f == event.started
            for i, s, f in zip(self.index, self.symbol, self.is_start)
        )

    def contains_all(self, events: Iterable[Event]) -> bool:
        """Whether every given event is in the set."""
        return all(event in self for event in events)

    def __len__(self) -> int:
        return len(self.index)

    def is_empty(self) -> bool:
        """Whether no symbol is mapped."""
        return not self.mapping

    def _events(self) -> Iterator[Event]:
        for i, s, f in zip(self.index, self.symbol, self.is_start):
            yield Event(i, f, s, self.mapping.get(s))

    def test_order(self) -> bool:
        """Whether each event precedes the next one in the internal order."""
        if self.is_empty():
            return True
        events = list(self._events())
        return all(prev < cur for prev, cur in zip(events, events[1:]))

    def format(self) -> str:
        """Return a tabular text rendering of the events."""
        rule = "------------------ IntervalEventSet ------------------"
        lines = [rule, "Index\tSymbol\tIsStart\tValue"]
        for i, s, f in zip(self.index, self.symbol, self.is_start):
            lines.append(f"{i}\t{s}\t{int(f)}\t{self.mapping.get(s, '')}")
        lines.append(rule)
        return "\n".join(lines) + "\n"