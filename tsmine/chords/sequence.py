"""Time-ordered sequences of labelled intervals."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from .event_set import IntervalEventSet


def _duration(start: int, end: int) -> int:
    return end - start + 1


def _non_decreasing(values: Sequence[int]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


@dataclass(frozen=True, eq=False)
class Element:
    """One entry of an :class:`IntervalSequence`.

    ``internal_id`` is the symbol id in the sequence; elements compare equal
    when their ids match and are ordered by start.
    """

    internal_id: int
    start: int
    end: int
    symbol: Any
    total_length: int

    @property
    def duration(self) -> int:
        """The stored duration, ``start + end - 1``."""
        return self.start + self.end - 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.internal_id == other.internal_id

    def __hash__(self) -> int:
        return hash(self.internal_id)

    def __lt__(self, other: "Element") -> bool:
        return self.start < other.start

    def format(self) -> str:
        """Return a two-line text rendering of the element."""
        return (
            "------------------ Element ------------------\n"
            f"({self.symbol} [{self.start},{self.end}])\n"
        )


class IntervalSequence:
    """Intervals ``[start[i], end[i]]`` labelled ``mapping[sequence[i]]``.

    Starts and ends are expected to be non-decreasing and every start to be
    at most its end; a sequence that breaks this triggers a
    ``RuntimeWarning``.  ``total_support`` maps each symbol id to the
    duration of its first interval.
    """

    def __init__(
        self,
        symbols: Iterable[Any] = (),
        start: Iterable[int] = (),
        end: Iterable[int] = (),
    ):
        self.sequence: list[int] = []
        self.start: list[int] = []
        self.end: list[int] = []
        self.mapping: dict[int, Any] = {}
        self.total_support: dict[int, int] = {}
        self._fill(list(symbols), list(start), list(end))
        self._warn_if_insane()

    def _fill(self, symbols: list, start: list[int], end: list[int]) -> None:
        ids: dict[Any, int] = {}
        for value, s, e in zip(symbols, start, end):
            if value not in ids:
                ids[value] = len(ids)
            sid = ids[value]
            self.mapping.setdefault(sid, value)
            self.sequence.append(sid)
            self.start.append(s)
            self.end.append(e)
            self.total_support.setdefault(sid, _duration(s, e))

    def _warn_if_insane(self) -> None:
        if not self.is_sane():
            warnings.warn(
                "the sequence was initialised with unordered or invalid intervals",
                RuntimeWarning,
                stacklevel=3,
            )

    @classmethod
    def from_mapped(
        cls,
        sequence: Iterable[int],
        start: Iterable[int],
        end: Iterable[int],
        mapping: Mapping[int, Any],
        total_support: Mapping[int, int] | None = None,
    ) -> "IntervalSequence":
        """Build from symbol ids and an id-to-symbol mapping.

        With ``total_support`` the ids are kept as given; without it the
        symbols are renumbered in order of appearance.
        """
        result = cls.__new__(cls)
        result.sequence, result.start, result.end = [], [], []
        result.mapping, result.total_support = {}, {}
        if total_support is None:
            result._fill([mapping[sid] for sid in sequence], list(start), list(end))
        else:
            result.sequence = list(sequence)
            result.start = list(start)
            result.end = list(end)
            result.mapping = dict(mapping)
            result.total_support = dict(total_support)
        result._warn_if_insane()
        return result

    def symbols(self) -> list[Any]:
        """The symbol of every interval, in sequence order."""
        return [self.mapping[sid] for sid in self.sequence]

    def symbol_supports(self) -> dict[Any, int]:
        """Map each symbol to its total support."""
        return {
            value: self.total_support.get(sid, 0)
            for sid, value in sorted(self.mapping.items())
        }

    def get(self, index: int) -> Element:
        """Return the element at position ``index``."""
        sid = self.sequence[index]
        return Element(
            sid,
            self.start[index],
            self.end[index],
            self.mapping[sid],
            self.total_support.get(sid, 0),
        )

    def __len__(self) -> int:
        return len(self.sequence)

    def length(self) -> int:
        """Time span from the first start to the last end, inclusive."""
        if not self.sequence:
            raise ValueError("an empty sequence has no length")
        return self.end[-1] - self.start[0] + 1

    def clear(self) -> None:
        """Remove every interval and symbol."""
        self.sequence.clear()
        self.start.clear()
        self.end.clear()
        self.mapping.clear()
        self.total_support.clear()

    def contains(self, element: Element) -> bool:
        """Whether the element's symbol occurs in the sequence."""
        return element.symbol in self.mapping.values()

    def contains_all(self, elements: Iterable[Element]) -> bool:
        """Whether every element's symbol occurs in the sequence."""
        return all(self.contains(element) for element in elements)

    @staticmethod
    def convert(event_set: IntervalEventSet) -> "IntervalSequence":
        """Turn events into a sequence of the symbol sets sounding between them."""
        if len(event_set) == 0:
            raise ValueError("cannot convert an empty event set")
        starts: dict[int, list[int]] = {}
        ends: dict[int, list[int]] = {}
        for index, sid, flag in zip(
            event_set.index, event_set.symbol, event_set.is_start
        ):
            (starts if flag else ends).setdefault(index, []).append(sid)

        chords: list[frozenset] = []
        chord_start: list[int] = []
        chord_end: list[int] = []
        current: set = set()
        last = 0
        for time in sorted(set(event_set.index)):
            if current:
                chord_start.append(last)
                chord_end.append(time)
                chords.append(frozenset(current))
            last = time
            for sid in ends.get(time, ()):
                current.discard(event_set.mapping.get(sid))
            for sid in starts.get(time, ()):
                current.add(event_set.mapping.get(sid))
        return IntervalSequence(chords, chord_start, chord_end)

    def index_of(self, element: Element) -> int:
        """Position of the element's symbol among the mapped symbols.

        When the symbol is absent the last position is returned, or -1 for
        an empty mapping.
        """
        position = -1
        for _, value in sorted(self.mapping.items()):
            position += 1
            if value == element.symbol:
                return position
        return position

    def last_index_of(self, element: Element) -> int:
        """Last position holding the element's symbol, or -1."""
        symbols = self.symbols()
        return next(
            (i for i in reversed(range(len(symbols))) if symbols[i] == element.symbol),
            -1,
        )

    def sub_sequence(self, from_index: int, to_index: int) -> "IntervalSequence":
        """Intervals at positions ``from_index`` up to, not including, ``to_index``."""
        part = slice(from_index, to_index)
        sequence = self.sequence[part]
        start = self.start[part]
        end = self.end[part]
        mapping: dict[int, Any] = {}
        support: dict[int, int] = {}
        for sid, s, e in zip(sequence, start, end):
            if sid not in support:
                mapping[sid] = self.mapping[sid]
                support[sid] = _duration(s, e)
        return IntervalSequence.from_mapped(sequence, start, end, mapping, support)

    def restrictive_sub_sequence(self, start: int, stop: int) -> "IntervalSequence":
        """Sub-sequence from the first interval starting at or after ``start``
        up to, not including, the first one ending at or after ``stop``."""
        size = len(self.sequence)
        current_start = current_end = 0
        from_index = 0
        i = 0
        while i < size and current_start < start:
            from_index = i
            current_start = self.start[i]
            i += 1
        if from_index > size or current_end >= stop:
            return IntervalSequence()
        to_index = from_index
        i = from_index
        while i < size and current_end < stop:
            to_index = i
            current_end = self.end[i]
            i += 1
        return self.sub_sequence(from_index, to_index)

    def lazy_sub_sequence(self, start: int, stop: int) -> "IntervalSequence":
        """Intervals from the first ending at or after ``start`` up to, not
        including, the first starting at or after ``stop``."""
        size = len(self.sequence)
        from_index = next(
            (i for i in range(size) if self.end[i] >= start), len(self.start)
        )
        to_index = next((i for i in range(size) if self.start[i] >= stop), 0)
        if from_index >= to_index:
            return IntervalSequence()
        return self.sub_sequence(from_index, to_index)

    def is_sane(self) -> bool:
        """Whether starts and ends are ordered and every interval is valid."""
        return (
            _non_decreasing(self.start)
            and _non_decreasing(self.end)
            and len(self.start) == len(self.end)
            and all(s <= e for s, e in zip(self.start, self.end))
        )

    def format(self) -> str:
        """Return a tabular text rendering of the sequence."""
        rule = "------------------ IntervalSequence ------------------"
        lines = [rule, "Seq\tStart\tEnd\tTotalSupport\t"]
        for sid, s, e in zip(self.sequence, self.start, self.end):
            lines.append(f"{sid}\t{s}\t{e}\t{self.total_support.get(sid, '')}\t")
        lines.append(rule)
        return "\n".join(lines) + "\n"