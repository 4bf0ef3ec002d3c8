"""Closed itemset mining over interval sequences of symbol sets.

Occurrences are kept as vertical bit vectors, one flag per interval of the
sequence.  The support of a bit vector is the total duration of the
intervals whose flag is set.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Sequence

from .sequence import IntervalSequence

Bits = tuple[bool, ...]


def _bits_and(a: Sequence[bool], b: Sequence[bool]) -> Bits:
    return tuple(x and y for x, y in zip(a, b))


def _result_order(entry: tuple[frozenset, Bits]) -> list:
    return sorted(entry[0])


class MinDurVerticalClosedItemset:
    """Vertical itemset store with duration-aware supports and margin settings.

    ``alpha`` is the margin: a closed set is dropped when a superset keeps at
    least ``1 - alpha`` of its support.  ``min_duration`` is the duration an
    occurrence must exceed to count towards an item's support.
    """

    def __init__(self, min_support: int = 0, alpha: float = 0.0, min_duration: int = 0):
        self.min_support = min_support
        self.beta = 1.0 - alpha
        self.min_duration = min_duration
        self.supp: list[int] = []
        self.item: dict[Hashable, Bits] = {}
        self.result: dict[frozenset, Bits] = {}

    def support_map(self) -> dict[frozenset, int]:
        """Map each resulting itemset to the support of its occurrences."""
        return {key: self.transaction_support(bits) for key, bits in self.result.items()}

    def add_result(self, closed_set: Iterable[Any], transactions: Sequence[bool]) -> None:
        """Record a closed itemset; an itemset already recorded is kept as is."""
        self.result.setdefault(frozenset(closed_set), tuple(transactions))

    def is_margin(self, superset: int, subset: int) -> bool:
        """Whether the superset keeps less than ``beta`` of the subset's support."""
        return superset / subset < self.beta

    def transaction_support(self, bits: Sequence[bool]) -> int:
        """Total duration of the intervals flagged in ``bits``."""
        return sum(duration for flag, duration in zip(bits, self.supp) if flag)

    def _bits(self, symbol: Any) -> Bits:
        return self.item.get(symbol, tuple(False for _ in self.supp))

    def cover(self, symbols: Iterable[Any]) -> Bits:
        """Intervals holding every symbol; all intervals for no symbol."""
        result: Bits = tuple(True for _ in self.supp)
        for symbol in symbols:
            result = _bits_and(result, self._bits(symbol))
        return result

    @staticmethod
    def is_subset(a: Sequence[bool], b: Sequence[bool]) -> bool:
        """Whether every interval flagged in ``a`` is flagged in ``b``."""
        return all(y for x, y in zip(a, b) if x) and not any(a[len(b):])

    def preprocess(self, sequence: IntervalSequence) -> None:
        """Build interval durations and item bit vectors, then drop rare items."""
        symbol_sets = sequence.symbols()
        size = len(symbol_sets)
        self.supp = [e - s + 1 for s, e in zip(sequence.start, sequence.end)]
        flags: dict[Any, list[bool]] = {}
        for position, symbols in enumerate(symbol_sets):
            for symbol in symbols:
                flags.setdefault(symbol, [False] * size)[position] = True
        self.item = {symbol: tuple(flags[symbol]) for symbol in sorted(flags)}
        self.remove_infrequent()

    def remove_infrequent(self) -> None:
        """Drop every item whose support is below the minimal support."""
        rare = [s for s in self.item if self.item_support(s) < self.min_support]
        for symbol in rare:
            del self.item[symbol]

    def sort_by_supports(self, post_set: Iterable[Any]) -> list[Any]:
        """Order symbols by the number of intervals holding them, then by symbol."""
        groups: dict[int, list[Any]] = {}
        for symbol in sorted(post_set):
            groups.setdefault(sum(self._bits(symbol)), []).append(symbol)
        return [symbol for count in sorted(groups) for symbol in groups[count]]

    def item_support(self, symbol: Any) -> int:
        """Summed durations above ``min_duration`` of the symbol's occurrences.

        The duration of the last occurrence is never added.
        """
        total = 0
        duration = 0
        for flag, length in zip(self._bits(symbol), self.supp):
            if flag:
                if duration > self.min_duration:
                    total += duration
                duration = length
        return total

    def itemset_support(self, symbols: Iterable[Any]) -> int:
        """Summed durations above ``min_duration`` of the stretches that end
        where the itemset occurs; the total duration for an empty itemset."""
        symbols = list(symbols)
        if not symbols:
            return sum(self.supp)
        total = 0
        duration = 0
        for flag, length in zip(self.cover(symbols), self.supp):
            if flag:
                if duration > self.min_duration:
                    total += duration
                duration = 0
            duration += length
        return total


class MarginDCIClosedIntersection(MinDurVerticalClosedItemset):
    """DCI-Closed mining of margin-closed itemsets, margins checked by intersection."""

    def __init__(self, min_support: int = 0, alpha: float = 0.0, min_duration: int = 0):
        super().__init__(min_support, alpha, min_duration)
        self.sorted_by_support: list[Any] = []
        self.support_per_item: list[int] = []

    def run(self, sequence: IntervalSequence) -> dict[frozenset, Bits]:
        """Mine the closed itemsets of ``sequence`` mapped to their occurrences."""
        self.preprocess(sequence)
        bottom = self.bottom_closure()
        post_set = set(self.item) - set(bottom)
        self.sorted_by_support = self.sort_by_supports(post_set)
        self.support_per_item = [self.item_support(s) for s in self.sorted_by_support]

        bottom_support = sum(self.supp)
        if bottom_support >= self.min_support:
            self.test_margin(set(bottom), self.cover(bottom), bottom_support)
        self.dci_closed(
            bottom, [], list(self.sorted_by_support), self.cover(bottom), bottom_support
        )
        self.result = dict(sorted(self.result.items(), key=_result_order))
        return self.result

    def dci_closed(
        self,
        closed_set: Sequence[Any],
        pre_set: Sequence[Any],
        post_set: Sequence[Any],
        old_bits: Sequence[bool],
        last_support: int,
    ) -> bool:
        """Extend ``closed_set`` depth first; return whether every frequent
        extension fell below the margin of ``last_support``."""
        pre = list(pre_set)
        post = list(post_set)
        was_margin = True
        last_supp = last_support * self.beta

        while post:
            symbol = post.pop(0)
            new_gen = [*closed_set, symbol]
            new_bits = _bits_and(old_bits, self._bits(symbol))
            current = self.transaction_support(new_bits)
            if current >= self.min_support and not self.is_duplicate(new_bits, pre):
                was_margin &= current < last_supp
                closed_new = list(new_gen)
                post_new = []
                for other in post:
                    if self.is_subset(new_bits, self._bits(other)):
                        closed_new.append(other)
                    else:
                        post_new.append(other)
                if self.dci_closed(closed_new, list(pre), post_new, new_bits, current):
                    self.test_margin(set(closed_new), new_bits, current)
                pre.append(symbol)
        return was_margin

    def test_margin(
        self, closed_set: Iterable[Any], transactions: Sequence[bool], closed_support: int
    ) -> None:
        """Record ``closed_set`` unless a frequent one-item extension keeps
        at least ``beta`` of its support."""
        closed_set = set(closed_set)
        if self.beta != 1:
            closed_supp = closed_support * self.beta
            position = len(self.support_per_item) - 1
            for symbol in reversed(self.sorted_by_support):
                if symbol in closed_set:
                    continue
                item_supp = self.support_per_item[position]
                position -= 1
                if item_supp < closed_supp:
                    break
                current = self.transaction_support(
                    _bits_and(self._bits(symbol), transactions)
                )
                if current >= self.min_support and current >= closed_supp:
                    return
        self.add_result(closed_set, transactions)

    def bottom_closure(self) -> list[Any]:
        """Items present in every interval, in symbol order."""
        size = len(self.supp)
        return [symbol for symbol, bits in self.item.items() if sum(bits) == size]

    def is_duplicate(self, new_gen: Sequence[bool], pre_set: Iterable[Any]) -> bool:
        """Whether an already processed item covers every occurrence of ``new_gen``."""
        return any(self.is_subset(new_gen, self._bits(symbol)) for symbol in pre_set)