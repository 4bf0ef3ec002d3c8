"""Column-wise storage of the segments of a piecewise approximation."""

from __future__ import annotations

from dataclasses import dataclass, field

FLT_MAX = 3.4028234663852886e38

_DEFAULTS = {
    "leftx": 0,
    "rightx": 0,
    "lefty": 0.0,
    "righty": 0.0,
    "mc": 0.0,
    "entrp": 0.0,
    "delta": 0.0,
}


@dataclass
class Segment:
    """Parallel lists describing ``nb_seg`` consecutive segments.

    ``leftx``/``rightx`` are inclusive sample bounds, ``lefty``/``righty`` the
    fitted end values, ``mc`` the merge cost with the next segment, ``entrp``
    the approximate entropy, ``best`` the fitted values and ``delta`` the
    cached entropy gain of a merge.
    """

    leftx: list[int] = field(default_factory=list)
    rightx: list[int] = field(default_factory=list)
    lefty: list[float] = field(default_factory=list)
    righty: list[float] = field(default_factory=list)
    mc: list[float] = field(default_factory=list)
    entrp: list[float] = field(default_factory=list)
    best: list[list[float]] = field(default_factory=list)
    delta: list[float] = field(default_factory=list)
    nb_seg: int = 0

    @staticmethod
    def fine_grained(data_size: int) -> "Segment":
        """Split ``data_size`` samples into pairs; the last segment takes any rest."""
        count = data_size // 2
        if count < 1:
            raise ValueError("at least two samples are needed to build segments")
        leftx = [2 * i for i in range(count)]
        rightx = [left + 1 for left in leftx]
        rightx[-1] = data_size - 1
        return Segment(
            leftx=leftx,
            rightx=rightx,
            lefty=[0.0] * count,
            righty=[0.0] * count,
            mc=[FLT_MAX] * count,
            entrp=[0.0] * count,
            best=[[] for _ in range(count)],
            delta=[0.0] * count,
            nb_seg=count,
        )

    def single(self, index: int) -> "Segment":
        """Return a one-segment copy of segment ``index`` (empty if out of range).

        The copy's right value is taken from the left value of the original.
        """
        if not 0 <= index < self.nb_seg:
            return Segment()
        return Segment(
            leftx=[self.leftx[index]],
            rightx=[self.rightx[index]],
            lefty=[self.lefty[index]],
            righty=[self.lefty[index]],
            mc=[self.mc[index]],
            entrp=[self.entrp[index]],
            best=[list(self.best[index])],
            delta=[self.delta[index]],
            nb_seg=1,
        )

    def clear(self) -> None:
        """Remove every segment."""
        self.nb_seg = 0
        for name in (*_DEFAULTS, "best"):
            getattr(self, name).clear()

    def _row(self, i: int) -> tuple:
        return (
            self.leftx[i],
            self.rightx[i],
            self.lefty[i],
            self.righty[i],
            self.mc[i],
            self.entrp[i],
            list(self.best[i]),
            self.delta[i],
        )

    def _columns(self) -> tuple:
        return (
            self.leftx,
            self.rightx,
            self.lefty,
            self.righty,
            self.mc,
            self.entrp,
            self.best,
            self.delta,
        )

    def push_back(self, other: "Segment") -> None:
        """Append the segments of ``other`` in order."""
        rows = [other._row(i) for i in range(other.nb_seg)]
        for row in rows:
            self.nb_seg += 1
            for column, value in zip(self._columns(), row):
                column.append(value)

    def push_front(self, other: "Segment") -> None:
        """Insert each segment of ``other`` at the front, one after another.

        The segments of ``other`` therefore end up in reverse order.
        """
        rows = [other._row(i) for i in range(other.nb_seg)]
        for row in rows:
            self.nb_seg += 1
            for column, value in zip(self._columns(), row):
                column.insert(0, value)

    def remove_point(self, index: int) -> None:
        """Drop segment ``index`` from every column except ``entrp``."""
        self.nb_seg -= 1
        for column in (
            self.leftx,
            self.rightx,
            self.lefty,
            self.righty,
            self.mc,
            self.best,
            self.delta,
        ):
            del column[index]

    def trim(self) -> None:
        """Cut or pad every column to exactly ``nb_seg`` entries."""
        n = self.nb_seg
        for name, default in _DEFAULTS.items():
            column = getattr(self, name)
            column[:] = column[:n] + [default] * max(0, n - len(column))
        self.best[:] = self.best[:n] + [[] for _ in range(max(0, n - len(self.best)))]

    def set_from(self, other: "Segment", index: int) -> None:
        """Make the first segment span segments ``index`` and ``index + 1`` of ``other``."""
        if index < other.nb_seg:
            self.leftx[0] = other.leftx[index]
            self.rightx[0] = other.rightx[index + 1]
            self.lefty[0] = other.lefty[index]
            self.righty[0] = other.righty[index + 1]
            self.mc[0] = 0.0
            self.entrp[0] = 0.0
            self.best = [[] for _ in self.best]
            self.delta[0] = FLT_MAX

    def __len__(self) -> int:
        return self.nb_seg

    def sub_segment(self, start: int, stop: int) -> "Segment":
        """Return segments ``start`` to ``stop`` inclusive (empty if start > stop)."""
        if start > stop:
            return Segment()
        if start < 0 or stop >= self.nb_seg:
            raise IndexError("sub-segment bounds out of range")
        sl = slice(start, stop + 1)
        return Segment(
            leftx=self.leftx[sl],
            rightx=self.rightx[sl],
            lefty=self.lefty[sl],
            righty=self.righty[sl],
            mc=self.mc[sl],
            entrp=self.entrp[sl],
            best=[list(b) for b in self.best[sl]],
            delta=self.delta[sl],
            nb_seg=stop - start + 1,
        )

    def format(self) -> str:
        """Return a tabular text dump of the segments."""
        lines = [
            "-------------------- Segment's data",
            f"Segment length = {self.nb_seg}",
            "Seg\tLeftx\tRightx\tLefty\t\tRighty\t\tMC\t\tEntropy",
        ]
        for i in range(self.nb_seg):
            lines.append(
                f"{i + 1}\t{self.leftx[i]}\t{self.rightx[i]}\t"
                f"{self.lefty[i]:g}  \t{self.righty[i]:g}  \t{self.mc[i]:g}"
                f"  \t{self.entrp[i]:g}"
            )
        return "\n".join(lines) + "\n"