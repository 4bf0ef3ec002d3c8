"""Elementary numeric helpers used by the time-series segmentation."""

from __future__ import annotations

import math
import os
from typing import Iterable, Sequence

_BUFFER_LEN = 1024
_MAX_RATIO = 256


def harmonize(values: Sequence[float]) -> list[float]:
    """Return the values shifted so that their mean is zero."""
    values = list(values)
    if not values:
        raise ValueError("cannot harmonize an empty sequence")
    mean = sum(values) / len(values)
    return [v - mean for v in values]


def argmax(values: Sequence[float]) -> tuple[float, int]:
    """Return ``(maximum, index)`` of the first largest value."""
    if not values:
        raise ValueError("argmax of an empty sequence")
    index = max(range(len(values)), key=values.__getitem__)
    return values[index], index


def argmin(values: Sequence[float]) -> tuple[float, int]:
    """Return ``(minimum, index)`` of the first smallest value."""
    if not values:
        raise ValueError("argmin of an empty sequence")
    index = min(range(len(values)), key=values.__getitem__)
    return values[index], index


def resample(values: Sequence[float], up_rate: int, down_rate: int) -> list[float]:
    """Resample ``values`` by the integer ratio ``up_rate // down_rate``.

    The signal is padded with one trailing zero frame and converted by
    linear interpolation; the first ``up_rate`` output frames are returned,
    zero-filled when fewer were produced.
    """
    values = list(values)
    if up_rate == down_rate:
        return values
    ratio = min(up_rate // down_rate, _MAX_RATIO)
    if ratio <= 0:
        raise ValueError(f"conversion ratio {up_rate}/{down_rate} is out of range")
    frames = values + [0.0]
    if len(frames) > _BUFFER_LEN:
        raise ValueError(f"input longer than {_BUFFER_LEN - 1} frames")

    count = min(ratio * len(frames), _BUFFER_LEN)
    output = []
    for k in range(count):
        position = k / ratio
        base = int(position)
        frac = position - base
        following = frames[base + 1] if base + 1 < len(frames) else 0.0
        output.append(frames[base] * (1.0 - frac) + following * frac)
    if len(output) < up_rate:
        output.extend([0.0] * (up_rate - len(output)))
    return output[:up_rate]


def standard_deviation(values: Sequence[float]) -> float:
    """Return the sample standard deviation (divisor ``n - 1``)."""
    if len(values) < 2:
        raise ValueError("standard deviation needs at least two values")
    return math.sqrt(sum_sqr(harmonize(values)) / (len(values) - 1))


def step_vector(start: float, end: float, step: float) -> list[float]:
    """Return values from ``start`` towards ``end`` spaced by ``step``.

    A zero step or equal bounds yield ``[start, end]``; a step that points
    away from ``end`` is an error.
    """
    if step == 0 or start == end:
        return [start, end]
    if start < end and step > 0:
        def within(v):
            return v <= end
    elif start > end and step < 0:
        def within(v):
            return v >= end
    else:
        raise ValueError(
            f"bad step_vector input: start={start}, end={end}, step={step}"
        )
    result = []
    current = start
    while within(current):
        result.append(current)
        current += step
    return result


def sum_sqr(values: Iterable[float]) -> float:
    """Return the sum of the squared values."""
    return sum(v * v for v in values)


def write_values(path: str | os.PathLike, data: Iterable[float]) -> None:
    """Write values three per line, tab separated."""
    with open(path, "w", encoding="ascii") as handle:
        for position, value in enumerate(data, start=1):
            handle.write(f"{value:g}")
            handle.write("\n" if position % 3 == 0 else "\t")


def read_values(path: str | os.PathLike) -> list[float]:
    """Read whitespace-separated numbers up to the first one that does not parse."""
    with open(path, encoding="ascii", errors="replace") as handle:
        text = handle.read()
    values = []
    for token in text.split():
        try:
            values.append(float(token))
        except ValueError:
            break
    return values