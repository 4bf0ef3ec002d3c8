# tsmine

`tsmine` provides building blocks for segmenting numeric time series and
a complete miner for closed "chords" (sets of co-occurring symbolic
intervals). It is pure Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Mining closed chords

```python
from tsmine.chords.interval_set import IntervalSet
from tsmine.chords.event_set import IntervalEventSet
from tsmine.chords.sequence import IntervalSequence
from tsmine.chords.miner import MarginDCIClosedIntersection

tones = IntervalSet([0, 2, 5], [6, 9, 12], ["A", "B", "C"])
events = IntervalEventSet.from_interval_set(tones)
chords = IntervalSequence.convert(events)

miner = MarginDCIClosedIntersection(min_support=2, alpha=0.0, min_duration=0)
closed = miner.run(chords)        # frozenset of symbols -> occurrence flags
supports = miner.support_map()    # frozenset of symbols -> support
```

The pieces:

- `tsmine.chords.interval.Interval` – a frozen `(start, end, symbol)` record.
- `tsmine.chords.interval_set.IntervalSet` – intervals stored column-wise,
  with symbols numbered by `mapping`; supports `in`, `add_all`, `sub_set`
  and `get(sid)` (start → end for one symbol id).
- `tsmine.chords.events.Event` and
  `tsmine.chords.event_set.IntervalEventSet` – start and end events in time
  order (starts before ends at equal times). An unordered set raises a
  `RuntimeWarning`.
- `tsmine.chords.sequence.IntervalSequence` – a time-ordered sequence of
  labelled intervals. `IntervalSequence.convert` turns an event set into a
  sequence of the symbol sets sounding between consecutive event times.
  Sub-sequences are taken with `sub_sequence`, `restrictive_sub_sequence`
  and `lazy_sub_sequence`.
- `tsmine.chords.miner.MarginDCIClosedIntersection` – DCI-Closed mining on
  vertical bit vectors. The support of an occurrence vector is the total
  duration of the flagged intervals. With `alpha > 0` a closed set is only
  kept when no frequent one-item extension retains at least `1 - alpha` of
  its support. `min_duration` sets the duration an occurrence must exceed to
  count towards an item's support when infrequent items are pruned.

## Time series helpers

```python
from tsmine.segmentation.numeric import read_values, standard_deviation
from tsmine.segmentation.entropy import approx_entropy
from tsmine.segmentation.segment import Segment

series = read_values("series.txt")
entropy = approx_entropy(series, 1, 0.2 * standard_deviation(series))
segments = Segment.fine_grained(len(series))
```

- `tsmine.segmentation.numeric` – `harmonize`, `argmin`, `argmax`,
  `standard_deviation` (divisor `n - 1`), `step_vector`, `sum_sqr`,
  `resample` (integer-ratio linear interpolation) and plain-text I/O:
  `read_values` reads whitespace-separated numbers up to the first token
  that does not parse; `write_values` writes values three per line, tab
  separated.
- `tsmine.segmentation.entropy.approx_entropy(data, dim, r)` – the
  approximate entropy of a series for embedding dimension `dim` and
  tolerance `r`.
- `tsmine.segmentation.segment.Segment` – column-wise storage for a list of
  consecutive segments (bounds, fitted end values, merge costs, entropies),
  with `fine_grained`, `push_back`, `push_front`, `remove_point`,
  `sub_segment` and `format`.

## What this package does not do

The package has no command-line program and does not itself run a
segmentation: there is no piecewise linear approximation, no least-squares
line fitting and no multi-level (entropy-driven) merging of segments. The
`segmentation` sub-package offers only the numeric helpers, the approximate
entropy and the `Segment` container described above, from which such a
procedure can be assembled.