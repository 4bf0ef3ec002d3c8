import math
import statistics

import pytest

from tsmine.segmentation.numeric import (
    argmax,
    argmin,
    harmonize,
    read_values,
    resample,
    standard_deviation,
    step_vector,
    sum_sqr,
    write_values,
)


def test_harmonize_has_zero_mean():
    values = [1.0, 4.0, 7.5, -2.0]
    result = harmonize(values)
    assert math.isclose(sum(result), 0.0, abs_tol=1e-12)
    assert len(result) == len(values)


def test_harmonize_preserves_differences():
    values = [3.0, 8.0, 10.0]
    result = harmonize(values)
    assert math.isclose(result[1] - result[0], values[1] - values[0])
    assert math.isclose(result[2] - result[1], values[2] - values[1])


def test_harmonize_empty_raises():
    with pytest.raises(ValueError):
        harmonize([])


def test_argmax_first_occurrence():
    values = [1, 5, 5, 2]
    value, index = argmax(values)
    assert value == max(values)
    assert index == values.index(max(values))


def test_argmin_first_occurrence():
    values = [4, -3, 7, -3]
    value, index = argmin(values)
    assert value == min(values)
    assert index == values.index(min(values))


def test_argmax_empty_raises():
    with pytest.raises(ValueError):
        argmax([])


def test_argmin_empty_raises():
    with pytest.raises(ValueError):
        argmin([])


def test_resample_same_rates_returns_input():
    values = [0.5, 1.5]
    assert resample(values, 2, 2) == values


def test_resample_length_and_start():
    values = [2.0, 6.0]
    result = resample(values, 4, 2)
    assert len(result) == 4
    assert result[0] == values[0]


def test_resample_pads_to_up_rate():
    values = [1.0, 2.0]
    result = resample(values, 9, 2)
    assert len(result) == 9
    assert result[0] == values[0]


def test_resample_ratio_below_one_raises():
    with pytest.raises(ValueError):
        resample([1.0, 2.0], 1, 2)


def test_standard_deviation_matches_statistics():
    values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    assert math.isclose(standard_deviation(values), statistics.stdev(values))


def test_standard_deviation_needs_two_values():
    with pytest.raises(ValueError):
        standard_deviation([1.0])


@pytest.mark.parametrize("start,end,step", [(0.0, 1.0, 0.25), (1, 5, 1), (2.0, 3.7, 0.5)])
def test_step_vector_increasing(start, end, step):
    result = step_vector(start, end, step)
    assert result[0] == start
    assert result[-1] <= end < result[-1] + step
    assert all(math.isclose(b - a, step) for a, b in zip(result, result[1:]))


def test_step_vector_decreasing():
    result = step_vector(5.0, 1.0, -1.5)
    assert result[0] == 5.0
    assert result[-1] >= 1.0 > result[-1] - 1.5
    assert all(math.isclose(a - b, 1.5) for a, b in zip(result, result[1:]))


def test_step_vector_zero_step_gives_bounds():
    assert step_vector(3.0, 8.0, 0) == [3.0, 8.0]


def test_step_vector_equal_bounds():
    assert step_vector(2.0, 2.0, 1.0) == [2.0, 2.0]


def test_step_vector_wrong_direction_raises():
    with pytest.raises(ValueError):
        step_vector(0.0, 5.0, -1.0)


def test_sum_sqr_sign_invariant_and_scaling():
    values = [1.5, -2.0, 3.0]
    assert sum_sqr([-v for v in values]) == sum_sqr(values)
    assert math.isclose(sum_sqr([2 * v for v in values]), 4 * sum_sqr(values))


def test_sum_sqr_empty_is_zero():
    assert sum_sqr([]) == 0


def test_write_values_layout(tmp_path):
    path = tmp_path / "out.int"
    write_values(path, [1, 2, 3, 4])
    assert path.read_text() == "1\t2\t3\n4\t"


def test_write_read_round_trip(tmp_path):
    path = tmp_path / "series.txt"
    values = [0.5, -1.25, 3.0, 7.0, 2.5]
    write_values(path, values)
    assert read_values(path) == values


def test_read_values_stops_at_bad_token(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 2\nx 3\n")
    assert read_values(path) == [1.0, 2.0]


def test_read_values_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_values(tmp_path / "missing.txt")