import pytest

from pixscale.filter_weights import PRECISION, FilterBounds, FilterWeights


def _weights(values, kernel_size, rows):
    bounds = [FilterBounds(i, kernel_size) for i in range(rows)]
    return FilterWeights(
        weights=values,
        bounds=bounds,
        kernel_size=kernel_size,
        aligned_size=kernel_size,
        distinct_elements=rows,
        coeffs_size=1,
    )


def test_default_precision_is_fifteen_bits():
    fw = _weights([0.5, 0.5], 2, 1)
    approx = fw.numerical_approximation_i16()
    assert approx.weights == [1 << (PRECISION - 1), 1 << (PRECISION - 1)]


def test_rounds_half_away_from_zero():
    fw = _weights([0.5, -0.5, 1.5, 2.5], 4, 1)
    approx = fw.numerical_approximation_i16(0, 0)
    assert approx.weights == [1, -1, 2, 3]


def test_saturates_to_i16_range():
    fw = _weights([2.0, -2.0], 2, 1)
    approx = fw.numerical_approximation_i16(0, PRECISION)
    assert approx.weights == [32767, -32768]


def test_alignment_pads_rows_with_zeros():
    fw = _weights([1.0, 1.0, 1.0, 0.0, 0.0, 1.0], 3, 2)
    approx = fw.numerical_approximation_i16(4, 0)
    assert approx.aligned_size == 4
    assert approx.kernel_size == 3
    assert approx.weights == [1, 1, 1, 0, 0, 0, 1, 0]


def test_metadata_and_bounds_preserved():
    fw = _weights([0.25] * 8, 4, 2)
    approx = fw.numerical_approximation_i16(0, 8)
    assert approx.bounds == fw.bounds
    assert approx.bounds is not fw.bounds
    assert approx.distinct_elements == fw.distinct_elements
    assert approx.coeffs_size == fw.coeffs_size
    assert len(approx.weights) == approx.distinct_elements * approx.aligned_size


def test_bounds_ordering():
    assert sorted([FilterBounds(3, 1), FilterBounds(1, 5)]) == [
        FilterBounds(1, 5),
        FilterBounds(3, 1),
    ]


def test_zero_kernel_size_rejected():
    fw = _weights([], 0, 0)
    with pytest.raises(ValueError):
        fw.numerical_approximation_i16()