"""Unit tests for the filter catalog."""

import math

import numpy as np
import pytest

from pyfastresize.filters import FilterVariant

SINC_FILTERS = [
    FilterVariant.HAMMING,
    FilterVariant.LANCZOS2,
    FilterVariant.LANCZOS3,
    FilterVariant.LANCZOS4,
]


@pytest.mark.unit
def test_radii():
    assert [v.radius for v in FilterVariant] == [0.5, 1.0, 2.0, 3.0, 4.0]


@pytest.mark.unit
def test_quality_index_matches_value():
    assert FilterVariant(0) is FilterVariant.BOX
    assert FilterVariant(3) is FilterVariant.LANCZOS3


@pytest.mark.unit
@pytest.mark.parametrize(
    "selector, expected",
    [
        (0, FilterVariant.BOX),
        (4, FilterVariant.LANCZOS4),
        (np.int64(1), FilterVariant.HAMMING),
        ("lanczos2", FilterVariant.LANCZOS2),
        (" Hamming ", FilterVariant.HAMMING),
        (FilterVariant.LANCZOS3, FilterVariant.LANCZOS3),
    ],
)
def test_resolve(selector, expected):
    assert FilterVariant.resolve(selector) is expected


@pytest.mark.unit
@pytest.mark.parametrize("selector", [-1, 5, "bicubic", 2.0, None, True])
def test_resolve_rejects_invalid(selector):
    with pytest.raises(ValueError):
        FilterVariant.resolve(selector)


@pytest.mark.unit
def test_box_interval_is_half_open():
    box = FilterVariant.BOX
    assert box.evaluate(-0.5) == 1.0
    assert box.evaluate(0.0) == 1.0
    assert box.evaluate(0.4999) == 1.0
    assert box.evaluate(0.5) == 0.0
    assert box.evaluate(-0.5001) == 0.0


@pytest.mark.unit
@pytest.mark.parametrize("variant", SINC_FILTERS)
def test_unity_near_zero(variant):
    assert variant.evaluate(0.0) == 1.0
    assert variant.evaluate(1e-8) == 1.0
    assert variant.evaluate(-1e-8) == 1.0


@pytest.mark.unit
@pytest.mark.parametrize("variant", SINC_FILTERS)
def test_zero_outside_support(variant):
    r = variant.radius
    assert variant.evaluate(r) == 0.0
    assert variant.evaluate(-r) == 0.0
    assert variant.evaluate(r + 0.3) == 0.0


@pytest.mark.unit
@pytest.mark.parametrize("variant", list(FilterVariant))
def test_symmetric(variant):
    x = np.linspace(0.01, variant.radius - 0.01, 37)
    np.testing.assert_allclose(variant.weights(x), variant.weights(-x))


@pytest.mark.unit
@pytest.mark.parametrize("variant", SINC_FILTERS)
def test_zero_at_nonzero_integers(variant):
    # sinc factor vanishes at every nonzero integer inside the support
    for k in range(1, int(variant.radius)):
        assert abs(variant.evaluate(float(k))) < 1e-12


@pytest.mark.unit
def test_lanczos3_known_value():
    x = 0.5
    expected = (math.sin(math.pi * x) / (math.pi * x)) * (
        math.sin(math.pi * x / 3) / (math.pi * x / 3)
    )
    assert FilterVariant.LANCZOS3.evaluate(x) == pytest.approx(expected)


@pytest.mark.unit
def test_hamming_known_value():
    x = 0.5
    expected = (math.sin(math.pi * x) / (math.pi * x)) * (0.54 + 0.46 * math.cos(math.pi * x))
    assert FilterVariant.HAMMING.evaluate(x) == pytest.approx(expected)


@pytest.mark.unit
@pytest.mark.parametrize("variant", list(FilterVariant))
def test_vectorized_matches_scalar(variant):
    xs = np.linspace(-variant.radius - 0.5, variant.radius + 0.5, 41)
    vec = variant.weights(xs)
    assert vec.shape == xs.shape
    for x, v in zip(xs, vec):
        assert variant.evaluate(x) == pytest.approx(v, abs=1e-12)


@pytest.mark.unit
def test_weights_finite_around_zero():
    xs = np.array([-1e-9, 0.0, 1e-9, 1e-3])
    for variant in SINC_FILTERS:
        assert np.all(np.isfinite(variant.weights(xs)))
