"""Unit tests for the separable convolution pass."""

import numpy as np
import pytest

from pyfastresize.filters import FilterVariant, KernelTable, build_kernel_table
from pyfastresize.resample import convolve_transpose
from pyfastresize.resample.convolve import convolve_transpose_loop


def _table(src_size, taps_per_row, shifts):
    lengths = np.array([len(t) for t in taps_per_row], dtype=np.int32)
    offsets = np.concatenate([[0], np.cumsum(lengths)[:-1]]).astype(np.int32)
    return KernelTable(
        src_size=src_size,
        shifts=np.array(shifts, dtype=np.int32),
        lengths=lengths,
        offsets=offsets,
        taps=np.concatenate([np.array(t, dtype=np.int16) for t in taps_per_row]),
    )


@pytest.mark.unit
def test_identity_table_transposes(random_rgba):
    height, width = random_rgba.shape[:2]
    table = build_kernel_table(FilterVariant.BOX, width, width, 1.0)
    dest = np.zeros(width * height * 4, dtype=np.uint8)

    convolve_transpose(random_rgba, dest, width, height, table)

    np.testing.assert_array_equal(
        dest.reshape(width, height, 4), random_rgba.transpose(1, 0, 2)
    )


@pytest.mark.unit
@pytest.mark.parametrize("variant", list(FilterVariant))
@pytest.mark.parametrize("dest_w", [7, 23, 40])
def test_vectorized_matches_scalar_pass(random_rgba, variant, dest_w):
    height, width = random_rgba.shape[:2]
    table = build_kernel_table(variant, width, dest_w, dest_w / width, 0.1)
    fast = np.zeros(dest_w * height * 4, dtype=np.uint8)
    slow = np.zeros_like(fast)

    convolve_transpose(random_rgba, fast, width, height, table)
    convolve_transpose_loop(random_rgba, slow, width, height, table)

    np.testing.assert_array_equal(fast, slow)


@pytest.mark.unit
def test_rounds_half_up():
    # Two source pixels averaged with equal Q14 weights
    src = np.array([1, 0, 0, 0, 2, 1, 0, 0], dtype=np.uint8)
    table = _table(2, [[8192, 8192]], [0])
    dest = np.zeros(4, dtype=np.uint8)

    convolve_transpose(src, dest, 2, 1, table)

    # 1.5 -> 2, 0.5 -> 1
    assert dest.tolist() == [2, 1, 0, 0]


@pytest.mark.unit
def test_saturates_at_storage_boundary():
    src = np.array([255, 0, 255, 0, 0, 255, 0, 255], dtype=np.uint8)
    table = _table(2, [[-8192, 24576]], [0])
    dest = np.zeros(4, dtype=np.uint8)

    convolve_transpose(src, dest, 2, 1, table)

    assert dest.tolist() == [0, 255, 0, 255]


@pytest.mark.unit
def test_empty_kernel_outputs_zero():
    src = np.full(3 * 4, 200, dtype=np.uint8)
    table = _table(3, [[], [16384]], [0, 1])
    dest = np.full(2 * 4, 7, dtype=np.uint8)

    convolve_transpose(src, dest, 3, 1, table)

    assert dest.tolist() == [0, 0, 0, 0, 200, 200, 200, 200]


@pytest.mark.unit
@pytest.mark.parametrize("value", [0, 255])
@pytest.mark.parametrize("variant", list(FilterVariant))
def test_extremal_inputs_stay_in_range(variant, value):
    width, height, dest_w = 13, 5, 31
    src = np.full(width * height * 4, value, dtype=np.uint8)
    table = build_kernel_table(variant, width, dest_w, dest_w / width)
    dest = np.zeros(dest_w * height * 4, dtype=np.uint8)

    convolve_transpose(src, dest, width, height, table)

    # Unity-gain kernels reproduce a constant signal exactly
    assert np.all(dest == value)


@pytest.mark.unit
def test_rejects_mismatched_table(random_rgba):
    height, width = random_rgba.shape[:2]
    table = build_kernel_table(3, width + 1, 10, 0.5)
    dest = np.zeros(10 * height * 4, dtype=np.uint8)
    with pytest.raises(ValueError):
        convolve_transpose(random_rgba, dest, width, height, table)


@pytest.mark.unit
def test_rejects_wrong_destination():
    src = np.zeros(4 * 2 * 4, dtype=np.uint8)
    table = build_kernel_table(3, 4, 2, 0.5)

    with pytest.raises(ValueError):
        convolve_transpose(src, np.zeros(3, dtype=np.uint8), 4, 2, table)
    with pytest.raises(TypeError):
        convolve_transpose(src, np.zeros(16, dtype=np.float32), 4, 2, table)
    with pytest.raises(ValueError):
        strided = np.zeros(32, dtype=np.uint8)[::2]
        convolve_transpose(src, strided, 4, 2, table)
