# tests/test_fft_utils.py
import numpy as np
import pytest

from fft_errors import SizeOverflowError
from fft_utils import (
    abs_dft_interval,
    check_signal,
    get_fft_infos,
    is_power_of_two,
    naive_dft,
    random_reals,
    zero_reals,
)
from trig_tables import ITEMSIZE, SIZE_MAX, check_buffer_size, chirp_table, radix2_table


def test_is_power_of_two():
    assert [n for n in range(20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]


def test_buffer_factories():
    assert zero_reals(5).tolist() == [0.0] * 5
    r = random_reals(1000, np.random.default_rng(0))
    assert r.shape == (1000,)
    assert r.min() >= -1.0 and r.max() < 1.0


def test_check_signal_returns_leading_views():
    real, imag = np.arange(5.0), np.zeros(5)
    r, i, n = check_signal(real, imag, 3)
    assert n == 3
    r[0] = 42.0
    assert real[0] == 42.0
    assert i.size == 3


def test_naive_dft_of_impulse_is_flat():
    real, imag = naive_dft([1.0, 0.0, 0.0, 0.0], [0.0] * 4)
    np.testing.assert_allclose(real, [1.0] * 4, atol=1e-12)
    np.testing.assert_allclose(imag, [0.0] * 4, atol=1e-12)


def test_naive_dft_matches_numpy():
    rng = np.random.default_rng(9)
    x = rng.standard_normal(21) + 1j * rng.standard_normal(21)
    real, imag = naive_dft(x.real, x.imag)
    np.testing.assert_allclose(real + 1j * imag, np.fft.fft(x), atol=1e-9)


def test_abs_dft_interval_subrange():
    signal = random_reals(20, np.random.default_rng(1))
    full = abs_dft_interval(signal, 0, 11)
    np.testing.assert_allclose(abs_dft_interval(signal, 3, 7), full[3:7])


def test_get_fft_infos():
    freq_bins, delta_f = get_fft_infos(8, 1000.0)
    assert delta_f == 125.0
    assert freq_bins.tolist() == [0.0, 125.0, 250.0, 375.0, 500.0]
    freq_bins, _ = get_fft_infos(7, 7.0)
    assert freq_bins.tolist() == [0.0, 1.0, 2.0, 3.0]


def test_get_fft_infos_rejects_empty():
    with pytest.raises(ValueError):
        get_fft_infos(0, 100.0)


def test_radix2_table_values():
    table = radix2_table(8)
    assert table.cos.shape == table.sin.shape == (4,)
    np.testing.assert_allclose(table.cos, np.cos(2 * np.pi * np.arange(4) / 8))
    np.testing.assert_allclose(table.sin, np.sin(2 * np.pi * np.arange(4) / 8))


def test_chirp_table_values():
    n = 7
    table = chirp_table(n)
    i = np.arange(n)
    np.testing.assert_allclose(table.cos, np.cos(np.pi * i * i / n), atol=1e-12)
    np.testing.assert_allclose(table.sin, np.sin(np.pi * i * i / n), atol=1e-12)


def test_tables_are_read_only():
    table = chirp_table(5)
    with pytest.raises(ValueError):
        table.cos[0] = 2.0


def test_check_buffer_size():
    assert check_buffer_size(16) == 16
    assert check_buffer_size(SIZE_MAX // ITEMSIZE) == SIZE_MAX // ITEMSIZE
    with pytest.raises(SizeOverflowError):
        check_buffer_size(SIZE_MAX // ITEMSIZE + 1)
    with pytest.raises(OverflowError):
        radix2_table(2 * (SIZE_MAX // ITEMSIZE + 1))
