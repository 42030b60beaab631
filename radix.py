import time

import numpy as np

from fft_errors import NotPowerOfTwoError
from fft_utils import check_signal
from trig_tables import radix2_table

# ---------------- helpers ---------------- #

def reverse_bits(x: int, levels: int) -> int:
    """Reverse the low *levels* bits of *x*."""
    result = 0
    for _ in range(levels):
        result = (result << 1) | (x & 1)
        x >>= 1
    return result


def _bit_reverse_indices(levels: int) -> np.ndarray:
    """``reverse_bits(i, levels)`` for every ``i < 2**levels`` (vectorised)."""
    idx = np.arange(1 << levels, dtype=np.intp)
    rev = np.zeros_like(idx)
    for _ in range(levels):
        rev = (rev << 1) | (idx & 1)
        idx >>= 1
    return rev


def _log2_exact(n: int) -> int:
    levels = max(n.bit_length() - 1, 0)
    if 1 << levels != n:
        raise NotPowerOfTwoError(n)
    return levels


# ---------------- radix‑2 (DIT) FFT ---------------- #

def transform_radix2(real: np.ndarray, imag: np.ndarray, n: int | None = None) -> None:
    """Non‑recursive, in‑place radix‑2 Cooley–Tukey FFT.

    Parameters
    ----------
    real, imag : ndarray
        Real and imaginary parts of the signal (float64, contiguous). They
        are overwritten with the forward DFT.
    n : int, optional
        Transform length, an *exact power of two*. Defaults to ``len(real)``.

    Raises
    ------
    NotPowerOfTwoError
        If *n* is not a power of two.
    SizeOverflowError
        If the twiddle table size cannot be represented.
    """
    real, imag, n = check_signal(real, imag, n)
    levels = _log2_exact(n)
    table = radix2_table(n)

    # 1. Bit‑reverse permutation, each pair swapped once
    i = np.arange(n, dtype=np.intp)
    j = _bit_reverse_indices(levels)
    swap = j > i
    i, j = i[swap], j[swap]
    real[i], real[j] = real[j], real[i]
    imag[i], imag[j] = imag[j], imag[i]

    # 2. Butterfly stages; every block of one stage is handled at once
    size = 2
    while size <= n:
        half = size // 2
        step = n // size
        cos_k = table.cos[::step]
        sin_k = table.sin[::step]
        re = real.reshape(-1, size)
        im = imag.reshape(-1, size)

        tpre = re[:, half:] * cos_k + im[:, half:] * sin_k
        tpim = -re[:, half:] * sin_k + im[:, half:] * cos_k
        re[:, half:] = re[:, :half] - tpre
        im[:, half:] = im[:, :half] - tpim
        re[:, :half] += tpre
        im[:, :half] += tpim
        size <<= 1  # ×2 per stage


# ---------------- quick benchmark / accuracy check ---------------- #

def benchmark_radix(N):
    print(f"\nRadix‑2 FFT benchmark, N = {N}")
    x = np.random.randn(N) + 1j * np.random.randn(N)

    start = time.perf_counter()
    real, imag = x.real.copy(), x.imag.copy()
    transform_radix2(real, imag)
    X_r = real + 1j * imag
    elapsed = time.perf_counter() - start
    print(f"Radix‑2 FFT done in {elapsed:.2f} s")

    X_np = np.fft.fft(x)
    rel_err = np.max(np.abs(X_r - X_np) / np.maximum(np.abs(X_np), 1e-12))
    print(f"max relative error = {rel_err:.2e}")


if __name__ == "__main__":
    for N in (1 << 20, 1 << 22, 1 << 24):  # 1 M, 4 M, 16 M
        benchmark_radix(N)
