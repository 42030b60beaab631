import logging
import operator
import time

import numpy as np

import convolution
from fft_errors import SizeOverflowError
from fft_utils import check_signal, is_power_of_two, zero_reals
from trig_tables import SIZE_MAX, check_buffer_size, chirp_table

logger = logging.getLogger(__name__)


def convolution_length(n: int) -> int:
    """Smallest power of two ``m`` with ``m >= 2n + 1``.

    Raises ``SizeOverflowError`` when ``2n + 1``, ``m`` or the byte size of
    an ``m``-long buffer cannot be represented.
    """
    n = operator.index(n)
    if n > (SIZE_MAX - 1) // 2:
        raise SizeOverflowError(f"2n+1 overflows for n={n}")
    target = n * 2 + 1
    m = 1
    while m < target:
        if m > SIZE_MAX // 2:
            raise SizeOverflowError(f"No power-of-two convolution length for n={n}")
        m *= 2
    return check_buffer_size(m)


def transform_bluestein(real: np.ndarray, imag: np.ndarray, n: int | None = None) -> None:
    """In-place DFT of any length via Bluestein's chirp-z reduction.

    The length-``n`` transform is rewritten as a circular convolution of
    power-of-two length ``m >= 2n + 1``, which the radix-2 engine handles.
    """
    if n is None:
        n = np.size(real)
    m = convolution_length(n)
    real, imag, n = check_signal(real, imag, n)
    if n == 0:
        return
    assert is_power_of_two(m), m
    logger.debug("bluestein: n=%d, convolution length m=%d", n, m)

    table = chirp_table(n)  # Chirp
    cos_t, sin_t = table.cos, table.sin

    areal = zero_reals(m)
    aimag = zero_reals(m)
    areal[:n] = real * cos_t + imag * sin_t
    aimag[:n] = -real * sin_t + imag * cos_t

    breal = zero_reals(m)
    bimag = zero_reals(m)
    breal[:n] = cos_t
    bimag[:n] = sin_t
    if n > 1:
        breal[m - n + 1:] = cos_t[:0:-1]  # b[m-i] = chirp[i]
        bimag[m - n + 1:] = sin_t[:0:-1]

    creal, cimag = convolution.convolve_complex(areal, aimag, breal, bimag, m)

    real[:] = creal[:n] * cos_t + cimag[:n] * sin_t
    imag[:] = -creal[:n] * sin_t + cimag[:n] * cos_t


def benchmark_bluestein(N):
    print(f"\nBluestein FFT benchmark, N = {N}")
    x = np.random.randn(N) + 1j * np.random.randn(N)

    start = time.perf_counter()
    real, imag = x.real.copy(), x.imag.copy()
    transform_bluestein(real, imag)
    X_b = real + 1j * imag
    elapsed = time.perf_counter() - start

    print(f"Bluestein FFT done in {elapsed:.2f} s")

    try:
        X_np = np.fft.fft(x)
        # max relative error, guarding against division by zero
        relative_err = np.max(np.abs(X_b - X_np) / np.maximum(np.abs(X_np), 1e-12))
        print(f"max relative error = {relative_err:.2e}")
    except MemoryError:
        print("Cannot verify against NumPy FFT (out of memory)")

if __name__ == "__main__":
    benchmark_bluestein(1_000_007)
    benchmark_bluestein(5_000_001)
