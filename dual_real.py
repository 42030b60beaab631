import numpy as np

from fft_errors import SignalError
from fft_transform import transform
from fft_utils import as_real_buffer, zero_reals


def fft_2signals(signal_1, signal_2, n: int | None = None):
    """Forward DFTs of two real signals from a single complex transform.

    ``signal_1`` is packed into the real channel and ``signal_2`` into the
    imaginary channel of ``X``; the two spectra are then separated with

        X1(k) = 1/2  [X(k) + X*(n-k)]
        X2(k) = 1/2j [X(k) - X*(n-k)]

    Parameters
    ----------
    signal_1, signal_2 : array_like
        Real signals of equal length.
    n : int, optional
        Number of leading samples to transform. Defaults to the full length.

    Returns
    -------
    X1_real, X1_imag, X2_real, X2_imag : ndarray
        Full (two-sided) spectra of both signals, each of length *n*.
    """
    X_real = as_real_buffer(signal_1, n, "signal_1")
    X_imag = as_real_buffer(signal_2, n, "signal_2")
    if X_real.size != X_imag.size:
        raise SignalError(f"signals differ in length: {X_real.size} != {X_imag.size}")
    n = X_real.size

    transform(X_real, X_imag, n)

    X1_real, X1_imag = zero_reals(n), zero_reals(n)
    X2_real, X2_imag = zero_reals(n), zero_reals(n)
    if n == 0:
        return X1_real, X1_imag, X2_real, X2_imag

    # DC bin is real for both signals
    X1_real[0] = X_real[0]
    X2_real[0] = X_imag[0]

    # Nyquist bin only exists for even n
    if n % 2 == 0:
        X1_real[n // 2] = X_real[n // 2]
        X2_real[n // 2] = X_imag[n // 2]

    k = np.arange(1, (n + 1) // 2)
    mirror = n - k
    X1_real[k] = 0.5 * (X_real[k] + X_real[mirror])
    X2_real[k] = 0.5 * (X_imag[k] + X_imag[mirror])
    X1_imag[k] = 0.5 * (X_imag[k] - X_imag[mirror])
    X2_imag[k] = -0.5 * (X_real[k] - X_real[mirror])

    # make use of the symmetry
    X1_real[mirror] = X1_real[k]
    X2_real[mirror] = X2_real[k]
    X1_imag[mirror] = -X1_imag[k]
    X2_imag[mirror] = -X2_imag[k]

    return X1_real, X1_imag, X2_real, X2_imag


def _one_sided_magnitude(real: np.ndarray, imag: np.ndarray, n: int) -> np.ndarray:
    half = n // 2 + 1
    return 2 * np.hypot(real[:half], imag[:half]) / n


def abs_fft_2signals(signal_1, signal_2, n: int | None = None):
    """One-sided magnitude spectra ``2|X(k)|/n``, ``k <= n/2``, of two real signals."""
    X1_real, X1_imag, X2_real, X2_imag = fft_2signals(signal_1, signal_2, n)
    n = X1_real.size
    if n == 0:
        return zero_reals(0), zero_reals(0)
    return (
        _one_sided_magnitude(X1_real, X1_imag, n),
        _one_sided_magnitude(X2_real, X2_imag, n),
    )


def abs_fft(signal, n: int | None = None) -> np.ndarray:
    """One-sided magnitude spectrum ``2|X(k)|/n`` (``n//2 + 1`` bins) of a real signal."""
    real = as_real_buffer(signal, n, "signal")
    n = real.size
    if n == 0:
        return zero_reals(0)
    imag = zero_reals(n)
    transform(real, imag, n)
    return _one_sided_magnitude(real, imag, n)
