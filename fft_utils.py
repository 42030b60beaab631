"""
Helpers shared by the transform modules: buffer validation, buffer
factories, the brute-force reference DFT and frequency-axis labelling.
"""

import operator

import numpy as np

from fft_errors import SignalError
from trig_tables import DTYPE


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def check_length(n, size: int | None = None, name: str = "signal") -> int:
    """Normalise a length argument to a plain ``int`` and range-check it.

    Accepts any integer type (including NumPy scalars); floats raise
    ``TypeError``. ``size`` is the buffer length ``n`` must fit in, if known.
    """
    n = operator.index(n)
    if n < 0:
        raise SignalError(f"n={n} must not be negative")
    if size is not None and n > size:
        raise SignalError(f"n={n} does not fit {name} of length {size}")
    return n


def check_signal(real: np.ndarray, imag: np.ndarray, n: int | None = None):
    """Validate an in-place signal and return ``(real[:n], imag[:n], n)``.

    Both parts must be writeable, C-contiguous, one-dimensional float64
    arrays of the same length. ``n`` defaults to that length and may be
    smaller, in which case only the leading ``n`` samples are used.
    """
    for name, buf in (("real", real), ("imag", imag)):
        if not isinstance(buf, np.ndarray) or buf.dtype != DTYPE or buf.ndim != 1:
            raise SignalError(f"{name} must be a 1-D float64 ndarray")
        if not buf.flags.c_contiguous or not buf.flags.writeable:
            raise SignalError(f"{name} must be C-contiguous and writeable")
    if real.shape != imag.shape:
        raise SignalError(f"real and imag differ in length: {real.size} != {imag.size}")
    n = real.size if n is None else check_length(n, real.size)
    return real[:n], imag[:n], n


def as_real_buffer(x, n: int | None = None, name: str = "x") -> np.ndarray:
    """Copy an array-like into a fresh float64 buffer of ``n`` samples."""
    buf = np.array(x, dtype=DTYPE, ndmin=1)
    if buf.ndim != 1:
        raise SignalError(f"{name} must be one-dimensional")
    n = buf.size if n is None else check_length(n, buf.size, name)
    return np.ascontiguousarray(buf[:n])


def zero_reals(n: int) -> np.ndarray:
    return np.zeros(n, dtype=DTYPE)


def random_reals(n: int, rng: np.random.Generator | None = None) -> np.ndarray:
    """Uniform samples in ``[-1, 1)``."""
    rng = rng if rng is not None else np.random.default_rng()
    return rng.uniform(-1.0, 1.0, n)


def naive_dft(real, imag, inverse: bool = False):
    """Reference DFT straight from the definition, O(n^2).

    The exponent ``t*k`` is reduced modulo ``n`` before scaling so large
    products keep their precision. The inverse is unnormalised, like
    ``inverse_transform``.
    """
    x = np.asarray(real, dtype=DTYPE) + 1j * np.asarray(imag, dtype=DTYPE)
    n = x.size
    if n == 0:
        return zero_reals(0), zero_reals(0)
    coef = (2 if inverse else -2) * np.pi
    t = np.arange(n, dtype=np.int64)
    angle = coef * (np.outer(t, t) % n) / n
    out = np.exp(1j * angle) @ x
    return out.real.copy(), out.imag.copy()


def abs_dft_interval(signal, start: int, stop: int) -> np.ndarray:
    """Brute-force one-sided magnitude ``2|X(k)|/n`` for ``start <= k < stop``."""
    x = np.asarray(signal, dtype=DTYPE)
    n = x.size
    k = np.arange(start, stop, dtype=np.int64)
    t = np.arange(n, dtype=np.int64)
    angle = -2 * np.pi * (np.outer(k, t) % n) / n
    sumreal = np.cos(angle) @ x
    sumimag = np.sin(angle) @ x
    return 2 * np.sqrt(sumreal * sumreal + sumimag * sumimag) / n


def get_fft_infos(n: int, sampling_rate: float):
    """
    Frequency axis of a one-sided spectrum.

    Parameters
    ----------
    n : int
        Length of the transformed signal.
    sampling_rate : float
        Sampling frequency of the signal.

    Returns
    -------
    freq_bins : ndarray
        ``n//2 + 1`` bin centre frequencies, ``k * delta_f``.
    delta_f : float
        Spacing between adjacent bins, ``sampling_rate / n``.
    """
    if n <= 0:
        raise ValueError(f"Signal length must be positive, got {n}.")
    delta_f = sampling_rate / n
    return delta_f * np.arange(n // 2 + 1, dtype=DTYPE), delta_f
