"""
Forward/inverse DFT of any length.

Power-of-two lengths go straight to the radix-2 engine, every other length
goes through Bluestein's algorithm, whose inner convolution is always a
power of two and therefore lands back on the radix-2 engine.
"""

import logging

import numpy as np

import bluestein
from fft_utils import check_signal, is_power_of_two
from radix import transform_radix2
from trig_tables import DTYPE

logger = logging.getLogger(__name__)


def transform(real: np.ndarray, imag: np.ndarray, n: int | None = None) -> None:
    """Replace ``real + j*imag`` by its forward DFT, in place."""
    real, imag, n = check_signal(real, imag, n)
    if n == 0:
        return
    if is_power_of_two(n):
        logger.debug("transform: radix-2 path, n=%d", n)
        transform_radix2(real, imag, n)
    else:
        logger.debug("transform: bluestein path, n=%d", n)
        bluestein.transform_bluestein(real, imag, n)


def inverse_transform(real: np.ndarray, imag: np.ndarray, n: int | None = None) -> None:
    """Unnormalised inverse DFT, in place; divide by ``n`` to reconstruct.

    Swapping the real and imaginary parts conjugates-and-swaps the signal,
    which turns the forward transform into the inverse one.
    """
    real, imag, n = check_signal(real, imag, n)
    transform(imag, real, n)


def fft(x) -> np.ndarray:
    """Forward DFT of a complex array-like, returned as a new complex array."""
    x = np.asarray(x, dtype=complex)
    if x.ndim != 1:
        raise ValueError("fft expects a 1-D sequence")
    real = np.array(x.real, dtype=DTYPE)
    imag = np.array(x.imag, dtype=DTYPE)
    transform(real, imag)
    return real + 1j * imag


def ifft(X) -> np.ndarray:
    """Inverse DFT of a complex array-like, scaled by ``1/n``."""
    X = np.asarray(X, dtype=complex)
    if X.ndim != 1:
        raise ValueError("ifft expects a 1-D sequence")
    real = np.array(X.real, dtype=DTYPE)
    imag = np.array(X.imag, dtype=DTYPE)
    inverse_transform(real, imag)
    if X.size:
        real /= X.size
        imag /= X.size
    return real + 1j * imag
