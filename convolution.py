"""Circular convolution through the convolution theorem."""

import numpy as np

import fft_transform
from fft_errors import SignalError
from fft_utils import as_real_buffer, check_length, zero_reals
from trig_tables import check_buffer_size


def convolve_complex(xreal, ximag, yreal, yimag, n: int | None = None):
    """
    Circular convolution of two complex sequences of length *n*.

    The operands are copied, so the inputs are left untouched. Both copies
    are transformed, multiplied bin by bin, inverse transformed and scaled by
    ``1/n`` (the transform pair itself is unnormalised).

    Returns
    -------
    outreal, outimag : ndarray
        ``out[k] = sum_t x[t] * y[(k - t) mod n]``.
    """
    if n is not None:
        check_buffer_size(check_length(n, name="convolution operands"))
    xr = as_real_buffer(xreal, n, "xreal")
    xi = as_real_buffer(ximag, n, "ximag")
    yr = as_real_buffer(yreal, n, "yreal")
    yi = as_real_buffer(yimag, n, "yimag")
    if len({xr.size, xi.size, yr.size, yi.size}) != 1:
        raise SignalError("convolution operands must all have the same length")
    n = xr.size
    if n == 0:
        return xr, xi

    fft_transform.transform(xr, xi, n)
    fft_transform.transform(yr, yi, n)
    temp = xr * yr - xi * yi
    xi[:] = xi * yr + xr * yi
    xr[:] = temp
    fft_transform.inverse_transform(xr, xi, n)

    # Scaling (the transform pair omits it)
    xr /= n
    xi /= n
    return xr, xi


def convolve_real(x, y, n: int | None = None) -> np.ndarray:
    """Circular convolution of two real sequences."""
    x = as_real_buffer(x, n, "x")
    y = as_real_buffer(y, n, "y")
    if x.size != y.size:
        raise SignalError(f"x and y differ in length: {x.size} != {y.size}")
    n = x.size
    outreal, _ = convolve_complex(x, zero_reals(n), y, zero_reals(n), n)
    return outreal
