"""Exceptions raised by the transform and convolution routines."""


class FFTError(Exception):
    """Base exception for all transform errors."""

    pass


class NotPowerOfTwoError(FFTError, ValueError):
    """Raised when the radix-2 engine receives a length that is not 2**k."""

    def __init__(self, n: int):
        self.n = n
        super().__init__(f"Input length must be a power of two for radix-2 FFT, got {n}.")


class SizeOverflowError(FFTError, OverflowError):
    """
    Raised when a working size cannot be represented.

    The check happens before anything is allocated, so a huge ``n`` fails
    the same way every time instead of wrapping or exhausting memory.
    """

    pass


class SignalError(FFTError, ValueError):
    """Raised for malformed signal buffers or a length that does not fit them."""

    pass
