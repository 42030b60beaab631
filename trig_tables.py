import sys
from typing import NamedTuple

import numpy as np

from fft_errors import SizeOverflowError

DTYPE = np.float64
ITEMSIZE = np.dtype(DTYPE).itemsize
SIZE_MAX = sys.maxsize


class TrigTable(NamedTuple):
    cos: np.ndarray
    sin: np.ndarray


def check_buffer_size(count: int) -> int:
    """Raise ``SizeOverflowError`` if ``count`` float64 values overflow the size domain."""
    if count < 0 or SIZE_MAX // ITEMSIZE < count:
        raise SizeOverflowError(f"A buffer of {count} float64 values exceeds SIZE_MAX={SIZE_MAX}.")
    return count


def _frozen(angles: np.ndarray) -> TrigTable:
    table = TrigTable(np.cos(angles), np.sin(angles))
    table.cos.flags.writeable = False
    table.sin.flags.writeable = False
    return table


def radix2_table(n: int) -> TrigTable:
    """Twiddle table ``cos/sin(2*pi*i/n)`` for ``i < n/2``."""
    half = check_buffer_size(n // 2)
    return _frozen(2 * np.pi * np.arange(half, dtype=DTYPE) / n)


def chirp_table(n: int) -> TrigTable:
    """Chirp table ``cos/sin(pi * (i*i mod 2n) / n)`` for ``i < n``.

    The square is reduced modulo ``2n`` in integer arithmetic first; for large
    ``i`` the float product ``pi*i*i/n`` would lose most of its precision.
    """
    check_buffer_size(n)
    if 2 * n <= 1 << 32:
        i = np.arange(n, dtype=np.uint64)
        residues = (i * i) % np.uint64(2 * n)
    else:
        # i*i no longer fits in uint64
        residues = np.fromiter((i * i % (2 * n) for i in range(n)), dtype=DTYPE, count=n)
    return _frozen(np.pi * residues.astype(DTYPE) / n)
