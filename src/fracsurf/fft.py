"""
Radix-2 fast Fourier transforms.

Iterative in-place Cooley-Tukey transforms with a precomputed bit-reversal
permutation. The 1D transforms act on the last axis of their input, so all
rows of a 2D array go through the butterflies together. The 2D transforms are
separable: rows first, then columns.

Sign and scaling follow :mod:`numpy.fft`: the forward kernel is
exp(-2πi jk/n) and the inverse kernel exp(+2πi jk/n) with a 1/n factor.
"""

from functools import lru_cache

import numpy as np


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive integral power of two."""
    return isinstance(n, (int, np.integer)) and n > 0 and (n & (n - 1)) == 0


@lru_cache(maxsize=None)
def bit_reversal_permutation(n: int) -> np.ndarray:
    """
    Bit-reversal permutation table for a transform of length ``n``.

    Parameters
    ----------
    n : int
        Transform length, a power of two.

    Returns
    -------
    rev : ndarray
        Integer array with ``rev[i]`` equal to ``i`` with its log2(n) bits
        reversed. The table is cached and must not be modified.
    """
    if not is_power_of_two(n):
        raise ValueError(f"Transform length must be a power of two, got {n}")
    bits = int(n).bit_length() - 1
    idx = np.arange(n)
    rev = np.zeros(n, dtype=np.intp)
    for _ in range(bits):
        rev = (rev << 1) | (idx & 1)
        idx = idx >> 1
    rev.flags.writeable = False
    return rev


def _radix2(x: np.ndarray, inverse: bool) -> np.ndarray:
    """Transform along the last axis; returns a new complex array."""
    x = np.asarray(x)
    n = x.shape[-1]
    # C-ordered copy: the butterflies work through reshaped views of it
    z = np.array(x[..., bit_reversal_permutation(n)], dtype=complex, order="C")

    sign = 1.0 if inverse else -1.0
    size = 2
    while size <= n:
        half = size // 2
        twiddle = np.exp(sign * 2j * np.pi * np.arange(half) / size)
        blocks = z.reshape(z.shape[:-1] + (n // size, size))
        even = blocks[..., :half]
        odd = blocks[..., half:] * twiddle
        top = even + odd
        bottom = even - odd
        blocks[..., :half] = top
        blocks[..., half:] = bottom
        size *= 2

    if inverse:
        z /= n
    return z


def fft1d(x: np.ndarray) -> np.ndarray:
    """
    Forward discrete Fourier transform along the last axis.

    Parameters
    ----------
    x : array_like
        Real or complex input whose last axis has power-of-two length.

    Returns
    -------
    X : ndarray
        Complex spectrum, same shape as ``x``.
    """
    return _radix2(x, inverse=False)


def ifft1d(X: np.ndarray) -> np.ndarray:
    """
    Inverse discrete Fourier transform along the last axis (scaled by 1/n).

    Parameters
    ----------
    X : array_like
        Complex spectrum whose last axis has power-of-two length.

    Returns
    -------
    x : ndarray
        Complex signal, same shape as ``X``.
    """
    return _radix2(X, inverse=True)


def _check_2d(a: np.ndarray) -> np.ndarray:
    a = np.asarray(a)
    if a.ndim != 2:
        raise ValueError(f"Expected 2D array, got shape {a.shape}")
    ny, nx = a.shape
    if not (is_power_of_two(nx) and is_power_of_two(ny)):
        raise ValueError(f"Grid dimensions must be powers of two, got {ny}x{nx}")
    return a


def fft2(field: np.ndarray) -> np.ndarray:
    """Forward 2D transform of a (ny, nx) array: rows, then columns."""
    field = _check_2d(field)
    rows = fft1d(field)
    return fft1d(rows.T).T


def ifft2(spectrum: np.ndarray) -> np.ndarray:
    """
    Inverse 2D transform of a (ny, nx) spectrum.

    Every row is transformed first; the column pass starts only once the
    whole row pass has completed.

    Parameters
    ----------
    spectrum : array_like
        Complex grid with power-of-two dimensions.

    Returns
    -------
    z : ndarray
        Complex array of shape (ny, nx). For a Hermitian-symmetric spectrum
        the imaginary part is zero up to rounding error.

    Examples
    --------
    >>> import numpy as np
    >>> from fracsurf.fft import ifft2
    >>> F = np.zeros((4, 4), dtype=complex)
    >>> F[0, 1] = F[0, 3] = 0.5
    >>> z = ifft2(F).real  # cos(2π x / 4) / 16 along each row
    """
    spectrum = _check_2d(spectrum)
    rows = ifft1d(spectrum)
    return ifft1d(rows.T).T
