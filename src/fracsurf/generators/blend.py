"""
Frequency-dependent blending of two spectra.

The second surface of an AUPG pair is built as a mixture of the anchor
spectrum A and an independent noise spectrum N:

    B(k) = w(k) A(k) + sqrt(1 - w(k)^2) N(k)

The weight w(k) follows a tanh transition in log-wavelength, so that long
wavelengths (lambda >> TL) follow the anchor (w -> mfmax) and short
wavelengths are dominated by the noise (w -> mfmin). Because w^2 + s^2 = 1,
the mixture has the same power as A when A and N are independent with equal
spectra.
"""

import numpy as np

from .spectrum import K2_FLOOR, enforce_hermitian, wavenumber_sq_grid

# Wavenumbers at or below this value get the long-wavelength limit mfmax
K_FLOOR = 1e-20
# Floors keeping both logarithms of the transition argument finite
TL_FLOOR = 1e-20
ML_FLOOR = 1.0001


def validate_blend_parameters(TL: float, ML: float, mfmin: float, mfmax: float) -> None:
    """Check the transition parameters of the blend weight."""
    if not TL > 0:
        raise ValueError(f"Transition length TL must be > 0, got {TL}")
    if not ML > 0:
        raise ValueError(f"Mismatch length ML must be > 0, got {ML}")
    if not 0 <= mfmin <= mfmax <= 1:
        raise ValueError(
            f"Require 0 <= mfmin <= mfmax <= 1, got mfmin={mfmin}, mfmax={mfmax}"
        )


def blend_weight(
    k: np.ndarray | float,
    TL: float,
    ML: float,
    mfmin: float,
    mfmax: float,
) -> np.ndarray | float:
    """
    Correlation weight of the anchor spectrum at wavenumber k.

    Parameters
    ----------
    k : array_like or float
        Angular wavenumber magnitude(s), k >= 0.
    TL : float
        Transition length: wavelength at which the weight is halfway between
        ``mfmin`` and ``mfmax``.
    ML : float
        Mismatch length controlling the sharpness of the transition through
        ``ln(ML)``; values below 1.0001 are floored, giving a near step.
    mfmin, mfmax : float
        Short- and long-wavelength limits of the weight.

    Returns
    -------
    w : array_like or float
        ``mfmin + (mfmax - mfmin) * 0.5 * (1 + tanh(x))`` with
        ``x = ln(lambda / TL) / ln(ML)`` and ``lambda = 2π / k``;
        exactly ``mfmax`` for k <= 1e-20.

    Examples
    --------
    >>> from fracsurf.generators.blend import blend_weight
    >>> blend_weight(0.0, TL=0.01, ML=2.0, mfmin=0.0, mfmax=1.0)
    1.0
    """
    k_arr = np.asarray(k, dtype=float)
    dc = k_arr <= K_FLOOR
    lam = 2 * np.pi / np.where(dc, 1.0, k_arr)
    x = np.log(lam / max(TL_FLOOR, TL)) / np.log(max(ML, ML_FLOOR))
    w = np.where(dc, mfmax, mfmin + (mfmax - mfmin) * 0.5 * (1 + np.tanh(x)))
    if w.ndim == 0:
        return float(w)
    return w


def blend_weight_grid(
    nx: int,
    ny: int,
    Lx: float,
    Ly: float,
    ax: float,
    ay: float,
    theta: float,
    TL: float,
    ML: float,
    mfmin: float,
    mfmax: float,
) -> np.ndarray:
    """Blend weight at every point of a (ny, nx) grid, using the anisotropic wavenumber."""
    k2 = wavenumber_sq_grid(nx, ny, Lx, Ly, ax, ay, theta)
    k = np.sqrt(np.maximum(k2, K2_FLOOR))
    return blend_weight(k, TL, ML, mfmin, mfmax)


def blend_spectra(
    anchor: np.ndarray,
    noise: np.ndarray,
    weight: np.ndarray,
) -> np.ndarray:
    """
    Mix an anchor spectrum with an independent noise spectrum.

    Parameters
    ----------
    anchor : ndarray
        Complex spectrum A of shape (ny, nx).
    noise : ndarray
        Complex spectrum N of the same shape, built from an independent seed.
    weight : ndarray or float
        Anchor weight w per grid point (broadcast against the spectra).

    Returns
    -------
    blended : ndarray
        ``w A + sqrt(max(0, 1 - w^2)) N``, with Hermitian symmetry re-imposed.
    """
    anchor = np.asarray(anchor, dtype=complex)
    noise = np.asarray(noise, dtype=complex)
    if anchor.shape != noise.shape:
        raise ValueError(
            f"Spectra must have the same shape, got {anchor.shape} and {noise.shape}"
        )
    w = np.asarray(weight, dtype=float)
    s = np.sqrt(np.maximum(0.0, 1.0 - w * w))
    blended = w * anchor + s * noise
    return enforce_hermitian(blended)
