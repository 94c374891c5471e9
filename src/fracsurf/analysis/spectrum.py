"""
Spectral diagnostics of generated height fields.

Power spectral density of a field and radially averaged spectra, plus the
spectral coherence of two fields per wavenumber band, used to check how the
correlation of an AUPG pair decays with wavenumber.

Wavenumbers are angular (2π/L per grid step), as in the generators.
"""

import numpy as np
from numpy.fft import fft2

from ..generators.spectrum import wavenumber_axis


def _check_field(field: np.ndarray) -> np.ndarray:
    field = np.asarray(field, dtype=float)
    if field.ndim != 2:
        raise ValueError(f"Expected 2D array, got shape {field.shape}")
    return field


def _wavenumber_magnitude(ny: int, nx: int, L: float) -> np.ndarray:
    kx = wavenumber_axis(nx, L)
    ky = wavenumber_axis(ny, L)
    return np.sqrt(kx[None, :] ** 2 + ky[:, None] ** 2)


def _radial_edges(ny: int, nx: int, L: float, n_bins: int | None) -> np.ndarray:
    N = min(nx, ny)
    if n_bins is None:
        n_bins = N // 4
    k_max = np.pi * N / L  # Nyquist
    return np.linspace(0, k_max, n_bins + 1)


def psd_2d(field: np.ndarray, L: float = 1.0) -> tuple[np.ndarray, np.ndarray]:
    """
    Compute the 2D power spectral density of a field on a square domain.

    Parameters
    ----------
    field : ndarray
        2D input field with shape (ny, nx).
    L : float, optional
        Side length of the domain. Default is 1.0.

    Returns
    -------
    k : ndarray
        Angular wavenumber magnitude at each Fourier coefficient, FFT order.
    psd : ndarray
        ``|fft2(field)|^2 / (nx ny)^2``, same shape as ``field``.
    """
    field = _check_field(field)
    ny, nx = field.shape
    zhat = fft2(field)
    psd = np.abs(zhat) ** 2 / (nx * ny) ** 2
    return _wavenumber_magnitude(ny, nx, L), psd


def psd_radial_average(
    field: np.ndarray,
    L: float = 1.0,
    n_bins: int | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Compute the radially averaged power spectral density.

    Parameters
    ----------
    field : ndarray
        2D input field.
    L : float, optional
        Side length of the domain. Default is 1.0.
    n_bins : int, optional
        Number of radial bins between 0 and the Nyquist wavenumber.
        If None, uses min(nx, ny)//4 bins.

    Returns
    -------
    k_bins : ndarray
        Wavenumber bin centers (empty bins are dropped).
    psd_avg : ndarray
        Radially averaged PSD.

    Examples
    --------
    >>> from fracsurf import generate_surface
    >>> from fracsurf.analysis import psd_radial_average
    >>> surface = generate_surface(nx=256, ny=256, L=1.0, D=2.2)
    >>> k, psd = psd_radial_average(surface.field, L=1.0)
    """
    k, psd = psd_2d(field, L)
    ny, nx = psd.shape
    k_edges = _radial_edges(ny, nx, L, n_bins)
    k_bins = 0.5 * (k_edges[:-1] + k_edges[1:])

    psd_avg = np.zeros(len(k_bins))
    counts = np.zeros(len(k_bins))

    for i in range(len(k_bins)):
        mask = (k >= k_edges[i]) & (k < k_edges[i + 1])
        if np.any(mask):
            psd_avg[i] = np.mean(psd[mask])
            counts[i] = np.sum(mask)

    valid = counts > 0
    return k_bins[valid], psd_avg[valid]


def spectral_coherence(
    field_a: np.ndarray,
    field_b: np.ndarray,
    L: float = 1.0,
    n_bins: int | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Correlation of two fields per radial wavenumber band.

    For each band the coherence is

        Re Σ A conj(B) / sqrt(Σ |A|^2 Σ |B|^2)

    where A and B are the Fourier coefficients of the two fields. It is 1
    where B reproduces A up to a positive factor and fluctuates around 0
    where the fields are independent.

    Parameters
    ----------
    field_a, field_b : ndarray
        2D fields of identical shape.
    L : float, optional
        Side length of the domain. Default is 1.0.
    n_bins : int, optional
        Number of radial bins. If None, uses min(nx, ny)//4 bins.

    Returns
    -------
    k_bins : ndarray
        Wavenumber bin centers (bins without spectral power are dropped).
    coherence : ndarray
        Coherence in each band, in [-1, 1].
    """
    field_a = _check_field(field_a)
    field_b = _check_field(field_b)
    if field_a.shape != field_b.shape:
        raise ValueError(
            f"Fields must have the same shape, got {field_a.shape} and {field_b.shape}"
        )
    ny, nx = field_a.shape
    A = fft2(field_a)
    B = fft2(field_b)
    k = _wavenumber_magnitude(ny, nx, L)
    k_edges = _radial_edges(ny, nx, L, n_bins)
    k_bins = 0.5 * (k_edges[:-1] + k_edges[1:])

    coherence = np.zeros(len(k_bins))
    valid = np.zeros(len(k_bins), dtype=bool)

    for i in range(len(k_bins)):
        mask = (k >= k_edges[i]) & (k < k_edges[i + 1])
        power = np.sum(np.abs(A[mask]) ** 2) * np.sum(np.abs(B[mask]) ** 2)
        if power > 0:
            cross = np.sum(A[mask] * np.conj(B[mask])).real
            coherence[i] = cross / np.sqrt(power)
            valid[i] = True

    return k_bins[valid], coherence[valid]
