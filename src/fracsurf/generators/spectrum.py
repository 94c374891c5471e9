"""
Power-law spectra with random phase.

Builds the complex Fourier coefficients of a self-affine surface directly in
frequency space: prescribed magnitudes |F(k)| = k^{-(H+1)}, so that the power
spectral density follows k^{-2(H+1)}, with uniformly random phases. Hermitian
symmetry F(-k) = conj(F(k)) is imposed afterwards so that the inverse
transform of the spectrum is a real field.

Wavenumbers are angular (2π/L per grid step) and laid out in FFT order,
with the anisotropy applied to the rotated wavenumber vector.
"""

import numpy as np

from ..fft import is_power_of_two
from ..rng import RandomStream

# Below this squared wavenumber a point is treated as the DC term
K2_FLOOR = 1e-30


def validate_grid(nx: int, ny: int) -> None:
    """Raise ValueError unless both grid dimensions are powers of two >= 2."""
    for name, n in (("nx", nx), ("ny", ny)):
        if not is_power_of_two(n) or n < 2:
            raise ValueError(f"{name} must be a power of two >= 2, got {n}")


def validate_surface_parameters(
    nx: int,
    ny: int,
    L: float,
    D: float,
    sigma: float,
    anisotropy: float,
) -> None:
    """Check the parameters shared by all surface generators."""
    validate_grid(nx, ny)
    if not L > 0:
        raise ValueError(f"Domain size L must be > 0, got {L}")
    if not 2 < D < 3:
        raise ValueError(f"Fractal dimension D must be in (2, 3), got {D}")
    if not sigma >= 0:
        raise ValueError(f"RMS height sigma must be >= 0, got {sigma}")
    if not anisotropy > 0:
        raise ValueError(f"Anisotropy ratio must be > 0, got {anisotropy}")


def wavenumber_axis(n: int, L: float) -> np.ndarray:
    """
    Angular wavenumbers of an n-point periodic axis of length L.

    Index 0 is the zero frequency, indices 1..n//2 the positive wavenumbers in
    ascending order and the remaining indices the negative ones. Unlike
    :func:`numpy.fft.fftfreq`, the Nyquist index n//2 is positive.

    Parameters
    ----------
    n : int
        Number of grid points.
    L : float
        Physical length of the axis.

    Returns
    -------
    k : ndarray
        Wavenumbers ``m * 2π/L`` with ``m = 0, 1, ..., n//2, n//2 + 1 - n, ..., -1``.
    """
    idx = np.arange(n)
    m = np.where(idx <= n // 2, idx, idx - n)
    return m * (2 * np.pi / L)


def anisotropic_wavenumber_sq(
    kx: np.ndarray,
    ky: np.ndarray,
    theta: float,
    ax: float,
    ay: float,
) -> np.ndarray:
    """
    Squared magnitude of the rotated and stretched wavenumber vector.

    The vector (kx, ky) is rotated by ``theta`` (radians), its components are
    divided by ``ax`` and ``ay``, and the squared norm is returned. Inputs
    broadcast against each other.
    """
    c = np.cos(theta)
    s = np.sin(theta)
    xr = c * kx + s * ky
    yr = -s * kx + c * ky
    xa = xr / ax
    ya = yr / ay
    return xa * xa + ya * ya


def wavenumber_sq_grid(
    nx: int,
    ny: int,
    Lx: float,
    Ly: float,
    ax: float,
    ay: float,
    theta: float,
) -> np.ndarray:
    """Squared anisotropic wavenumber at every point of a (ny, nx) grid."""
    kx = wavenumber_axis(nx, Lx)
    ky = wavenumber_axis(ny, Ly)
    return anisotropic_wavenumber_sq(kx[None, :], ky[:, None], theta, ax, ay)


def enforce_hermitian(spectrum: np.ndarray) -> np.ndarray:
    """
    Impose Hermitian symmetry on a 2D spectrum.

    Each point (j, i) is paired with its mirror ((-j) mod ny, (-i) mod nx).
    Of each pair, the point that comes first in row-major order is kept and
    its conjugate is written to the mirror. Self-mirrored points (the origin
    and the Nyquist rows/columns) keep only their real part, and the origin
    is set to zero so the field has zero mean.

    Parameters
    ----------
    spectrum : ndarray
        Complex array of shape (ny, nx).

    Returns
    -------
    out : ndarray
        New complex array satisfying ``out[-j, -i] == conj(out[j, i])``
        exactly, with ``out[0, 0] == 0``.
    """
    spectrum = np.asarray(spectrum, dtype=complex)
    if spectrum.ndim != 2:
        raise ValueError(f"Expected 2D array, got shape {spectrum.shape}")
    ny, nx = spectrum.shape

    jj = (-np.arange(ny)) % ny
    ii = (-np.arange(nx)) % nx
    order = np.arange(ny * nx).reshape(ny, nx)
    mirror_order = order[np.ix_(jj, ii)]
    mirrored = np.conj(spectrum[np.ix_(jj, ii)])

    out = np.where(order <= mirror_order, spectrum, mirrored)
    self_mirrored = order == mirror_order
    out[self_mirrored] = out[self_mirrored].real
    out[0, 0] = 0.0
    return out


def build_spectrum(
    nx: int,
    ny: int,
    Lx: float,
    Ly: float,
    Hurst: float,
    ax: float,
    ay: float,
    theta: float,
    rng: RandomStream,
) -> np.ndarray:
    """
    Build a Hermitian power-law spectrum with random phases.

    Parameters
    ----------
    nx, ny : int
        Grid resolution (powers of two).
    Lx, Ly : float
        Physical size of the domain along x and y.
    Hurst : float
        Hurst exponent H; the amplitude decays as k^{-(H+1)}.
    ax, ay : float
        Anisotropy stretch factors applied to the rotated wavenumber.
    theta : float
        Rotation of the anisotropy axes in radians.
    rng : RandomStream
        Seeded uniform generator. One phase is drawn per non-DC grid point,
        in row-major order.

    Returns
    -------
    spectrum : ndarray
        Complex array of shape (ny, nx) with Hermitian symmetry and a zero
        DC coefficient.

    Notes
    -----
    Phases are drawn for every non-DC point, including the half of the grid
    that is subsequently overwritten by the mirror, so the number of draws
    depends only on the grid size.
    """
    validate_grid(nx, ny)
    k2 = wavenumber_sq_grid(nx, ny, Lx, Ly, ax, ay, theta)

    spectrum = np.zeros((ny, nx), dtype=complex)
    active = k2 >= K2_FLOOR
    amplitude = np.sqrt(k2[active]) ** -(Hurst + 1)
    phase = 2 * np.pi * rng.random(int(np.count_nonzero(active)))
    spectrum[active] = amplitude * np.cos(phase) + 1j * (amplitude * np.sin(phase))

    return enforce_hermitian(spectrum)
