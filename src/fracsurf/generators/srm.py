"""
Single self-affine surface by spectral synthesis (SRM).

A Hermitian power-law spectrum with random phases is transformed back to real
space with the radix-2 inverse FFT and rescaled to the requested RMS height.
Fractal dimension D and Hurst exponent are related by H = 3 - D.
"""

from dataclasses import dataclass

import numpy as np

from ..fft import ifft2
from ..normalize import rescale
from ..rng import make_rng
from .spectrum import build_spectrum, validate_surface_parameters


@dataclass(frozen=True)
class SurfaceResult:
    """Generated height field (read-only, shape (ny, nx)) and the parameters used."""

    field: np.ndarray
    meta: dict


def spectrum_to_field(spectrum: np.ndarray, sigma: float) -> np.ndarray:
    """Inverse-transform a Hermitian spectrum and rescale it to RMS height ``sigma``."""
    z = rescale(np.real(ifft2(spectrum)), sigma)
    z.flags.writeable = False
    return z


def print_parameters(title: str, params: dict) -> None:
    print(f"{title}:")
    for name, value in params.items():
        print(f"    {name} = {value}")


def generate_surface(
    nx: int = 512,
    ny: int = 512,
    L: float = 0.1,
    D: float = 2.1,
    sigma: float = 0.01,
    anisotropy: float = 1.0,
    theta_deg: float = 0.0,
    rng_kind: str = "parkmiller",
    seed: int = 799753397,
    verbose: bool = False,
) -> SurfaceResult:
    """
    Generate a periodic self-affine rough surface.

    Parameters
    ----------
    nx, ny : int, optional
        Grid resolution, powers of two. Default is 512 x 512.
    L : float, optional
        Side length of the square domain. Default is 0.1.
    D : float, optional
        Fractal dimension, in the open range (2, 3). Higher D gives a rougher
        surface. Default is 2.1.
    sigma : float, optional
        Target RMS height of the surface. Default is 0.01.
    anisotropy : float, optional
        Stretch factor applied to the x component of the rotated wavenumber
        (the y factor is 1). Default is 1.0 (isotropic).
    theta_deg : float, optional
        Rotation of the anisotropy axes, in degrees. Default is 0.
    rng_kind : str, optional
        Uniform generator used for the phases: ``"parkmiller"``,
        ``"baysdurham"`` or ``"lecuyer"``. Default is ``"parkmiller"``.
    seed : int, optional
        Seed of the phase generator. Default is 799753397.
    verbose : bool, optional
        If True, print generation parameters. Default is False.

    Returns
    -------
    result : SurfaceResult
        ``result.field`` is the (ny, nx) height field with zero mean and
        standard deviation ``sigma``; ``result.meta`` holds the parameters,
        the Hurst exponent ``H`` and the grid spacings ``dx``, ``dy``.

    Raises
    ------
    ValueError
        If parameters are outside valid ranges.

    Examples
    --------
    >>> from fracsurf import generate_surface
    >>> result = generate_surface(nx=128, ny=128, D=2.3, seed=7)
    >>> result.field.shape
    (128, 128)
    """
    validate_surface_parameters(nx, ny, L, D, sigma, anisotropy)

    H = 3 - D
    meta = {
        "nx": nx,
        "ny": ny,
        "L": L,
        "D": D,
        "H": H,
        "sigma": sigma,
        "anisotropy": anisotropy,
        "theta_deg": theta_deg,
        "rng_kind": rng_kind,
        "seed": seed,
        "dx": L / nx,
        "dy": L / ny,
    }
    if verbose:
        print_parameters("Self-affine surface (SRM)", meta)

    rng = make_rng(rng_kind, seed)
    theta = np.deg2rad(theta_deg)
    spectrum = build_spectrum(nx, ny, L, L, H, anisotropy, 1.0, theta, rng)

    return SurfaceResult(field=spectrum_to_field(spectrum, sigma), meta=meta)
