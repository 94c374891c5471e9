"""
Pairs of partially correlated rough surfaces (AUPG).

Two independent power-law spectra are built from two seeds with identical
physical parameters. The first is the anchor surface A; the second is mixed
with the anchor through a wavenumber-dependent weight (see
:mod:`fracsurf.generators.blend`) to give surface B. The two surfaces share
their long-wavelength content and decorrelate below the transition length TL,
as for the two faces of a fracture or two worn contact surfaces.
"""

from dataclasses import dataclass

import numpy as np

from ..rng import make_rng
from .blend import blend_spectra, blend_weight_grid, validate_blend_parameters
from .spectrum import build_spectrum, validate_surface_parameters
from .srm import print_parameters, spectrum_to_field


@dataclass(frozen=True)
class AupgResult:
    """Anchor and blended height fields (read-only, shape (ny, nx)) and the parameters used."""

    field_a: np.ndarray
    field_b: np.ndarray
    meta: dict


def generate_aupg(
    nx: int = 512,
    ny: int = 512,
    L: float = 0.1,
    D: float = 2.1,
    sigma: float = 0.01,
    anisotropy: float = 1.0,
    theta_deg: float = 0.0,
    mfmin: float = 0.0,
    mfmax: float = 1.0,
    TL: float = 0.01,
    ML: float = 0.015,
    rng_kind: str = "parkmiller",
    seed1: int = 799753397,
    seed2: int = 737375979,
    verbose: bool = False,
) -> AupgResult:
    """
    Generate two rough surfaces with wavelength-dependent correlation.

    Parameters
    ----------
    nx, ny : int, optional
        Grid resolution, powers of two. Default is 512 x 512.
    L : float, optional
        Side length of the square domain. Default is 0.1.
    D : float, optional
        Fractal dimension, in the open range (2, 3). Default is 2.1.
    sigma : float, optional
        Target RMS height of both surfaces. Default is 0.01.
    anisotropy : float, optional
        Stretch factor of the x wavenumber component. Default is 1.0.
    theta_deg : float, optional
        Rotation of the anisotropy axes, in degrees. Default is 0.
    mfmin, mfmax : float, optional
        Short- and long-wavelength limits of the anchor weight,
        0 <= mfmin <= mfmax <= 1. Defaults are 0 and 1.
    TL : float, optional
        Transition length (same unit as L). Default is 0.01.
    ML : float, optional
        Mismatch length setting the sharpness of the transition via ln(ML);
        values below 1.0001 give a near step at TL. Default is 0.015.
    rng_kind : str, optional
        Uniform generator name, shared by both spectra. Default is
        ``"parkmiller"``.
    seed1, seed2 : int, optional
        Seeds of the anchor and noise spectra; must differ.
    verbose : bool, optional
        If True, print generation parameters. Default is False.

    Returns
    -------
    result : AupgResult
        ``field_a`` (anchor) and ``field_b`` (blended), each rescaled to zero
        mean and standard deviation ``sigma``, and ``meta``.

    Raises
    ------
    ValueError
        If parameters are outside valid ranges or the seeds are equal.

    Notes
    -----
    ``field_a`` is identical to ``generate_surface(..., seed=seed1).field``
    for the same shared parameters.

    Examples
    --------
    >>> from fracsurf import generate_aupg
    >>> pair = generate_aupg(nx=128, ny=128, L=0.1, TL=0.02, seed1=1, seed2=2)
    >>> pair.field_a.shape == pair.field_b.shape
    True
    """
    validate_surface_parameters(nx, ny, L, D, sigma, anisotropy)
    validate_blend_parameters(TL, ML, mfmin, mfmax)
    if seed1 == seed2:
        raise ValueError("seed1 and seed2 must differ for independent spectra")

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
        "mfmin": mfmin,
        "mfmax": mfmax,
        "TL": TL,
        "ML": ML,
        "rng_kind": rng_kind,
        "seed1": seed1,
        "seed2": seed2,
        "dx": L / nx,
        "dy": L / ny,
    }
    if verbose:
        print_parameters("AUPG surface pair", meta)

    theta = np.deg2rad(theta_deg)
    ax, ay = anisotropy, 1.0
    anchor = build_spectrum(nx, ny, L, L, H, ax, ay, theta, make_rng(rng_kind, seed1))
    noise = build_spectrum(nx, ny, L, L, H, ax, ay, theta, make_rng(rng_kind, seed2))

    weight = blend_weight_grid(nx, ny, L, L, ax, ay, theta, TL, ML, mfmin, mfmax)
    blended = blend_spectra(anchor, noise, weight)

    return AupgResult(
        field_a=spectrum_to_field(anchor, sigma),
        field_b=spectrum_to_field(blended, sigma),
        meta=meta,
    )
