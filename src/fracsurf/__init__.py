"""
fracsurf - Synthetic fractal rough surfaces by spectral synthesis.

A Python package for generating reproducible, periodic self-affine height
fields with prescribed fractal dimension, RMS height and anisotropy, and
pairs of surfaces whose correlation decays with wavenumber.

Features
--------
- Seedable Park-Miller, Bays-Durham and L'Ecuyer uniform generators
- Hermitian power-law spectra with random phases
- Correlated surface pairs (AUPG) with a tanh transition in wavelength
- Radix-2 FFT/IFFT
- Spectral diagnostics (PSD, band coherence)
- ASCII STL export

Quick Start
-----------
>>> from fracsurf import generate_surface, generate_aupg
>>> surface = generate_surface(nx=256, ny=256, L=0.1, D=2.2, sigma=0.01, seed=42)
>>> pair = generate_aupg(nx=256, ny=256, L=0.1, TL=0.01, seed1=1, seed2=2)

References
----------
Persson, B.N.J., Albohr, O., Tartaglino, U., Volokitin, A.I. and Tosatti, E.,
2005. On the nature of surface roughness with application to contact
mechanics, sealing, rubber friction and adhesion. Journal of Physics:
Condensed Matter, 17(1), R1. DOI: 10.1088/0953-8984/17/1/R01

License
-------
BSD-3-Clause
"""

__version__ = "0.1.0"

# Random streams
from .rng import (
    RandomStream,
    ParkMiller,
    BaysDurham,
    Lecuyer,
    make_rng,
)

# Transforms and normalization
from .fft import fft2, ifft2
from .normalize import rescale

# Main generators
from .generators import (
    build_spectrum,
    enforce_hermitian,
    blend_weight,
    blend_spectra,
    SurfaceResult,
    AupgResult,
    generate_surface,
    generate_aupg,
)

# Export
from .export import to_stl, save_stl

__all__ = [
    # Version
    "__version__",
    # Random streams
    "RandomStream",
    "ParkMiller",
    "BaysDurham",
    "Lecuyer",
    "make_rng",
    # Transforms
    "fft2",
    "ifft2",
    "rescale",
    # Generators
    "build_spectrum",
    "enforce_hermitian",
    "blend_weight",
    "blend_spectra",
    "SurfaceResult",
    "AupgResult",
    "generate_surface",
    "generate_aupg",
    # Export
    "to_stl",
    "save_stl",
]
