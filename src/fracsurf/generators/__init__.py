"""
Rough surface generators.

This module provides spectral synthesis of periodic self-affine surfaces:

- Single surface (SRM): power-law spectrum with random phases
- Correlated pair (AUPG): anchor surface plus a second surface blended with
  independent noise above a transition wavenumber

All generators are driven by the seedable streams of :mod:`fracsurf.rng`,
so the same parameters and seeds always give the same surfaces.
"""

from .spectrum import (
    wavenumber_axis,
    anisotropic_wavenumber_sq,
    enforce_hermitian,
    build_spectrum,
)
from .blend import blend_weight, blend_weight_grid, blend_spectra
from .srm import SurfaceResult, generate_surface
from .aupg import AupgResult, generate_aupg

__all__ = [
    "wavenumber_axis",
    "anisotropic_wavenumber_sq",
    "enforce_hermitian",
    "build_spectrum",
    "blend_weight",
    "blend_weight_grid",
    "blend_spectra",
    "SurfaceResult",
    "generate_surface",
    "AupgResult",
    "generate_aupg",
]
