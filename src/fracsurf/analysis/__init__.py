"""
Analysis tools for generated surfaces.

- Power spectral density (2D and radially averaged)
- Spectral coherence of two surfaces per wavenumber band
"""

from .spectrum import (
    psd_2d,
    psd_radial_average,
    spectral_coherence,
)

__all__ = [
    "psd_2d",
    "psd_radial_average",
    "spectral_coherence",
]
