"""Tests for spectral analysis of generated surfaces."""

import numpy as np
import pytest

from fracsurf import generate_aupg, generate_surface
from fracsurf.analysis import psd_2d, psd_radial_average, spectral_coherence


class TestPSD:
    """Tests for power spectral density functions."""

    def test_psd_2d_shape(self):
        """Test that 2D PSD has the field's shape."""
        field = np.random.randn(32, 64)
        k, psd = psd_2d(field)
        assert k.shape == field.shape
        assert psd.shape == field.shape

    def test_parseval(self):
        """Test that the PSD sums to the mean square of the field."""
        field = np.random.randn(32, 32)
        _, psd = psd_2d(field)
        np.testing.assert_allclose(psd.sum(), np.mean(field**2))

    def test_psd_radial_average(self):
        """Test radially averaged PSD."""
        field = np.random.randn(64, 64)
        k, psd = psd_radial_average(field)
        assert len(k) == len(psd)
        assert np.all(psd >= 0)
        assert np.all(np.diff(k) > 0)

    def test_power_law_slope(self):
        """Test that the radial PSD decays as k^{-2(H+1)}."""
        surface = generate_surface(nx=256, ny=256, L=1.0, D=2.3, seed=2)
        k, psd = psd_radial_average(surface.field, L=1.0)
        mask = (k > 30) & (k < 500)
        slope = np.polyfit(np.log(k[mask]), np.log(psd[mask]), 1)[0]
        H = 0.7
        assert abs(slope + 2 * (H + 1)) < 0.2


class TestSpectralCoherence:
    """Tests for band coherence of two fields."""

    def test_self_coherence(self):
        """Test that a field is fully coherent with itself."""
        field = generate_surface(nx=64, ny=64, L=1.0, seed=1).field
        _, coherence = spectral_coherence(field, 2 * field, L=1.0)
        np.testing.assert_allclose(coherence, 1.0)

    def test_anticorrelated(self):
        """Test that a negated field gives coherence -1."""
        field = generate_surface(nx=64, ny=64, L=1.0, seed=1).field
        _, coherence = spectral_coherence(field, -field, L=1.0)
        np.testing.assert_allclose(coherence, -1.0)

    def test_aupg_transition(self):
        """Test that an AUPG pair is coherent above TL and not below."""
        TL = 1.0 / 8
        pair = generate_aupg(nx=128, ny=128, L=1.0, TL=TL, seed1=11, seed2=12)
        k, coherence = spectral_coherence(pair.field_a, pair.field_b, L=1.0)
        k_t = 2 * np.pi / TL
        np.testing.assert_allclose(coherence[k < 0.85 * k_t], 1.0, atol=1e-9)
        assert np.median(np.abs(coherence[k > 1.3 * k_t])) < 0.2

    def test_shape_mismatch(self):
        """Test that fields of different shapes raise error."""
        with pytest.raises(ValueError):
            spectral_coherence(np.zeros((8, 8)), np.zeros((8, 16)))
