"""Tests for the uniform random streams."""

import numpy as np
import pytest

from fracsurf import BaysDurham, Lecuyer, ParkMiller, make_rng


# First ten internal states for seed 1
PARKMILLER_STATES = [
    33614, 564950498, 1097816499, 1969887316, 140734213,
    940422544, 202055088, 768218109, 770072199, 1866991771,
]
BAYSDURHAM_STATES = [
    735081007, 127561359, 770072199, 1126132005, 1409755266,
    229615974, 1866991771, 1101274651, 33063458, 1874372714,
]
LECUYER_STATES = [
    151029581, 346800217, 1258064654, 1249796104, 1523912596,
    1490479808, 1482006293, 1350177170, 513874449, 553878616,
]


def draw(rng, n=10):
    return [next(rng) for _ in range(n)]


class TestGoldenValues:
    """Regression tests: first ten draws for seed 1."""

    def test_parkmiller(self):
        """Test Park-Miller sequence for seed 1."""
        expected = [s / 2147483647 for s in PARKMILLER_STATES]
        assert draw(make_rng("parkmiller", 1)) == expected

    def test_parkmiller_first_value(self):
        """Test the documented first value of the Park-Miller stream."""
        np.testing.assert_allclose(next(ParkMiller(1)), 1.5652738518851222e-05, rtol=1e-15)

    def test_baysdurham(self):
        """Test Bays-Durham sequence for seed 1."""
        expected = [s / 2147483647 for s in BAYSDURHAM_STATES]
        assert draw(make_rng("baysdurham", 1)) == expected

    def test_baysdurham_values(self):
        """Test Bays-Durham values against printed decimals."""
        expected = [
            0.34229876815448457, 0.059400386670325128, 0.35859281167322438,
            0.52439607937093646, 0.65646845226011630, 0.10692327008905042,
            0.86938579188165521, 0.51282097190284215, 0.015396372422294864,
            0.87282281130218076,
        ]
        np.testing.assert_allclose(draw(BaysDurham(1)), expected, rtol=1e-14)

    def test_lecuyer(self):
        """Test L'Ecuyer sequence for seed 1."""
        expected = [(1.0 / 2147483563) * s for s in LECUYER_STATES]
        assert draw(make_rng("lecuyer", 1)) == expected

    def test_lecuyer_values(self):
        """Test L'Ecuyer values against printed decimals."""
        expected = [
            0.070328631893700783, 0.16149144187884990, 0.58583202948594582,
            0.58198168569637609, 0.70962712928573879, 0.69405877357115775,
            0.69011298551205724, 0.62872526396142669, 0.23929144690734008,
            0.25791983954756814,
        ]
        np.testing.assert_allclose(draw(Lecuyer(1)), expected, rtol=1e-14)


class TestMakeRng:
    """Tests for generator selection by name."""

    @pytest.mark.parametrize(
        "kind, cls",
        [
            ("parkmiller", ParkMiller),
            ("ParkMiller", ParkMiller),
            ("baysdurham", BaysDurham),
            ("Bays-Durham", BaysDurham),
            ("lecuyer", Lecuyer),
            ("L'Ecuyer", Lecuyer),
        ],
    )
    def test_kind_names(self, kind, cls):
        """Test that names are matched case-insensitively."""
        assert isinstance(make_rng(kind, 3), cls)

    def test_unknown_kind_falls_back(self):
        """Test that unknown names and None give Park-Miller."""
        assert isinstance(make_rng("mersenne", 3), ParkMiller)
        assert isinstance(make_rng(None, 3), ParkMiller)
        assert draw(make_rng("mersenne", 3)) == draw(ParkMiller(3))

    def test_non_string_kind_falls_back(self):
        """Test that non-string kinds give Park-Miller instead of raising."""
        assert isinstance(make_rng(7, 3), ParkMiller)
        assert draw(make_rng(7, 3)) == draw(ParkMiller(3))


class TestStreams:
    """Tests shared by all generator variants."""

    @pytest.mark.parametrize("kind", ["parkmiller", "baysdurham", "lecuyer"])
    def test_reproducibility(self, kind):
        """Test that equal seeds give equal sequences."""
        assert draw(make_rng(kind, 12345), 100) == draw(make_rng(kind, 12345), 100)

    @pytest.mark.parametrize("kind", ["parkmiller", "baysdurham", "lecuyer"])
    def test_different_seeds(self, kind):
        """Test that different seeds give different sequences."""
        assert draw(make_rng(kind, 1), 20) != draw(make_rng(kind, 2), 20)

    @pytest.mark.parametrize("kind", ["parkmiller", "baysdurham", "lecuyer"])
    def test_unit_interval(self, kind):
        """Test that draws lie in [0, 1)."""
        u = make_rng(kind, 2024).random(10000)
        assert u.shape == (10000,)
        assert np.all(u >= 0.0)
        assert np.all(u < 1.0)

    @pytest.mark.parametrize("kind", ["parkmiller", "baysdurham", "lecuyer"])
    def test_uniform_moments(self, kind):
        """Test that the sample mean and variance match U(0, 1)."""
        u = make_rng(kind, 99).random(20000)
        assert abs(u.mean() - 0.5) < 0.01
        assert abs(u.var() - 1 / 12) < 0.005

    @pytest.mark.parametrize("kind", ["parkmiller", "baysdurham", "lecuyer"])
    def test_random_matches_next(self, kind):
        """Test that random(size) returns the same draws as repeated next()."""
        block = make_rng(kind, 7).random(50)
        np.testing.assert_array_equal(block, draw(make_rng(kind, 7), 50))

    def test_random_scalar(self):
        """Test that random() without size returns a float."""
        assert isinstance(make_rng("lecuyer", 5).random(), float)

    @pytest.mark.parametrize("kind", ["parkmiller", "baysdurham", "lecuyer"])
    def test_seed_normalization(self, kind):
        """Test that negative and fractional seeds are normalized."""
        assert draw(make_rng(kind, -17)) == draw(make_rng(kind, 17))
        assert draw(make_rng(kind, 17.9)) == draw(make_rng(kind, 17))

    @pytest.mark.parametrize("kind", ["parkmiller", "baysdurham", "lecuyer"])
    @pytest.mark.parametrize("seed", [2**31, 10**12, 2**62])
    def test_large_seeds(self, kind, seed):
        """Test that seeds beyond 32 bits still give draws in [0, 1)."""
        u = make_rng(kind, seed).random(2000)
        assert np.all(u >= 0.0)
        assert np.all(u < 1.0)

    def test_lecuyer_seed_reduced_modulo(self):
        """Test that L'Ecuyer seeds are reduced modulo IM1 - 1."""
        assert draw(Lecuyer(Lecuyer.IM1 - 1 + 41)) == draw(Lecuyer(41))

    def test_parkmiller_seed_zero(self):
        """Test that seed 0 is mapped to a valid nonzero state."""
        rng = ParkMiller(0)
        assert rng.state == 1
        assert 0 < next(rng) < 1

    def test_parkmiller_seed_wraps(self):
        """Test that seeds are reduced modulo m - 1."""
        assert draw(ParkMiller(2147483646 + 5)) == draw(ParkMiller(5))

    def test_iterator_protocol(self):
        """Test that streams can be iterated."""
        rng = make_rng("baysdurham", 1)
        assert iter(rng) is rng
        first = [u for _, u in zip(range(3), rng)]
        assert first == [s / 2147483647 for s in BAYSDURHAM_STATES[:3]]
