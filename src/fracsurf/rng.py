"""
Seedable uniform random number generators.

Three classic generators are provided behind a single contract: each stream
is created from an integer seed and yields floats in [0, 1), deterministically
for a given seed and call count.

1. **Park-Miller** minimal standard linear congruential generator.
2. **Bays-Durham** shuffle of the Park-Miller stream (32-entry table), which
   breaks the short-range serial correlation of the plain LCG.
3. **L'Ecuyer** combined generator: two LCGs with different moduli mixed
   through a Bays-Durham table (``ran2`` in Numerical Recipes).

Reference:
    Press, W.H., Teukolsky, S.A., Vetterling, W.T. and Flannery, B.P., 1992.
    Numerical Recipes in C, 2nd ed. Cambridge University Press. Section 7.1.
"""

import math

import numpy as np


class RandomStream:
    """
    Base class of the uniform generators.

    Streams follow the iterator protocol, so ``next(stream)`` returns the
    next float in [0, 1). Subclasses implement ``_draw``.
    """

    def __iter__(self):
        return self

    def __next__(self) -> float:
        return self._draw()

    def _draw(self) -> float:
        raise NotImplementedError

    def random(self, size: int | None = None) -> float | np.ndarray:
        """
        Draw uniform variates in [0, 1).

        Parameters
        ----------
        size : int, optional
            Number of consecutive draws. If None, a single float is returned.

        Returns
        -------
        u : float or ndarray
            One draw, or a 1D array of ``size`` draws in generation order.
        """
        if size is None:
            return self._draw()
        return np.fromiter((self._draw() for _ in range(size)), dtype=float, count=size)


def _seed_magnitude(seed) -> int:
    return abs(math.floor(seed))


class ParkMiller(RandomStream):
    """Park-Miller minimal standard generator, s <- 16807 * s mod (2^31 - 1)."""

    M = 2147483647
    A = 16807

    def __init__(self, seed=1):
        self.state = _seed_magnitude(seed) % (self.M - 1) + 1

    def _draw(self) -> float:
        self.state = (self.A * self.state) % self.M
        return self.state / self.M


class BaysDurham(RandomStream):
    """Park-Miller stream shuffled through a table of previous draws."""

    def __init__(self, seed=1, table_size: int = 32):
        self._pm = ParkMiller(seed)
        self.table_size = table_size
        self.table = [next(self._pm) for _ in range(table_size)]

    def _draw(self) -> float:
        j = math.floor(next(self._pm) * self.table_size)
        r = self.table[j]
        self.table[j] = next(self._pm)
        return r


class Lecuyer(RandomStream):
    """
    L'Ecuyer combined generator with Bays-Durham shuffle.

    Both LCGs are advanced with Schrage's method so intermediate products
    stay below 2^31. The output is clamped below ``1 - 1.2e-7`` so that 1.0
    is never returned.
    """

    IM1 = 2147483563
    IM2 = 2147483399
    AM = 1.0 / IM1
    IA1 = 40014
    IA2 = 40692
    IQ1 = 53668
    IQ2 = 52774
    IR1 = 12211
    IR2 = 3791
    NTAB = 32
    NDIV = (IM1 - 1) // NTAB
    EPS = 1.2e-7
    RNMX = 1.0 - EPS

    def __init__(self, seed=1):
        idum = _seed_magnitude(seed) % (self.IM1 - 1) + 1
        self.idum2 = 123456789
        self.table = [0] * self.NTAB
        # Warm-up: the first 8 values are discarded, the next 32 fill the table
        for j in range(self.NTAB + 7, -1, -1):
            idum = self._schrage(idum, self.IA1, self.IQ1, self.IR1, self.IM1)
            if j < self.NTAB:
                self.table[j] = idum
        self.iy = self.table[0]
        self.idum = idum

    @staticmethod
    def _schrage(x: int, a: int, q: int, r: int, m: int) -> int:
        k = x // q
        x = a * (x - k * q) - k * r
        if x < 0:
            x += m
        return x

    def _draw(self) -> float:
        self.idum = self._schrage(self.idum, self.IA1, self.IQ1, self.IR1, self.IM1)
        self.idum2 = self._schrage(self.idum2, self.IA2, self.IQ2, self.IR2, self.IM2)
        j = self.iy // self.NDIV
        self.iy = self.table[j] - self.idum2
        self.table[j] = self.idum
        if self.iy < 1:
            self.iy += self.IM1 - 1
        t = self.AM * self.iy
        return self.RNMX if t > self.RNMX else t


RNG_KINDS = {
    "parkmiller": ParkMiller,
    "baysdurham": BaysDurham,
    "bays-durham": BaysDurham,
    "lecuyer": Lecuyer,
    "l'ecuyer": Lecuyer,
}


def make_rng(kind: str | None = "parkmiller", seed=1) -> RandomStream:
    """
    Create a uniform random stream by generator name.

    Parameters
    ----------
    kind : str, optional
        Generator name, case-insensitive: ``"parkmiller"``, ``"baysdurham"``
        (or ``"bays-durham"``), ``"lecuyer"`` (or ``"l'ecuyer"``).
        None, unknown names and non-string values fall back to Park-Miller.
    seed : int, optional
        Seed. Negative and fractional seeds are normalized with floor and
        absolute value. Default is 1.

    Returns
    -------
    rng : RandomStream
        Freshly seeded stream.

    Examples
    --------
    >>> from fracsurf import make_rng
    >>> rng = make_rng("lecuyer", seed=42)
    >>> u = next(rng)
    >>> phases = rng.random(16)
    """
    cls = RNG_KINDS.get(str(kind or "parkmiller").lower(), ParkMiller)
    return cls(seed)
