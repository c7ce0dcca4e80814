#!/usr/bin/env python3
"""
Deterministic random number generator for testing.
"""

class TestDRNG:
    """Deterministic random number generator for consistent test results."""

    # not a test class, despite the name
    __test__ = False

    def __init__(self, seed):
        """Initialize with a seed."""
        if isinstance(seed, bytes):
            seed = int.from_bytes(seed, 'big')
        self.state = seed & 0xFFFFFFFF

    def _next(self):
        """Generate next random value using linear congruential generator."""
        # Using parameters from Numerical Recipes
        self.state = (1664525 * self.state + 1013904223) & 0xFFFFFFFF
        return self.state

    def randint(self, a, b):
        """Generate random integer in range [a, b] inclusive."""
        if a > b:
            raise ValueError("a must be <= b")
        range_size = b - a + 1
        return a + (self._next() % range_size)

    def randbytes(self, n):
        """Generate n random bytes."""
        # low bits of an LCG have short periods, take the top byte
        return bytes((self._next() >> 24) & 0xFF for _ in range(n))

    def sample(self, population, k):
        """k distinct elements of population, in selection order."""
        pool = list(population)
        if not 0 <= k <= len(pool):
            raise ValueError("sample larger than population")
        result = []
        for _ in range(k):
            result.append(pool.pop(self.randint(0, len(pool) - 1)))
        return result
