"""
Big-integer helpers: modular arithmetic, primality, sampling and encodings.
"""

import hashlib
import random

# Shared secure source for every sampled scalar unless a caller passes its own.
_SYSTEM_RNG = random.SystemRandom()


def default_rng(rng=None):
    """Return rng, or the process-wide secure generator when rng is None."""
    return _SYSTEM_RNG if rng is None else rng


def verify_pos_range(a, n):
    """Raise unless 0 <= a < n."""
    if not 0 <= a < n:
        raise ValueError("a not in range")
    return True


def bit_len(n):
    return n.bit_length()


def byte_len(n):
    return (n.bit_length() + 7) // 8


def is_even(n):
    return n % 2 == 0


def pos_mod(n, p):
    """Reduce n into [0, p), also for negative n."""
    return n % p


def exp_mod(n, e, p):
    """Return n^e mod p by square-and-multiply."""
    if e < 0:
        raise ValueError("negative exponent")
    r = 1
    q = n % p
    while e > 0:
        if e & 1:
            r = (r * q) % p
        q = (q * q) % p
        e >>= 1
    return r


def _extended_euclid(x, y):
    a, b, c, d = 1, 0, 0, 1
    while y != 0:
        q = x // y
        x, y = y, x - q * y
        a, c = c, a - q * c
        b, d = d, b - q * d
    return x, a, b


def inv_mod(t, n):
    """Inverse of t modulo n via the extended Euclidean algorithm."""
    g, a, _ = _extended_euclid(t % n, n)
    if g != 1:
        raise ValueError("value not invertible modulo n")
    return a % n


def is_prime(n, iterations=7, rng=None):
    """
    Miller-Rabin primality test.

    A prime is never reported composite; a composite passes with
    probability at most 4^-iterations.
    """
    if n in (2, 3):
        return True
    if n < 2 or is_even(n):
        return False

    # n - 1 = 2^s * d
    d = n - 1
    s = 0
    while is_even(d):
        d >>= 1
        s += 1

    for _ in range(iterations):
        base = rnd(n - 3, rng) + 2
        x = exp_mod(base, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = (x * x) % n
            if x == 1:
                return False
            if x == n - 1:
                break
        else:
            return False
    return True


def rnd(n, rng=None):
    """Uniform integer in [0, n), by rejection over byte_len(n) random bytes."""
    if n <= 0:
        raise ValueError("upper bound must be positive")
    rng = default_rng(rng)
    length = byte_len(n)
    while True:
        candidate = OS2IP(rng.randbytes(length))
        if candidate < n:
            return candidate


def rnd_range(lo, hi, rng=None):
    """Uniform integer in [lo, hi]."""
    return rnd(hi - lo + 1, rng) + lo


def I2OSP(n, length):
    """Convert integer to octet string."""
    if length <= 0 or n < 0 or n >= 256**length:
        raise ValueError("Integer too large for length")
    return n.to_bytes(length, 'big')


def OS2IP(octets):
    """Convert octet string to integer."""
    return int.from_bytes(octets, 'big')


def hash_nums(nums):
    """
    Hash a sequence of integers to an 80-bit challenge.

    Each integer is encoded as its decimal string, prefixed by the encoding's
    length as a 4-byte big-endian integer, so distinct sequences never
    collide on concatenation.
    """
    data = b""
    for num in nums:
        encoded = str(num).encode('utf-8')
        data += I2OSP(len(encoded), 4) + encoded
    digest = hashlib.sha256(data).digest()
    # Our challenge is only 80 bits.
    return OS2IP(digest[:10])
