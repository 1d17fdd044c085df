# factorworker/numeric.py
# Exact big-integer helpers used by the primality test and by rho.

from __future__ import annotations
import random
from typing import Optional

_rng = random.Random()

def gcd(a: int, b: int) -> int:
    """Euclid; gcd(a, 0) == a."""
    while b:
        a, b = b, a % b
    return a

def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """base**exponent % modulus by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be >= 0")
    if modulus < 1:
        raise ValueError("modulus must be >= 1")
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result

def rand_between(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """
    Uniform integer in [low, high).

    randrange draws getrandbits(k) for the bit length of the span and rejects
    overshoots, so the result is unbiased however wide the range is.
    """
    if high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    return (rng or _rng).randrange(low, high)
