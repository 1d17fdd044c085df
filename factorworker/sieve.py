# factorworker/sieve.py
# Small-prime table shared by every factorization in the process.

from __future__ import annotations
from functools import lru_cache
from typing import Tuple

PRIME_LIMIT = 100_000

def generate_primes(limit: int) -> Tuple[int, ...]:
    """All primes <= limit, ascending (Sieve of Eratosthenes)."""
    if limit < 2:
        return ()
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    p = 2
    while p * p <= limit:
        if sieve[p]:
            sieve[p*p:limit+1:p] = bytes(((limit - p*p) // p) + 1)
        p += 1
    return tuple(i for i in range(2, limit + 1) if sieve[i])

@lru_cache(maxsize=None)
def small_primes(limit: int = PRIME_LIMIT) -> Tuple[int, ...]:
    """Memoized prime table; the same tuple object is handed to every caller."""
    return generate_primes(limit)
