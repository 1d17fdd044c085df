# factorworker/primality.py
# Miller–Rabin probable-prime test with random witnesses.

from __future__ import annotations
import random
from typing import Optional

from .numeric import mod_pow, rand_between

DEFAULT_ROUNDS = 5

def _decompose(n: int):
    """n - 1 = d * 2**r with d odd."""
    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1
    return d, r

def is_probable_prime(n: int, rounds: int = DEFAULT_ROUNDS,
                      rng: Optional[random.Random] = None) -> bool:
    """
    Never rejects a prime. A composite survives all rounds with probability
    at most 4**-rounds; raise `rounds` when that matters.
    """
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    if n < 2: return False
    if n in (2, 3): return True
    if n % 2 == 0: return False

    d, r = _decompose(n)
    for _ in range(rounds):
        a = rand_between(2, n - 1, rng)      # witness in [2, n-2]
        x = mod_pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True
