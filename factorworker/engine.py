# factorworker/engine.py
# Full decomposition: trial division against the cached sieve, then
# Miller–Rabin / Pollard-ρ on whatever is left, driven by an explicit stack.

from __future__ import annotations
import logging, random, time
from typing import Dict, Optional

from .primality import DEFAULT_ROUNDS, is_probable_prime
from .rho import check_deadline, find_factor
from .sieve import PRIME_LIMIT, small_primes

log = logging.getLogger(__name__)

def _bump(factors: Dict[int, int], p: int, k: int = 1) -> None:
    factors[p] = factors.get(p, 0) + k

def trial_divide(n: int, primes) -> tuple[Dict[int, int], int, bool]:
    """
    Strip every prime in `primes` out of n.
    Returns (factors, remainder, exhausted); exhausted is False when the loop
    stopped early because p*p exceeded the remainder.
    """
    factors: Dict[int, int] = {}
    for p in primes:
        if p * p > n:
            return factors, n, False
        if n % p == 0:
            k = 0
            while n % p == 0:
                n //= p
                k += 1
            _bump(factors, p, k)
    return factors, n, True

def factorize(n: int, rounds: int = DEFAULT_ROUNDS, rng: Optional[random.Random] = None,
              prime_limit: int = PRIME_LIMIT, max_ms: Optional[int] = None) -> Dict[int, int]:
    """
    Prime -> exponent for n >= 1, ascending by prime. factorize(1) == {}.

    Factors up to `prime_limit` are found deterministically; anything above
    relies on the probabilistic primality test (see `rounds`).
    With `max_ms` set, FactorTimeout is raised once that budget is spent;
    no partial result is returned.
    """
    if n < 1:
        raise ValueError(f"n must be a positive integer, got {n}")
    deadline = None if max_ms is None else time.perf_counter() + max_ms / 1000.0

    primes = small_primes(prime_limit)
    factors, rest, exhausted = trial_divide(n, primes)
    if rest == 1:
        return dict(sorted(factors.items()))

    # No prime <= the sieve bound divides `rest`, so below bound**2 it is prime.
    if not exhausted or rest <= prime_limit * prime_limit:
        _bump(factors, rest)
        return dict(sorted(factors.items()))

    log.debug("trial division left a %d-digit cofactor", len(str(rest)))
    stack = [rest]
    while stack:
        check_deadline(deadline)
        c = stack.pop()
        if c == 1:
            continue
        if is_probable_prime(c, rounds, rng):
            _bump(factors, c)
            continue
        f = find_factor(c, rng, deadline=deadline)
        log.debug("split %d-digit composite", len(str(c)))
        stack.append(f)
        stack.append(c // f)
    return dict(sorted(factors.items()))

def product(factors: Dict[int, int]) -> int:
    out = 1
    for p, e in factors.items():
        out *= p ** e
    return out

def format_factors(factors: Dict[int, int]) -> str:
    if not factors:
        return "1"
    return " * ".join(f"{p}^{e}" if e > 1 else str(p) for p, e in factors.items())
