# factorworker/rho.py
# Pollard-ρ factor finder.
# - Floyd walk (x advances once, y twice) with fresh seed/constant on a
#   degenerate g == n outcome
# - Brent walk with batch-GCD as fallback once the Floyd attempts run out
# - 6k±1 trial sweep as last resort, which always terminates
# An optional deadline (time.perf_counter() value) bounds the whole search.

from __future__ import annotations
import logging, math, random, time
from typing import Optional

from .errors import FactorNotFound, FactorTimeout
from .numeric import gcd, rand_between

log = logging.getLogger(__name__)

DEFAULT_ATTEMPTS = 32
CHECK_EVERY = 1024   # walk steps between deadline checks

def check_deadline(deadline: Optional[float]) -> None:
    if deadline is not None and time.perf_counter() >= deadline:
        raise FactorTimeout("time budget exhausted")

def _floyd(n: int, rng: Optional[random.Random], deadline: Optional[float] = None) -> int:
    """One walk. Returns g with 1 < g <= n; g == n means the walk degenerated."""
    x = rand_between(2, n - 1, rng)
    c = rand_between(1, n - 1, rng)
    y = x
    g = 1
    steps = 0
    while g == 1:
        x = (x * x + c) % n
        y = (y * y + c) % n
        y = (y * y + c) % n
        g = gcd(abs(x - y), n)
        steps += 1
        if steps % CHECK_EVERY == 0:
            check_deadline(deadline)
    return g

def _brent(n: int, rng: Optional[random.Random], deadline: Optional[float] = None,
           m: int = 128) -> int:
    """Brent's cycle search; product of differences, gcd once per block of m."""
    y = rand_between(1, n - 1, rng)
    c = rand_between(1, n - 1, rng)
    f = lambda v: (v * v + c) % n
    g = r = q = 1
    x = ys = y
    while g == 1:
        x = y
        for _ in range(r):
            y = f(y)
        k = 0
        while k < r and g == 1:
            ys = y
            for _ in range(min(m, r - k)):
                y = f(y)
                q = (q * abs(x - y)) % n
            g = gcd(q, n)
            k += m
            check_deadline(deadline)
        r <<= 1
    if g == n:
        # the block overshot; replay it one step at a time
        while True:
            ys = f(ys)
            g = gcd(abs(x - ys), n)
            if g > 1:
                break
    return g

def _trial_sweep(n: int, deadline: Optional[float] = None) -> Optional[int]:
    if n % 2 == 0: return 2
    if n % 3 == 0: return 3
    limit = math.isqrt(n)
    i, step, tried = 5, 2, 0
    while i <= limit:
        if n % i == 0:
            return i
        i += step
        step = 6 - step
        tried += 1
        if tried % (CHECK_EVERY * 64) == 0:
            check_deadline(deadline)
    return None

def find_factor(n: int, rng: Optional[random.Random] = None,
                max_attempts: int = DEFAULT_ATTEMPTS,
                deadline: Optional[float] = None) -> int:
    """
    Return a nontrivial factor of composite n (2 straight away for even n).

    Degenerate walks are retried internally; FactorNotFound is raised only
    when n has no nontrivial factor at all, FactorTimeout once `deadline`
    passes.
    """
    if n < 4:
        raise ValueError(f"no nontrivial factor exists for n={n}")
    if n % 2 == 0:
        return 2

    for attempt in range(1, max_attempts + 1):
        g = _floyd(n, rng, deadline)
        if g < n:
            return g
        log.debug("rho walk %d degenerated on %d-bit n, reseeding", attempt, n.bit_length())
        check_deadline(deadline)

    log.warning("floyd rho gave up after %d walks on %d-bit n; trying brent",
                max_attempts, n.bit_length())
    for attempt in range(1, max_attempts + 1):
        g = _brent(n, rng, deadline)
        if g < n:
            return g
        log.debug("brent walk %d degenerated", attempt)
        check_deadline(deadline)

    log.warning("brent rho gave up after %d walks; falling back to trial sweep", max_attempts)
    f = _trial_sweep(n, deadline)
    if f is None:
        raise FactorNotFound(f"no factor found for {n} (is it prime?)")
    return f
