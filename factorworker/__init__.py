from .engine import factorize, format_factors, product
from .errors import FactorError, FactorNotFound, FactorTimeout, ParseError
from .numeric import gcd, mod_pow, rand_between
from .parse import parse_integer
from .primality import is_probable_prime
from .rho import find_factor
from .sieve import generate_primes, small_primes
__all__ = [
    "factorize", "format_factors", "product",
    "FactorError", "FactorNotFound", "FactorTimeout", "ParseError",
    "gcd", "mod_pow", "rand_between", "parse_integer",
    "is_probable_prime", "find_factor", "generate_primes", "small_primes",
]
