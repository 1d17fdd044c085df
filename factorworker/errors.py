# factorworker/errors.py

class FactorError(ValueError):
    """Base class for everything the engine and its boundary raise."""

class ParseError(FactorError):
    """Input text is not a valid non-negative decimal integer."""

class FactorNotFound(FactorError):
    """Every rho attempt and the trial sweep came back without a factor."""

class FactorTimeout(FactorError):
    """The caller's time budget ran out before the decomposition finished."""
