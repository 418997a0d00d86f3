"""
Common exception classes.

A proof that does not verify is not an error: :py:meth:`cpzk.engine.ChaumPedersen.verify`
simply returns ``False``. The classes below cover the conditions that must fail loudly.
"""


class ZeroModulusError(ZeroDivisionError):
    """Modular reduction by zero was requested."""


class NegativeExponentError(ValueError):
    """Exponentiation only supports non-negative exponents."""


class InvalidBoundError(ValueError):
    """Cannot sample from an empty range."""


class RandomSourceError(Exception):
    """Random source cannot supply a valid sample."""
