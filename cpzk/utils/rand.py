"""
Sources of uniform random scalars.

The engine never draws randomness from a hidden global generator: it asks a
:py:class:`RandomSource` for a value below a bound. Production code uses
:py:class:`SystemRandomSource`; tests can replay fixed vectors with
:py:class:`SequenceRandomSource`.
"""

import abc
import threading

from cpzk.utils.misc import ensure_bn
from cpzk.exceptions import InvalidBoundError, RandomSourceError


class RandomSource(metaclass=abc.ABCMeta):
    """
    Abstract provider of uniform samples below a bound.
    """

    @abc.abstractmethod
    def below(self, bound):
        """
        Draw a value uniformly from :math:`[0, bound)`.

        Args:
            bound (petlib.bn.Bn): Exclusive, positive upper bound.
        """
        pass


class SystemRandomSource(RandomSource):
    """
    Random source backed by the OpenSSL CSPRNG.

    ``Bn.random`` rejects out-of-range candidates instead of reducing a wider value, so the
    output is exactly uniform for any bound, not only for powers of two.

    >>> from petlib.bn import Bn
    >>> x = SystemRandomSource().below(Bn(2).pow(6))
    >>> 0 <= x < 2**6
    True
    """

    def below(self, bound):
        return ensure_bn(bound).random()


class SequenceRandomSource(RandomSource):
    """
    Random source replaying a fixed sequence of values.

    Meant for deterministic test vectors. Each value must lie below the bound it is drawn for.

    >>> source = SequenceRandomSource([7, 4])
    >>> source.below(11), source.below(11)
    (7, 4)

    Args:
        values: Iterable of integers or big numbers.
    """

    def __init__(self, values):
        self._values = iter(values)
        self._lock = threading.Lock()

    def below(self, bound):
        bound = ensure_bn(bound)
        with self._lock:
            try:
                value = ensure_bn(next(self._values))
            except StopIteration:
                raise RandomSourceError("Sequence of random values is exhausted.")

        if not 0 <= value < bound:
            raise RandomSourceError(
                "Replayed value {} is not below the bound {}.".format(value, bound)
            )
        return value


def check_bound(bound):
    """
    Ensure a sampling bound describes a non-empty range.

    >>> check_bound(11)
    11
    >>> check_bound(0)
    Traceback (most recent call last):
    ...
    cpzk.exceptions.InvalidBoundError: Bound must be positive, got 0.
    """
    bound = ensure_bn(bound)
    if bound <= 0:
        raise InvalidBoundError("Bound must be positive, got {}.".format(bound))
    return bound
