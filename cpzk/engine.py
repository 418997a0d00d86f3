r"""
Chaum-Pedersen proof of equality of discrete logarithms.

The prover knows :math:`x` such that :math:`y_1 = g^x` and :math:`y_2 = h^x` modulo :math:`p`, and
convinces the verifier of it without revealing :math:`x`:

.. math::
    PK\{ x: y_1 = g^x \land y_2 = h^x \}

The protocol runs in three moves. The prover commits to :math:`r_1 = g^k, r_2 = h^k` for a fresh
random :math:`k`, the verifier answers with a random challenge :math:`c`, and the prover responds
with :math:`s = k - c x \bmod q`. The verifier accepts iff :math:`r_1 = g^s y_1^c` and
:math:`r_2 = h^s y_2^c`.

See "`Wallet Databases with Observers`_" by Chaum and Pedersen, 1992 for the details.

.. _`Wallet Databases with Observers`:
    https://link.springer.com/chapter/10.1007/3-540-48071-4_7

"""
import logging

from petlib.bn import Bn

from cpzk.group import GroupParams
from cpzk.utils.misc import ensure_bn
from cpzk.utils.rand import SystemRandomSource, check_bound
from cpzk.exceptions import ZeroModulusError, NegativeExponentError


logger = logging.getLogger(__name__)


def _check_modulus(modulus):
    modulus = ensure_bn(modulus)
    if modulus == 0:
        raise ZeroModulusError("Modulus must be non-zero.")
    # Only the magnitude of a misused negative modulus is meaningful.
    if modulus < 0:
        modulus = Bn(0) - modulus
    return modulus


def exponentiate(base, exponent, modulus):
    """
    Compute :math:`base^{exponent} \\bmod modulus`.

    >>> exponentiate(4, 6, 23)
    2
    >>> exponentiate(9, 7, 23)
    4

    Args:
        base: Integer base. Negative bases are reduced to their non-negative residue.
        exponent: Non-negative integer exponent.
        modulus: Non-zero integer modulus.

    Returns:
        petlib.bn.Bn: Value in :math:`[0, |modulus|)`.

    Raises:
        ZeroModulusError: If the modulus is zero.
        NegativeExponentError: If the exponent is negative.
    """
    modulus = _check_modulus(modulus)
    exponent = ensure_bn(exponent)
    if exponent < 0:
        raise NegativeExponentError(
            "Negative exponents are not supported, got {}.".format(exponent)
        )

    base = ensure_bn(base) % modulus
    return base.mod_pow(exponent, modulus)


def generate_random_below(bound, source=None):
    """
    Draw a uniformly random value in :math:`[0, bound)`.

    >>> 0 <= generate_random_below(11) < 11
    True

    Args:
        bound: Positive exclusive upper bound.
        source (:py:class:`cpzk.utils.rand.RandomSource`): Where to draw from. Defaults to the
            OpenSSL CSPRNG.
    """
    bound = check_bound(bound)
    if source is None:
        source = SystemRandomSource()
    return source.below(bound)


class ChaumPedersen:
    """
    Proof engine for a fixed group.

    The engine is stateless apart from its immutable parameters, so a single instance can
    serve many concurrent proofs.

    .. WARNING ::

        The commitment randomness :math:`k` must be fresh for every proof. Answering two
        different challenges :math:`c_1 \\neq c_2` with the same :math:`k` gives
        :math:`s_1 - s_2 = (c_2 - c_1) x`, which reveals the secret. Nothing here detects reuse.

    Example with the toy group :math:`p = 23, q = 11`:

    >>> engine = ChaumPedersen(GroupParams(p=23, q=11, g=4, h=9))
    >>> y1, y2 = engine.public_values(6)
    >>> r1, r2 = engine.commit(7)
    >>> s = engine.solve(7, 4, 6)
    >>> s
    5
    >>> engine.verify(r1, r2, y1, y2, 4, s)
    True

    Args:
        params (:py:class:`cpzk.group.GroupParams`): Group description.
        random_source (:py:class:`cpzk.utils.rand.RandomSource`): Source of randomness used by
            :py:meth:`generate_random_below`. Defaults to the OpenSSL CSPRNG.
    """

    exponentiate = staticmethod(exponentiate)

    def __init__(self, params, random_source=None):
        if not isinstance(params, GroupParams):
            raise TypeError("Expected GroupParams. Got: {}".format(params))
        if random_source is None:
            random_source = SystemRandomSource()
        self.params = params
        self.random_source = random_source

    def solve(self, k, c, x):
        """
        Compute the response :math:`s = k - c x \\bmod q`.

        The result is always the canonical representative in :math:`[0, q)`, including when
        :math:`c x - k` is an exact multiple of :math:`q`.

        >>> engine = ChaumPedersen(GroupParams(p=23, q=11, g=4, h=9))
        >>> engine.solve(1, 3, 4)
        0

        Args:
            k: Commitment randomness.
            c: Challenge.
            x: Secret.
        """
        q = _check_modulus(self.params.q)
        k, c, x = ensure_bn(k), ensure_bn(c), ensure_bn(x)

        cx = c * x
        if k >= cx:
            return (k - cx) % q
        return (q - (cx - k) % q) % q

    def verify(self, r1, r2, y1, y2, c, s):
        """
        Check a proof transcript.

        Recomputes :math:`g^s y_1^c` and :math:`h^s y_2^c` modulo :math:`p` and compares them
        against the commitment values. Negative challenges or responses never verify.

        Args:
            r1, r2: Commitment values.
            y1, y2: Public values.
            c: Challenge.
            s: Response.

        Returns:
            bool: True if both verification equations hold, False otherwise.
        """
        c, s = ensure_bn(c), ensure_bn(s)
        if c < 0 or s < 0:
            logger.debug("Rejecting proof with negative challenge or response.")
            return False

        p, g, h = self.params.p, self.params.g, self.params.h
        check1 = (exponentiate(g, s, p) * exponentiate(y1, c, p)) % p
        check2 = (exponentiate(h, s, p) * exponentiate(y2, c, p)) % p

        first_holds = ensure_bn(r1) == check1
        second_holds = ensure_bn(r2) == check2
        if not (first_holds and second_holds):
            logger.debug(
                "Proof rejected: first equation %s, second equation %s.",
                "holds" if first_holds else "fails",
                "holds" if second_holds else "fails",
            )
        return first_holds and second_holds

    def generate_random_below(self, bound):
        """
        Draw a uniformly random value in :math:`[0, bound)` from the engine's random source.

        Raises:
            InvalidBoundError: If the bound is not positive.
        """
        return generate_random_below(bound, self.random_source)

    def random_scalar(self):
        """
        Draw a uniformly random exponent below the group order.

        Use for the commitment randomness :math:`k` and for challenges.
        """
        return self.generate_random_below(self.params.q)

    def public_values(self, x):
        """
        Compute the public values :math:`(g^x, h^x)` for a secret.
        """
        p = self.params.p
        return exponentiate(self.params.g, x, p), exponentiate(self.params.h, x, p)

    def commit(self, k):
        """
        Compute the commitment values :math:`(g^k, h^k)` for commitment randomness ``k``.
        """
        p = self.params.p
        return exponentiate(self.params.g, k, p), exponentiate(self.params.h, k, p)
