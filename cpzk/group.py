"""
Public group description shared by provers and verifiers.
"""

import attr

from cpzk.utils.misc import ensure_bn


@attr.s(frozen=True)
class GroupParams:
    r"""
    Parameters of a prime-order subgroup of :math:`\mathbb{Z}_p^*`.

    The values are taken as given. Nothing checks that :math:`p` and :math:`q` are prime, that
    :math:`q` divides :math:`p - 1`, or that :math:`g` and :math:`h` generate the subgroup of
    order :math:`q`. Parameters that break these conditions silently break soundness.

    >>> params = GroupParams(p=23, q=11, g=4, h=9)
    >>> params.q
    11

    Args:
        p: Prime modulus.
        q: Prime order of the subgroup generated by ``g`` and ``h``.
        g: First generator.
        h: Second generator, with no known discrete-log relation to ``g``.
    """

    p = attr.ib(converter=ensure_bn)
    q = attr.ib(converter=ensure_bn)
    g = attr.ib(converter=ensure_bn)
    h = attr.ib(converter=ensure_bn)
