import pytest

from petlib.bn import Bn

from cpzk import GroupParams
from cpzk.consts import TOY_GROUP


# Safe primes p = 2q + 1. The squares 4 and 9 are quadratic residues, so both have order q.
SMALL_GROUPS = [
    TOY_GROUP,
    GroupParams(p=47, q=23, g=4, h=9),
    GroupParams(p=2039, q=1019, g=4, h=9),
]


@pytest.fixture(params=SMALL_GROUPS, ids=lambda params: "p=%s" % params.p)
def group(request):
    return request.param


@pytest.fixture(scope="session")
def large_group():
    p = Bn.get_prime(512, safe=1)
    q = (int(p) - 1) // 2
    return GroupParams(p=p, q=q, g=4, h=9)
