from petlib.bn import Bn


def ensure_bn(x):
    """
    Ensure that value is big number.

    Plain integers of any size (and sign) are accepted. Anything else, floats included, is
    rejected rather than truncated.

    >>> isinstance(ensure_bn(42), Bn)
    True
    >>> isinstance(ensure_bn(Bn(42)), Bn)
    True
    >>> ensure_bn(2 ** 100) == Bn(2).pow(100)
    True
    >>> ensure_bn(7.9)
    Traceback (most recent call last):
    ...
    TypeError: Expected an integer. Got: 7.9
    """
    if isinstance(x, Bn):
        return x
    if not isinstance(x, int):
        raise TypeError("Expected an integer. Got: {}".format(x))
    return Bn.from_decimal(str(x))
