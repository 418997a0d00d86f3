"""
Chaum-Pedersen proof in the quadratic residues modulo a freshly generated safe prime.

Parameter generation is not part of cpzk; it is done here with petlib directly. Squares of
small integers are quadratic residues, hence have order q, but their discrete-log relation is
not secret: use independently generated generators in practice.
"""

from petlib.bn import Bn

from cpzk import ChaumPedersen, GroupParams

p = Bn.get_prime(256, safe=1)
q = (int(p) - 1) // 2
engine = ChaumPedersen(GroupParams(p=p, q=q, g=4, h=9))

x = engine.random_scalar()
y1, y2 = engine.public_values(x)

k = engine.random_scalar()
r1, r2 = engine.commit(k)

c = engine.random_scalar()
s = engine.solve(k, c, x)

assert engine.verify(r1, r2, y1, y2, c, s)
