"""
Chaum-Pedersen proof in the toy group p = 23, q = 11:
PK{ x: y1 = g^x and y2 = h^x }

WARNING: if you update this file, update the README.
"""

from petlib.bn import Bn

from cpzk import ChaumPedersen, GroupParams

engine = ChaumPedersen(GroupParams(p=23, q=11, g=4, h=9))

# The prover's secret and the values she publishes.
x = 6
y1, y2 = engine.public_values(x)

# Commit.
k = 7
r1, r2 = engine.commit(k)

# The verifier picks a challenge, the prover responds.
c = 4
s = engine.solve(k, c, x)

assert s == Bn(5)
assert engine.verify(r1, r2, y1, y2, c, s)

# A response computed from the wrong secret does not verify.
s_fake = engine.solve(k, c, 14)
assert not engine.verify(r1, r2, y1, y2, c, s_fake)
