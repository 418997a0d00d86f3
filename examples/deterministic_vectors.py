"""
Replaying fixed randomness through the debug runner.

The first value is used as commitment randomness, the second as the challenge.
"""

from petlib.bn import Bn

from cpzk import ChaumPedersen, SequenceRandomSource
from cpzk.consts import TOY_GROUP
from cpzk.utils.debug import SigmaProtocol

engine = ChaumPedersen(TOY_GROUP, random_source=SequenceRandomSource([7, 4]))
protocol = SigmaProtocol(engine, secret=6)
assert protocol.verify(verbose=False)

transcript = protocol.last_transcript
assert transcript.r1 == Bn(8) and transcript.r2 == Bn(4)
assert transcript.response == Bn(5)
