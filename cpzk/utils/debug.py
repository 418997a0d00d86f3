"""
Utils that can be useful for debugging.
"""

import attr


@attr.s
class Transcript:
    """
    Record of one in-process protocol run.
    """

    y1 = attr.ib()
    y2 = attr.ib()
    r1 = attr.ib()
    r2 = attr.ib()
    challenge = attr.ib()
    response = attr.ib()


class SigmaProtocol:
    """
    Sigma-protocol runner with an honest prover and verifier in the same process.

    Both parties share the engine, and with it its random source, which supplies first the
    commitment randomness and then the challenge.

    Args:
        engine (:py:class:`cpzk.engine.ChaumPedersen`): Proof engine.
        secret: The prover's secret exponent.
    """

    def __init__(self, engine, secret):
        self.engine = engine
        self.secret = secret
        self.last_transcript = None

    def verify(self, verbose=True):
        """Run the protocol once and verify the result."""

        engine = self.engine

        # Peggy publishes her values and commits.
        y1, y2 = engine.public_values(self.secret)
        k = engine.random_scalar()
        r1, r2 = engine.commit(k)

        # Victor challenges, Peggy responds.
        challenge = engine.random_scalar()
        response = engine.solve(k, challenge, self.secret)

        self.last_transcript = Transcript(y1, y2, r1, r2, challenge, response)
        result = engine.verify(r1, r2, y1, y2, challenge, response)

        if verbose:
            if result:
                print("Verified for {0}".format(engine.__class__.__name__))
            else:
                print("Not verified for {0}".format(engine.__class__.__name__))

        return result
