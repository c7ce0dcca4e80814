"""
Codec mapping prover messages to Fiat-Shamir challenges.
"""

from ..bignum import OS2IP
from .hash_state import Sha256HashState

# Challenges are truncated to 80 bits.
CHALLENGE_BITS = 80
CHALLENGE_BYTES = CHALLENGE_BITS // 8


class ChallengeCodec:
    """
    Byte-oriented codec: points are absorbed in their canonical encoding,
    challenges are the leading bytes of the digest read big-endian.
    """

    HashState = Sha256HashState

    def init(self):
        return self.HashState()

    def prover_message(self, hash_state, elements):
        """Encode prover message into hash state."""
        hash_state.absorb(b"".join(element.to_bytes() for element in elements))

    def verifier_challenge(self, hash_state):
        """Generate verifier challenge from hash state."""
        return OS2IP(hash_state.squeeze(CHALLENGE_BYTES))


def hash_points(points, codec=None):
    """Challenge for a list of points, as an 80-bit integer."""
    codec = codec or ChallengeCodec()
    hash_state = codec.init()
    codec.prover_message(hash_state, points)
    return codec.verifier_challenge(hash_state)
