"""
Fiat-Shamir transformation subpackage.
"""

from .codec import ChallengeCodec, hash_points, CHALLENGE_BITS, CHALLENGE_BYTES
from .hash_state import HashState, Sha256HashState

__all__ = [
    'ChallengeCodec',
    'hash_points',
    'CHALLENGE_BITS',
    'CHALLENGE_BYTES',
    'HashState',
    'Sha256HashState'
]
