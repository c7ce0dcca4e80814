"""
Hash state used to derive Fiat-Shamir challenges.
"""

import hashlib


class HashState:
    """Absorbs a transcript and squeezes digest bytes out of it."""

    hash_name = None

    def __init__(self, initial_state=None):
        """Initialize with optional initial state."""
        self.state = initial_state or b''

    def absorb(self, data):
        """Absorb data into the state."""
        self.state += data

    def squeeze(self, length):
        """Return the first length bytes of the digest of everything absorbed."""
        digest = hashlib.new(self.hash_name, self.state).digest()
        if length > len(digest):
            raise ValueError("squeeze length exceeds digest size")
        return digest[:length]

    def clone(self):
        """Clone the current state."""
        return type(self)(self.state)


class Sha256HashState(HashState):
    """SHA-256 based hash state."""

    hash_name = "sha256"
