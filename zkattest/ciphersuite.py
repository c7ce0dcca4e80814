"""
Named parameter suites for the attestation protocol.
"""

from collections import namedtuple

from .fiat_shamir import CHALLENGE_BITS
from .groups import GroupP256, GroupTomEdwards256, GroupWar256

# Rounds of the exponentiation proof when used on its own.
DEFAULT_SEC_LEVEL = 80
# Rounds used by the attestation examples; trades soundness for speed.
ATTEST_SEC_LEVEL = 20


Ciphersuite = namedtuple("Ciphersuite", ["name", "signature_group", "proof_group"])


def make_ciphersuite(name, signature_group, proof_group):
    """Pair a signature group with a group whose scalars are its coordinates."""
    if proof_group.order != signature_group.p:
        raise ValueError(
            f"{proof_group.name} order does not match the {signature_group.name} base field"
        )
    return Ciphersuite(name, signature_group, proof_group)


CIPHERSUITE = {
    "P256_TOMEDWARDS256": make_ciphersuite("P256_TOMEDWARDS256", GroupP256, GroupTomEdwards256),
    "P256_WAR256": make_ciphersuite("P256_WAR256", GroupP256, GroupWar256),
}

DEFAULT_SUITE = "P256_TOMEDWARDS256"


def get_ciphersuite(name):
    try:
        return CIPHERSUITE[name]
    except KeyError:
        raise ValueError(f"unknown ciphersuite: {name}") from None


__all__ = [
    'Ciphersuite', 'CIPHERSUITE', 'DEFAULT_SUITE', 'get_ciphersuite', 'make_ciphersuite',
    'DEFAULT_SEC_LEVEL', 'ATTEST_SEC_LEVEL', 'CHALLENGE_BITS'
]
