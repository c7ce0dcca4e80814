"""
zkattest - zero-knowledge proofs of an ECDSA signature by one key of a list.
"""

from .fiat_shamir import ChallengeCodec, hash_points
from .groups import (
    GroupP256, GroupWar256, GroupTomEdwards256, MultiMult, Relation
)
from .sigma_protocols import (
    Commitment, PedersenParams, generate_pedersen_params,
    prove_equality, verify_equality, prove_mult, verify_mult,
    prove_point_add, verify_point_add, prove_exp, verify_exp,
    prove_membership, verify_membership, interpolate
)
from .ciphersuite import CIPHERSUITE, DEFAULT_SEC_LEVEL, ATTEST_SEC_LEVEL
from .attest import (
    SignatureProofList, SystemParametersList, generate_params_list,
    key_to_int, hash_message, sign_message,
    prove_signature_list, verify_signature_list
)
from .serde import read_json, write_json

__all__ = [
    'ChallengeCodec', 'hash_points',
    'GroupP256', 'GroupWar256', 'GroupTomEdwards256', 'MultiMult', 'Relation',
    'Commitment', 'PedersenParams', 'generate_pedersen_params',
    'prove_equality', 'verify_equality', 'prove_mult', 'verify_mult',
    'prove_point_add', 'verify_point_add', 'prove_exp', 'verify_exp',
    'prove_membership', 'verify_membership', 'interpolate',
    'CIPHERSUITE', 'DEFAULT_SEC_LEVEL', 'ATTEST_SEC_LEVEL',
    'SignatureProofList', 'SystemParametersList', 'generate_params_list',
    'key_to_int', 'hash_message', 'sign_message',
    'prove_signature_list', 'verify_signature_list',
    'read_json', 'write_json'
]
