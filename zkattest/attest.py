"""
Zero-knowledge attestation: "I hold a valid ECDSA P-256 signature on this
message from one of these keys", without revealing which key.

An ECDSA signature (r, s) on digest z under key Pk satisfies

    R = (z/s)*G + (r/s)*Pk,   x(R) = r mod n

so with s1 = s/r and z1 = z/r, Pk = s1*R - z1*G. The prover commits to s1
with base R, commits to the coordinates of Pk in the proof group and
shows both that these commitments are consistent (exponentiation proof)
and that the x coordinate is in the public list (membership proof).
"""

import hashlib
import logging
from collections import namedtuple

from ecdsa import BadSignatureError, NIST256p
from ecdsa.util import sigdecode_string, sigencode_string

from .bignum import OS2IP, bit_len, inv_mod
from .ciphersuite import DEFAULT_SEC_LEVEL, DEFAULT_SUITE, get_ciphersuite
from .sigma_protocols import (
    PedersenParams, check_sec_level, generate_pedersen_params,
    prove_exp, verify_exp, prove_membership, verify_membership
)

logger = logging.getLogger(__name__)


SignatureProofList = namedtuple(
    "SignatureProofList",
    ["R", "com_s1", "key_x_com", "key_y_com", "exp_proof", "membership_proof"],
)

SystemParametersList = namedtuple(
    "SystemParametersList", ["signature_params", "proof_params", "sec_level"]
)


def generate_params_list(sec_level=DEFAULT_SEC_LEVEL, suite=DEFAULT_SUITE, rng=None):
    """Fresh Pedersen parameters on both groups of a ciphersuite."""
    check_sec_level(sec_level)
    ciphersuite = get_ciphersuite(suite)
    signature_params = generate_pedersen_params(ciphersuite.signature_group, rng=rng)
    proof_params = generate_pedersen_params(ciphersuite.proof_group, rng=rng)
    return SystemParametersList(signature_params, proof_params, sec_level)


def hash_message(message):
    """SHA-256 digest of a message, as signed by sign_message."""
    return hashlib.sha256(message).digest()


def sign_message(signing_key, message):
    """Raw r || s ECDSA signature of message under an ecdsa.SigningKey."""
    if signing_key.curve != NIST256p:
        raise ValueError("signing key is not a P-256 key")
    return signing_key.sign(message, hashfunc=hashlib.sha256, sigencode=sigencode_string)


def _public_point(group, public_key):
    """Validated group point of an ecdsa.VerifyingKey or an encoded key."""
    if isinstance(public_key, (bytes, bytearray)):
        data = bytes(public_key)
    else:
        data = public_key.to_string("uncompressed")
    return group.deserialize_point(data)


def key_to_int(public_key, group=None):
    """x coordinate of a public key, the form in which keys are listed."""
    group = group or get_ciphersuite(DEFAULT_SUITE).signature_group
    coords = _public_point(group, public_key).to_affine()
    if coords is None:
        raise ValueError("invalid public key")
    return coords[0]


def truncate_to_n(msg_hash, n):
    """Leftmost bit_len(n) bits of a digest, as ECDSA does."""
    z = OS2IP(msg_hash)
    delta = 8 * len(msg_hash) - bit_len(n)
    if delta > 0:
        z >>= delta
    return z


def prove_signature_list(params, msg_hash, sig_bytes, public_key, which, keys, rng=None):
    """Prove a signature on msg_hash by the key at position which of keys."""
    params_sig = params.signature_params
    params_proof = params.proof_params
    ec = params_sig.group
    n = ec.order

    pk_point = _public_point(ec, public_key)
    pk_coords = pk_point.to_affine()
    if pk_coords is None:
        raise ValueError("invalid public key")
    if not isinstance(public_key, (bytes, bytearray)):
        try:
            public_key.verify_digest(sig_bytes, msg_hash, sigdecode=sigdecode_string)
        except BadSignatureError:
            raise ValueError("signature does not verify") from None

    if len(sig_bytes) == 0 or len(sig_bytes) % 2 != 0:
        raise ValueError("malformed signature")
    half = len(sig_bytes) // 2
    r = OS2IP(sig_bytes[:half])
    s = OS2IP(sig_bytes[half:])
    if not (0 < r < n and 0 < s < n):
        raise ValueError("signature values out of range")
    z = truncate_to_n(msg_hash, n)

    # signature verification arithmetic, recovering R
    s_inv = inv_mod(s, n)
    u1 = s_inv * z % n
    u2 = s_inv * r % n
    R = ec.generator().dblmul(u1, pk_point, u2)
    coords_r = R.to_affine()
    if coords_r is None or coords_r[0] % n != r:
        raise ValueError("signature does not verify")

    r_inv = inv_mod(r, n)
    s1 = r_inv * s % n
    z1 = r_inv * z % n
    Q = ec.generator() * z1

    params_sig_exp = PedersenParams(ec, R, params_sig.h)
    com_s1 = params_sig_exp.commit(s1, rng)
    pk_x = params_proof.commit(pk_coords[0], rng)
    pk_y = params_proof.commit(pk_coords[1], rng)

    exp_proof = prove_exp(
        params_sig_exp, params_proof, s1, com_s1, pk_point, pk_x, pk_y,
        params.sec_level, Q, rng
    )
    membership_proof = prove_membership(params_proof, pk_x, which, keys, rng)
    logger.debug("built signature list proof over %d keys", len(keys))

    return SignatureProofList(R, com_s1.p, pk_x.p, pk_y.p, exp_proof, membership_proof)


def verify_signature_list(params, msg_hash, keys, proof, sec_level=None, rng=None):
    """Check a proof built by prove_signature_list against the list keys."""
    params_sig = params.signature_params
    params_proof = params.proof_params
    ec = params_sig.group
    n = ec.order
    if sec_level is None:
        sec_level = params.sec_level
    check_sec_level(sec_level)

    ec.check_point(proof.R)
    coords_r = proof.R.to_affine()
    if coords_r is None:
        raise ValueError("R is at infinity")
    z = truncate_to_n(msg_hash, n)
    r_inv = inv_mod(coords_r[0], n)
    z1 = r_inv * z % n
    Q = ec.generator() * z1
    params_sig_exp = PedersenParams(ec, proof.R, params_sig.h)

    if not verify_membership(params_proof, proof.key_x_com, keys, proof.membership_proof, rng):
        logger.debug("membership proof rejected")
        return False

    if not verify_exp(params_sig_exp, params_proof, proof.com_s1, proof.key_x_com,
                      proof.key_y_com, proof.exp_proof, sec_level, Q, rng):
        logger.debug("exponentiation proof rejected")
        return False
    return True
