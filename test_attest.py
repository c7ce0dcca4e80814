#!/usr/bin/env python3
"""
Test suite for proving possession of an ECDSA signature by a listed key.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest
from ecdsa import NIST256p, SECP256k1, SigningKey

from zkattest import (
    ATTEST_SEC_LEVEL, generate_params_list, hash_message, key_to_int,
    prove_signature_list, sign_message, verify_signature_list
)
from zkattest.attest import SignatureProofList, truncate_to_n
from zkattest.groups import GroupP256
from zkattest.sigma_protocols import prove_membership
from test_drng import TestDRNG

MESSAGE = b"kilroy was here"


def make_key(secret=0x1234567890abcdef):
    signing_key = SigningKey.from_secret_exponent(secret, curve=NIST256p)
    return signing_key, signing_key.get_verifying_key()


def make_list(verifying_key):
    return [key_to_int(verifying_key), 4, 5, 6, 7, 8]


def test_key_to_int():
    _, verifying_key = make_key()
    assert key_to_int(verifying_key) == verifying_key.pubkey.point.x()
    encoded = verifying_key.to_string("uncompressed")
    assert key_to_int(encoded) == verifying_key.pubkey.point.x()
    with pytest.raises(ValueError):
        key_to_int(b"\x04" + b"\x01" * 64)


def test_sign_message():
    signing_key, verifying_key = make_key()
    sig = sign_message(signing_key, MESSAGE)
    assert len(sig) == 64
    with pytest.raises(ValueError):
        sign_message(SigningKey.generate(curve=SECP256k1), MESSAGE)


def test_truncate_to_n():
    digest = hash_message(MESSAGE)
    assert truncate_to_n(digest, GroupP256.order) == int.from_bytes(digest, "big")
    assert truncate_to_n(b"\xff" * 40, GroupP256.order) == 2 ** 256 - 1


@pytest.mark.parametrize("suite,sec_level", [
    ("P256_TOMEDWARDS256", ATTEST_SEC_LEVEL),
    ("P256_WAR256", 8),
])
def test_signature_list_proof(suite, sec_level):
    rng = TestDRNG(b"attest")
    signing_key, verifying_key = make_key()
    params = generate_params_list(sec_level, suite, rng)
    msg_hash = hash_message(MESSAGE)
    sig = sign_message(signing_key, MESSAGE)
    keys = make_list(verifying_key)

    proof = prove_signature_list(params, msg_hash, sig, verifying_key, 0, keys, rng)
    assert len(proof.exp_proof) == sec_level
    assert verify_signature_list(params, msg_hash, keys, proof, rng=rng)


def test_signature_list_proof_rejections():
    rng = TestDRNG(b"attest_reject")
    signing_key, verifying_key = make_key()
    params = generate_params_list(ATTEST_SEC_LEVEL, rng=rng)
    msg_hash = hash_message(MESSAGE)
    sig = sign_message(signing_key, MESSAGE)
    keys = make_list(verifying_key)
    proof = prove_signature_list(params, msg_hash, sig, verifying_key, 0, keys, rng)

    # the key was dropped from the list
    altered = [keys[0] + 1] + keys[1:]
    assert not verify_signature_list(params, msg_hash, altered, proof, rng=rng)

    # different message
    other_hash = hash_message(b"kilroy was not here")
    assert not verify_signature_list(params, other_hash, keys, proof, rng=rng)

    # claimed position of the key is wrong
    wrong = prove_signature_list(params, msg_hash, sig, verifying_key, 1, keys, rng)
    assert not verify_signature_list(params, msg_hash, keys, wrong, rng=rng)


def test_signature_list_proof_bad_signature():
    rng = TestDRNG(b"attest_bad")
    signing_key, verifying_key = make_key()
    _, other_key = make_key(0xfeedface)
    params = generate_params_list(4, rng=rng)
    msg_hash = hash_message(MESSAGE)
    sig = sign_message(signing_key, MESSAGE)
    keys = make_list(verifying_key)

    with pytest.raises(ValueError):
        prove_signature_list(params, msg_hash, sig, other_key, 0, keys, rng)
    with pytest.raises(ValueError):
        prove_signature_list(params, hash_message(b"other"), sig, verifying_key, 0, keys, rng)
    with pytest.raises(ValueError):
        prove_signature_list(params, msg_hash, sig[:-1], verifying_key.to_string("uncompressed"),
                             0, keys, rng)
    with pytest.raises(ValueError):
        prove_signature_list(params, msg_hash, b"\x00" * 64, verifying_key.to_string("uncompressed"),
                             0, keys, rng)


def test_signature_list_rejects_missing_rounds():
    rng = TestDRNG(b"attest_rounds")
    _, verifying_key = make_key()
    params = generate_params_list(4, rng=rng)
    msg_hash = hash_message(b"anything")
    keys = make_list(verifying_key)

    # membership alone, with no signature behind it
    key_x = params.proof_params.commit(keys[0], rng)
    membership = prove_membership(params.proof_params, key_x, 0, keys, rng)
    R = GroupP256.generator()
    forged = SignatureProofList(R, R, key_x.p, key_x.p, [], membership)

    with pytest.raises(ValueError):
        verify_signature_list(params, msg_hash, keys, forged, rng=rng)
    with pytest.raises(ValueError):
        verify_signature_list(params._replace(sec_level=0), msg_hash, keys, forged, rng=rng)
    with pytest.raises(ValueError):
        verify_signature_list(params, msg_hash, keys, forged, sec_level=0, rng=rng)
    with pytest.raises(ValueError):
        generate_params_list(0, rng=rng)
    with pytest.raises(ValueError):
        generate_params_list(81, rng=rng)
