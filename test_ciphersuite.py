#!/usr/bin/env python3
"""
Test suite for parameter suites and Fiat-Shamir challenges.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest

from zkattest.ciphersuite import (
    CHALLENGE_BITS, CIPHERSUITE, DEFAULT_SUITE, get_ciphersuite, make_ciphersuite
)
from zkattest.fiat_shamir import ChallengeCodec, Sha256HashState, hash_points
from zkattest.groups import GroupP256, GroupWar256
from test_drng import TestDRNG


def test_registry():
    assert DEFAULT_SUITE in CIPHERSUITE
    for name, suite in CIPHERSUITE.items():
        assert suite.name == name
        assert suite.signature_group is GroupP256
        assert suite.proof_group.order == suite.signature_group.p
        assert get_ciphersuite(name) is suite


def test_invalid_suites():
    with pytest.raises(ValueError):
        make_ciphersuite("BROKEN", GroupP256, GroupP256)
    with pytest.raises(ValueError):
        get_ciphersuite("P384_WAR256")


def test_hash_points():
    rng = TestDRNG(b"challenge")
    P = GroupP256.random(rng)
    Q = GroupWar256.random(rng)
    c = hash_points([P, Q])
    assert c == hash_points([P, Q])
    assert 0 <= c < 2 ** CHALLENGE_BITS
    assert c != hash_points([Q, P])
    assert hash_points([GroupP256.identity()]) != hash_points([])


def test_codec_matches_hash_points():
    P = GroupP256.generator()
    codec = ChallengeCodec()
    state = codec.init()
    codec.prover_message(state, [P])
    codec.prover_message(state, [P * 2])
    assert codec.verifier_challenge(state) == hash_points([P, P * 2])


def test_hash_state():
    state = Sha256HashState()
    state.absorb(b"abc")
    clone = state.clone()
    clone.absorb(b"d")
    assert state.squeeze(32).hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )
    assert clone.squeeze(4) != state.squeeze(4)
    with pytest.raises(ValueError):
        state.squeeze(33)
