#!/usr/bin/env python3
"""
Test suite for big-integer helpers.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest

from zkattest.bignum import (
    I2OSP, OS2IP, exp_mod, hash_nums, inv_mod, is_prime, pos_mod, rnd, rnd_range,
    verify_pos_range
)
from zkattest.groups import GroupP256
from test_drng import TestDRNG


def test_inv_mod():
    assert inv_mod(3, 5) == 2
    assert inv_mod(7, 41) == 6
    assert inv_mod(-3, 5) == 3
    n = GroupP256.order
    k = 0x1234567890abcdef
    assert k * inv_mod(k, n) % n == 1


def test_inv_mod_not_invertible():
    with pytest.raises(ValueError):
        inv_mod(6, 9)
    with pytest.raises(ValueError):
        inv_mod(0, 7)


def test_exp_mod():
    assert exp_mod(3, 0, 7) == 1
    assert exp_mod(2, 10, 1000) == 24
    assert exp_mod(5, 117, 19) == pow(5, 117, 19)
    with pytest.raises(ValueError):
        exp_mod(2, -1, 7)


def test_is_prime_small():
    rng = TestDRNG(b"primality")
    assert is_prime(2)
    assert is_prime(23, rng=rng)
    assert is_prime(257, rng=rng)
    assert not is_prime(1)
    assert not is_prime(221, rng=rng)
    assert not is_prime(477, rng=rng)
    # Carmichael number
    assert not is_prime(561, rng=rng)


def test_is_prime_group_parameters():
    rng = TestDRNG(b"primality")
    assert is_prime(GroupP256.order, rng=rng)
    assert is_prime(GroupP256.p, rng=rng)
    assert not is_prime(GroupP256.p * 3, rng=rng)


def test_rnd_in_range():
    rng = TestDRNG(b"rnd")
    for bound in (1, 2, 255, 256, 257, GroupP256.order):
        for _ in range(5):
            assert 0 <= rnd(bound, rng) < bound
    with pytest.raises(ValueError):
        rnd(0, rng)


def test_verify_pos_range():
    assert verify_pos_range(0, 3)
    with pytest.raises(ValueError):
        verify_pos_range(3, 3)
    with pytest.raises(ValueError):
        verify_pos_range(-1, 3)


def test_octet_conversions():
    assert I2OSP(1, 2) == b"\x00\x01"
    assert OS2IP(b"\x01\x00") == 256
    assert OS2IP(I2OSP(GroupP256.p, 32)) == GroupP256.p
    with pytest.raises(ValueError):
        I2OSP(256, 1)


def test_hash_nums():
    h = hash_nums([1, 23])
    assert h == hash_nums([1, 23])
    assert 0 <= h < 2**80
    # length prefixes keep the split between numbers
    assert h != hash_nums([12, 3])
    assert hash_nums([]) != hash_nums([0])


def test_pos_mod_and_rnd_range():
    assert pos_mod(-1, 7) == 6
    assert pos_mod(15, 7) == 1
    rng = TestDRNG(b"rnd_range")
    values = {rnd_range(3, 5, rng) for _ in range(50)}
    assert values <= {3, 4, 5}
