#!/usr/bin/env python3
"""
Test suite for the elliptic-curve groups.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest
from ecdsa import NIST256p

from zkattest.groups import (
    ALL_GROUPS, GroupP256, GroupTomEdwards256, GroupWar256, group_by_name
)
from test_drng import TestDRNG


@pytest.mark.parametrize("group", ALL_GROUPS, ids=lambda g: g.name)
def test_generator_on_group(group):
    assert group.is_on_group(group.generator())
    assert not group.generator().is_identity()
    assert group.identity().is_identity()


@pytest.mark.parametrize("group", ALL_GROUPS, ids=lambda g: g.name)
def test_order_annihilates_generator(group):
    assert (group.generator() * group.order).is_identity()
    assert group.generator() * (group.order + 1) == group.generator()


@pytest.mark.parametrize("group", ALL_GROUPS, ids=lambda g: g.name)
def test_group_law(group):
    rng = TestDRNG(b"group_law")
    G = group.generator()
    P = group.random(rng)
    Q = group.random(rng)

    assert (P + (-P)).is_identity()
    assert P + group.identity() == P
    assert P + Q == Q + P
    assert P.double() == P + P
    assert P - Q + Q == P
    assert G * 5 == G + G + G + G + G
    assert G * 0 == group.identity()
    assert G * -3 == -(G * 3)


@pytest.mark.parametrize("group", ALL_GROUPS, ids=lambda g: g.name)
def test_scalar_multiplication_distributes(group):
    rng = TestDRNG(b"distribute")
    G = group.generator()
    a = group.random_scalar(rng)
    b = group.random_scalar(rng)
    assert G * a + G * b == G * (a + b)
    assert (G * a) * b == G * (a * b)
    assert b * G == G * b


@pytest.mark.parametrize("group", ALL_GROUPS, ids=lambda g: g.name)
def test_dblmul(group):
    rng = TestDRNG(b"dblmul")
    G = group.generator()
    H = group.random(rng)
    a = group.random_scalar(rng)
    b = group.random_scalar(rng)
    assert G.dblmul(a, H, b) == G * a + H * b
    assert G.dblmul(0, H, b) == H * b
    assert G.dblmul(5, H, 0x1000) == G * 5 + H * 0x1000


@pytest.mark.parametrize("group", ALL_GROUPS, ids=lambda g: g.name)
def test_point_bytes_round_trip(group):
    rng = TestDRNG(b"bytes")
    P = group.random(rng)
    data = P.to_bytes()
    assert len(data) == group.element_byte_length()
    assert group.deserialize_point(data) == P
    assert group.serialize([P, P]) == data + data


@pytest.mark.parametrize("group", ALL_GROUPS, ids=lambda g: g.name)
def test_off_curve_point_rejected(group):
    x, y = group.generator().to_affine()
    with pytest.raises(ValueError):
        group.from_affine(x, (y + 1) % group.p)
    with pytest.raises(ValueError):
        group.from_affine(x, group.p)
    with pytest.raises(ValueError):
        group.deserialize_point(b"\x04" + b"\x00" * 3)


def test_p256_matches_ecdsa():
    G = GroupP256.generator()
    for k in (1, 2, 3, 12345, GroupP256.order - 1):
        expected = NIST256p.generator * k
        assert (G * k).to_affine() == (expected.x(), expected.y())


def test_p256_doubling_vector():
    x, y = GroupP256.generator().double().to_affine()
    assert x == 0x7cf27b188d034f7e8a52380304b51ac3c08969e277f21b35a60b48fc47669978
    assert y == 0x07775510db8ed040293d9ac69f7430dbba7dade63ce982299e04b79d227873d1


def test_weierstrass_identity_encoding():
    identity = GroupP256.identity()
    assert identity.to_affine() is None
    assert identity.to_bytes() == b"\x00"
    assert GroupP256.deserialize_point(b"\x00").is_identity()


def test_edwards_identity_is_affine():
    assert GroupTomEdwards256.identity().to_affine() == (0, 1)


def test_mixing_groups_rejected():
    G = GroupP256.generator()
    with pytest.raises(ValueError):
        G + GroupWar256.generator()
    with pytest.raises(ValueError):
        G * GroupWar256.scalar(3)
    with pytest.raises(ValueError):
        GroupP256.scalar(3) + GroupTomEdwards256.scalar(3)


def test_scalar_deserialize_range():
    data = GroupP256.ScalarField.serialize([7])
    assert GroupP256.deserialize_scalar(data) == GroupP256.scalar(7)
    with pytest.raises(ValueError):
        GroupP256.deserialize_scalar(GroupP256.order.to_bytes(32, "big"))
    with pytest.raises(ValueError):
        GroupP256.deserialize_scalar(b"\x01")


def test_group_by_name():
    assert group_by_name("p256") is GroupP256
    assert group_by_name("war256") is GroupWar256
    assert group_by_name("tomEdwards256") is GroupTomEdwards256
    with pytest.raises(ValueError):
        group_by_name("p384")


@pytest.mark.parametrize("group", ALL_GROUPS, ids=lambda g: g.name)
def test_points_have_no_instance_dict(group):
    P = group.generator() * 3
    assert not hasattr(P, "__dict__")
    assert P.to_affine() == P.to_affine()
    assert not hasattr(group.identity(), "__dict__")


def test_scalar_arithmetic():
    a = GroupP256.scalar(7)
    b = GroupP256.scalar(-1)
    assert int(b) == GroupP256.order - 1
    assert a + b == 6
    assert 1 - a == GroupP256.scalar(-6)
    assert (a / 7) == 1
    assert (a / b) * b == a
    assert hash(a) == hash(GroupP256.scalar(7 + GroupP256.order))
    with pytest.raises(ValueError):
        a / 0
