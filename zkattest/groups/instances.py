"""
Concrete groups: NIST P-256 and the two coordinate-commitment groups.

war256 and tomEdwards256 have prime order equal to the P-256 base-field
prime, so P-256 coordinates are scalars of either of them.
"""

from .base import ScalarField
from .edwards import EdwardsGroup
from .weierstrass import WeierstrassGroup


class P256ScalarField(ScalarField, order=0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551):
    """Scalar field for P-256 group."""
    pass


class GroupP256(WeierstrassGroup):
    """NIST P-256 (secp256r1) elliptic curve group."""

    name = "p256"

    p = 0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff
    order = 0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551
    a = p - 3
    b = 0x5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b

    Gx = 0x6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296
    Gy = 0x4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5

    ScalarField = P256ScalarField


class War256ScalarField(ScalarField, order=0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff):
    """Scalar field for war256, the P-256 base field."""
    pass


class GroupWar256(WeierstrassGroup):
    """Weierstrass group of order p256.p."""

    name = "war256"

    p = 0xffffffff0000000100000000000000017e72b42b30e7317793135661b1c4b117
    order = 0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff
    a = p - 3
    b = 0xb441071b12f4a0366fb552f8e21ed4ac36b06aceeb354224863e60f20219fc56

    Gx = 0x3
    Gy = 0x5a6dd32df58708e64e97345cbe66600decd9d538a351bb3c30b4954925b1f02d

    ScalarField = War256ScalarField


class TomEdwards256ScalarField(ScalarField, order=0x0ffffffff00000001000000000000000000000000ffffffffffffffffffffffff):
    """Scalar field for tomEdwards256, the P-256 base field."""
    pass


class GroupTomEdwards256(EdwardsGroup):
    """Twisted Edwards group a*x^2 + y^2 = 1 + d*x^2*y^2 of order p256.p."""

    name = "tomEdwards256"

    p = 0x3fffffffc000000040000000000000002ae382c7957cc4ff9713c3d82bc47d3af
    order = 0x0ffffffff00000001000000000000000000000000ffffffffffffffffffffffff
    a = 0x1abce3fd8e1d7a21252515332a512e09d4249bd5b1ec35e316c02254fe8cedf5d
    d = 0x051781d9823abde00ec99295ba542c8b1401874bcbeb9e9c861174c7bca6a02aa

    Gx = 0x7907055d0a7d4abc3eafdc25d431d9659fbe007ee2d8ddc4e906206ea9ba4fdb
    Gy = 0xbe231cb9f9bf18319c9f081141559b0a33dddccd2221f0464a9cd57081b01a01

    ScalarField = TomEdwards256ScalarField


ALL_GROUPS = [GroupP256, GroupWar256, GroupTomEdwards256]

_GROUPS_BY_NAME = {group.name: group for group in ALL_GROUPS}


def group_by_name(name):
    """Resolve a built-in group from its name."""
    try:
        return _GROUPS_BY_NAME[name]
    except KeyError:
        raise ValueError(f"invalid group name: {name}") from None
