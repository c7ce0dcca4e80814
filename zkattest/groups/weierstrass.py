"""
Short Weierstrass curves y^2 = x^3 - 3x + b in projective coordinates.

Addition and doubling use the complete formulas for a = -3 from Renes,
Costello and Batina, "Complete addition formulas for prime order elliptic
curves" (Algorithms 4 and 6), so no input needs special casing.
"""

from ..bignum import OS2IP, inv_mod
from .base import Group, Point, _UNSET


class WeierstrassGroup(Group):
    """Prime-order short Weierstrass group with a = -3."""

    a = None
    b = None
    Gx = None
    Gy = None

    _generator = None
    _identity = None

    def __init_subclass__(cls, **kwargs):
        """Validate curve parameters of concrete groups."""
        super().__init_subclass__(**kwargs)
        if cls.p is None:
            return
        for value in (cls.a, cls.b, cls.Gx, cls.Gy):
            if not 0 <= value < cls.p:
                raise ValueError(f"parameter out of range for {cls.name}")
        if cls.a != cls.p - 3:
            raise ValueError("only supports a=-3")
        if not cls.is_on_group(cls.generator()):
            raise ValueError("generator not on group")

    @classmethod
    def generator(cls):
        if cls.__dict__.get("_generator") is None:
            cls._generator = WeierstrassPoint(cls, cls.Gx, cls.Gy, 1)
        return cls._generator

    @classmethod
    def identity(cls):
        if cls.__dict__.get("_identity") is None:
            cls._identity = WeierstrassPoint(cls, 0, 1, 0)
        return cls._identity

    @classmethod
    def is_on_group(cls, point):
        """Check Y^2*Z = X^3 + a*X*Z^2 + b*Z^3."""
        if not isinstance(point, WeierstrassPoint) or point.group is not cls:
            return False
        p = cls.p
        x, y, z = point.x, point.y, point.z
        if x == 0 and y == 0 and z == 0:
            return False
        z2 = z * z % p
        lhs = y * y * z
        rhs = x * x * x + cls.a * x * z2 + cls.b * z2 * z
        return (lhs - rhs) % p == 0

    @classmethod
    def from_affine(cls, x, y):
        if not (0 <= x < cls.p and 0 <= y < cls.p):
            raise ValueError("coordinate not in range")
        point = WeierstrassPoint(cls, x, y, 1)
        if not cls.is_on_group(point):
            raise ValueError(f"point not on Weierstrass group: {cls.name}")
        return point

    @classmethod
    def deserialize_point(cls, data):
        """Parse 0x00 (infinity) or 0x04 || x || y and validate the result."""
        if len(data) == 1 and data[0] == 0x00:
            return cls.identity()
        if len(data) == cls.element_byte_length() and data[0] == 0x04:
            size = cls.field_byte_length()
            x = OS2IP(data[1:1 + size])
            y = OS2IP(data[1 + size:])
            return cls.from_affine(x, y)
        raise ValueError("error deserializing point")


class WeierstrassPoint(Point):
    """Point on a short Weierstrass curve, projective (X:Y:Z)."""

    __slots__ = ("group", "x", "y", "z", "_affine")

    def __init__(self, group, x, y, z=1):
        self.group = group
        self.x = x
        self.y = y
        self.z = z
        self._affine = _UNSET

    def is_identity(self):
        return self.x == 0 and self.y != 0 and self.z == 0

    def __eq__(self, other):
        if not isinstance(other, WeierstrassPoint):
            return NotImplemented
        if other.group is not self.group:
            return False
        p = self.group.p
        return ((self.x * other.z - other.x * self.z) % p == 0 and
                (self.y * other.z - other.y * self.z) % p == 0)

    def __neg__(self):
        return WeierstrassPoint(self.group, self.x, (-self.y) % self.group.p, self.z)

    def double(self):
        p, b = self.group.p, self.group.b
        x, y, z = self.x, self.y, self.z

        t0 = x * x % p
        t1 = y * y % p
        t2 = z * z % p
        t3 = x * y % p
        t3 = t3 + t3
        z3 = x * z % p
        z3 = z3 + z3
        y3 = b * t2 % p
        y3 = y3 - z3
        x3 = y3 + y3
        y3 = x3 + y3
        x3 = t1 - y3
        y3 = t1 + y3
        y3 = x3 * y3 % p
        x3 = x3 * t3 % p
        t3 = t2 + t2
        t2 = t2 + t3
        z3 = b * z3 % p
        z3 = z3 - t2
        z3 = z3 - t0
        t3 = z3 + z3
        z3 = z3 + t3
        t3 = t0 + t0
        t0 = t3 + t0
        t0 = t0 - t2
        t0 = t0 * z3 % p
        y3 = y3 + t0
        t0 = y * z % p
        t0 = t0 + t0
        z3 = t0 * z3 % p
        x3 = x3 - z3
        z3 = t0 * t1 % p
        z3 = 4 * z3

        return WeierstrassPoint(self.group, x3 % p, y3 % p, z3 % p)

    def __add__(self, other):
        self.group.check_point(other)
        p, b = self.group.p, self.group.b
        x1, y1, z1 = self.x, self.y, self.z
        x2, y2, z2 = other.x, other.y, other.z

        t0 = x1 * x2 % p
        t1 = y1 * y2 % p
        t2 = z1 * z2 % p
        t3 = (x1 + y1) * (x2 + y2) % p
        t4 = t0 + t1
        t3 = t3 - t4
        t4 = (y1 + z1) * (y2 + z2) % p
        x3 = t1 + t2
        t4 = t4 - x3
        x3 = (x1 + z1) * (x2 + z2) % p
        y3 = t0 + t2
        y3 = x3 - y3
        z3 = b * t2 % p
        x3 = y3 - z3
        z3 = x3 + x3
        x3 = x3 + z3
        z3 = t1 - x3
        x3 = t1 + x3
        y3 = b * y3 % p
        t1 = t2 + t2
        t2 = t1 + t2
        y3 = y3 - t2
        y3 = y3 - t0
        t1 = y3 + y3
        y3 = t1 + y3
        t1 = t0 + t0
        t0 = t1 + t0
        t0 = t0 - t2
        t1 = t4 * y3 % p
        t2 = t0 * y3 % p
        y3 = x3 * z3 % p
        y3 = y3 + t2
        x3 = t3 * x3 % p
        x3 = x3 - t1
        z3 = t4 * z3 % p
        t1 = t3 * t0 % p
        z3 = z3 + t1

        return WeierstrassPoint(self.group, x3 % p, y3 % p, z3 % p)

    def _compute_affine(self):
        if self.is_identity():
            return None
        p = self.group.p
        z_inv = inv_mod(self.z, p)
        return (self.x * z_inv % p, self.y * z_inv % p)
