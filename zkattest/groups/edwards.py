"""
Twisted Edwards curves a*x^2 + y^2 = 1 + d*x^2*y^2 in extended coordinates.

Group law from Hisil, Wong, Carter and Dawson, "Twisted Edwards Curves
Revisited": unified addition (section 3.1) and doubling (section 3.3).
"""

from ..bignum import OS2IP, inv_mod
from .base import Group, Point, _UNSET


class EdwardsGroup(Group):
    """Prime-order subgroup of a twisted Edwards curve."""

    a = None
    d = None
    Gx = None
    Gy = None

    _generator = None
    _identity = None

    def __init_subclass__(cls, **kwargs):
        """Validate curve parameters of concrete groups."""
        super().__init_subclass__(**kwargs)
        if cls.p is None:
            return
        for value in (cls.a, cls.d, cls.Gx, cls.Gy):
            if not 0 <= value < cls.p:
                raise ValueError(f"parameter out of range for {cls.name}")
        if not cls.is_on_group(cls.generator()):
            raise ValueError("generator not on group")

    @classmethod
    def generator(cls):
        if cls.__dict__.get("_generator") is None:
            t = cls.Gx * cls.Gy % cls.p
            cls._generator = EdwardsPoint(cls, cls.Gx, cls.Gy, t, 1)
        return cls._generator

    @classmethod
    def identity(cls):
        if cls.__dict__.get("_identity") is None:
            cls._identity = EdwardsPoint(cls, 0, 1, 0, 1)
        return cls._identity

    @classmethod
    def is_on_group(cls, point):
        """Check a*X^2 + Y^2 = Z^2 + d*T^2 and X*Y = Z*T."""
        if not isinstance(point, EdwardsPoint) or point.group is not cls:
            return False
        p = cls.p
        x, y, t, z = point.x, point.y, point.t, point.z
        if z % p == 0:
            return False
        curve = (cls.a * x * x + y * y - z * z - cls.d * t * t) % p
        segre = (x * y - z * t) % p
        return curve == 0 and segre == 0

    @classmethod
    def from_affine(cls, x, y):
        if not (0 <= x < cls.p and 0 <= y < cls.p):
            raise ValueError("coordinate not in range")
        point = EdwardsPoint(cls, x, y, x * y % cls.p, 1)
        if not cls.is_on_group(point):
            raise ValueError(f"point not on TEdwards group: {cls.name}")
        return point

    @classmethod
    def deserialize_point(cls, data):
        """Parse 0x04 || x || y and validate the result."""
        if len(data) == cls.element_byte_length() and data[0] == 0x04:
            size = cls.field_byte_length()
            x = OS2IP(data[1:1 + size])
            y = OS2IP(data[1 + size:])
            return cls.from_affine(x, y)
        raise ValueError("error deserializing TEdwardsPoint")


class EdwardsPoint(Point):
    """Point on a twisted Edwards curve, extended (X:Y:T:Z) with XY = ZT."""

    __slots__ = ("group", "x", "y", "t", "z", "_affine")

    def __init__(self, group, x, y, t, z=1):
        self.group = group
        self.x = x
        self.y = y
        self.t = t
        self.z = z
        self._affine = _UNSET

    def is_identity(self):
        p = self.group.p
        return self.x % p == 0 and self.z % p != 0 and (self.y - self.z) % p == 0

    def __eq__(self, other):
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        if other.group is not self.group:
            return False
        p = self.group.p
        return ((self.x * other.z - other.x * self.z) % p == 0 and
                (self.y * other.z - other.y * self.z) % p == 0)

    def __neg__(self):
        p = self.group.p
        return EdwardsPoint(self.group, (-self.x) % p, self.y, (-self.t) % p, self.z)

    def double(self):
        p, a = self.group.p, self.group.a
        x, y, z = self.x, self.y, self.z

        A = x * x % p               # A = X1^2
        B = y * y % p               # B = Y1^2
        C = 2 * z * z % p           # C = 2*Z1^2
        D = a * A % p               # D = a*A
        E = ((x + y) * (x + y) - A - B) % p
        G = D + B
        F = G - C
        H = D - B

        return EdwardsPoint(self.group, E * F % p, G * H % p, E * H % p, F * G % p)

    def __add__(self, other):
        self.group.check_point(other)
        p, a, d = self.group.p, self.group.a, self.group.d
        x1, y1, t1, z1 = self.x, self.y, self.t, self.z
        x2, y2, t2, z2 = other.x, other.y, other.t, other.z

        A = x1 * x2 % p
        B = y1 * y2 % p
        C = d * t1 % p * t2 % p
        D = z1 * z2 % p
        E = ((x1 + y1) * (x2 + y2) - A - B) % p
        F = D - C
        G = D + C
        H = B - a * A

        return EdwardsPoint(self.group, E * F % p, G * H % p, E * H % p, F * G % p)

    def _compute_affine(self):
        p = self.group.p
        z_inv = inv_mod(self.z, p)
        return (self.x * z_inv % p, self.y * z_inv % p)
