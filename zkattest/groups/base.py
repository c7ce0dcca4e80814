"""
Base classes for cryptographic groups, their points and scalar fields.
"""

from abc import ABC, abstractmethod

from ..bignum import I2OSP, OS2IP, byte_len, rnd
from .field import GF, PrimeFieldElement

# Marks an affine view that has not been computed yet.
_UNSET = object()

_HEX_DIGITS = "0123456789abcdef"


class ScalarField:
    """Base scalar field implementation - to be subclassed with specific order."""

    order = None
    field = None
    field_bytes_length = None

    def __init_subclass__(cls, order=None, **kwargs):
        """Initialize subclass with a specific field order."""
        super().__init_subclass__(**kwargs)
        if order is not None:
            cls.order = order
            cls.field = GF(order)
            cls.field_bytes_length = byte_len(order)

    @classmethod
    def scalar_byte_length(cls):
        return cls.field_bytes_length

    @classmethod
    def random(cls, rng=None):
        """Uniform scalar in [0, order)."""
        return cls.field(rnd(cls.order, rng))

    @classmethod
    def serialize(cls, scalars):
        """Serialize list of scalars to bytes."""
        return b"".join(cls.field(s).to_bytes() for s in scalars)

    @classmethod
    def deserialize(cls, data):
        """Deserialize bytes to list of scalars, rejecting unreduced values."""
        scalar_len = cls.field_bytes_length
        if len(data) % scalar_len != 0:
            raise ValueError("Invalid data length")

        scalars = []
        for i in range(0, len(data), scalar_len):
            value = OS2IP(data[i:i + scalar_len])
            if value >= cls.order:
                raise ValueError("scalar not in range")
            scalars.append(cls.field(value))
        return scalars


class Group(ABC):
    """
    Abstract base class for prime-order elliptic-curve groups.

    Concrete groups are classes carrying their parameters as class
    attributes; they are never instantiated and never mutated.
    """

    name = None
    p = None
    order = None
    ScalarField = None

    @classmethod
    @abstractmethod
    def generator(cls):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def identity(cls):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def is_on_group(cls, point):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_affine(cls, x, y):
        """Build a validated point from affine coordinates."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def deserialize_point(cls, data):
        raise NotImplementedError

    @classmethod
    def field_byte_length(cls):
        return byte_len(cls.p)

    @classmethod
    def element_byte_length(cls):
        return 1 + 2 * cls.field_byte_length()  # uncompressed points

    @classmethod
    def check_point(cls, point):
        if not isinstance(point, Point) or point.group is not cls:
            raise ValueError("points not compatible")
        return True

    @classmethod
    def check_scalar(cls, scalar):
        if not isinstance(scalar, PrimeFieldElement) or scalar.field is not cls.ScalarField.field:
            raise ValueError("scalar not compatible")
        return True

    @classmethod
    def scalar(cls, k):
        """Scalar of this group, reduced modulo the order."""
        return cls.ScalarField.field(k)

    @classmethod
    def random_scalar(cls, rng=None):
        return cls.ScalarField.random(rng)

    @classmethod
    def random(cls, rng=None):
        """Generate random group element."""
        return cls.generator() * cls.random_scalar(rng)

    @classmethod
    def deserialize_scalar(cls, data):
        if len(data) != cls.ScalarField.scalar_byte_length():
            raise ValueError("Invalid data length")
        return cls.ScalarField.deserialize(data)[0]

    @classmethod
    def serialize(cls, elements):
        """Concatenate the encodings of a list of elements."""
        result = b""
        for element in elements:
            cls.check_point(element)
            result += element.to_bytes()
        return result

    @classmethod
    def msm(cls, scalars, elements):
        """Multi-scalar multiplication, one term at a time."""
        if len(scalars) != len(elements):
            raise ValueError("Scalars and elements must have same length")

        result = cls.identity()
        for scalar, element in zip(scalars, elements):
            result = result + element * scalar
        return result


class Point(ABC):
    """
    Group element kept in homogeneous coordinates.

    Points are values: operations return new points and the affine view is
    computed at most once per point.
    """

    __slots__ = ()

    group = None

    @abstractmethod
    def is_identity(self):
        raise NotImplementedError

    @abstractmethod
    def __eq__(self, other):
        raise NotImplementedError

    @abstractmethod
    def __neg__(self):
        raise NotImplementedError

    @abstractmethod
    def __add__(self, other):
        raise NotImplementedError

    @abstractmethod
    def double(self):
        raise NotImplementedError

    @abstractmethod
    def _compute_affine(self):
        raise NotImplementedError

    __hash__ = None

    def to_affine(self):
        """Affine (x, y), or None for the point at infinity."""
        if self._affine is _UNSET:
            self._affine = self._compute_affine()
        return self._affine

    def to_bytes(self):
        coords = self.to_affine()
        if coords is None:
            return b'\x00'
        x, y = coords
        size = self.group.field_byte_length()
        return b'\x04' + I2OSP(x, size) + I2OSP(y, size)

    def __sub__(self, other):
        return self + (-other)

    def _scalar_int(self, scalar):
        if isinstance(scalar, PrimeFieldElement):
            self.group.check_scalar(scalar)
            return scalar.value
        if isinstance(scalar, int):
            return scalar
        raise ValueError("scalar not compatible")

    def _multiples(self):
        """Table [0*P, 1*P, ..., 15*P] for the 4-bit window."""
        table = [self.group.identity(), self]
        for _ in range(14):
            table.append(table[-1] + self)
        return table

    def __mul__(self, scalar):
        """Scalar multiplication, one hex digit per step. Not constant time."""
        k = self._scalar_int(scalar)
        if k < 0:
            return (-self) * (-k)
        mults = self._multiples()
        q = self.group.identity()
        for digit in format(k, 'x'):
            q = q.double().double().double().double()
            index = _HEX_DIGITS.index(digit)
            if index:
                q = q + mults[index]
        return q

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def dblmul(self, s1, p2, s2):
        """Return s1*self + s2*p2 sharing the doublings of both products."""
        self.group.check_point(p2)
        k1 = self._scalar_int(s1)
        k2 = self._scalar_int(s2)
        if k1 < 0 or k2 < 0:
            return self * k1 + p2 * k2

        mults1 = self._multiples()
        mults2 = p2._multiples()
        digits1 = format(k1, 'x')
        digits2 = format(k2, 'x')
        width = max(len(digits1), len(digits2))
        digits1 = digits1.rjust(width, '0')
        digits2 = digits2.rjust(width, '0')

        q = self.group.identity()
        for d1, d2 in zip(digits1, digits2):
            q = q.double().double().double().double()
            i1 = _HEX_DIGITS.index(d1)
            i2 = _HEX_DIGITS.index(d2)
            if i1:
                q = q + mults1[i1]
            if i2:
                q = q + mults2[i2]
        return q

    def __repr__(self):
        coords = self.to_affine()
        if coords is None:
            return f"{self.group.name}: point at infinity"
        return f"{self.group.name}: ({coords[0]:#x}, {coords[1]:#x})"
