"""
Finite field arithmetic modulo a group order.

Scalars of every group are elements of GF(order). Elements remember their
field and refuse to mix with elements of a different one.
"""

from ..bignum import I2OSP, inv_mod


class PrimeFieldElement:
    """Element of a finite field GF(p), always reduced into [0, p)."""

    __slots__ = ("field", "value")

    def __init__(self, value, field):
        self.field = field
        self.value = value % field.p

    def _coerce(self, other):
        if isinstance(other, int):
            return other
        if other.field is not self.field:
            raise ValueError("scalar not compatible")
        return other.value

    def __add__(self, other):
        return PrimeFieldElement(self.value + self._coerce(other), self.field)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        return PrimeFieldElement(self.value - self._coerce(other), self.field)

    def __rsub__(self, other):
        return PrimeFieldElement(self._coerce(other) - self.value, self.field)

    def __mul__(self, other):
        if not isinstance(other, (int, PrimeFieldElement)):
            # lets scalar * point reach Point.__rmul__
            return NotImplemented
        return PrimeFieldElement(self.value * self._coerce(other), self.field)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        other_inv = inv_mod(self._coerce(other), self.field.p)
        return PrimeFieldElement(self.value * other_inv, self.field)

    def __neg__(self):
        return PrimeFieldElement(-self.value, self.field)

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == (other % self.field.p)
        if not isinstance(other, PrimeFieldElement):
            return NotImplemented
        return self.field is other.field and self.value == other.value

    def __hash__(self):
        return hash((self.field.p, self.value))

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"PrimeFieldElement({self.value:#x}, GF({self.field.p:#x}))"

    def __str__(self):
        return hex(self.value)

    def to_bytes(self):
        return I2OSP(self.value, self.field.byte_length)


class FiniteField:
    """Finite field GF(p) for prime p."""

    def __init__(self, p):
        self.p = p
        self.order = p
        self.characteristic = p
        self.byte_length = (p.bit_length() + 7) // 8

    def __call__(self, value):
        """Create a field element."""
        if isinstance(value, PrimeFieldElement):
            if value.field is not self:
                raise ValueError("scalar not compatible")
            return value
        return PrimeFieldElement(value, self)

    def __repr__(self):
        return f"GF({self.p:#x})"


def GF(p):
    """Factory function to create finite fields, mimicking SAGE's GF()."""
    return FiniteField(p)
