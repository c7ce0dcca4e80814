"""
Polynomial interpolation over Z_m.
"""

from ..bignum import inv_mod


def eval_poly(coeff, x, m):
    """Evaluate sum(coeff[i] * x^i) mod m by Horner's rule."""
    ret = 0
    for c in reversed(coeff):
        ret = (c + x * ret) % m
    return ret


def _poly_mul_linear(poly, root, m):
    """Multiply poly (lowest degree first) by (X - root)."""
    out = [0] * (len(poly) + 1)
    for i, c in enumerate(poly):
        out[i + 1] = (out[i + 1] + c) % m
        out[i] = (out[i] - root * c) % m
    return out


def interpolate(x, y, m):
    """
    Coefficients, lowest degree first, of the unique polynomial of degree
    below len(x) through the points (x[i], y[i]) mod m.

    Raises ValueError when two nodes collide modulo m.
    """
    if len(x) != len(y):
        raise ValueError("inconsistent args")
    n = len(x)
    coeff = [0] * n
    for i in range(n):
        basis = [1]
        denom = 1
        for j in range(n):
            if j == i:
                continue
            basis = _poly_mul_linear(basis, x[j], m)
            denom = denom * (x[i] - x[j]) % m
        scale = y[i] * inv_mod(denom, m) % m
        for k in range(n):
            coeff[k] = (coeff[k] + scale * basis[k]) % m

    for xi, yi in zip(x, y):
        if yi % m != eval_poly(coeff, xi, m):
            raise ArithmeticError("incorrect interpolation")
    return coeff
