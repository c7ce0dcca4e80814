"""
Proof that committed affine coordinates satisfy R = P + Q.

P, Q, R live in one group; their coordinates are committed in a second
group whose scalar field is the first group's base field. With
lambda = (y2 - y1) / (x2 - x1) the affine addition law reads

    x3 = lambda^2 - x1 - x2
    y3 = lambda * (x1 - x3) - y1

which is proven with four multiplication proofs and two equality proofs
over the intermediates i8 .. i13 below.
"""

import logging
from collections import namedtuple

from ..bignum import inv_mod
from ..groups import MultiMult
from .equality import aggregate_equality, prove_equality
from .mult import aggregate_mult, prove_mult
from .pedersen import Commitment

logger = logging.getLogger(__name__)


PointAddProof = namedtuple(
    "PointAddProof",
    ["C_8", "C_10", "C_11", "C_13", "pi_8", "pi_10", "pi_11", "pi_13", "pi_x", "pi_y"],
)


def _affine(point, label):
    coords = point.to_affine()
    if coords is None:
        raise ValueError(f"{label} is at infinity")
    return coords


def prove_point_add(params, P, Q, R, PX, PY, QX, QY, RX, RY, rng=None):
    """
    Prove R = P + Q given commitments to the coordinates of P, Q and R.
    """
    if P + Q != R:
        raise ValueError("Points don't add up!")
    group = params.group
    prime = group.order

    x1, y1 = _affine(P, "P")
    x2, y2 = _affine(Q, "Q")
    x3, _ = _affine(R, "R")

    C1, C2, C3 = PX, QX, RX
    C4, C5, C6 = PY, QY, RY

    i7 = (x2 - x1) % prime          # i7  = x2 - x1
    i8 = inv_mod(i7, prime)         # i8  = 1 / (x2 - x1)
    i9 = (y2 - y1) % prime          # i9  = y2 - y1
    i10 = i8 * i9 % prime           # i10 = lambda
    i11 = i10 * i10 % prime         # i11 = lambda^2
    i12 = (x1 - x3) % prime         # i12 = x1 - x3
    i13 = i10 * i12 % prime         # i13 = lambda * (x1 - x3)

    C7 = C2 - C1
    C8 = params.commit(i8, rng)
    C9 = C5 - C4
    C10 = params.commit(i10, rng)
    C11 = params.commit(i11, rng)
    C12 = C1 - C3
    C13 = params.commit(i13, rng)
    # commitment to 1 with zero blinding
    C14 = Commitment(params.g, group.scalar(0))

    pi8 = prove_mult(params, i7, i8, 1, C7, C8, C14, rng)
    pi10 = prove_mult(params, i8, i9, i10, C8, C9, C10, rng)
    pi11 = prove_mult(params, i10, i10, i11, C10, C10, C11, rng)
    # x3 = i11 - x1 - x2
    pix = prove_equality(params, i11, C11, C3 + C1 + C2, rng)
    pi13 = prove_mult(params, i10, i12, i13, C10, C12, C13, rng)
    # y3 = i13 - y1
    piy = prove_equality(params, i13, C13, C6 + C4, rng)

    return PointAddProof(C8.p, C10.p, C11.p, C13.p, pi8, pi10, pi11, pi13, pix, piy)


def aggregate_point_add(params, PX, PY, QX, QY, RX, RY, pi, multi, rng=None):
    """Drain every sub-proof of a point addition proof into multi."""
    C1, C2, C3 = PX, QX, RX
    C4, C5, C6 = PY, QY, RY
    C7 = C2 - C1
    C9 = C5 - C4
    C12 = C1 - C3
    C14 = params.g

    checks = [
        ("pi8", lambda: aggregate_mult(params, C7, pi.C_8, C14, pi.pi_8, multi, rng)),
        ("pi10", lambda: aggregate_mult(params, pi.C_8, C9, pi.C_10, pi.pi_10, multi, rng)),
        ("pi11", lambda: aggregate_mult(params, pi.C_10, pi.C_10, pi.C_11, pi.pi_11, multi, rng)),
        ("pix", lambda: aggregate_equality(params, pi.C_11, C3 + C1 + C2, pi.pi_x, multi, rng)),
        ("pi13", lambda: aggregate_mult(params, pi.C_10, C12, pi.C_13, pi.pi_13, multi, rng)),
        ("piy", lambda: aggregate_equality(params, pi.C_13, C4 + C6, pi.pi_y, multi, rng)),
    ]
    for label, check in checks:
        if not check():
            logger.debug("point addition sub-proof %s rejected", label)
            return False
    return True


def verify_point_add(params, PX, PY, QX, QY, RX, RY, pi, rng=None):
    multi = MultiMult(params.group)
    if not aggregate_point_add(params, PX, PY, QX, QY, RX, RY, pi, multi, rng):
        return False
    return multi.evaluate().is_identity()
