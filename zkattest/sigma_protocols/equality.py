"""
Proof that two Pedersen commitments open to the same value.
"""

from collections import namedtuple

from ..fiat_shamir import hash_points
from ..groups import MultiMult, Relation


EqualityProof = namedtuple("EqualityProof", ["A_1", "A_2", "t_x", "t_r1", "t_r2"])


def prove_equality(params, x, C1, C2, rng=None):
    """
    ZK(x, r1, r2: C1 = xG + r1 H and C2 = xG + r2 H)
    """
    group = params.group
    k = group.random_scalar(rng)
    A1 = params.commit(k, rng)
    A2 = params.commit(k, rng)

    c = group.scalar(hash_points([C1.p, C2.p, A1.p, A2.p]))
    xx = group.scalar(x)

    t_x = k - c * xx            # t_x  = k - c*x
    t_r1 = A1.r - c * C1.r      # t_r1 = s1 - c*r1
    t_r2 = A2.r - c * C2.r      # t_r2 = s2 - c*r2

    return EqualityProof(A1.p, A2.p, t_x, t_r1, t_r2)


def aggregate_equality(params, C1, C2, pi, multi, rng=None):
    """Drain the two relations of an equality proof into multi."""
    group = params.group
    c = group.scalar(hash_points([C1, C2, pi.A_1, pi.A_2]))
    one = group.scalar(1)

    A1rel = Relation(group)
    A1rel.insert_many([params.g, params.h, C1, -pi.A_1], [pi.t_x, pi.t_r1, c, one])
    A2rel = Relation(group)
    A2rel.insert_many([params.g, params.h, C2, -pi.A_2], [pi.t_x, pi.t_r2, c, one])

    A1rel.drain(multi, rng)
    A2rel.drain(multi, rng)
    return True


def verify_equality(params, C1, C2, pi, rng=None):
    multi = MultiMult(params.group)
    if not aggregate_equality(params, C1, C2, pi, multi, rng):
        return False
    return multi.evaluate().is_identity()
