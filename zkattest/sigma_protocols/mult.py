"""
Proof of multiplication between committed values.

    ZK(x, y, z, rx, ry, rz: z = x * y and Cx = xG + rx H and
       Cy = yG + ry H and Cz = zG + rz H)

Cz is rewritten as y*Cx + (rz - y*rx) H, which the prover shows with the
auxiliary first move A_4_2 = k_y*Cx + k_z*H.
"""

from collections import namedtuple

from ..fiat_shamir import hash_points
from ..groups import MultiMult, Relation


MultProof = namedtuple(
    "MultProof", ["A_x", "A_y", "A_4_2", "t_x", "t_y", "t_rx", "t_ry", "t_r4"]
)


def prove_mult(params, x, y, z, Cx, Cy, Cz, rng=None):
    group = params.group
    xx = group.scalar(x)
    yy = group.scalar(y)

    kx = group.random_scalar(rng)
    ky = group.random_scalar(rng)
    kz = group.random_scalar(rng)
    Ax = params.commit(kx, rng)
    Ay = params.commit(ky, rng)
    A4_2 = Cx.p.dblmul(ky, params.h, kz)

    c = group.scalar(hash_points([Cx.p, Cy.p, Cz.p, Ax.p, Ay.p, A4_2]))

    t_x = kx - c * xx
    t_y = ky - c * yy
    t_rx = Ax.r - c * Cx.r
    t_ry = Ay.r - c * Cy.r
    t_r4 = kz - c * (Cz.r - Cx.r * yy)

    return MultProof(Ax.p, Ay.p, A4_2, t_x, t_y, t_rx, t_ry, t_r4)


def aggregate_mult(params, Cx, Cy, Cz, pi, multi, rng=None):
    """Drain the three relations of a multiplication proof into multi."""
    group = params.group
    c = group.scalar(hash_points([Cx, Cy, Cz, pi.A_x, pi.A_y, pi.A_4_2]))
    one = group.scalar(1)

    A_xrel = Relation(group)
    A_xrel.insert_many([params.g, params.h, Cx, -pi.A_x], [pi.t_x, pi.t_rx, c, one])
    A_yrel = Relation(group)
    A_yrel.insert_many([params.g, params.h, Cy, -pi.A_y], [pi.t_y, pi.t_ry, c, one])
    A_4_2rel = Relation(group)
    A_4_2rel.insert_many([Cx, params.h, Cz, -pi.A_4_2], [pi.t_y, pi.t_r4, c, one])

    A_xrel.drain(multi, rng)
    A_yrel.drain(multi, rng)
    A_4_2rel.drain(multi, rng)
    return True


def verify_mult(params, Cx, Cy, Cz, pi, rng=None):
    multi = MultiMult(params.group)
    if not aggregate_mult(params, Cx, Cy, Cz, pi, multi, rng):
        return False
    return multi.evaluate().is_identity()
