"""
One-out-of-many proofs.

Groth and Kohlweiss, "One-out-of-Many Proofs: Or How to Leak a Secret and
Spend a Coin", https://eprint.iacr.org/2014/764. Proves a commitment opens
to one entry of a public list without revealing which.
"""

import logging
from collections import namedtuple

from ..fiat_shamir import hash_points
from ..groups import MultiMult, Relation
from .interpolate import interpolate

logger = logging.getLogger(__name__)


GKProof = namedtuple("GKProof", ["cl", "ca", "cb", "cd", "f", "za", "zb", "zd"])


def pad(values, group):
    """Scalars of values, repeating the first up to a power of two (at least 2)."""
    if not values:
        raise ValueError("empty list")
    ret = [group.scalar(v) for v in values]
    size = 2
    while size < len(ret):
        size *= 2
    ret.extend([ret[0]] * (size - len(ret)))
    return ret


def _levels(size):
    return size.bit_length() - 1


def _bit(i, j):
    return (i >> j) & 1


def prove_membership(params, com, index, values, rng=None):
    """Prove com opens to values[index]."""
    group = params.group
    order = group.order
    vec = pad(values, group)
    if not 0 <= index < len(values):
        raise ValueError("index not in range")
    n = _levels(len(vec))
    el = [_bit(index, i) for i in range(n)]

    ri = [group.random_scalar(rng).value for _ in range(n)]
    ai = [group.random_scalar(rng).value for _ in range(n)]
    si = [group.random_scalar(rng).value for _ in range(n)]
    ti = [group.random_scalar(rng).value for _ in range(n)]
    rho = [group.random_scalar(rng).value for _ in range(n)]

    cl = [params.commit_with(el[i], ri[i]) for i in range(n)]
    ca = [params.commit_with(ai[i], si[i]) for i in range(n)]
    cb = [params.commit_with(el[i] * ai[i], ti[i]) for i in range(n)]

    # d(w) = sum_j (v_index - v_j) * prod_k f_{k, bit k of j}(w) with
    # f_1 = e*w + a and f_0 = w - f_1; the index term cancels, so d has
    # degree n - 1 and n evaluations determine it.
    omegas = list(range(n))
    dv = []
    for w in omegas:
        f1 = [(el[k] * w + ai[k]) % order for k in range(n)]
        f0 = [(w - f1[k]) % order for k in range(n)]
        dval = 0
        for j, vj in enumerate(vec):
            prod = 1
            for k in range(n):
                prod = prod * (f1[k] if _bit(j, k) else f0[k]) % order
            dval = (dval + (vec[index].value - vj.value) * prod) % order
        dv.append(dval)
    di = interpolate(omegas, dv, order)
    cd = [params.commit_with(di[i], rho[i]) for i in range(n)]

    x = hash_points(cl + ca + cb + cd) % order

    f, za, zb = [], [], []
    for i in range(n):
        fi = (el[i] * x + ai[i]) % order
        f.append(group.scalar(fi))
        za.append(group.scalar(ri[i] * x + si[i]))
        zb.append(group.scalar(ri[i] * (x - fi) + ti[i]))
    zd = com.r.value * pow(x, n, order)
    for i in range(n):
        zd -= rho[i] * pow(x, i, order)

    logger.debug("built membership proof over %d entries", len(vec))
    return GKProof(cl, ca, cb, cd, f, za, zb, group.scalar(zd))


def verify_membership(params, com, values, proof, rng=None):
    """Check that com opens to one of values."""
    group = params.group
    order = group.order
    vec = pad(values, group)
    n = _levels(len(vec))
    for name in ("cl", "ca", "cb", "cd", "f", "za", "zb"):
        if len(getattr(proof, name)) != n:
            logger.debug("membership proof field %s has the wrong length", name)
            return False

    x = hash_points(proof.cl + proof.ca + proof.cb + proof.cd) % order
    xs = group.scalar(x)
    one = group.scalar(1)

    multi = MultiMult(group)
    multi.add_known(params.g)
    multi.add_known(params.h)
    for i in range(n):
        # the committed level value is a bit
        rel0 = Relation(group)
        rel0.insert_many(
            [proof.cl[i], proof.ca[i], params.g, params.h],
            [xs, one, -proof.f[i], -proof.za[i]],
        )
        rel0.drain(multi, rng)
        rel1 = Relation(group)
        rel1.insert_many(
            [proof.cl[i], proof.cb[i], params.h],
            [xs - proof.f[i], one, -proof.zb[i]],
        )
        rel1.drain(multi, rng)

    total = 0
    for i, vi in enumerate(vec):
        pix = 1
        for j in range(n):
            fj = proof.f[j].value
            pix = pix * (fj if _bit(i, j) else x - fj) % order
        total = (total + vi.value * pix) % order

    rel_final = Relation(group)
    for i in range(n):
        rel_final.insert(proof.cd[i], group.scalar(-pow(x, i, order)))
    rel_final.insert(com, group.scalar(pow(x, n, order)))
    rel_final.insert_many([params.g, params.h], [group.scalar(-total), -proof.zd])
    rel_final.drain(multi, rng)

    return multi.evaluate().is_identity()
