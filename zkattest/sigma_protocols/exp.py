"""
Cross-group proof of a committed scalar multiplication.

Group A holds Cs = s*g_A + r*h_A; group B holds commitments Px, Py to the
affine coordinates of P = s*g_A - Q (Q optional, identity when absent).
Each round is a one-bit cut-and-choose: the prover commits to T = alpha*g_A
in A and to T's coordinates in B, then depending on the challenge bit
either opens alpha directly or reveals z = alpha - s together with a proof
that T1 + P = T for T1 = z*g_A + Q. A cheating prover survives each round
with probability 1/2.
"""

import logging
from collections import namedtuple

from ..bignum import default_rng
from ..fiat_shamir import CHALLENGE_BITS, hash_points
from ..groups import MultiMult, Relation
from .point_add import aggregate_point_add, prove_point_add

logger = logging.getLogger(__name__)


_EXP_FIELDS = [
    "A", "Tx", "Ty",
    # response to challenge bit 1
    "alpha", "beta1", "beta2", "beta3",
    # response to challenge bit 0
    "z", "z2", "proof", "r1", "r2",
]

ExpProof = namedtuple("ExpProof", _EXP_FIELDS, defaults=(None,) * 9)

_OPENING_FIELDS = ("alpha", "beta1", "beta2", "beta3")
_SHIFT_FIELDS = ("z", "z2", "proof", "r1", "r2")


def padded_bits(val, length):
    """The length least significant bits of val, lowest first."""
    return [(val >> i) & 1 == 1 for i in range(length)]


def _affine(point, label):
    coords = point.to_affine()
    if coords is None:
        raise ValueError(f"{label} is at infinity")
    return coords


def check_sec_level(sec_level):
    """Raise unless sec_level is a round count the challenge can cover."""
    if isinstance(sec_level, bool) or not isinstance(sec_level, int):
        raise ValueError("security level must be an integer")
    if not 0 < sec_level <= CHALLENGE_BITS:
        raise ValueError(f"security level must be in 1..{CHALLENGE_BITS}")
    return True


def _challenge(Px, Py, rounds):
    points = [Px, Py]
    for A, Tx, Ty in rounds:
        points.extend([A, Tx, Ty])
    return hash_points(points)


def prove_exp(params_a, params_b, s, Cs, P, Px, Py, sec_level, Q=None, rng=None):
    """
    Prove Cs commits to s with P = s*g_A - Q, given coordinate commitments
    Px, Py of P in group B. Returns one ExpProof per round.
    """
    check_sec_level(sec_level)
    group_a = params_a.group
    ss = group_a.scalar(s)

    alpha, r, T, A, Tx, Ty = [], [], [], [], [], []
    for i in range(sec_level):
        alpha.append(group_a.random_scalar(rng))
        r.append(group_a.random_scalar(rng))
        T.append(params_a.g * alpha[i])
        A.append(T[i] + params_a.h * r[i])
        x, y = _affine(T[i], "T")
        Tx.append(params_b.commit(x, rng))
        Ty.append(params_b.commit(y, rng))

    challenge = _challenge(Px.p, Py.p, [(A[i], Tx[i].p, Ty[i].p) for i in range(sec_level)])
    bits = padded_bits(challenge, sec_level)

    proofs = []
    for i in range(sec_level):
        if bits[i]:
            proof = ExpProof(
                A[i], Tx[i].p, Ty[i].p,
                alpha=alpha[i], beta1=r[i], beta2=Tx[i].r, beta3=Ty[i].r,
            )
        else:
            z = alpha[i] - ss
            T1 = params_a.g * z
            if Q is not None:
                T1 = T1 + Q
            x, y = _affine(T1, "T1")
            T1x = params_b.commit(x, rng)
            T1y = params_b.commit(y, rng)
            # alpha*g - s*g = z*g, hence T1 + P = T
            point_add_proof = prove_point_add(
                params_b, T1, P, T[i], T1x, T1y, Px, Py, Tx[i], Ty[i], rng
            )
            proof = ExpProof(
                A[i], Tx[i].p, Ty[i].p,
                z=z, z2=r[i] - Cs.r, proof=point_add_proof, r1=T1x.r, r2=T1y.r,
            )
        proofs.append(proof)
    logger.debug("built exponentiation proof with %d rounds", sec_level)
    return proofs


def _has_fields(proof, names):
    return all(getattr(proof, name) is not None for name in names)


def verify_exp(params_a, params_b, Cs, Px, Py, pi, sec_level, Q=None, rng=None):
    """
    Check sec_level rounds of pi, picked at random when pi holds more.
    """
    check_sec_level(sec_level)
    if sec_level > len(pi):
        raise ValueError("security level not achieved")
    if len(pi) > CHALLENGE_BITS:
        logger.debug("exponentiation proof has more rounds than challenge bits")
        return False
    group_a = params_a.group
    group_b = params_b.group
    one = group_a.scalar(1)

    multi_b = MultiMult(group_b)
    multi_a = MultiMult(group_a)
    multi_b.add_known(params_b.g)
    multi_b.add_known(params_b.h)
    multi_a.add_known(params_a.g)
    multi_a.add_known(params_a.h)
    multi_a.add_known(Cs)

    challenge = _challenge(Px, Py, [(proof.A, proof.Tx, proof.Ty) for proof in pi])
    bits = padded_bits(challenge, len(pi))
    indices = default_rng(rng).sample(range(len(pi)), sec_level)

    for i in indices:
        proof = pi[i]
        if bits[i]:
            if not _has_fields(proof, _OPENING_FIELDS):
                logger.debug("round %d lacks the opening response", i)
                return False
            T = params_a.g * proof.alpha
            relA = Relation(group_a)
            relA.insert_many([T, params_a.h, -proof.A], [one, proof.beta1, one])
            relA.drain(multi_a, rng)

            coords = T.to_affine()
            if coords is None:
                logger.debug("round %d opens T at infinity", i)
                return False
            sx = group_b.scalar(coords[0])
            sy = group_b.scalar(coords[1])
            one_b = group_b.scalar(1)
            relTx = Relation(group_b)
            relTx.insert_many([params_b.g, params_b.h, -proof.Tx], [sx, proof.beta2, one_b])
            relTy = Relation(group_b)
            relTy.insert_many([params_b.g, params_b.h, -proof.Ty], [sy, proof.beta3, one_b])
            relTx.drain(multi_b, rng)
            relTy.drain(multi_b, rng)
        else:
            if not _has_fields(proof, _SHIFT_FIELDS):
                logger.debug("round %d lacks the shifted response", i)
                return False
            T1 = params_a.g * proof.z
            relA = Relation(group_a)
            relA.insert_many([T1, Cs, -proof.A, params_a.h], [one, one, one, proof.z2])
            relA.drain(multi_a, rng)

            if Q is not None:
                T1 = T1 + Q
            coords = T1.to_affine()
            if coords is None:
                logger.debug("round %d shifts T1 to infinity", i)
                return False
            sx = group_b.scalar(coords[0])
            sy = group_b.scalar(coords[1])
            T1x = params_b.g.dblmul(sx, params_b.h, proof.r1)
            T1y = params_b.g.dblmul(sy, params_b.h, proof.r2)
            if not aggregate_point_add(params_b, T1x, T1y, Px, Py, proof.Tx, proof.Ty,
                                       proof.proof, multi_b, rng):
                logger.debug("round %d point addition rejected", i)
                return False

    return multi_b.evaluate().is_identity() and multi_a.evaluate().is_identity()
