"""
Pedersen commitments C = v*G + r*H.
"""

import logging
from collections import namedtuple

logger = logging.getLogger(__name__)


class Commitment:
    """
    A commitment point together with its blinding factor.

    Only the committer holds these; verifiers see the point alone.
    Addition, subtraction and scaling act on point and blinding together,
    so the result still opens to the combined value.
    """

    __slots__ = ("p", "r")

    def __init__(self, p, r):
        p.group.check_scalar(r)
        self.p = p
        self.r = r

    def __add__(self, other):
        return Commitment(self.p + other.p, self.r + other.r)

    def __sub__(self, other):
        return Commitment(self.p - other.p, self.r - other.r)

    def __mul__(self, k):
        sk = self.p.group.scalar(k)
        return Commitment(self.p * sk, self.r * sk)

    def __rmul__(self, k):
        return self.__mul__(k)

    def __repr__(self):
        return f"Commitment({self.p!r})"


class PedersenParams(namedtuple("PedersenParams", ["group", "g", "h"])):
    """Commitment key: a group and two generators g, h."""

    __slots__ = ()

    def commit_with(self, value, blinding):
        """Point value*g + blinding*h for explicit value and blinding."""
        return self.h.dblmul(self.group.scalar(blinding), self.g, self.group.scalar(value))

    def commit(self, value, rng=None):
        """Commit to value with a fresh blinding factor."""
        r = self.group.random_scalar(rng)
        return Commitment(self.commit_with(value, r), r)


def generate_pedersen_params(group, g=None, rng=None):
    """
    Pick h = k*g for a random k.

    Whoever runs this knows log_g(h) and could open commitments to any
    value, so the result only binds against parties trusting the setup.
    """
    # TODO: derive h by hashing to the curve so nobody knows log_g(h).
    if g is None:
        g = group.generator()
    group.check_point(g)
    h = g * group.random_scalar(rng)
    logger.debug("generated Pedersen parameters on %s", group.name)
    return PedersenParams(group, g, h)
