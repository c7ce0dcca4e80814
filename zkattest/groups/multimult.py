"""
Batch verification of linear relations over a group.

A Relation is one equation sum(s_i * P_i) == identity. Draining it scales
every term by a fresh random scalar before folding it into a MultiMult, so
a single evaluation checks many relations at once, wrongly accepting an
invalid one with probability about 1/order.
"""

import heapq
import itertools


class MultiMult:
    """
    Accumulator of (point, scalar) terms evaluated with Bos-Coster.

    Terms on points registered with add_known() are merged by summing
    their scalars; all others are kept as separate terms.
    """

    def __init__(self, group):
        self.group = group
        self.pairs = []
        self.known = []

    def add_known(self, point):
        self.group.check_point(point)
        if not any(point == pt for pt, _ in self.known):
            self.pairs.append([point, 0])
            self.known.append((point, len(self.pairs) - 1))

    def insert(self, point, scalar):
        self.group.check_point(point)
        self.group.check_scalar(scalar)
        for pt, idx in self.known:
            if point == pt:
                self.pairs[idx][1] = (self.pairs[idx][1] + scalar.value) % self.group.order
                return
        self.pairs.append([point, scalar.value])

    def evaluate(self):
        """
        Return sum(s_i * P_i) over every inserted term.

        Each step takes the two largest scalars a >= b and replaces
        (a, Pa), (b, Pb) with (a - q*b, Pa), (b, Pb + q*Pa) for q = a // b,
        which folds a run of q single subtractions into one step.
        """
        # max-heap on the scalar; the counter keeps points out of comparisons
        counter = itertools.count()
        heap = [(-k, next(counter), pt) for pt, k in self.pairs if k != 0]
        if not heap:
            return self.group.identity()
        heapq.heapify(heap)

        while True:
            neg_a, _, pa = heapq.heappop(heap)
            if not heap:
                return pa * (-neg_a)
            a = -neg_a
            neg_b, _, pb = heap[0]
            b = -neg_b

            # a*Pa + b*Pb == (a - q*b)*Pa + b*(Pb + q*Pa)
            q = a // b
            rest = a - q * b
            merged = pb + pa if q == 1 else pb + pa * q
            heapq.heapreplace(heap, (-b, next(counter), merged))
            if rest:
                heapq.heappush(heap, (-rest, next(counter), pa))


class Relation:
    """A linear equation over a group that must sum to the identity."""

    def __init__(self, group):
        self.group = group
        self.pairs = []

    def insert(self, point, scalar):
        self.group.check_point(point)
        self.group.check_scalar(scalar)
        self.pairs.append((point, scalar))

    def insert_many(self, points, scalars):
        if len(points) != len(scalars):
            raise ValueError("arrays are not the same length")
        for point, scalar in zip(points, scalars):
            self.insert(point, scalar)

    def drain(self, multi, rng=None):
        """Fold this relation, scaled by a fresh random scalar, into multi."""
        if multi.group is not self.group:
            raise ValueError("points not compatible")
        randomizer = self.group.random_scalar(rng)
        for point, scalar in self.pairs:
            multi.insert(point, scalar * randomizer)
