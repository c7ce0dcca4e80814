"""
Sigma protocols subpackage: commitments and the relation proofs built on them.
"""

from .pedersen import Commitment, PedersenParams, generate_pedersen_params
from .equality import EqualityProof, prove_equality, aggregate_equality, verify_equality
from .mult import MultProof, prove_mult, aggregate_mult, verify_mult
from .point_add import PointAddProof, prove_point_add, aggregate_point_add, verify_point_add
from .exp import ExpProof, check_sec_level, prove_exp, verify_exp
from .interpolate import interpolate, eval_poly
from .membership import GKProof, prove_membership, verify_membership

__all__ = [
    'Commitment', 'PedersenParams', 'generate_pedersen_params',
    'EqualityProof', 'prove_equality', 'aggregate_equality', 'verify_equality',
    'MultProof', 'prove_mult', 'aggregate_mult', 'verify_mult',
    'PointAddProof', 'prove_point_add', 'aggregate_point_add', 'verify_point_add',
    'ExpProof', 'check_sec_level', 'prove_exp', 'verify_exp',
    'interpolate', 'eval_poly',
    'GKProof', 'prove_membership', 'verify_membership'
]
