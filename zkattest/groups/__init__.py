"""
Groups subpackage for elliptic-curve groups, scalars and batch verification.
"""

from .base import Group, Point, ScalarField
from .field import GF, PrimeFieldElement
from .weierstrass import WeierstrassGroup, WeierstrassPoint
from .edwards import EdwardsGroup, EdwardsPoint
from .instances import (
    GroupP256, GroupWar256, GroupTomEdwards256, ALL_GROUPS, group_by_name
)
from .multimult import MultiMult, Relation

__all__ = [
    'Group', 'Point', 'ScalarField',
    'GF', 'PrimeFieldElement',
    'WeierstrassGroup', 'WeierstrassPoint',
    'EdwardsGroup', 'EdwardsPoint',
    'GroupP256', 'GroupWar256', 'GroupTomEdwards256', 'ALL_GROUPS', 'group_by_name',
    'MultiMult', 'Relation'
]
