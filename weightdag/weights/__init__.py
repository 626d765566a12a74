"""Weight contract, numeric weight types and evaluation functions."""

from .base import Weight, WeightFunction
from .functions import Scale, double_weight, identity, triple_weight
from .numeric import WEIGHT_TYPES, FloatWeight, IntegerWeight

__all__ = [
    "Weight",
    "WeightFunction",
    "IntegerWeight",
    "FloatWeight",
    "WEIGHT_TYPES",
    "identity",
    "Scale",
    "double_weight",
    "triple_weight",
]
