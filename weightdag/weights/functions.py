"""Weight evaluation functions.

A weight function maps a weight to a transformed weight of the same type.
The longest path search applies one to every vertex weight and one to every
edge weight before combining them into the path total.
"""

from typing import Union

from .base import W
from .numeric import FloatWeight, IntegerWeight

NumericWeight = Union[IntegerWeight, FloatWeight]


def identity(weight: W) -> W:
    """Return the weight unchanged."""
    return weight


class Scale:
    """Multiply a numeric weight by a constant factor.

    The result keeps the type of the input weight, so scaling an
    ``IntegerWeight`` by a float truncates towards zero.
    """

    def __init__(self, factor: Union[int, float]) -> None:
        self.factor = factor

    def __call__(self, weight: NumericWeight) -> NumericWeight:
        return type(weight)(type(weight.value)(weight.value * self.factor))

    def __repr__(self) -> str:
        return f"Scale({self.factor!r})"


# Sample functions used by the demo: vertices count double, edges triple.
double_weight = Scale(2)
triple_weight = Scale(3)
