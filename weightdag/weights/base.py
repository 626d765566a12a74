"""Protocol interfaces for graph weights.

Protocols that decouple the graph algorithms from concrete weight types.
"""

from typing import Callable, Protocol, TypeVar

W = TypeVar("W", bound="Weight")


class Weight(Protocol):
    """Minimal interface for a value usable as a vertex or edge weight.

    Implementations must be totally ordered and immutable: ``combine``
    returns a new weight and leaves both operands untouched.
    """

    def combine(self: W, other: W) -> W:
        """Return the additive combination of this weight and ``other``."""
        ...

    def __lt__(self: W, other: W) -> bool: ...


# Transform applied to a vertex or edge weight before it is accumulated
# into a path total.
WeightFunction = Callable[[W], W]
