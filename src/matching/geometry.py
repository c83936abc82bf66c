"""Distance between positions."""

import math

from src.matching.models import Position


def euclidean_distance(a: Position, b: Position) -> float:
    """Straight-line distance between two positions of the same dimension.

    Raises:
        ValueError: If the positions have a different number of coordinates.
    """
    if len(a) != len(b):
        raise ValueError(
            f"Cannot measure distance between {len(a)}-D and {len(b)}-D positions"
        )
    return math.dist(a, b)
