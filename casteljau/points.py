import logging
import math
from numbers import Integral
from typing import Optional
import numpy as np
from .exceptions import InvalidInput

def random_control_points(count: int, rng: Optional[np.random.Generator] = None,
                          low: float = 200.0, high: float = 1000.0) -> np.ndarray:
    """Draw count integer-valued points uniformly from [low, high) on both axes.

    Demo data for hosts that have no points of their own. Pass a seeded generator
    for reproducible curves.
    """
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise InvalidInput(f"Control point count must be an integer, got {count!r}")
    if count < 1:
        raise InvalidInput(f"Need at least one control point, got {count}")
    first, stop = math.ceil(low), math.ceil(high)
    if stop <= first:
        raise InvalidInput(f"No integer coordinates in [{low}, {high})")
    if rng is None:
        rng = np.random.default_rng()

    points = rng.integers(first, stop, size=(int(count), 2)).astype(np.float64)
    logging.debug(f"Generated {count} control points in [{low}, {high})")
    return points
