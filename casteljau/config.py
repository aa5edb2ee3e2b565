from dataclasses import dataclass
from typing import Optional
import numpy as np

@dataclass
class CurveConfig:
    """Defaults for sampling and for generating demo control points"""
    step_count: int = 1000

    point_count: int = 9
    coordinate_low: float = 200.0
    coordinate_high: float = 1000.0
    seed: Optional[int] = None

    def make_rng(self) -> np.random.Generator:
        """Random source for control point generation, seeded when a seed is set"""
        return np.random.default_rng(self.seed)
