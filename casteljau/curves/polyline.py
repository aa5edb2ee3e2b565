from typing import Iterator, List, Optional
import numpy as np
from .linear import Linear

class Polyline:
    """Ordered curve samples joined by straight segments, ready to be drawn"""

    def __init__(self, points: np.ndarray):
        self.points = np.array(points, dtype=np.float64)
        self.points.flags.writeable = False
        self._lines: Optional[List[Linear]] = None

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index) -> np.ndarray:
        return self.points[index]

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.points)

    def get_lines(self) -> List[Linear]:
        if self._lines is None:
            self._lines = [Linear(self.points[i], self.points[i + 1]) for i in range(len(self.points) - 1)]
        return self._lines

    def get_length(self) -> float:
        return float(sum(line.get_length() for line in self.get_lines()))
