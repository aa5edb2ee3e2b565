import numpy as np

class Linear:
    def __init__(self, point1: np.ndarray, point2: np.ndarray):
        self.point1 = point1
        self.point2 = point2

    def get_length(self) -> float:
        return float(np.sqrt(np.sum((self.point2 - self.point1)**2)))

    def point_at(self, t: float) -> np.ndarray:
        return self.point1 + (self.point2 - self.point1) * t
