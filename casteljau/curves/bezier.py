import logging
from numbers import Integral, Real
from typing import Sequence, Tuple, Union
import numpy as np
from .polyline import Polyline
from ..exceptions import InvalidInput

DEFAULT_STEP_COUNT = 1000
# Upper bound on parameters evaluated together; keeps the scratch buffer at N x SAMPLE_CHUNK x 2
SAMPLE_CHUNK = 4096

ControlPoints = Union[np.ndarray, Sequence[Tuple[float, float]]]

class BezierEngine:
    """Evaluates the Bezier curve of order N - 1 defined by N control points.

    Points are evaluated with the de Casteljau algorithm on a scratch buffer that is
    overwritten in place, one pass per order, so a curve of any order costs O(order^2)
    per sample and never recurses. Both coordinates go through the same array expression.
    """

    def __init__(self, points: ControlPoints):
        self.set_control_points(points)

    def set_control_points(self, points: ControlPoints):
        """Replace the control points. The sequence is copied, at least one point is required"""
        try:
            raw = np.asarray(points)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"Control points must be (x, y) pairs of numbers: {e}") from e
        if raw.dtype.kind not in "iuf":
            raise InvalidInput(f"Control points must be (x, y) pairs of numbers, got dtype {raw.dtype}")
        array = np.array(raw, dtype=np.float64)
        if array.ndim >= 1 and len(array) == 0:
            raise InvalidInput("Bezier curve needs at least one control point, got 0")
        if array.ndim != 2 or array.shape[1] != 2:
            raise InvalidInput(f"Control points must be 2D, got shape {array.shape}")

        array.flags.writeable = False
        self._points = array
        logging.debug(f"Set {len(array)} control points, curve order {self.order}")

    @property
    def control_points(self) -> np.ndarray:
        return self._points

    @property
    def order(self) -> int:
        return len(self._points) - 1

    def evaluate_at(self, t: float) -> np.ndarray:
        """Point on the curve at parameter t.

        t is meant to lie in [0, 1]. Values outside are not rejected: they return the
        polynomial's extrapolation, which is rarely useful for drawing.
        """
        if isinstance(t, bool) or not isinstance(t, Real):
            raise InvalidInput(f"Curve parameter must be a real number, got {t!r}")
        return self._casteljau(np.array([t], dtype=np.float64))[0]

    def sample_curve(self, step_count: int = DEFAULT_STEP_COUNT) -> Polyline:
        """Sample the curve at t = i / step_count for i in 0..step_count.

        Always yields step_count + 1 samples, the first at exactly t = 0 and the last at
        exactly t = 1.
        """
        if isinstance(step_count, bool) or not isinstance(step_count, Integral):
            raise InvalidInput(f"Step count must be an integer, got {step_count!r}")
        if step_count < 1:
            raise InvalidInput(f"Step count must be at least 1, got {step_count}")

        step_count = int(step_count)
        t = np.arange(step_count + 1, dtype=np.float64) / step_count
        samples = np.empty((step_count + 1, 2), dtype=np.float64)
        for start in range(0, len(t), SAMPLE_CHUNK):
            end = start + SAMPLE_CHUNK
            samples[start:end] = self._casteljau(t[start:end])

        logging.debug(f"Sampled order {self.order} curve with {step_count} steps")
        return Polyline(samples)

    def _casteljau(self, t: np.ndarray) -> np.ndarray:
        """Evaluate the curve at every parameter in t, returns an array of shape (len(t), 2)"""
        buffer = np.repeat(self._points[:, np.newaxis, :], len(t), axis=1)
        s = t[np.newaxis, :, np.newaxis]
        for count in range(self.order, 0, -1):
            buffer[:count] = (1.0 - s) * buffer[:count] + s * buffer[1:count + 1]
        return buffer[0]
