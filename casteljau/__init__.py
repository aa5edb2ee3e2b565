from .curves import BezierEngine, DEFAULT_STEP_COUNT, Linear, Polyline
from .config import CurveConfig
from .exceptions import InvalidInput
from .points import random_control_points

__all__ = [
    'BezierEngine',
    'DEFAULT_STEP_COUNT',
    'Linear',
    'Polyline',
    'CurveConfig',
    'InvalidInput',
    'random_control_points'
]
