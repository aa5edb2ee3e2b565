from .bezier import BezierEngine, DEFAULT_STEP_COUNT
from .linear import Linear
from .polyline import Polyline

__all__ = [
    'BezierEngine',
    'DEFAULT_STEP_COUNT',
    'Linear',
    'Polyline'
]
