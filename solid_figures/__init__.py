from solid_figures.errors import ConsistencyViolation
from solid_figures.figures import Shape, Rectangle, Square
from solid_figures.transform import transform, draw, console_report

__all__ = [
    'ConsistencyViolation',
    'Shape',
    'Rectangle',
    'Square',
    'transform',
    'draw',
    'console_report',
]
