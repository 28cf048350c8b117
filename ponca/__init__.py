"""Point cloud analysis: fit states, distance weight functions, a line primitive, bounded priority queues and a colour map."""

__version__ = "0.1.0"

__all__ = [
    "enums",
    "limited_priority_queue",
    "weight_func",
    "colormap",
    "primitive",
    "line",
]