"""Grid snake rules engine."""

from .body import Body, Segment
from .grid import Grid
from .logic import Simulation
from .scheduler import FixedTimer, Scheduler
from .state import CellType, Heading, Position, Snapshot

__all__ = [
    "Body",
    "CellType",
    "FixedTimer",
    "Grid",
    "Heading",
    "Position",
    "Scheduler",
    "Segment",
    "Simulation",
    "Snapshot",
]
