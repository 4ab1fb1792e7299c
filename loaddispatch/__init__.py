# load-dispatch/loaddispatch/__init__.py

from .models import Load, Driver, DriverBid, Assigned, NoLoadsToAssign, AssignmentResult
from .config import (
    COST_OF_DRIVER,
    DEPOT_LOCATION,
    MAX_WORKING_TIME,
    DispatchConfig,
)
from .errors import InputIOError, InputFormatError, EmptyCandidateSet
from .dispatch import DispatchEngine, load_queue
from .loader import read_loads
from .scoring import route_distance, total_cost, build_summary

__version__ = "1.0.0"

__all__ = [
    # Models
    "Load",
    "Driver",
    "DriverBid",
    "Assigned",
    "NoLoadsToAssign",
    "AssignmentResult",
    # Core
    "DispatchEngine",
    "load_queue",
    "read_loads",
    # Functions
    "route_distance",
    "total_cost",
    "build_summary",
    # Errors
    "InputIOError",
    "InputFormatError",
    "EmptyCandidateSet",
    # Config
    "COST_OF_DRIVER",
    "DEPOT_LOCATION",
    "MAX_WORKING_TIME",
    "DispatchConfig",
]
