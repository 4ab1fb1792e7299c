# load-dispatch/loaddispatch/config.py
"""
Configuration parameters for the greedy load dispatcher.

Module-level constants hold the defaults. The engine never reads them
directly: it receives a DispatchConfig, so a run (or a test) can vary the
fixed driver cost, the depot or the working-time budget without touching
global state.

Distances and working time share one unit: one unit of distance takes one
minute to drive.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final, Tuple

# =============================================================================
# DEPOT
# =============================================================================

DEPOT_LOCATION: Final[Tuple[float, float]] = (0.0, 0.0)
"""Single depot every route starts from and returns to."""

# =============================================================================
# COST PARAMETERS
# =============================================================================

COST_OF_DRIVER: Final[float] = 500.0
"""
Flat cost charged for every driver used, in distance units.
A load is only added to an existing driver when the detour from that
driver's nearest drop-off is cheaper than this plus the depot leg.
"""

# =============================================================================
# WORKING TIME
# =============================================================================

MAX_WORKING_TIME: Final[float] = 12 * 60
"""Working-time budget per driver (12 hours, in minutes)."""


@dataclass(frozen=True)
class DispatchConfig:
    """
    Immutable set of numeric parameters for one dispatch run.

    Attributes:
        fixed_driver_cost: Flat cost per driver used
        depot: (x, y) location of the depot
        max_working_time: Working-time budget per driver
    """
    fixed_driver_cost: float = COST_OF_DRIVER
    depot: Tuple[float, float] = DEPOT_LOCATION
    max_working_time: float = MAX_WORKING_TIME

    def __post_init__(self) -> None:
        if self.fixed_driver_cost < 0:
            raise ValueError(f"fixed_driver_cost must be non-negative, got {self.fixed_driver_cost}")
        if self.max_working_time < 0:
            raise ValueError(f"max_working_time must be non-negative, got {self.max_working_time}")
        if len(self.depot) != 2:
            raise ValueError(f"depot must be an (x, y) pair, got {self.depot!r}")
        # Normalise so that lists and ints compare equal to the tuple default.
        object.__setattr__(self, "depot", (float(self.depot[0]), float(self.depot[1])))

    def with_overrides(self, **changes) -> "DispatchConfig":
        """Return a copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


DEFAULT_CONFIG: Final[DispatchConfig] = DispatchConfig()
"""Configuration used when the caller does not supply one."""
