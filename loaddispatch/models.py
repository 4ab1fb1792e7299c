# load-dispatch/loaddispatch/models.py
"""
Core domain models for the greedy load dispatcher.

This module defines the data structures shared by the engine and the report:
- Load: A transport task from a pickup point to a drop-off point
- Driver: A driver with its ordered loads and accumulated working time
- DriverBid: The outcome of evaluating one driver for one load
- Assigned / NoLoadsToAssign: The two possible outcomes of a dispatch run
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Union

Point = Tuple[float, float]


@dataclass(frozen=True)
class Load:
    """
    A load to be carried from pickup to dropoff.

    Attributes:
        load_id: 1-based position of the record in the input
        pickup: (x, y) pickup location
        dropoff: (x, y) drop-off location
    """
    load_id: int
    pickup: Point
    dropoff: Point

    def __repr__(self) -> str:
        return f"Load({self.load_id})"


@dataclass
class Driver:
    """
    A driver serving loads in the order they were assigned.

    Attributes:
        driver_id: 1-based creation order within a run
        loads: Assigned loads, in assignment order
        working_time: Accumulated working time (only ever grows)
    """
    driver_id: int
    loads: List[Load] = field(default_factory=list)
    working_time: float = 0.0

    def add_load(self, load: Load, cost: float) -> None:
        """
        Append a load and charge its cost to the driver's working time.

        Raises:
            ValueError: If cost is negative
        """
        if cost < 0:
            raise ValueError(f"Working time cannot decrease (cost={cost})")
        self.loads.append(load)
        self.working_time += cost

    @property
    def load_ids(self) -> List[int]:
        """Returns the ids of the assigned loads, in assignment order."""
        return [load.load_id for load in self.loads]

    @property
    def dropoff_locations(self) -> List[Point]:
        """Returns drop-off points ordered by ascending load id."""
        return [load.dropoff for load in sorted(self.loads, key=lambda l: l.load_id)]

    def __repr__(self) -> str:
        return f"Driver({self.driver_id}, loads={self.load_ids}, time={self.working_time:.2f})"


@dataclass(frozen=True)
class DriverBid:
    """
    Evaluation of an existing driver for a new load.

    Only feasible bids are ever built; creating one does not touch the driver.
    working_time is the driver's working time when the bid was made, so the
    projection stays fixed after the driver takes the load.
    """
    driver: Driver
    working_time: float
    nearest_dropoff: Point
    depot_to_pickup: float
    dropoff_to_pickup: float
    pickup_to_dropoff: float

    @property
    def marginal_cost(self) -> float:
        """Working time added if the driver takes the load."""
        return self.dropoff_to_pickup + self.pickup_to_dropoff

    @property
    def projected_working_time(self) -> float:
        """Working time plus the marginal cost plus a depot leg as safety margin."""
        return self.working_time + self.marginal_cost + self.depot_to_pickup


@dataclass
class Assigned:
    """Successful dispatch run: every load belongs to exactly one driver."""
    drivers: List[Driver]

    @property
    def num_drivers(self) -> int:
        return len(self.drivers)


@dataclass(frozen=True)
class NoLoadsToAssign:
    """Dispatch run that had nothing to do, so no driver was created."""
    reason: str = "No loads to assign"


AssignmentResult = Union[Assigned, NoLoadsToAssign]
