# load-dispatch/loaddispatch/dispatch.py
"""
Dispatch Engine for the greedy load dispatcher.

Loads are pulled one at a time, closest pickup to the depot first, and each
one is committed for good before the next is looked at:

1. **Evaluate**: every driver still within budget "bids" for the load. The
   bid is the detour from the driver's nearest existing drop-off to the new
   pickup. A bid is only valid if that detour is cheaper than commissioning
   a new driver, and if the driver would still fit in the working-time
   budget with a depot leg to spare.

2. **Commit**: the lowest valid bid wins the load. With no valid bid a new
   driver is created for it.

There is no improvement pass afterwards, so the result depends on processing
order. Ties are broken by load id and by driver creation order, which makes
runs reproducible.
"""

from __future__ import annotations

import heapq
import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from . import utils
from .config import DEFAULT_CONFIG, DispatchConfig
from .models import Assigned, AssignmentResult, Driver, DriverBid, Load, NoLoadsToAssign, Point

logger = logging.getLogger(__name__)


# =============================================================================
# LOAD ORDERING
# =============================================================================

def load_queue(loads: Iterable[Load], depot: Point = DEFAULT_CONFIG.depot) -> Iterator[Load]:
    """
    Yield loads by ascending pickup distance from the depot.

    Equal distances fall back to ascending load id. The result is a one-shot
    generator: once drained it stays empty.

    Args:
        loads: Loads to order (not modified)
        depot: Point distances are measured from

    Yields:
        Each load exactly once, in processing order
    """
    heap: List[Tuple[float, int, int, Load]] = [
        (utils.euclidean_distance(depot, load.pickup), load.load_id, position, load)
        for position, load in enumerate(loads)
    ]
    heapq.heapify(heap)
    while heap:
        _, _, _, load = heapq.heappop(heap)
        yield load


# =============================================================================
# DISPATCH ENGINE
# =============================================================================

class DispatchEngine:
    """
    Greedy load-to-driver assignment.

    Evaluation (evaluate_driver, select_driver) never mutates a driver; the
    only state change happens in commit, once per load.

    Attributes:
        config: Cost and budget parameters for the run
    """

    def __init__(self, config: Optional[DispatchConfig] = None) -> None:
        self.config: DispatchConfig = config if config is not None else DEFAULT_CONFIG

    def evaluate_driver(self, driver: Driver, load: Load) -> Optional[DriverBid]:
        """
        Work out whether an existing driver can take a load, and at what cost.

        Args:
            driver: Existing driver (must already have at least one load)
            load: Load being dispatched

        Returns:
            The driver's bid, or None if the driver is over budget, if a new
            driver would be cheaper, or if the load would push the driver
            past the budget
        """
        cfg = self.config
        if driver.working_time > cfg.max_working_time:
            return None

        nearest_dropoff = utils.nearest_neighbor(load.pickup, driver.dropoff_locations)

        depot_to_pickup = utils.euclidean_distance(cfg.depot, load.pickup)
        dropoff_to_pickup = utils.euclidean_distance(nearest_dropoff, load.pickup)
        pickup_to_dropoff = utils.euclidean_distance(load.pickup, load.dropoff)

        # Reuse only pays off if the detour beats a fresh driver's fixed cost
        # plus its own trip out from the depot.
        if not dropoff_to_pickup < cfg.fixed_driver_cost + depot_to_pickup:
            return None

        bid = DriverBid(
            driver=driver,
            working_time=driver.working_time,
            nearest_dropoff=nearest_dropoff,
            depot_to_pickup=depot_to_pickup,
            dropoff_to_pickup=dropoff_to_pickup,
            pickup_to_dropoff=pickup_to_dropoff,
        )
        if bid.projected_working_time > cfg.max_working_time:
            return None
        return bid

    def select_driver(self, drivers: List[Driver], load: Load) -> Optional[DriverBid]:
        """
        Pick the existing driver with the shortest detour to the load.

        Args:
            drivers: Current drivers, in creation order
            load: Load being dispatched

        Returns:
            Winning bid, or None if no driver can take the load
        """
        best_bid: Optional[DriverBid] = None
        for driver in drivers:
            bid = self.evaluate_driver(driver, load)
            if bid is None:
                continue
            # Strict comparison keeps the earliest driver on ties
            if best_bid is None or bid.dropoff_to_pickup < best_bid.dropoff_to_pickup:
                best_bid = bid
        return best_bid

    def commit(self, drivers: List[Driver], load: Load, bid: Optional[DriverBid]) -> Driver:
        """
        Assign a load, either to the bidding driver or to a new one.

        Args:
            drivers: Driver ledger; a new driver is appended to it
            load: Load to assign
            bid: Winning bid from select_driver, or None

        Returns:
            The driver that received the load
        """
        if bid is not None:
            driver = bid.driver
            driver.add_load(load, bid.marginal_cost)
            logger.debug(
                f"{load!r} -> driver {driver.driver_id} "
                f"(detour {bid.dropoff_to_pickup:.2f}, time {driver.working_time:.2f})"
            )
            return driver

        cfg = self.config
        depot_to_pickup = utils.euclidean_distance(cfg.depot, load.pickup)
        pickup_to_dropoff = utils.euclidean_distance(load.pickup, load.dropoff)

        solo_round_trip = depot_to_pickup + pickup_to_dropoff + utils.euclidean_distance(load.dropoff, cfg.depot)
        if solo_round_trip > cfg.max_working_time:
            logger.warning(
                f"{load!r} alone needs {solo_round_trip:.2f} working time, "
                f"over the budget of {cfg.max_working_time:.2f}"
            )

        driver = Driver(driver_id=len(drivers) + 1)
        driver.add_load(load, depot_to_pickup + pickup_to_dropoff)
        drivers.append(driver)
        logger.debug(f"{load!r} -> new driver {driver.driver_id} (time {driver.working_time:.2f})")
        return driver

    def assign(self, loads: Iterable[Load]) -> AssignmentResult:
        """
        Run the greedy dispatch over all loads.

        Args:
            loads: Loads to dispatch; ids must be unique

        Returns:
            Assigned with the drivers in creation order, or NoLoadsToAssign
            if there was nothing to dispatch

        Raises:
            ValueError: If two loads share an id
        """
        loads = list(loads)
        seen_ids = set()
        for load in loads:
            if load.load_id in seen_ids:
                raise ValueError(f"Duplicate load id: {load.load_id}")
            seen_ids.add(load.load_id)

        drivers: List[Driver] = []
        for load in load_queue(loads, self.config.depot):
            bid = self.select_driver(drivers, load)
            self.commit(drivers, load, bid)

        if not drivers:
            logger.info("No loads to assign")
            return NoLoadsToAssign()

        logger.info(f"Assigned {len(loads)} loads to {len(drivers)} drivers")
        return Assigned(drivers=drivers)
