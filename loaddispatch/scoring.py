# load-dispatch/loaddispatch/scoring.py
"""
Cost reporting for a finished dispatch run.

The engine only tracks an estimate of each driver's working time while it
assigns loads. The figures here are recomputed from the final assignment
order and are the ones to report:

- route distance: depot -> first pickup, each drop-off -> next pickup,
  last drop-off -> depot
- driver cost: route distance + fixed driver cost
- total cost: sum of driver costs
"""

from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from . import utils
from .config import DEFAULT_CONFIG, DispatchConfig
from .models import Driver, Load, Point

SUMMARY_COLUMNS = ["Driver", "Loads", "Load Count", "Working Time", "Route Distance", "Cost"]


def route_distance(loads: Sequence[Load], depot: Point = DEFAULT_CONFIG.depot) -> float:
    """
    Distance of a route that serves loads in the given order.

    Args:
        loads: Loads in service order
        depot: Start and end point of the route

    Returns:
        Route distance, 0.0 for an empty route
    """
    if not loads:
        return 0.0

    total = utils.euclidean_distance(depot, loads[0].pickup)
    for prev_load, next_load in zip(loads, loads[1:]):
        total += utils.euclidean_distance(prev_load.dropoff, next_load.pickup)
    total += utils.euclidean_distance(loads[-1].dropoff, depot)
    return total


def driver_cost(driver: Driver, config: DispatchConfig = DEFAULT_CONFIG) -> float:
    """Route distance of one driver plus the fixed cost of using them."""
    return route_distance(driver.loads, config.depot) + config.fixed_driver_cost


def total_cost(drivers: Sequence[Driver], config: DispatchConfig = DEFAULT_CONFIG) -> float:
    """Total cost of a dispatch run."""
    return sum(driver_cost(driver, config) for driver in drivers)


def format_manifest(driver: Driver) -> str:
    """Render a driver's load ids in assignment order, e.g. '[1, 4, 2]'."""
    return str(driver.load_ids)


def build_summary(drivers: Sequence[Driver], config: DispatchConfig = DEFAULT_CONFIG) -> pd.DataFrame:
    """
    Build a per-driver summary table.

    Args:
        drivers: Drivers from an Assigned result
        config: Configuration the run used

    Returns:
        DataFrame with one row per driver and SUMMARY_COLUMNS as columns
    """
    table_data: List[dict] = []
    for driver in drivers:
        distance = route_distance(driver.loads, config.depot)
        table_data.append({
            "Driver": driver.driver_id,
            "Loads": format_manifest(driver),
            "Load Count": len(driver.loads),
            "Working Time": round(driver.working_time, 2),
            "Route Distance": round(distance, 2),
            "Cost": round(distance + config.fixed_driver_cost, 2),
        })
    return pd.DataFrame(table_data, columns=SUMMARY_COLUMNS)
