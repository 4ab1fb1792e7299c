import math

from loaddispatch.config import DispatchConfig
from loaddispatch.models import Driver, Load
from loaddispatch.scoring import (
    SUMMARY_COLUMNS,
    build_summary,
    driver_cost,
    format_manifest,
    route_distance,
    total_cost,
)


def chained_driver():
    return Driver(
        driver_id=1,
        loads=[Load(1, (10.0, 0.0), (20.0, 0.0)), Load(2, (20.0, 0.0), (30.0, 0.0))],
        working_time=30.0,
    )


def test_route_distance_empty_route():
    assert route_distance([]) == 0.0


def test_route_distance_single_load_round_trip():
    # Depot -> (3,4) -> depot.
    assert math.isclose(route_distance([Load(1, (3.0, 4.0), (3.0, 4.0))]), 10.0)


def test_route_distance_follows_assignment_order():
    driver = chained_driver()
    assert math.isclose(route_distance(driver.loads), 40.0)
    # Reversed: 20 out, 20 back from (30,0) to (10,0), 20 home.
    assert math.isclose(route_distance(list(reversed(driver.loads))), 60.0)


def test_route_distance_uses_custom_depot():
    load = Load(1, (10.0, 0.0), (10.0, 0.0))
    assert math.isclose(route_distance([load], depot=(10.0, 0.0)), 0.0)


def test_driver_and_total_cost_include_fixed_cost():
    config = DispatchConfig(fixed_driver_cost=100)
    single = Driver(driver_id=2, loads=[Load(3, (3.0, 4.0), (3.0, 4.0))], working_time=5.0)
    assert math.isclose(driver_cost(chained_driver(), config), 140.0)
    assert math.isclose(total_cost([chained_driver(), single], config), 140.0 + 110.0)


def test_total_cost_of_no_drivers_is_zero():
    assert total_cost([]) == 0


def test_format_manifest_lists_ids_in_assignment_order():
    driver = Driver(driver_id=1)
    driver.add_load(Load(4, (0.0, 0.0), (0.0, 0.0)), 0.0)
    driver.add_load(Load(2, (0.0, 0.0), (0.0, 0.0)), 0.0)
    assert format_manifest(driver) == "[4, 2]"


def test_build_summary_has_row_per_driver():
    single = Driver(driver_id=2, loads=[Load(3, (3.0, 4.0), (3.0, 4.0))], working_time=5.0)
    summary = build_summary([chained_driver(), single])

    assert list(summary.columns) == SUMMARY_COLUMNS
    assert len(summary) == 2
    first = summary.iloc[0]
    assert first["Driver"] == 1
    assert first["Loads"] == "[1, 2]"
    assert first["Load Count"] == 2
    assert first["Route Distance"] == 40.0
    assert first["Cost"] == 540.0
    assert summary.iloc[1]["Working Time"] == 5.0


def test_build_summary_empty():
    summary = build_summary([])
    assert summary.empty
    assert list(summary.columns) == SUMMARY_COLUMNS
