import pytest

from shipping_rates.exceptions import InvalidCoordinate, NoCandidates
from shipping_rates.models.domain import Coordinate, Warehouse
from shipping_rates.services.facilities import nearest
from shipping_rates.services.facilities import resolver as resolver_module

HYDERABAD = Coordinate(17.3850, 78.4867)


def _warehouse(wid: int, code: str, lat: float | None, lon: float | None, active: bool = True) -> Warehouse:
    location = Coordinate(lat, lon) if lat is not None and lon is not None else None
    return Warehouse(id=wid, code=code, name=f"{code} Warehouse", location=location, is_active=active)


BANGALORE_WH = _warehouse(1, "BLR_WH_01", 12.9716, 77.5946)
MUMBAI_WH = _warehouse(2, "MUM_WH_01", 19.0760, 72.8777)
DELHI_WH = _warehouse(3, "DEL_WH_01", 28.7041, 77.1025)


def test_nearest_uses_smallest_distance(monkeypatch):
    distances = {"BLR_WH_01": 500.0, "MUM_WH_01": 710.0, "DEL_WH_01": 1260.0}
    lookup = {w.location: w.code for w in (BANGALORE_WH, MUMBAI_WH, DELHI_WH)}
    monkeypatch.setattr(resolver_module, "distance_km", lambda origin, target: distances[lookup[target]])

    result = nearest(HYDERABAD, [DELHI_WH, MUMBAI_WH, BANGALORE_WH])

    assert result.facility is BANGALORE_WH
    assert result.distance_km == 500.0


def test_nearest_with_real_distances():
    result = nearest(HYDERABAD, [BANGALORE_WH, MUMBAI_WH, DELHI_WH])

    assert result.facility.code == "BLR_WH_01"
    assert 490 <= result.distance_km <= 510


def test_nearest_skips_inactive_and_unlocated_warehouses():
    closed_next_door = _warehouse(9, "HYD_WH_01", 17.3850, 78.4867, active=False)
    unlocated = _warehouse(10, "GHOST", None, None)

    result = nearest(HYDERABAD, [closed_next_door, unlocated, MUMBAI_WH, DELHI_WH])

    assert result.facility is MUMBAI_WH


def test_ties_go_to_first_candidate():
    twin_a = _warehouse(1, "A", 10.0, 10.0)
    twin_b = _warehouse(2, "B", 10.0, 10.0)

    assert nearest(Coordinate(0.0, 0.0), [twin_a, twin_b]).facility is twin_a
    assert nearest(Coordinate(0.0, 0.0), [twin_b, twin_a]).facility is twin_b


def test_origin_on_a_warehouse_is_zero_distance():
    result = nearest(Coordinate(19.0760, 72.8777), [BANGALORE_WH, MUMBAI_WH])
    assert result.facility is MUMBAI_WH
    assert result.distance_km == 0.0


@pytest.mark.parametrize(
    "candidates",
    [
        [],
        [_warehouse(1, "CLOSED", 12.0, 77.0, active=False)],
        [_warehouse(2, "NOWHERE", None, None)],
    ],
)
def test_no_candidates(candidates):
    with pytest.raises(NoCandidates):
        nearest(HYDERABAD, candidates)


def test_invalid_origin_is_rejected():
    with pytest.raises(InvalidCoordinate):
        nearest(Coordinate(120.0, 0.0), [BANGALORE_WH])
