"""Nearest active warehouse lookup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from ...exceptions import NoCandidates
from ...models.domain import Coordinate, Warehouse
from ..geospatial import distance_km, validate_coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NearestFacility:
    facility: Warehouse
    distance_km: float


def nearest(origin: Coordinate, candidates: Iterable[Warehouse]) -> NearestFacility:
    """Return the active warehouse closest to ``origin``.

    Inactive warehouses and warehouses without a location are ignored. When two
    warehouses are equally far the one that appears first in ``candidates``
    wins, so callers should pass them in a stable order (the directory sorts
    by id).
    """

    origin = validate_coordinate(origin, "origin")
    best: NearestFacility | None = None
    for warehouse in candidates:
        if not warehouse.is_active or warehouse.location is None:
            continue
        distance = distance_km(origin, warehouse.location)
        if best is None or distance < best.distance_km:
            best = NearestFacility(facility=warehouse, distance_km=distance)

    if best is None:
        logger.error("No active warehouses with a valid location are available")
        raise NoCandidates("No active warehouses with a valid location are available", field="warehouses")

    logger.debug(
        f"Nearest warehouse to ({origin.latitude}, {origin.longitude}): {best.facility.code} "
        f"(ID: {best.facility.id}) at {best.distance_km:.2f} km"
    )
    return best
