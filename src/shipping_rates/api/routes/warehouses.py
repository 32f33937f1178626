"""Warehouse lookup endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, status

from ...schemas.shipping import LocationModel, NearestWarehouseResponse
from ...services.facilities import NearestFacility
from ...services.shipping import ShippingService
from ..dependencies import get_shipping_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/warehouse", tags=["warehouse"])


def to_nearest_response(result: NearestFacility) -> NearestWarehouseResponse:
    warehouse = result.facility
    return NearestWarehouseResponse(
        warehouseId=warehouse.id,
        warehouseCode=warehouse.code,
        warehouseName=warehouse.name,
        warehouseLocation=LocationModel(lat=warehouse.location.latitude, lng=warehouse.location.longitude),
        distanceKm=round(result.distance_km, 2),
    )


@router.get("/nearest", response_model=NearestWarehouseResponse, status_code=status.HTTP_200_OK)
def get_nearest_warehouse(
    seller_id: int = Query(..., alias="sellerId", ge=1, description="Seller database ID"),
    product_id: int | None = Query(default=None, alias="productId", ge=1, description="Accepted for API compatibility"),
    service: ShippingService = Depends(get_shipping_service),
) -> NearestWarehouseResponse:
    logger.info(f"Request to find nearest warehouse for seller ID: {seller_id}")
    response = to_nearest_response(service.find_nearest(seller_id))
    logger.info(f"Found nearest warehouse: {response.warehouseCode} at distance: {response.distanceKm} km")
    return response
