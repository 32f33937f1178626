"""Shipping charge endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, status

from ...schemas.shipping import (
    RateQuoteResponse,
    ShippingCalculateRequest,
    ShippingCalculateResponse,
    ShippingChargeResponse,
)
from ...services.pricing import parse_speed_tier
from ...services.shipping import ShippingService
from ..dependencies import get_shipping_service
from .warehouses import to_nearest_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shipping-charge", tags=["shipping"])


@router.get("", response_model=ShippingChargeResponse, status_code=status.HTTP_200_OK)
def get_shipping_charge(
    warehouse_id: int = Query(..., alias="warehouseId", ge=1),
    customer_id: int = Query(..., alias="customerId", ge=1),
    delivery_speed: str = Query(..., alias="deliverySpeed", description="STANDARD or EXPRESS"),
    product_id: int | None = Query(default=None, alias="productId", ge=1),
    service: ShippingService = Depends(get_shipping_service),
) -> ShippingChargeResponse:
    """Charge from a warehouse to a customer; 1 kg is assumed when no product is given."""
    speed = parse_speed_tier(delivery_speed)
    result = service.quote_charge_between(warehouse_id, customer_id, speed, product_id)
    logger.info(f"Calculated shipping charge: {result.charge} INR")
    return ShippingChargeResponse(
        shippingCharge=float(result.charge),
        transportMode=result.transport_tier.code,
        deliverySpeed=speed.code,
        distanceKm=round(result.distance_km, 2),
        weightKg=result.weight_kg,
    )


@router.post("/calculate", response_model=ShippingCalculateResponse, status_code=status.HTTP_200_OK)
def calculate_shipping_charge(
    payload: ShippingCalculateRequest,
    service: ShippingService = Depends(get_shipping_service),
) -> ShippingCalculateResponse:
    """Seller to customer via the warehouse nearest to the seller."""
    speed = parse_speed_tier(payload.deliverySpeed)
    result = service.quote_for_seller_and_customer(payload.sellerId, payload.customerId, speed, payload.productId)
    shipping = result.quote
    return ShippingCalculateResponse(
        shippingCharge=float(shipping.charge),
        nearestWarehouse=to_nearest_response(result.nearest_warehouse),
        transportMode=shipping.transport_tier.code,
        deliverySpeed=speed.code,
        distanceKm=round(shipping.distance_km, 2),
        weightKg=shipping.weight_kg,
    )


@router.get("/quote", response_model=RateQuoteResponse, status_code=status.HTTP_200_OK)
def quote_by_distance(
    distance_km: float = Query(..., alias="distanceKm"),
    weight_kg: float = Query(default=1.0, alias="weightKg"),
    delivery_speed: str = Query(default="STANDARD", alias="deliverySpeed"),
    service: ShippingService = Depends(get_shipping_service),
) -> RateQuoteResponse:
    """Price a known distance and weight directly, without any lookups."""
    speed = parse_speed_tier(delivery_speed)
    priced = service.quote_breakdown(distance_km, weight_kg, speed)
    return RateQuoteResponse(
        shippingCharge=float(priced.total),
        transportCharge=float(priced.transport_charge),
        deliveryCharge=float(priced.speed_charge),
        transportMode=priced.transport_tier.code,
        deliverySpeed=speed.code,
        distanceKm=distance_km,
        weightKg=weight_kg,
    )
