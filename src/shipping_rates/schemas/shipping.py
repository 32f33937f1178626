"""Shipping request/response schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class LocationModel(BaseModel):
    lat: float
    lng: float


class NearestWarehouseResponse(BaseModel):
    warehouseId: int
    warehouseCode: str
    warehouseName: str
    warehouseLocation: LocationModel
    distanceKm: float = Field(..., description="Distance from seller in kilometres.")


class ShippingChargeResponse(BaseModel):
    shippingCharge: float
    transportMode: str
    deliverySpeed: str
    distanceKm: float
    weightKg: float
    currency: str = "INR"


class ShippingCalculateRequest(BaseModel):
    sellerId: int = Field(..., ge=1)
    customerId: int = Field(..., ge=1)
    productId: Optional[int] = Field(default=None, ge=1)
    deliverySpeed: str = Field(..., description="STANDARD or EXPRESS (case-insensitive).")


class ShippingCalculateResponse(BaseModel):
    shippingCharge: float
    nearestWarehouse: NearestWarehouseResponse
    transportMode: str
    deliverySpeed: str
    distanceKm: float
    weightKg: float
    currency: str = "INR"


class RateQuoteResponse(BaseModel):
    shippingCharge: float
    transportCharge: float
    deliveryCharge: float
    transportMode: str
    deliverySpeed: str
    distanceKm: float
    weightKg: float
    currency: str = "INR"


class CacheStatsModel(BaseModel):
    name: str
    size: int
    maxEntries: int
    ttlSeconds: float
    hits: int
    misses: int
    evictions: int
    expirations: int
