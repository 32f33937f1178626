"""Listing schemas for collaborator records."""

from __future__ import annotations

from pydantic import BaseModel


class WarehouseModel(BaseModel):
    id: int
    code: str
    name: str
    city: str | None = None
    state: str | None = None
    lat: float | None = None
    lng: float | None = None


class PartyModel(BaseModel):
    id: int
    code: str
    name: str
    city: str | None = None
    state: str | None = None


class ProductModel(BaseModel):
    id: int
    productId: str
    name: str
    category: str | None = None
    weight: float
    chargeableWeight: float
