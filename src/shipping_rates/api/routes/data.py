"""Read-only listings of collaborator records for UI pickers."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from ...data.directory import EntityDirectory
from ...schemas.data import PartyModel, ProductModel, WarehouseModel
from ..dependencies import get_directory

router = APIRouter(prefix="/data", tags=["data"])


@router.get("/warehouses", response_model=List[WarehouseModel], status_code=status.HTTP_200_OK)
def list_warehouses(directory: EntityDirectory = Depends(get_directory)) -> List[WarehouseModel]:
    return [
        WarehouseModel(
            id=w.id,
            code=w.code,
            name=w.name,
            city=w.city,
            state=w.state,
            lat=w.location.latitude if w.location else None,
            lng=w.location.longitude if w.location else None,
        )
        for w in directory.list_active()
    ]


@router.get("/sellers", response_model=List[PartyModel], status_code=status.HTTP_200_OK)
def list_sellers(directory: EntityDirectory = Depends(get_directory)) -> List[PartyModel]:
    return [
        PartyModel(id=s.id, code=s.seller_code, name=s.name, city=s.city, state=s.state)
        for s in directory.list_sellers()
    ]


@router.get("/customers", response_model=List[PartyModel], status_code=status.HTTP_200_OK)
def list_customers(directory: EntityDirectory = Depends(get_directory)) -> List[PartyModel]:
    return [
        PartyModel(id=c.id, code=c.customer_code, name=c.name, city=c.city, state=c.state)
        for c in directory.list_customers()
    ]


@router.get("/products", response_model=List[ProductModel], status_code=status.HTTP_200_OK)
def list_products(directory: EntityDirectory = Depends(get_directory)) -> List[ProductModel]:
    return [
        ProductModel(
            id=p.id,
            productId=p.product_code,
            name=p.name,
            category=p.category,
            weight=p.weight_kg,
            chargeableWeight=round(p.chargeable_weight(directory.volumetric_divisor), 3),
        )
        for p in directory.list_products()
    ]
