"""Lookup facade over the warehouse, party and product repositories."""

from __future__ import annotations

import threading
from typing import Callable, Optional, Sequence

from ..config import settings
from ..exceptions import InvalidCoordinate, NotFound
from ..models.domain import Coordinate, Customer, Product, Seller, Warehouse
from . import parties_repository, warehouses_repository

ENTITY_KINDS = ("warehouse", "seller", "customer")


class EntityDirectory:
    """Resolves ids to warehouses, sellers, customers and products.

    Records are pulled from the loaders on first use and indexed by id. Call
    ``reload`` after the underlying store changes.
    """

    def __init__(
        self,
        warehouses: Callable[[], Sequence[Warehouse]] = warehouses_repository.get_warehouses,
        sellers: Callable[[], Sequence[Seller]] = parties_repository.load_sellers,
        customers: Callable[[], Sequence[Customer]] = parties_repository.load_customers,
        products: Callable[[], Sequence[Product]] = parties_repository.load_products,
        default_weight_kg: float | None = None,
        volumetric_divisor: float | None = None,
    ) -> None:
        self._loaders = {
            "warehouse": warehouses,
            "seller": sellers,
            "customer": customers,
            "product": products,
        }
        self.default_weight_kg = default_weight_kg if default_weight_kg is not None else settings.default_weight_kg
        self.volumetric_divisor = volumetric_divisor if volumetric_divisor is not None else settings.volumetric_divisor
        self._indexes: dict[str, dict[int, object]] = {}
        self._lock = threading.Lock()

    def _index(self, kind: str) -> dict[int, object]:
        index = self._indexes.get(kind)
        if index is None:
            with self._lock:
                index = self._indexes.get(kind)
                if index is None:
                    records = sorted(self._loaders[kind](), key=lambda record: record.id)
                    index = {record.id: record for record in records}
                    self._indexes[kind] = index
        return index

    def _get(self, kind: str, entity_id: int):
        record = self._index(kind).get(entity_id)
        if record is None:
            raise NotFound(kind.capitalize(), entity_id)
        return record

    def reload(self) -> None:
        with self._lock:
            self._indexes.clear()
        warehouses_repository.get_warehouses.cache_clear()
        parties_repository.clear_caches()

    def get_warehouse(self, warehouse_id: int) -> Warehouse:
        return self._get("warehouse", warehouse_id)

    def get_seller(self, seller_id: int) -> Seller:
        return self._get("seller", seller_id)

    def get_customer(self, customer_id: int) -> Customer:
        return self._get("customer", customer_id)

    def get_product(self, product_id: int) -> Product:
        return self._get("product", product_id)

    def list_active(self) -> list[Warehouse]:
        """Active warehouses ordered by id."""
        return [w for w in self._index("warehouse").values() if w.is_active]

    def list_sellers(self) -> list[Seller]:
        return [s for s in self._index("seller").values() if s.is_active]

    def list_customers(self) -> list[Customer]:
        return [c for c in self._index("customer").values() if c.is_active]

    def list_products(self) -> list[Product]:
        return [p for p in self._index("product").values() if p.is_active]

    def get_coordinate_for(self, kind: str, entity_id: int) -> Coordinate:
        if kind not in ENTITY_KINDS:
            raise ValueError(f"Unknown entity kind '{kind}'. Expected one of: {', '.join(ENTITY_KINDS)}")
        record = self._get(kind, entity_id)
        if record.location is None:
            raise InvalidCoordinate(
                f"{kind.capitalize()} '{entity_id}' does not have location information",
                field=f"{kind}.location",
                value=entity_id,
            )
        return record.location

    def chargeable_weight(self, product_id: Optional[int]) -> float:
        if product_id is None:
            return self.default_weight_kg
        return self.get_product(product_id).chargeable_weight(self.volumetric_divisor)
