"""Shipping charge orchestration: id resolution, caching and pricing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ...config import settings
from ...models.domain import Coordinate, Warehouse
from ..cache import CacheStats, RateQuoteKey, ResultCache
from ..facilities import NearestFacility, nearest
from ..geospatial import distance_km
from ..pricing import RateBreakdown, SpeedTier, TransportTier, breakdown, quote

logger = logging.getLogger(__name__)


class Directory(Protocol):
    def list_active(self) -> Sequence[Warehouse]: ...

    def get_coordinate_for(self, kind: str, entity_id: int) -> Coordinate: ...

    def chargeable_weight(self, product_id: Optional[int]) -> float: ...


@dataclass(frozen=True, slots=True)
class ShippingQuote:
    charge: Decimal
    distance_km: float
    weight_kg: float
    transport_tier: TransportTier
    speed_tier: SpeedTier


@dataclass(frozen=True, slots=True)
class SellerShippingQuote:
    quote: ShippingQuote
    nearest_warehouse: NearestFacility


class ShippingService:
    """Caller boundary of the rate engine.

    Nearest-warehouse results are cached per seller id and quotes per
    ``RateQuoteKey``. The nearest region does not watch the warehouse list, so
    a newly added warehouse is only seen once the seller's entry expires.
    """

    def __init__(
        self,
        directory: Directory,
        nearest_cache: ResultCache[NearestFacility] | None = None,
        quote_cache: ResultCache[ShippingQuote] | None = None,
    ) -> None:
        self.directory = directory
        self.nearest_cache = nearest_cache if nearest_cache is not None else ResultCache(
            "nearest_facility",
            max_entries=settings.nearest_cache_max_entries,
            ttl_seconds=settings.nearest_cache_ttl_seconds,
        )
        self.quote_cache = quote_cache if quote_cache is not None else ResultCache(
            "rate_quotes",
            max_entries=settings.quote_cache_max_entries,
            ttl_seconds=settings.quote_cache_ttl_seconds,
        )

    def quote_charge(self, distance_km: float, weight_kg: float, speed: SpeedTier) -> Decimal:
        return quote(distance_km, weight_kg, speed)

    def quote_charge_between(
        self,
        origin_id: int,
        destination_id: int,
        speed: SpeedTier,
        product_id: Optional[int] = None,
    ) -> ShippingQuote:
        """Price a shipment from warehouse ``origin_id`` to customer ``destination_id``."""
        key = RateQuoteKey(
            facility_id=origin_id,
            destination_id=destination_id,
            speed_tier=speed.code,
            product_id=product_id,
        )
        return self.quote_cache.get_or_compute(
            key, lambda: self._compute_quote(origin_id, destination_id, speed, product_id)
        )

    def _compute_quote(
        self,
        origin_id: int,
        destination_id: int,
        speed: SpeedTier,
        product_id: Optional[int],
    ) -> ShippingQuote:
        logger.info(
            f"Calculating shipping charge: warehouse={origin_id}, customer={destination_id}, "
            f"speed={speed.code}, product={product_id}"
        )
        origin = self.directory.get_coordinate_for("warehouse", origin_id)
        destination = self.directory.get_coordinate_for("customer", destination_id)
        weight_kg = self.directory.chargeable_weight(product_id)
        distance = distance_km(origin, destination)
        priced = breakdown(distance, weight_kg, speed)
        return ShippingQuote(
            charge=priced.total,
            distance_km=distance,
            weight_kg=weight_kg,
            transport_tier=priced.transport_tier,
            speed_tier=speed,
        )

    def find_nearest(self, origin_id: int) -> NearestFacility:
        """Nearest active warehouse to seller ``origin_id``."""
        return self.nearest_cache.get_or_compute(origin_id, lambda: self._compute_nearest(origin_id))

    def _compute_nearest(self, origin_id: int) -> NearestFacility:
        logger.info(f"Finding nearest warehouse for seller ID: {origin_id}")
        origin = self.directory.get_coordinate_for("seller", origin_id)
        result = nearest(origin, self.directory.list_active())
        logger.info(
            f"Nearest warehouse: {result.facility.name} (ID: {result.facility.id}) "
            f"at distance: {result.distance_km:.2f} km"
        )
        return result

    def quote_for_seller_and_customer(
        self,
        seller_id: int,
        customer_id: int,
        speed: SpeedTier,
        product_id: Optional[int] = None,
    ) -> SellerShippingQuote:
        """Route through the seller's nearest warehouse, then price warehouse to customer."""
        logger.info(
            f"Calculating complete shipping: seller={seller_id}, customer={customer_id}, "
            f"speed={speed.code}, product={product_id}"
        )
        warehouse = self.find_nearest(seller_id)
        shipping = self.quote_charge_between(warehouse.facility.id, customer_id, speed, product_id)
        logger.info(f"Complete shipping calculation result: {shipping.charge} INR via warehouse {warehouse.facility.code}")
        return SellerShippingQuote(quote=shipping, nearest_warehouse=warehouse)

    def quote_breakdown(self, distance_km: float, weight_kg: float, speed: SpeedTier) -> RateBreakdown:
        return breakdown(distance_km, weight_kg, speed)

    def cache_stats(self) -> list[CacheStats]:
        return [self.nearest_cache.stats(), self.quote_cache.stats()]

    def clear_caches(self) -> None:
        self.nearest_cache.clear()
        self.quote_cache.clear()
