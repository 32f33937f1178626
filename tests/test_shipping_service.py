import logging
from decimal import Decimal

import pytest

from shipping_rates.data.directory import EntityDirectory
from shipping_rates.exceptions import InvalidCoordinate, NoCandidates, NotFound
from shipping_rates.models.domain import Coordinate, Customer, Dimensions, Product, Seller, Warehouse
from shipping_rates.services.cache import RateQuoteKey, ResultCache
from shipping_rates.services.geospatial import distance_km
from shipping_rates.services.pricing import AIR, EXPRESS, LOCAL, STANDARD, quote
from shipping_rates.services.shipping import ShippingService

BLR = Coordinate(12.9716, 77.5946)
MUM = Coordinate(19.0760, 72.8777)


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class CountingDirectory(EntityDirectory):
    """Directory that records collaborator round-trips."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.coordinate_calls = []
        self.list_calls = 0

    def get_coordinate_for(self, kind, entity_id):
        self.coordinate_calls.append((kind, entity_id))
        return super().get_coordinate_for(kind, entity_id)

    def list_active(self):
        self.list_calls += 1
        return super().list_active()


def _directory(warehouses=None) -> CountingDirectory:
    warehouses = warehouses if warehouses is not None else (
        Warehouse(id=1, code="BLR_WH_01", name="Bangalore Warehouse", location=BLR),
        Warehouse(id=2, code="MUM_WH_01", name="Mumbai Warehouse", location=MUM),
    )
    sellers = (
        Seller(id=1, seller_code="SELLER-001", name="Nestle Seller", location=Coordinate(17.3850, 78.4867)),
        Seller(id=2, seller_code="SELLER-002", name="Pune Seller", location=Coordinate(18.5204, 73.8567)),
    )
    customers = (
        Customer(id=1, customer_code="Cust-123", name="Near Bangalore", location=Coordinate(12.9352, 77.6245)),
        Customer(id=2, customer_code="Cust-124", name="Kolkata Store", location=Coordinate(22.5867, 88.4171)),
        Customer(id=3, customer_code="Cust-125", name="Unmapped", location=None),
    )
    products = (
        Product(id=1, product_code="PROD-001", name="Maggie", weight_kg=0.5, dimensions=Dimensions(10, 10, 10)),
        Product(id=2, product_code="PROD-002", name="Rice Bag", weight_kg=10.0, dimensions=Dimensions(100, 80, 50)),
    )
    return CountingDirectory(
        warehouses=lambda: warehouses,
        sellers=lambda: sellers,
        customers=lambda: customers,
        products=lambda: products,
        default_weight_kg=1.0,
        volumetric_divisor=5000.0,
    )


def _service(directory=None, clock=None) -> ShippingService:
    clock = clock or FakeClock()
    return ShippingService(
        directory or _directory(),
        nearest_cache=ResultCache("nearest_facility", max_entries=500, ttl_seconds=600, clock=clock),
        quote_cache=ResultCache("rate_quotes", max_entries=500, ttl_seconds=300, clock=clock),
    )


def test_quote_charge_is_direct_pricing():
    assert _service().quote_charge(50, 5, STANDARD) == Decimal("760.00")


def test_quote_charge_between_defaults_to_one_kg():
    result = _service().quote_charge_between(1, 1, STANDARD)

    expected_distance = distance_km(BLR, Coordinate(12.9352, 77.6245))
    assert result.weight_kg == 1.0
    assert result.distance_km == pytest.approx(expected_distance)
    assert result.transport_tier is LOCAL
    assert result.charge == quote(expected_distance, 1.0, STANDARD)


def test_quote_charge_between_uses_chargeable_weight():
    result = _service().quote_charge_between(1, 2, EXPRESS, product_id=2)

    assert result.weight_kg == pytest.approx(80.0)
    assert result.transport_tier is AIR
    assert result.speed_tier is EXPRESS
    assert result.charge == quote(result.distance_km, 80.0, EXPRESS)


def test_quote_is_cached_per_key():
    directory = _directory()
    service = _service(directory)

    first = service.quote_charge_between(1, 2, STANDARD)
    second = service.quote_charge_between(1, 2, STANDARD)
    service.quote_charge_between(1, 2, EXPRESS)

    assert first is second
    assert directory.coordinate_calls.count(("customer", 2)) == 2
    assert RateQuoteKey(1, 2, "STANDARD", None) in service.quote_cache


def test_quote_cache_expires_after_five_minutes():
    clock = FakeClock()
    directory = _directory()
    service = _service(directory, clock)

    service.quote_charge_between(1, 1, STANDARD)
    clock.now += 299
    service.quote_charge_between(1, 1, STANDARD)
    clock.now += 1
    service.quote_charge_between(1, 1, STANDARD)

    assert directory.coordinate_calls.count(("warehouse", 1)) == 2


def test_find_nearest_returns_distance():
    result = _service().find_nearest(1)

    assert result.facility.code == "BLR_WH_01"
    assert result.distance_km == pytest.approx(distance_km(Coordinate(17.3850, 78.4867), BLR))


def test_find_nearest_is_cached_by_origin():
    clock = FakeClock()
    directory = _directory()
    service = _service(directory, clock)

    service.find_nearest(2)
    service.find_nearest(2)
    assert directory.list_calls == 1

    clock.now += 600
    assert service.find_nearest(2).facility.code == "MUM_WH_01"
    assert directory.list_calls == 2


def test_unknown_seller_is_not_found():
    with pytest.raises(NotFound, match="Seller"):
        _service().find_nearest(999)


def test_unknown_customer_is_not_found_and_not_cached():
    service = _service()
    with pytest.raises(NotFound, match="Customer"):
        service.quote_charge_between(1, 999, STANDARD)
    assert len(service.quote_cache) == 0


def test_unknown_product_is_not_found():
    with pytest.raises(NotFound, match="Product"):
        _service().quote_charge_between(1, 1, STANDARD, product_id=42)


def test_customer_without_location():
    with pytest.raises(InvalidCoordinate):
        _service().quote_charge_between(1, 3, STANDARD)


def test_no_active_warehouses():
    closed = (Warehouse(id=1, code="X", name="Closed", location=BLR, is_active=False),)
    with pytest.raises(NoCandidates):
        _service(_directory(warehouses=closed)).find_nearest(1)


def test_seller_to_customer_goes_through_nearest_warehouse():
    service = _service()

    result = service.quote_for_seller_and_customer(1, 2, EXPRESS, product_id=1)

    assert result.nearest_warehouse.facility.id == 1
    assert result.quote == service.quote_charge_between(1, 2, EXPRESS, product_id=1)
    assert result.quote.weight_kg == pytest.approx(0.5)


def test_cache_stats_report_both_regions():
    service = _service()
    service.find_nearest(1)
    service.find_nearest(1)

    nearest_stats, quote_stats = service.cache_stats()
    assert nearest_stats.name == "nearest_facility"
    assert (nearest_stats.hits, nearest_stats.misses) == (1, 1)
    assert quote_stats.name == "rate_quotes"
    assert quote_stats.ttl_seconds == 300

    service.clear_caches()
    assert len(service.nearest_cache) == 0


def test_default_caches_follow_settings():
    service = ShippingService(_directory())
    assert service.nearest_cache.max_entries == 500
    assert service.nearest_cache.ttl_seconds == 600
    assert service.quote_cache.ttl_seconds == 300


class MinimalDirectory:
    """Only the three collaborator lookups the service relies on."""

    def list_active(self):
        return [Warehouse(id=7, code="BLR_WH_01", name="Bangalore Warehouse", location=BLR)]

    def get_coordinate_for(self, kind, entity_id):
        return Coordinate(12.9352, 77.6245)

    def chargeable_weight(self, product_id):
        return 2.0


def test_service_needs_only_collaborator_lookups():
    service = _service(MinimalDirectory())

    result = service.quote_for_seller_and_customer(1, 1, STANDARD)

    assert result.nearest_warehouse.facility.id == 7
    assert result.quote.weight_kg == 2.0


def test_nearest_lookup_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="shipping_rates.services.shipping.service"):
        _service().find_nearest(1)

    assert "Finding nearest warehouse for seller ID: 1" in caplog.text
    assert "Nearest warehouse: Bangalore Warehouse (ID: 1) at distance:" in caplog.text
