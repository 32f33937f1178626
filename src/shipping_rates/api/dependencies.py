"""Shared service instances for the route handlers."""

from __future__ import annotations

from functools import lru_cache

from ..data.directory import EntityDirectory
from ..services.shipping import ShippingService


@lru_cache()
def get_directory() -> EntityDirectory:
    return EntityDirectory()


@lru_cache()
def get_shipping_service() -> ShippingService:
    return ShippingService(get_directory())
