"""Health endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from ...schemas.shipping import CacheStatsModel
from ...services.shipping import ShippingService
from ..dependencies import get_shipping_service

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/cache", response_model=List[CacheStatsModel], status_code=status.HTTP_200_OK)
def cache_health(service: ShippingService = Depends(get_shipping_service)) -> List[CacheStatsModel]:
    return [
        CacheStatsModel(
            name=stats.name,
            size=stats.size,
            maxEntries=stats.max_entries,
            ttlSeconds=stats.ttl_seconds,
            hits=stats.hits,
            misses=stats.misses,
            evictions=stats.evictions,
            expirations=stats.expirations,
        )
        for stats in service.cache_stats()
    ]
