"""Data access helpers for sellers, customers and products."""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from ..config import settings
from ..db.supabase import fetch_table_rows
from ..models.domain import Customer, Product, Seller
from .rows import parse_customer, parse_product, parse_rows, parse_seller, read_csv_rows

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _load(table: str, csv_path: Path, parser: Callable[[dict[str, Any]], T]) -> tuple[T, ...]:
    rows = fetch_table_rows(table)
    if rows is not None:
        records = parse_rows(rows, parser, f"supabase:{table}")
        if records:
            logger.info(f"Loaded {len(records)} {table} from database")
            return records

    records = parse_rows(read_csv_rows(csv_path), parser, str(csv_path))
    logger.info(f"Loaded {len(records)} {table} from {csv_path}")
    return records


@functools.lru_cache(maxsize=1)
def load_sellers(source: Optional[Path] = None) -> tuple[Seller, ...]:
    return _load("sellers", source or settings.sellers_file, parse_seller)


@functools.lru_cache(maxsize=1)
def load_customers(source: Optional[Path] = None) -> tuple[Customer, ...]:
    return _load("customers", source or settings.customers_file, parse_customer)


@functools.lru_cache(maxsize=1)
def load_products(source: Optional[Path] = None) -> tuple[Product, ...]:
    return _load("products", source or settings.products_file, parse_product)


def clear_caches() -> None:
    """Forget loaded records so the next call reads the store again."""
    load_sellers.cache_clear()
    load_customers.cache_clear()
    load_products.cache_clear()
