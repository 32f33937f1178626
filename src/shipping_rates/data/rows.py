"""Row parsing shared by the database and file loaders."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, TypeVar

from ..models.domain import Coordinate, Customer, Dimensions, Product, Seller, Warehouse

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "active"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "inactive"}


def _pick(row: dict[str, Any], *names: str) -> Any:
    """First non-empty value among the column aliases."""
    for name in names:
        value = row.get(name)
        if value is not None and value != "":
            return value
    return None


def _coerce_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).replace(",", ""))
    except ValueError as exc:
        raise ValueError(f"Unable to parse float from value '{value}'") from exc


def _coerce_bool(value: Any, default: bool = True) -> bool:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Unable to parse boolean from value '{value}'")


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value).strip() or None


def _location(row: dict[str, Any]) -> Optional[Coordinate]:
    lat = _coerce_float(_pick(row, "latitude", "Latitude", "lat"))
    lon = _coerce_float(_pick(row, "longitude", "Longitude", "lng", "lon"))
    if lat is None or lon is None:
        return None
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"Latitude must be between -90 and 90, got {lat}")
    if not -180.0 <= lon <= 180.0:
        raise ValueError(f"Longitude must be between -180 and 180, got {lon}")
    return Coordinate(latitude=lat, longitude=lon)


def _identifier(row: dict[str, Any]) -> int:
    value = _pick(row, "id", "ID", "Id")
    if value is None:
        raise KeyError("id")
    return int(float(value))


def parse_warehouse(row: dict[str, Any]) -> Warehouse:
    code = _text(_pick(row, "code", "warehouse_code", "Code", "DC")) or ""
    return Warehouse(
        id=_identifier(row),
        code=code,
        name=_text(_pick(row, "name", "Name")) or code,
        location=_location(row),
        city=_text(_pick(row, "city", "City")),
        state=_text(_pick(row, "state", "State")),
        is_active=_coerce_bool(_pick(row, "is_active", "active", "Active")),
    )


def parse_seller(row: dict[str, Any]) -> Seller:
    code = _text(_pick(row, "seller_id", "seller_code", "code")) or ""
    return Seller(
        id=_identifier(row),
        seller_code=code,
        name=_text(_pick(row, "company_name", "name")) or code,
        location=_location(row),
        city=_text(_pick(row, "city", "City")),
        state=_text(_pick(row, "state", "State")),
        is_active=_coerce_bool(_pick(row, "is_active", "active")),
    )


def parse_customer(row: dict[str, Any]) -> Customer:
    code = _text(_pick(row, "customer_id", "customer_code", "code")) or ""
    return Customer(
        id=_identifier(row),
        customer_code=code,
        name=_text(_pick(row, "store_name", "name")) or code,
        location=_location(row),
        city=_text(_pick(row, "city", "City")),
        state=_text(_pick(row, "state", "State")),
        is_active=_coerce_bool(_pick(row, "is_active", "active")),
    )


def parse_product(row: dict[str, Any]) -> Product:
    weight = _coerce_float(_pick(row, "weight_kg", "weight_in_kg", "weight"))
    if weight is None or weight <= 0:
        raise ValueError(f"Product weight must be positive, got '{weight}'")
    length = _coerce_float(_pick(row, "length_cm", "length"))
    width = _coerce_float(_pick(row, "width_cm", "width"))
    height = _coerce_float(_pick(row, "height_cm", "height"))
    dimensions = None
    if length and width and height:
        dimensions = Dimensions(length_cm=length, width_cm=width, height_cm=height)
    code = _text(_pick(row, "product_id", "product_code", "code")) or ""
    return Product(
        id=_identifier(row),
        product_code=code,
        name=_text(_pick(row, "name", "Name")) or code,
        weight_kg=weight,
        dimensions=dimensions,
        category=_text(_pick(row, "category", "Category")),
        is_active=_coerce_bool(_pick(row, "is_active", "active")),
    )


def read_csv_rows(csv_path: Path) -> list[dict[str, Any]]:
    """Read a headed CSV file into dictionaries with stripped column names."""
    if not csv_path.exists():
        raise FileNotFoundError(f"Data file not found: {csv_path}")

    with csv_path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise ValueError(f"Data file '{csv_path}' is missing a header row.")
        return [{(key or "").strip(): value for key, value in row.items()} for row in reader]


def parse_rows(rows: Iterable[dict[str, Any]], parser: Callable[[dict[str, Any]], T], source: str) -> tuple[T, ...]:
    """Parse every row, skipping (and logging) the ones that are malformed."""
    records: list[T] = []
    for index, row in enumerate(rows, start=1):
        try:
            records.append(parser(row))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping invalid row {index} from {source}: {e}")
    return tuple(records)
