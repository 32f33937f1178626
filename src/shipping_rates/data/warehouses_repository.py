"""Warehouse data loader with database-first approach, falling back to a workbook or CSV file."""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any

from openpyxl import load_workbook

from ..config import settings
from ..db.supabase import fetch_table_rows
from ..models.domain import Warehouse
from .rows import parse_rows, parse_warehouse, read_csv_rows

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"id", "code", "latitude", "longitude"}


def _load_warehouses_from_database() -> tuple[Warehouse, ...] | None:
    """Load warehouses from Supabase. Returns None if database not available or empty."""
    rows = fetch_table_rows("warehouses")
    if rows is None:
        return None
    warehouses = parse_rows(rows, parse_warehouse, "supabase:warehouses")
    return warehouses or None


def _read_workbook_rows(workbook_path: Path) -> list[dict[str, Any]]:
    wb = load_workbook(workbook_path, data_only=True, read_only=True)
    try:
        rows = wb.active.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            raise ValueError(f"Warehouse workbook '{workbook_path}' is empty.")
        columns = [str(name).strip().lower() if name is not None else "" for name in header]
        return [
            {column: value for column, value in zip(columns, row) if column}
            for row in rows
            if any(cell is not None for cell in row)
        ]
    finally:
        wb.close()


def _load_warehouses_from_file(source: Path | None = None) -> tuple[Warehouse, ...]:
    """Load warehouses from an .xlsx workbook or a .csv file."""
    path = source or settings.warehouses_file
    if not path.exists():
        raise FileNotFoundError(f"Warehouse file not found: {path}")

    if path.suffix.lower() == ".csv":
        records = [{key.lower(): value for key, value in row.items()} for row in read_csv_rows(path)]
    else:
        records = _read_workbook_rows(path)

    columns = set().union(*(record.keys() for record in records)) if records else set()
    missing_columns = REQUIRED_COLUMNS - columns
    if records and missing_columns:
        raise ValueError(f"Warehouse file missing columns: {', '.join(sorted(missing_columns))}")
    return parse_rows(records, parse_warehouse, str(path))


@functools.lru_cache(maxsize=1)
def get_warehouses(source: Path | None = None) -> tuple[Warehouse, ...]:
    """Get warehouses from the database first, fall back to the data file if needed."""
    db_warehouses = _load_warehouses_from_database()
    if db_warehouses:
        logger.info(f"Loaded {len(db_warehouses)} warehouses from database")
        return db_warehouses

    file_warehouses = _load_warehouses_from_file(source)
    logger.info(f"Loaded {len(file_warehouses)} warehouses from {source or settings.warehouses_file}")
    return file_warehouses
