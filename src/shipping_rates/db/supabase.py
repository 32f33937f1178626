"""Supabase client for the collaborator store."""

import logging
from functools import lru_cache
from typing import Any

from supabase import create_client, Client

from ..config import settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_supabase_client() -> Client | None:
    """Get cached Supabase client instance.

    Returns:
        Supabase Client instance if configured, None otherwise.
        Note: This does not test the connection - actual queries may fail with network errors.
    """
    if not settings.supabase_url or not settings.supabase_key:
        logger.info("Supabase credentials not configured, using data files")
        return None

    try:
        return create_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logger.error(f"Failed to create Supabase client: {e}")
        return None


def fetch_table_rows(table: str) -> list[dict[str, Any]] | None:
    """Return every row of ``table`` ordered by id, or None when the database is unavailable or empty."""
    supabase = get_supabase_client()
    if not supabase:
        return None

    try:
        response = supabase.table(table).select("*").order("id").execute()
    except Exception as e:
        # Falls back to the data file.
        logger.warning(f"Supabase query on '{table}' failed, falling back to file: {e}")
        return None
    return list(response.data) if response.data else None
