"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="SHIP_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Shipping Rate Engine API"
    api_prefix: str = "/api/v1"
    log_level: str = Field(default="INFO", description="Root logging level.")
    warehouses_file: Path = Field(
        default=Path("data/warehouses.csv"),
        description="Warehouse list (.xlsx or .csv) with code, name and coordinates.",
    )
    sellers_file: Path = Field(default=Path("data/sellers.csv"), description="Seller master data.")
    customers_file: Path = Field(default=Path("data/customers.csv"), description="Customer master data.")
    products_file: Path = Field(default=Path("data/products.csv"), description="Product catalogue with weights.")

    nearest_cache_max_entries: int = Field(default=500, ge=1)
    nearest_cache_ttl_seconds: float = Field(default=600.0, gt=0.0)
    quote_cache_max_entries: int = Field(default=500, ge=1)
    quote_cache_ttl_seconds: float = Field(default=300.0, gt=0.0)

    default_weight_kg: float = Field(default=1.0, gt=0.0, description="Weight used when no product is given.")
    volumetric_divisor: float = Field(default=5000.0, gt=0.0, description="cm³ per kg for volumetric weight.")

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )

    @field_validator("warehouses_file", "sellers_file", "customers_file", "products_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
