"""Error body returned for handled failures."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    timestamp: str
    status: int
    error: str
    message: str
    path: str
    field: str | None = None
    value: Any = None
    traceId: str
