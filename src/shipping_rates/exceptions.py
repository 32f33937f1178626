"""Error types raised by the rate engine and its collaborators."""

from __future__ import annotations

from typing import Any, Optional


class ShippingError(Exception):
    """Base class for all rate engine errors.

    ``field`` and ``value`` identify the offending input so the HTTP layer can
    build a user-facing message without parsing the text.
    """

    def __init__(self, message: str, *, field: Optional[str] = None, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value


class InvalidCoordinate(ShippingError, ValueError):
    """A latitude or longitude is missing or out of range."""


class InvalidInput(ShippingError, ValueError):
    """Distance or weight is outside the priceable domain."""


class InvalidSpeedTier(ShippingError, ValueError):
    """A delivery speed token could not be parsed."""


class NoCandidates(ShippingError, LookupError):
    """No active facility with a valid location was available."""


class NotFound(ShippingError, LookupError):
    """An identifier supplied by the caller does not resolve."""

    def __init__(self, resource: str, entity_id: Any, *, field: str = "id") -> None:
        super().__init__(f"{resource} not found with {field}: '{entity_id}'", field=field, value=entity_id)
        self.resource = resource
        self.entity_id = entity_id
