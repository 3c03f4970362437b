"""Async client for the Google Places API (New)."""

from places_client.clients.google_places import PlacesClient, normalize_fields
from places_client.exceptions import (
    EmptyResponse,
    InvalidArgument,
    InvalidConfiguration,
    PlacesClientError,
    TransportFailure,
)

__all__ = [
    "PlacesClient",
    "normalize_fields",
    "PlacesClientError",
    "InvalidConfiguration",
    "InvalidArgument",
    "TransportFailure",
    "EmptyResponse",
]
