"""
Google Places API (New) HTTP client.

Wraps the four endpoints:
- POST /v1/places:searchNearby
- GET  /v1/places/{place_id}
- POST /v1/places:searchText
- POST /v1/places:autocomplete

The response field mask is sent as the ``fields`` query parameter.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import httpx
from loguru import logger

from places_client.exceptions import (
    EmptyResponse,
    InvalidArgument,
    InvalidConfiguration,
    TransportFailure,
)

BASE_URL = "https://places.googleapis.com/v1"

ALL_FIELDS = "*"
PLACES_PREFIX = "places."

FieldSpec = str | Sequence[str] | None


def normalize_fields(fields: FieldSpec, strip_prefix: bool = False) -> str:
    """Build the comma-separated field mask sent as the ``fields`` query parameter.

    Args:
        fields: Field names as a list, or an already comma-separated string.
            Empty or missing selects every field (``"*"``).
        strip_prefix: Remove every ``places.`` occurrence. Place Details takes
            bare field names, while the search endpoints take ``places.``-prefixed ones.
    """
    if not fields:
        mask = ALL_FIELDS
    elif isinstance(fields, str):
        mask = fields
    else:
        mask = ",".join(fields)

    mask = "".join(mask.split())

    if strip_prefix:
        mask = mask.replace(PLACES_PREFIX, "")

    return mask


def _parse_location(location: str) -> tuple[str, str]:
    parts = location.split(",")
    if len(parts) < 2:
        raise InvalidArgument(
            f"Invalid location {location!r}: expected 'latitude,longitude'."
        )
    return parts[0].strip(), parts[1].strip()


class PlacesClient:
    """Async client for the Google Places API (New)."""

    def __init__(
        self,
        api_key: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise InvalidConfiguration("GOOGLE_PLACES_API_KEY is not set.")
        self._client = httpx.AsyncClient(
            base_url=BASE_URL,
            headers={
                "X-Goog-Api-Key": api_key,
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings=None, **kwargs: Any) -> PlacesClient:
        """Build a client from application settings (defaults to the global ones)."""
        if settings is None:
            from places_client.config import settings

        return cls(
            api_key=settings.GOOGLE_PLACES_API_KEY,
            timeout=settings.PLACES_HTTP_TIMEOUT_SECONDS,
            **kwargs,
        )

    normalize_fields = staticmethod(normalize_fields)

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def nearby_search(
        self,
        location: str,
        radius: int,
        params: Mapping[str, Any] | None = None,
    ) -> list[dict]:
        """Nearby Search: find places within ``radius`` meters of ``"lat,lng"``.

        ``params`` must carry a ``fields`` entry; every other entry is sent
        verbatim in the request body next to the computed location restriction.
        """
        latitude, longitude = _parse_location(location)

        params = dict(params or {})
        if "fields" not in params:
            raise InvalidArgument("Nearby search params must include 'fields'.")
        fields = normalize_fields(params.pop("fields"))

        body = {
            **params,
            "locationRestriction": {
                "circle": {
                    "center": {
                        "latitude": latitude,
                        "longitude": longitude,
                    },
                    "radius": radius,
                }
            },
        }

        logger.debug(
            f"Nearby search: lat={latitude}, lng={longitude}, "
            f"radius={radius}, fields={fields}"
        )
        envelope = await self._request(
            "POST",
            "/places:searchNearby",
            params={"fields": fields},
            json=body,
        )
        return self._unwrap(envelope, "places")

    async def get_place(self, place_id: str, fields: FieldSpec = None) -> dict:
        """Place Details: get the full place object for ``place_id``."""
        if not place_id:
            raise InvalidArgument("place_id must not be empty.")

        fields = normalize_fields(fields, strip_prefix=True)

        logger.debug(f"Place details: place_id={place_id!r}, fields={fields}")
        return await self._request(
            "GET",
            f"/places/{place_id}",
            params={"fields": fields},
        )

    async def search_text(self, query: str, fields: FieldSpec = None) -> list[dict]:
        """Text Search: find places matching a free-text query."""
        fields = normalize_fields(fields)

        logger.debug(f"Text search: query={query!r}, fields={fields}")
        envelope = await self._request(
            "POST",
            "/places:searchText",
            params={"fields": fields},
            json={"textQuery": query},
        )
        return self._unwrap(envelope, "places")

    async def autocomplete(
        self,
        input: str,
        params: Mapping[str, Any] | None = None,
    ) -> list[dict]:
        """Autocomplete: place and query predictions for partial user input."""
        body = {**(params or {}), "input": input}

        logger.debug(f"Autocomplete: input={input!r}")
        envelope = await self._request("POST", "/places:autocomplete", json=body)
        return self._unwrap(envelope, "suggestions")

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        params: dict | None = None,
        json: dict | None = None,
    ) -> Any:
        try:
            response = await self._client.request(method, path, params=params, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportFailure(
                f"Google Places API error: {e.response.status_code} - {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise TransportFailure(f"Google Places API request failed: {e}") from e

        if not response.content.strip():
            body = None
        else:
            try:
                body = response.json()
            except ValueError as e:
                raise TransportFailure(
                    f"Google Places API returned malformed JSON: {e}",
                    status_code=response.status_code,
                ) from e

        if not body:
            raise EmptyResponse(f"Empty response from Google Places API ({path}).")
        return body

    @staticmethod
    def _unwrap(envelope: Any, key: str) -> list[dict]:
        if not isinstance(envelope, dict) or envelope.get(key) is None:
            raise EmptyResponse(f"Google Places API response has no {key!r} entry.")
        return envelope[key]

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> PlacesClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
