"""
Places MCP Server.

Self-contained FastMCP instance exposing the Google Places client as tools.
Imported into the registry via tool_registry.py.
"""

from fastmcp import FastMCP

from places_client.clients.google_places import PlacesClient
from places_client.config import settings
from places_client.infrastructure.trace_decorator import traced
from places_client.schemas.places import AutocompleteResponse, Place, PlaceSearchResponse
from places_client.utils.formatters import format_place, format_places, format_suggestions

places_mcp = FastMCP("places")

# Everything format_place reads. Place Details gets the same list with the
# "places." prefix stripped by the client.
PLACE_FIELDS = [
    "places.id",
    "places.displayName",
    "places.formattedAddress",
    "places.location",
    "places.rating",
    "places.userRatingCount",
    "places.types",
    "places.regularOpeningHours",
    "places.websiteUri",
    "places.nationalPhoneNumber",
    "places.priceLevel",
    "places.editorialSummary",
]

READ_ONLY_ANNOTATIONS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": True,
}

# ---------------------------------------------------------------------------
# Lazy client singleton
# ---------------------------------------------------------------------------

_client: PlacesClient | None = None


def _get_client() -> PlacesClient:
    global _client
    if _client is None:
        _client = PlacesClient.from_settings(settings)
    return _client


async def close_client() -> None:
    """Close the shared client, if one was built. Called on server shutdown."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None


# ---------------------------------------------------------------------------
# MCP Tools
# ---------------------------------------------------------------------------


@places_mcp.tool(
    title="Search Places",
    description=(
        "Search for places worldwide using a free-text query. "
        "Returns names, addresses, ratings, opening hours, and contact details."
    ),
    tags={"places", "search", "google"},
    annotations={"title": "Search Places", **READ_ONLY_ANNOTATIONS},
)
@traced(span_name="mcp.tool.search_places")
async def search_places(query: str) -> PlaceSearchResponse:
    """Search for places using a text query.

    Args:
        query: What to search for (e.g. "best pizza in New York").
    """
    places = await _get_client().search_text(query, PLACE_FIELDS)
    return format_places(places)


@places_mcp.tool(
    title="Search Nearby Places",
    description=(
        "Find places within a radius of a geographic coordinate given as "
        "'latitude,longitude'. Supports filtering by place type such as "
        "restaurant, museum, or park."
    ),
    tags={"places", "nearby", "location", "google"},
    annotations={"title": "Search Nearby Places", **READ_ONLY_ANNOTATIONS},
)
@traced(span_name="mcp.tool.search_nearby_places")
async def search_nearby_places(
    location: str,
    radius_meters: int = 1000,
    place_type: str = "",
    max_results: int = 5,
) -> PlaceSearchResponse:
    """Search for places near a specific location.

    Args:
        location: Center point as "latitude,longitude" (e.g. "48.8566,2.3522").
        radius_meters: Search radius in meters (default 1000).
        place_type: Optional place type filter (e.g. "restaurant", "museum").
        max_results: Maximum number of results to return (1-20, default 5).
    """
    params: dict = {
        "fields": PLACE_FIELDS,
        "maxResultCount": min(max_results, 20),
    }
    if place_type:
        params["includedTypes"] = [place_type]

    places = await _get_client().nearby_search(location, radius_meters, params)
    return format_places(places)


@places_mcp.tool(
    title="Get Place Details",
    description=(
        "Retrieve detailed information about a specific place using its Google Place ID "
        "(as returned by the search tools)."
    ),
    tags={"places", "details", "google"},
    annotations={"title": "Get Place Details", **READ_ONLY_ANNOTATIONS},
)
@traced(span_name="mcp.tool.get_place_details")
async def get_place_details(place_id: str) -> Place:
    """Get detailed information about a specific place.

    Args:
        place_id: The Google Place ID (obtained from search results).
    """
    place = await _get_client().get_place(place_id, PLACE_FIELDS)
    return format_place(place)


@places_mcp.tool(
    title="Autocomplete Places",
    description=(
        "Suggest places and search queries for partially typed user input. "
        "Use the returned place IDs with Get Place Details."
    ),
    tags={"places", "autocomplete", "google"},
    annotations={"title": "Autocomplete Places", **READ_ONLY_ANNOTATIONS},
)
@traced(span_name="mcp.tool.autocomplete_places")
async def autocomplete_places(
    input: str,
    included_primary_types: list[str] | None = None,
) -> AutocompleteResponse:
    """Autocomplete partial place input.

    Args:
        input: Partial text typed by the user (e.g. "eiffel t").
        included_primary_types: Optional primary place types to restrict to (max 5).
    """
    params = {}
    if included_primary_types:
        params["includedPrimaryTypes"] = included_primary_types[:5]

    suggestions = await _get_client().autocomplete(input, params)
    return format_suggestions(suggestions)
