"""Formatting helpers for Google Places API responses."""

from places_client.schemas.places import (
    AutocompleteResponse,
    Location,
    Place,
    PlaceSearchResponse,
    Suggestion,
)


def format_place(place: dict) -> Place:
    """Map a raw place object onto the Place model."""
    location = place.get("location", {})
    hours = place.get("regularOpeningHours", {})

    return Place(
        name=place.get("displayName", {}).get("text", "Unknown"),
        address=place.get("formattedAddress"),
        location=Location(
            latitude=location.get("latitude"),
            longitude=location.get("longitude"),
        ),
        rating=place.get("rating"),
        review_count=place.get("userRatingCount"),
        phone=place.get("nationalPhoneNumber"),
        website=place.get("websiteUri"),
        price_level=place.get("priceLevel"),
        types=place.get("types", []),
        summary=place.get("editorialSummary", {}).get("text"),
        opening_hours=hours.get("weekdayDescriptions", []),
        place_id=place.get("id"),
    )


def format_places(places: list[dict]) -> PlaceSearchResponse:
    """Wrap a list of raw places into a PlaceSearchResponse."""
    formatted = [format_place(place) for place in places]
    return PlaceSearchResponse(count=len(formatted), places=formatted)


def format_suggestion(suggestion: dict) -> Suggestion:
    """Map one autocomplete suggestion (place or query prediction)."""
    if "placePrediction" in suggestion:
        kind, prediction = "place", suggestion["placePrediction"]
    else:
        kind, prediction = "query", suggestion.get("queryPrediction", {})

    structured = prediction.get("structuredFormat", {})

    return Suggestion(
        kind=kind,
        text=prediction.get("text", {}).get("text", ""),
        main_text=structured.get("mainText", {}).get("text"),
        secondary_text=structured.get("secondaryText", {}).get("text"),
        place_id=prediction.get("placeId"),
        types=prediction.get("types", []),
    )


def format_suggestions(suggestions: list[dict]) -> AutocompleteResponse:
    """Wrap a list of raw suggestions into an AutocompleteResponse."""
    formatted = [format_suggestion(s) for s in suggestions]
    return AutocompleteResponse(count=len(formatted), suggestions=formatted)
