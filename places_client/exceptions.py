"""Errors raised by the Google Places client."""


class PlacesClientError(Exception):
    """Base class for all places-client errors."""


class InvalidConfiguration(PlacesClientError, ValueError):
    """The client cannot be built from the given configuration (e.g. no API key)."""


class InvalidArgument(PlacesClientError, ValueError):
    """A caller-supplied argument failed a structural precondition."""


class TransportFailure(PlacesClientError):
    """The HTTP exchange failed: connection error, non-2xx status or undecodable JSON."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class EmptyResponse(PlacesClientError):
    """The API answered successfully but the body (or its envelope) was empty."""
