# ABOUTME: Exception types raised by the weather service clients.
# ABOUTME: Callers catch WeatherServiceError to handle every provider failure in one place.


class WeatherServiceError(Exception):
    """Base class for failures talking to the weather providers."""


class NetworkError(WeatherServiceError):
    """A provider call did not complete with a successful status.

    The underlying httpx error is chained as ``__cause__``.
    """


class MalformedResponse(WeatherServiceError):
    """A provider response did not have the expected shape."""
