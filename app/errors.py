"""Failure kinds raised while serving a weather request.

Each kind carries the HTTP status it is reported with. Messages are safe to
return to callers; upstream bodies and credentials only go to the log.
"""

from typing import Optional


class WeatherServiceError(Exception):
    """Base class for failures that end a weather request."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(WeatherServiceError):
    """The caller supplied no usable station id."""

    status_code = 400

    def __init__(self, message: str = "station_id is required"):
        super().__init__(message)


class UpstreamUnreachable(WeatherServiceError):
    """The provider could not be reached at all (connect, DNS, TLS, timeout)."""

    status_code = 502

    def __init__(self, message: str = "Weather provider is unreachable"):
        super().__init__(message)


class UpstreamError(WeatherServiceError):
    """The provider answered with a non-2xx status."""

    status_code = 502

    def __init__(self, upstream_status: int):
        self.upstream_status = upstream_status
        super().__init__(f"Weather provider returned HTTP {upstream_status}")


class NoObservationData(WeatherServiceError):
    """The provider has no current reading for the station."""

    status_code = 404

    def __init__(self, station_id: Optional[str] = None):
        self.station_id = station_id
        if station_id:
            message = f"No current observation available for station {station_id}"
        else:
            message = "No current observation available"
        super().__init__(message)


class MalformedUpstreamPayload(WeatherServiceError):
    """The provider answered 2xx with a body that is not a PWS envelope."""

    status_code = 502

    def __init__(self, message: str = "Weather provider returned an unexpected response format"):
        super().__init__(message)
