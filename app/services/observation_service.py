"""Turns a provider reply into the service's normalized current conditions."""

import logging
from typing import Optional

from pydantic import ValidationError

from ..errors import InvalidInput, UpstreamError, NoObservationData, MalformedUpstreamPayload
from ..models import PwsEnvelope, PwsObservation, WeatherResponse
from .pws_client import PwsClient, UpstreamReply


logger = logging.getLogger(__name__)

# Plain-text bodies the provider sends instead of JSON when a station has no reading
NO_DATA_SENTINELS = frozenset({"data expired", "no data"})

BODY_EXCERPT_CHARS = 200


def _excerpt(body: str, secret: Optional[str] = None) -> str:
    if secret:
        body = body.replace(secret, "***")
    if len(body) <= BODY_EXCERPT_CHARS:
        return body
    return body[:BODY_EXCERPT_CHARS] + "..."


def classify_reply(reply: UpstreamReply, station_id: str, secret: Optional[str] = None) -> str:
    """
    Decide whether a provider reply carries a payload worth parsing.

    Body excerpts are logged with any occurrence of secret masked.

    Returns:
        The body text, for a 2xx reply with real content

    Raises:
        UpstreamError: If the status is not 2xx
        NoObservationData: If the body is empty or a no-data sentinel
    """
    if not 200 <= reply.status_code < 300:
        logger.warning(
            f"Provider returned HTTP {reply.status_code} for {station_id}: {_excerpt(reply.body, secret)!r}"
        )
        raise UpstreamError(reply.status_code)

    normalized = " ".join(reply.body.split()).lower()
    if not normalized or normalized in NO_DATA_SENTINELS:
        logger.info(f"No current reading for {station_id} (body: {_excerpt(reply.body.strip(), secret)!r})")
        raise NoObservationData(station_id)

    return reply.body


def parse_payload(body: str, station_id: str, secret: Optional[str] = None) -> PwsObservation:
    """Decode the observations envelope and keep only its first record."""
    try:
        envelope = PwsEnvelope.model_validate_json(body)
    except ValidationError as e:
        logger.error(
            f"Unparseable observation payload for {station_id}: "
            f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}; body: {_excerpt(body, secret)!r}"
        )
        raise MalformedUpstreamPayload() from e

    if not envelope.observations:
        logger.info(f"Empty observation list for {station_id}")
        raise NoObservationData(station_id)

    return envelope.observations[0]


def map_observation(observation: PwsObservation) -> WeatherResponse:
    """Project an upstream record onto the normalized schema."""
    imperial = observation.imperial
    return WeatherResponse(
        station_id=observation.station_id,
        observed_at=observation.obs_time_local,
        temperature_f=imperial.temp,
        humidity_pct=imperial.humidity,
        wind_mph=imperial.wind_speed,
        wind_gust_mph=imperial.wind_gust,
        wind_dir_deg=imperial.wind_dir,
        pressure_in=imperial.pressure,
        precip_in_hr=imperial.precip_rate,
        neighborhood=observation.neighborhood,
    )


class ObservationService:
    """Fetches and normalizes the current observation for one station."""

    def __init__(self, client: PwsClient):
        self.client = client

    async def get_current_conditions(self, station_id: Optional[str]) -> WeatherResponse:
        """
        Run one request through fetch, classification, parsing and mapping.

        Args:
            station_id: Station id as supplied by the caller, untrimmed

        Returns:
            WeatherResponse for the station's most recent observation

        Raises:
            InvalidInput: If the station id is missing or blank
            UpstreamUnreachable: If the provider could not be reached
            UpstreamError: If the provider answered with a non-2xx status
            NoObservationData: If the station has no current reading
            MalformedUpstreamPayload: If the provider's body could not be decoded
        """
        station_id = (station_id or "").strip()
        if not station_id:
            logger.warning("Rejected weather request without a station_id")
            raise InvalidInput()

        reply = await self.client.fetch_current(station_id)
        body = classify_reply(reply, station_id, secret=self.client.api_key)
        observation = parse_payload(body, station_id, secret=self.client.api_key)
        weather = map_observation(observation)

        logger.info(f"Current conditions for {station_id} observed at {weather.observed_at}")
        return weather
