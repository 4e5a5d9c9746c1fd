"""Services package for the PWS weather service."""

from .pws_client import PwsClient, UpstreamReply
from .observation_service import ObservationService

__all__ = ["PwsClient", "UpstreamReply", "ObservationService"]
