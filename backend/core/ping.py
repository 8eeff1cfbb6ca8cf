"""Ping utility used by the API health-check."""

from backend.core.config import Settings
from backend.schemas.ping import PingResponse


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def build_ping_response(settings: Settings) -> PingResponse:
    """Health-check payload tagged with the running environment."""
    return PingResponse(message=get_ping_message(), environment=settings.app_env)
