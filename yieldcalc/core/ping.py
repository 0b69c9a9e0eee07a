"""Health-check payload for the API."""

from typing import Dict

from yieldcalc import __version__

SERVICE_NAME = "yieldcalc"


def get_ping_message() -> str:
    return "pong"


def get_service_info() -> Dict[str, str]:
    """Name and version reported alongside the ping message."""
    return {"service": SERVICE_NAME, "version": __version__}
