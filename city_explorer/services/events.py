import logging
from typing import Any

import httpx

from city_explorer.core.config import settings
from city_explorer.core.errors import FetchError

logger = logging.getLogger(__name__)

PROVIDER = "events"


async def fetch_events(formatted_query: str) -> list[dict[str, Any]]:
    """Eventbrite event search near an address → the `events` array, in order."""
    logger.info("Searching events near %r", formatted_query)
    try:
        async with httpx.AsyncClient() as client:
            resp = await client.get(
                settings.EVENTS_API_URL,
                params={
                    "token": settings.EVENTBRITE_API_KEY,
                    "location.address": formatted_query,
                },
            )
    except httpx.HTTPError as exc:
        raise FetchError(PROVIDER, str(exc)) from exc

    if resp.status_code != 200:
        raise FetchError(PROVIDER, f"HTTP {resp.status_code}")
    try:
        events = resp.json()["events"]
    except (ValueError, KeyError, TypeError) as exc:
        raise FetchError(PROVIDER, "response has no events") from exc
    if not isinstance(events, list):
        raise FetchError(PROVIDER, "events is not a list")
    return events
