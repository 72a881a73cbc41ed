import logging
from typing import Any

import httpx

from city_explorer.core.config import settings
from city_explorer.core.errors import FetchError

logger = logging.getLogger(__name__)

PROVIDER = "geocode"


async def fetch_geocode(address: str) -> dict[str, Any]:
    """
    Google Geocoding API, one request per call.
    Returns the first result only; later matches are discarded.
    """
    logger.info("Geocoding %r", address)
    try:
        async with httpx.AsyncClient() as client:
            resp = await client.get(
                settings.GEOCODE_API_URL,
                params={"address": address, "key": settings.GEOCODE_API_KEY},
            )
    except httpx.HTTPError as exc:
        raise FetchError(PROVIDER, str(exc)) from exc

    if resp.status_code != 200:
        raise FetchError(PROVIDER, f"HTTP {resp.status_code}")
    try:
        results = resp.json()["results"]
        return results[0]
    except (ValueError, KeyError, IndexError, TypeError) as exc:
        raise FetchError(PROVIDER, "no usable result in response") from exc
