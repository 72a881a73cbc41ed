import logging
from typing import Any

import httpx

from city_explorer.core.config import settings
from city_explorer.core.errors import FetchError

logger = logging.getLogger(__name__)

PROVIDER = "weather"


async def fetch_forecast(latitude: float, longitude: float) -> list[dict[str, Any]]:
    """Dark Sky style forecast → the provider's daily array, in order."""
    url = f"{settings.WEATHER_API_URL}/{settings.WEATHER_API_KEY}/{latitude},{longitude}"
    logger.info("Fetching forecast for %s,%s", latitude, longitude)
    try:
        async with httpx.AsyncClient() as client:
            resp = await client.get(url)
    except httpx.HTTPError as exc:
        raise FetchError(PROVIDER, str(exc)) from exc

    if resp.status_code != 200:
        raise FetchError(PROVIDER, f"HTTP {resp.status_code}")
    try:
        days = resp.json()["daily"]["data"]
    except (ValueError, KeyError, TypeError) as exc:
        raise FetchError(PROVIDER, "response has no daily forecast") from exc
    if not isinstance(days, list):
        raise FetchError(PROVIDER, "daily forecast is not a list")
    return days
