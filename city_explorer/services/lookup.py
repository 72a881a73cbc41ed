"""
Cache-or-fetch for the three resources.

The store is checked first; rows found are served exactly as stored. On a
miss the provider is called, each item is built into a record, the records
are persisted and the freshly built records are served.

Hits and misses do not share a shape: a hit hands back stored rows (with
their `id` / `location_id` columns), a miss hands back records. Routes pass
either one straight through.
"""
from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Union

from city_explorer.db.store import ResourceKind, Store
from city_explorer.schemas.query import LocationRef
from city_explorer.schemas.records import (
    Event,
    Location,
    Weather,
    build_event,
    build_location,
    build_weather,
)
from city_explorer.services.events import fetch_events
from city_explorer.services.geocoding import fetch_geocode
from city_explorer.services.weather import fetch_forecast

logger = logging.getLogger(__name__)

Payload = Union[dict[str, Any], list[dict[str, Any]], Location, list[Weather], list[Event]]


@dataclass(frozen=True)
class Lookup:
    hit: bool
    payload: Payload


async def cache_or_fetch(
    store: Store,
    kind: ResourceKind,
    key: Any,
    on_miss: Callable[[], Awaitable[Payload]],
) -> Lookup:
    rows = await store.find(kind, key)
    if rows:
        logger.debug("[%s] HIT  %s (%d rows)", kind.value, key, len(rows))
        return Lookup(hit=True, payload=rows)

    logger.debug("[%s] MISS %s", kind.value, key)
    return Lookup(hit=False, payload=await on_miss())


# ── Resource flows ────────────────────────────────────────────────────────────

async def get_location(store: Store, search_query: str) -> Lookup:
    async def on_miss() -> Location:
        result = await fetch_geocode(search_query)
        return await store.save_location(build_location(search_query, result))

    lookup = await cache_or_fetch(store, ResourceKind.LOCATION, search_query, on_miss)
    if lookup.hit:
        # search_query is unique, so the first row is the only row
        return Lookup(hit=True, payload=lookup.payload[0])
    return lookup


async def get_weather(store: Store, ref: LocationRef) -> Lookup:
    async def on_miss() -> list[Weather]:
        days = await fetch_forecast(ref.latitude, ref.longitude)
        forecasts = [build_weather(day) for day in days]
        await store.save_weather(forecasts, ref.id)
        return forecasts

    return await cache_or_fetch(store, ResourceKind.WEATHER, ref.id, on_miss)


async def get_events(store: Store, ref: LocationRef) -> Lookup:
    async def on_miss() -> list[Event]:
        listings = await fetch_events(ref.formatted_query)
        events = [build_event(listing) for listing in listings]
        await store.save_events(events, ref.id)
        return events

    return await cache_or_fetch(store, ResourceKind.EVENTS, ref.id, on_miss)
