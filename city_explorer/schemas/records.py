"""
Normalised records built from provider payloads.

Each builder maps one provider JSON item to one immutable record: field
renames and date formatting only. A missing field raises straight out of
the builder and is reported by the route's error handler.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

# "Mon Oct 19 2026": calendar date, no time of day.
DATE_FORMAT = "%a %b %d %Y"


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    search_query: str
    formatted_query: str
    latitude: float
    longitude: float
    id: Optional[int] = None


class Weather(BaseModel):
    model_config = ConfigDict(frozen=True)

    forecast: str
    time: str


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    link: str
    name: str
    event_date: str
    summary: Optional[str] = None


def format_date(moment: datetime) -> str:
    return moment.strftime(DATE_FORMAT)


def build_location(search_query: str, result: dict[str, Any]) -> Location:
    """Google geocode result → Location (no id until persisted)."""
    coords = result["geometry"]["location"]
    return Location(
        search_query=search_query,
        formatted_query=result["formatted_address"],
        latitude=coords["lat"],
        longitude=coords["lng"],
    )


def build_weather(day: dict[str, Any]) -> Weather:
    """One entry of the provider's daily array; `time` is epoch seconds."""
    moment = datetime.fromtimestamp(day["time"], tz=timezone.utc)
    return Weather(forecast=day["summary"], time=format_date(moment))


def build_event(event: dict[str, Any]) -> Event:
    # start.local is the venue's wall-clock time, e.g. 2026-10-19T19:00:00
    starts = datetime.fromisoformat(event["start"]["local"])
    return Event(
        link=event["url"],
        name=event["name"]["text"],
        event_date=format_date(starts),
        summary=event.get("summary"),
    )
