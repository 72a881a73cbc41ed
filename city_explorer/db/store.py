"""
Store adapter over one injected AsyncSession.

Lookups go through a fixed table of resource kinds, so no table or column
identifier ever comes from request data.
"""
from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import Table, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import Executable

from city_explorer.models.event import EventRow
from city_explorer.models.location import LocationRow
from city_explorer.models.weather import WeatherRow
from city_explorer.schemas.records import Event, Location, Weather

logger = logging.getLogger(__name__)


class ResourceKind(str, enum.Enum):
    LOCATION = "locations"
    WEATHER = "weathers"
    EVENTS = "events"


# kind → (table, key column)
_LOOKUPS: dict[ResourceKind, tuple[Table, str]] = {
    ResourceKind.LOCATION: (LocationRow.__table__, "search_query"),
    ResourceKind.WEATHER:  (WeatherRow.__table__,  "location_id"),
    ResourceKind.EVENTS:   (EventRow.__table__,    "location_id"),
}


class Store:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def query(self, statement: Executable) -> list[dict[str, Any]]:
        """Run a prepared statement and return rows as plain dicts."""
        result = await self.session.execute(statement)
        return [dict(row) for row in result.mappings()]

    async def find(self, kind: ResourceKind, key: Any) -> list[dict[str, Any]]:
        table, column = _LOOKUPS[kind]
        statement = (
            select(table)
            .where(table.c[column] == key)
            .order_by(table.c.id)
        )
        return await self.query(statement)

    # ── Writes ────────────────────────────────────────────────────────────────

    def _upsert(self, table: Table):
        dialect = self.session.bind.dialect.name
        if dialect == "postgresql":
            return pg_insert(table)
        if dialect == "sqlite":
            return sqlite_insert(table)
        raise ValueError(f"Unsupported database dialect: {dialect}")

    async def save_location(self, location: Location) -> Location:
        """
        Insert a location, ignoring a conflict on search_query.

        When the insert is a no-op another request stored the same query
        first; its id is read back so both callers answer with one row.
        """
        table = LocationRow.__table__
        statement = (
            self._upsert(table)
            .values(
                search_query=location.search_query,
                formatted_query=location.formatted_query,
                latitude=location.latitude,
                longitude=location.longitude,
            )
            .on_conflict_do_nothing(index_elements=["search_query"])
            .returning(table.c.id)
        )
        location_id = (await self.session.execute(statement)).scalar_one_or_none()

        if location_id is None:
            logger.info("Location %r already stored, reusing its id", location.search_query)
            location_id = (
                await self.session.execute(
                    select(table.c.id).where(table.c.search_query == location.search_query)
                )
            ).scalar_one()

        await self.session.commit()
        return location.model_copy(update={"id": location_id})

    async def save_weather(self, forecasts: Sequence[Weather], location_id: int) -> None:
        await self._append(
            WeatherRow.__table__,
            [{**w.model_dump(), "location_id": location_id} for w in forecasts],
        )

    async def save_events(self, events: Sequence[Event], location_id: int) -> None:
        await self._append(
            EventRow.__table__,
            [{**e.model_dump(), "location_id": location_id} for e in events],
        )

    async def _append(self, table: Table, rows: list[dict[str, Any]]) -> None:
        if not rows:
            return
        await self.session.execute(insert(table), rows)
        await self.session.commit()
        logger.debug("Stored %d %s rows", len(rows), table.name)
