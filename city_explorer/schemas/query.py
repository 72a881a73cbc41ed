from typing import Optional

from pydantic import BaseModel, ConfigDict


class LocationRef(BaseModel):
    """The location object the front end echoes back on /weather and /events."""

    model_config = ConfigDict(extra="ignore")

    id: int
    search_query: Optional[str] = None
    formatted_query: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
