from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from city_explorer.core.errors import handle_error
from city_explorer.db.session import get_db
from city_explorer.db.store import Store
from city_explorer.services.lookup import get_location

router = APIRouter(prefix="/location", tags=["location"])


@router.get("")
async def location(
    data: Optional[str] = Query(None, description="Free-text address"),
    db: AsyncSession = Depends(get_db),
):
    try:
        lookup = await get_location(Store(db), data)
    except Exception as exc:
        raise handle_error(exc) from exc
    return lookup.payload
