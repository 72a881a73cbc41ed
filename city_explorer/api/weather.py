from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from city_explorer.api.params import query_object
from city_explorer.core.errors import handle_error
from city_explorer.db.session import get_db
from city_explorer.db.store import Store
from city_explorer.schemas.query import LocationRef
from city_explorer.services.lookup import get_weather

router = APIRouter(prefix="/weather", tags=["weather"])


@router.get("")
async def weather(request: Request, db: AsyncSession = Depends(get_db)):
    try:
        ref = LocationRef.model_validate(query_object(request))
        lookup = await get_weather(Store(db), ref)
    except Exception as exc:
        raise handle_error(exc) from exc
    return lookup.payload
