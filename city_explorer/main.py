import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from city_explorer import __version__
from city_explorer.api.events import router as events_router
from city_explorer.api.location import router as location_router
from city_explorer.api.weather import router as weather_router
from city_explorer.core.config import settings
from city_explorer.db.session import create_schema, engine

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_schema()
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))
    yield
    await engine.dispose()


app = FastAPI(
    title="City Explorer API",
    version=__version__,
    description="Location, weather and local events for a free-text place name.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(location_router)
app.include_router(weather_router)
app.include_router(events_router)


@app.get("/health", tags=["meta"])
async def health_check():
    return {"status": "ok", "version": app.version}


# Mounted last: "/" would otherwise shadow the API routes.
if settings.STATIC_DIR:
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
