import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus_coffee.core.config import settings
from campus_coffee.core.logging_config import setup_logging
from campus_coffee.db.base import Base
from campus_coffee.db.session import async_engine

from campus_coffee.api.routers.health import router as health_router
from campus_coffee.api.routers.pos import router as pos_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    debug=settings.DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def on_startup():
    setup_logging()
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("%s started (env=%s, osm_source=%s)", settings.APP_NAME, settings.ENV, settings.OSM_SOURCE)

# Подключаем роутеры
app.include_router(health_router, tags=["health"])
app.include_router(pos_router, tags=["pos"])
