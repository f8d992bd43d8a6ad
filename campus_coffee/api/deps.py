# campus_coffee/api/deps.py

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from campus_coffee.core.config import settings
from campus_coffee.db.session import AsyncSessionLocal
from campus_coffee.services.osm import OsmDataService, build_osm_data_service


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Зависимость FastAPI, возвращающая асинхронную сессию SQLAlchemy.
    Сессия автоматически открывается при входе в контекст и закрывается по выходу.
    """
    async with AsyncSessionLocal() as session:
        yield session


@lru_cache
def get_osm_data_service() -> OsmDataService:
    """
    Активный OSM-адаптер (выбирается настройкой OSM_SOURCE), один на процесс.
    """
    return build_osm_data_service(settings)
