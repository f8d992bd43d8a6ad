import os

# Настройки читаются при импорте приложения, поэтому окружение задаём заранее
os.environ.setdefault("ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("OSM_SOURCE", "registry")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from campus_coffee.api.deps import get_db_session, get_osm_data_service
from campus_coffee.db.base import Base
from campus_coffee.main import app
from campus_coffee.schemas.pos import CampusType, PosDto, PosType
from campus_coffee.services.osm import RegistryOsmDataService


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(engine):
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def osm_registry():
    return RegistryOsmDataService()


@pytest.fixture
async def client(engine, osm_registry):
    session_factory = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async def override_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_osm_data_service] = lambda: osm_registry
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def any_pos():
    return PosDto(
        name="Schmelzpunkt",
        description="Great waffles",
        type=PosType.CAFE,
        campus=CampusType.ALTSTADT,
        street="Hauptstraße",
        house_number="90",
        postal_code=69117,
        city="Heidelberg",
    )


@pytest.fixture
def any_pos_json(any_pos):
    return any_pos.model_dump(mode="json", exclude={"id", "created_at", "updated_at"})
