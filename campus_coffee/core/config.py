from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field


# Каталог с XML-файлами OSM-узлов, поставляемыми вместе с пакетом
PACKAGED_OSM_XML_DIR = Path(__file__).resolve().parent.parent / "data" / "osm"


class Settings(BaseSettings):
    # Окружение: production, development, testing
    ENV: str = Field(
        "production",
        description="Application environment",
    )
    DEBUG: bool = Field(
        False,
        description="Turn on debug mode (reload, detailed errors)",
    )

    # Подключение к БД (в проде: postgresql+asyncpg://...)
    DATABASE_URL: str = Field(
        "sqlite+aiosqlite:///./campus_coffee.db",
        description="Async SQLAlchemy database URL",
    )

    # Общие параметры API
    API_PREFIX: str = Field(
        "/api",
        description="Base prefix for all API routes",
    )
    APP_NAME: str = Field(
        "CampusCoffee",
        description="Application name for docs/title",
    )

    # Логи
    LOG_LEVEL: str = Field(
        "INFO",
        description="Logging level",
    )
    LOG_DIR: str = Field(
        "logs",
        description="Directory for log files",
    )
    LOG_FILENAME: str = Field(
        "campus_coffee.log",
        description="Log file name",
    )

    # Источник данных OpenStreetMap
    OSM_SOURCE: Literal["registry", "api", "file"] = Field(
        "registry",
        description="Where OSM nodes are fetched from: in-memory registry, live OSM API or packaged XML files",
    )
    OSM_API_BASE_URL: str = Field(
        "https://www.openstreetmap.org/api/0.6",
        description="Base URL of the OSM XML API",
    )
    OSM_API_TIMEOUT: float = Field(
        10.0,
        description="Timeout (seconds) for OSM API requests",
    )
    OSM_XML_DIR: Path = Field(
        PACKAGED_OSM_XML_DIR,
        description="Directory with <node_id>.xml files for the file source",
    )

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


settings = Settings()
