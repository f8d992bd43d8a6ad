import logging

from sqlalchemy.ext.asyncio import AsyncSession

from campus_coffee.db.models.pos import Pos
from campus_coffee.exceptions import DuplicatePosNameError
from campus_coffee.schemas.pos import PosDto
from campus_coffee.services import pos_data
from campus_coffee.services.osm import OsmDataService
from campus_coffee.services.osm_mapping import convert_osm_node_to_pos

logger = logging.getLogger(__name__)


async def clear(db: AsyncSession) -> None:
    logger.warning("Clearing all POS data")
    await pos_data.clear(db)


async def get_all(db: AsyncSession) -> list[Pos]:
    logger.debug("Retrieving all POS")
    return await pos_data.get_all(db)


async def get_by_id(db: AsyncSession, pos_id: int) -> Pos:
    logger.debug("Retrieving POS with ID: %s", pos_id)
    return await pos_data.get_by_id(db, pos_id)


async def upsert(db: AsyncSession, pos: PosDto) -> Pos:
    """
    Без id — создание; с id — обновление, при этом точка обязана уже существовать
    (иначе PosNotFoundError). Дубликат имени -> DuplicatePosNameError.
    """
    if pos.id is None:
        logger.info("Creating new POS: %s", pos.name)
    else:
        logger.info("Updating POS with ID: %s", pos.id)
        await pos_data.get_by_id(db, pos.id)
    try:
        saved = await pos_data.upsert(db, pos, pos_id=pos.id)
    except DuplicatePosNameError as e:
        logger.error("Error upserting POS '%s': %s", pos.name, e)
        raise
    logger.info("Successfully upserted POS with ID: %s", saved.id)
    return saved


async def import_from_osm_node(db: AsyncSession, osm: OsmDataService, node_id: int) -> Pos:
    """
    Импорт точки из OSM: получить узел, сконвертировать, сохранить.
    Сохранение происходит, только если первые два шага прошли успешно.
    """
    logger.info("Importing POS from OpenStreetMap node %s...", node_id)
    node = await osm.fetch_node(node_id)
    saved = await upsert(db, convert_osm_node_to_pos(node))
    logger.info("Successfully imported POS '%s' from OSM node %s", saved.name, node_id)
    return saved
