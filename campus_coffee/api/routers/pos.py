from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from campus_coffee.api.deps import get_db_session, get_osm_data_service
from campus_coffee.core.config import settings
from campus_coffee.db.models.pos import Pos
from campus_coffee.exceptions import (
    DuplicatePosNameError,
    OsmNodeMissingFieldsError,
    OsmNodeNotFoundError,
    PosNotFoundError,
)
from campus_coffee.schemas.pos import PosDto
from campus_coffee.services import pos as pos_service
from campus_coffee.services.osm import OsmDataService
from typing import List

router = APIRouter(prefix=f"{settings.API_PREFIX}/pos", tags=["POS"])


def _set_location(request: Request, response: Response, pos: Pos) -> None:
    response.headers["Location"] = str(request.url_for("get_pos", pos_id=pos.id))


@router.get(
    "",
    response_model=List[PosDto],
    summary="Получить список точек продаж",
    description="Возвращает все зарегистрированные точки продаж (кафе, пекарни, автоматы, столовые)."
)
async def list_pos(db: AsyncSession = Depends(get_db_session)):
    return await pos_service.get_all(db)

@router.get(
    "/{pos_id}",
    response_model=PosDto,
    summary="Получить точку продаж по ID",
    description="Возвращает одну точку продаж по её уникальному идентификатору."
)
async def get_pos(
    pos_id: int,
    db: AsyncSession = Depends(get_db_session)
):
    try:
        return await pos_service.get_by_id(db, pos_id)
    except PosNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post(
    "",
    response_model=PosDto,
    status_code=201,
    summary="Создать точку продаж",
    description="Создаёт новую точку продаж. Имя должно быть уникальным."
)
async def create_pos(
    data: PosDto,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session)
):
    try:
        pos = await pos_service.upsert(db, data)
    except PosNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DuplicatePosNameError as e:
        raise HTTPException(status_code=409, detail=str(e))
    _set_location(request, response, pos)
    return pos

@router.post(
    "/import/{osm_id}",
    response_model=PosDto,
    status_code=201,
    summary="Импортировать точку продаж из OpenStreetMap",
    description="Загружает OSM-узел, сопоставляет его теги полям точки продаж и сохраняет её."
)
async def import_pos_from_osm(
    osm_id: int,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
    osm: OsmDataService = Depends(get_osm_data_service),
):
    try:
        pos = await pos_service.import_from_osm_node(db, osm, osm_id)
    except OsmNodeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except OsmNodeMissingFieldsError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except DuplicatePosNameError as e:
        raise HTTPException(status_code=409, detail=str(e))
    _set_location(request, response, pos)
    return pos

@router.put(
    "/{pos_id}",
    response_model=PosDto,
    summary="Обновить точку продаж",
    description="Полностью обновляет точку продаж. ID в пути и в теле запроса должны совпадать."
)
async def update_pos(
    pos_id: int,
    data: PosDto,
    db: AsyncSession = Depends(get_db_session)
):
    if data.id != pos_id:
        raise HTTPException(status_code=400, detail="POS ID in path and body do not match.")
    try:
        return await pos_service.upsert(db, data)
    except PosNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DuplicatePosNameError as e:
        raise HTTPException(status_code=409, detail=str(e))
