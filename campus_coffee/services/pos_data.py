from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from campus_coffee.db.models.pos import Pos
from campus_coffee.exceptions import DuplicatePosNameError, PosNotFoundError
from campus_coffee.schemas.pos import PosBase

# Поля, которые клиент может задавать; id и временные метки ставит БД
_WRITABLE_FIELDS = tuple(PosBase.model_fields.keys())


async def get_pos(db: AsyncSession, pos_id: int) -> Pos | None:
    result = await db.execute(select(Pos).where(Pos.id == pos_id))
    return result.scalars().first()


async def get_all(db: AsyncSession) -> list[Pos]:
    result = await db.execute(select(Pos).order_by(Pos.id))
    return list(result.scalars().all())


async def get_by_id(db: AsyncSession, pos_id: int) -> Pos:
    pos = await get_pos(db, pos_id)
    if not pos:
        raise PosNotFoundError(pos_id)
    return pos


async def _name_taken(db: AsyncSession, name: str, exclude_id: int | None = None) -> bool:
    stmt = select(Pos.id).where(Pos.name == name)
    if exclude_id is not None:
        stmt = stmt.where(Pos.id != exclude_id)
    result = await db.execute(stmt)
    return result.first() is not None


async def upsert(db: AsyncSession, data: PosBase, pos_id: int | None = None) -> Pos:
    """
    Создаёт запись (pos_id is None) или перезаписывает поля существующей.
    Нарушение уникальности имени -> DuplicatePosNameError, прочие IntegrityError пробрасываются как есть.
    """
    values = data.model_dump(include=set(_WRITABLE_FIELDS))
    if pos_id is None:
        pos = Pos(**values)
        db.add(pos)
    else:
        pos = await get_by_id(db, pos_id)
        for k, v in values.items():
            setattr(pos, k, v)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        if await _name_taken(db, data.name, exclude_id=pos_id):
            raise DuplicatePosNameError(data.name) from e
        raise
    await db.refresh(pos)
    return pos


async def clear(db: AsyncSession) -> None:
    await db.execute(delete(Pos))
    await db.commit()
