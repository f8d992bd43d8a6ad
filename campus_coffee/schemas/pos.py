from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# Верхняя граница INTEGER (int4) в БД
POSTAL_CODE_MAX = 2**31 - 1


class PosType(str, Enum):
    CAFE = "CAFE"
    BAKERY = "BAKERY"
    VENDING_MACHINE = "VENDING_MACHINE"
    CAFETERIA = "CAFETERIA"


class CampusType(str, Enum):
    ALTSTADT = "ALTSTADT"
    BERGHEIM = "BERGHEIM"
    INF = "INF"


class PosBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Уникальное название точки продаж")
    description: str = Field(..., max_length=1024, description="Описание (кухня, тип заведения)")
    type: PosType = Field(..., description="Тип точки: кафе, пекарня, автомат, столовая")
    campus: CampusType = Field(..., description="Кампус, к которому относится точка")
    street: str = Field(..., min_length=1, max_length=255, description="Улица")
    house_number: str = Field(..., min_length=1, max_length=32, description="Номер дома")
    postal_code: int = Field(..., ge=0, le=POSTAL_CODE_MAX, description="Почтовый индекс")
    city: str = Field(..., min_length=1, max_length=255, description="Город")


class PosDto(PosBase):
    """
    Транспортное представление POS: используется и во входящих запросах, и в ответах.
    id отсутствует у ещё не сохранённой точки; временные метки ставит БД.
    """
    id: Optional[int] = Field(None, description="ID точки продаж (назначается БД)")
    created_at: Optional[datetime] = Field(None, description="Время создания записи")
    updated_at: Optional[datetime] = Field(None, description="Время последнего изменения")

    model_config = {
        "from_attributes": True,
    }

