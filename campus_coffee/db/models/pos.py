from sqlalchemy import Column, Integer, String, DateTime, Enum, func
from campus_coffee.db.base import Base
from campus_coffee.schemas.pos import PosType, CampusType


class Pos(Base):
    __tablename__ = "pos"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False, comment="Уникальное название точки продаж")
    description = Column(String(1024), nullable=False)
    type = Column(Enum(PosType, name="pos_type"), nullable=False)
    campus = Column(Enum(CampusType, name="campus_type"), nullable=False)
    street = Column(String(255), nullable=False)
    house_number = Column(String(32), nullable=False)
    postal_code = Column(Integer, nullable=False)
    city = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
