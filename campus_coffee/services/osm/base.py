from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class OsmNode:
    """
    Промежуточное (не сохраняемое) представление узла OpenStreetMap.
    Создаётся на каждый импорт и отбрасывается после конвертации в POS.
    """
    node_id: int
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    tags: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Теги только для чтения: узлы реестра разделяются между вызовами
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    @property
    def name(self) -> Optional[str]:
        return self.tags.get("name")

    @property
    def address(self) -> str:
        """Улица и город через запятую; отсутствующие части пропускаются."""
        return combine_address(self.tags.get("addr:street"), self.tags.get("addr:city"))


def combine_address(street: Optional[str], city: Optional[str]) -> str:
    return ", ".join(part for part in (street, city) if part)


class OsmDataService(ABC):
    """
    Порт получения OSM-узлов. Реализации взаимозаменяемы, активна одна (см. OSM_SOURCE).
    """

    @abstractmethod
    async def fetch_node(self, node_id: int) -> OsmNode:
        """
        Возвращает узел по его ID.
        Бросает OsmNodeNotFoundError, если узел отсутствует или не может быть получен.
        """
        raise NotImplementedError
