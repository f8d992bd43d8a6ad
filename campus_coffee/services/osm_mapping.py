import logging
import re
from typing import Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from campus_coffee.exceptions import OsmNodeMissingFieldsError
from campus_coffee.schemas.pos import POSTAL_CODE_MAX, CampusType, PosDto, PosType
from campus_coffee.services.osm.base import OsmNode

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Point of Sale"

# Только ASCII-цифры с необязательным знаком: без "_", пробелов и прочего
_POSTCODE_RE = re.compile(r"[+-]?[0-9]+")

# Поле POS -> тег OSM, из которого оно берётся
_FIELD_TAGS = {
    "name": "name",
    "street": "addr:street",
    "house_number": "addr:housenumber",
    "postal_code": "addr:postcode",
    "city": "addr:city",
}


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _require_tag(node: OsmNode, key: str) -> str:
    value = node.tags.get(key)
    if _is_blank(value):
        logger.error("OSM node %s is missing required '%s' tag", node.node_id, key)
        raise OsmNodeMissingFieldsError(node.node_id, key)
    return value.strip()


def format_tag_value(value: str) -> str:
    """'coffee_shop' -> 'Coffee Shop'"""
    words = value.replace("_", " ").lower().split(" ")
    # хвостовые пустые слова отбрасываются ("coffee_" -> "Coffee")
    while words and not words[-1]:
        words.pop()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def build_description(tags: Mapping[str, str]) -> str:
    cuisine = tags.get("cuisine")
    amenity = tags.get("amenity")
    name = tags.get("name")

    if not _is_blank(cuisine):
        return format_tag_value(cuisine)
    if not _is_blank(amenity):
        return format_tag_value(amenity)
    if not _is_blank(name):
        return name
    return DEFAULT_DESCRIPTION


def map_pos_type(tags: Mapping[str, str]) -> PosType:
    cuisine = tags.get("cuisine")
    amenity = tags.get("amenity")

    # Сначала кухня (подстроки), затем amenity (точное совпадение)
    if cuisine is not None:
        cuisine_lower = cuisine.lower()
        if "coffee" in cuisine_lower:
            return PosType.CAFE
        if "bakery" in cuisine_lower or "baker" in cuisine_lower:
            return PosType.BAKERY

    if amenity is not None:
        amenity_lower = amenity.lower()
        if amenity_lower in ("cafe", "coffee_shop"):
            return PosType.CAFE
        if amenity_lower == "vending_machine":
            return PosType.VENDING_MACHINE
        if amenity_lower in ("cafeteria", "restaurant"):
            return PosType.CAFETERIA
        if amenity_lower == "bakery":
            return PosType.BAKERY

    logger.debug("No matching PosType for cuisine=%r, amenity=%r, defaulting to CAFE", cuisine, amenity)
    return PosType.CAFE


def map_campus_type(city: str, tags: Mapping[str, str]) -> CampusType:
    # TODO: определять кампус по координатам узла, когда появятся границы кампусов
    if "heidelberg" not in city.lower():
        logger.debug("Could not determine campus for city '%s', defaulting to ALTSTADT", city)
    return CampusType.ALTSTADT


def _parse_postal_code(node: OsmNode, value: str) -> int:
    if _POSTCODE_RE.fullmatch(value):
        postal_code = int(value)
        if -POSTAL_CODE_MAX - 1 <= postal_code <= POSTAL_CODE_MAX:
            return postal_code
    logger.error("OSM node %s has invalid postal code '%s'", node.node_id, value)
    raise OsmNodeMissingFieldsError(node.node_id, "addr:postcode")


def convert_osm_node_to_pos(node: OsmNode) -> PosDto:
    """
    Конвертирует OSM-узел в новую (несохранённую) точку продаж.

    Обязательные теги: name, addr:street, addr:housenumber, addr:postcode
    (целое число), addr:city. Отсутствие любого -> OsmNodeMissingFieldsError.
    """
    logger.debug("Converting OSM node %s to POS", node.node_id)

    name = _require_tag(node, "name")
    street = _require_tag(node, "addr:street")
    house_number = _require_tag(node, "addr:housenumber")
    postal_code_str = _require_tag(node, "addr:postcode")
    postal_code = _parse_postal_code(node, postal_code_str)
    city = _require_tag(node, "addr:city")

    description = build_description(node.tags)
    pos_type = map_pos_type(node.tags)
    campus = map_campus_type(city, node.tags)

    logger.debug(
        "Mapped OSM node %s to POS: name='%s', type=%s, campus=%s",
        node.node_id, name, pos_type.value, campus.value,
    )
    try:
        return PosDto(
            name=name,
            description=description,
            type=pos_type,
            campus=campus,
            street=street,
            house_number=house_number,
            postal_code=postal_code,
            city=city,
        )
    except PydanticValidationError as e:
        field = str(e.errors()[0]["loc"][0])
        tag = _FIELD_TAGS.get(field, field)
        logger.error("OSM node %s has invalid '%s' value: %s", node.node_id, tag, e.errors()[0]["msg"])
        raise OsmNodeMissingFieldsError(node.node_id, tag) from e
