import logging
from xml.etree.ElementTree import ParseError

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring

from campus_coffee.exceptions import OsmNodeNotFoundError
from campus_coffee.services.osm.base import OsmNode

logger = logging.getLogger(__name__)


def parse_osm_node_xml(content: bytes | str, node_id: int) -> OsmNode:
    """
    Разбирает OSM XML (<osm><node lat=".." lon=".."><tag k=".." v=".."/>...</node></osm>).

    Парсер не раскрывает DOCTYPE, сущности и внешние ссылки.
    Любая ошибка разбора (нет <node>, нет/битые lat/lon) -> OsmNodeNotFoundError.
    """
    try:
        root = fromstring(content, forbid_dtd=True, forbid_entities=True, forbid_external=True)
    except (ParseError, DefusedXmlException) as e:
        logger.error("Cannot parse OSM XML for node %s: %s", node_id, e)
        raise OsmNodeNotFoundError(node_id) from e

    node_el = root if root.tag == "node" else root.find("node")
    if node_el is None:
        logger.error("No <node> element in OSM XML for node %s", node_id)
        raise OsmNodeNotFoundError(node_id)

    lat_str = node_el.get("lat")
    lon_str = node_el.get("lon")
    if lat_str is None or lon_str is None:
        logger.error("Missing lat/lon attributes in OSM XML for node %s", node_id)
        raise OsmNodeNotFoundError(node_id)
    try:
        latitude = float(lat_str)
        longitude = float(lon_str)
    except ValueError as e:
        logger.error("Invalid lat/lon in OSM XML for node %s (lat=%s, lon=%s)", node_id, lat_str, lon_str)
        raise OsmNodeNotFoundError(node_id) from e

    tags = {}
    for tag_el in node_el.findall("tag"):
        key = tag_el.get("k")
        value = tag_el.get("v")
        if key is not None and value is not None:
            tags[key] = value

    logger.debug("Parsed OSM node %s: lat=%s, lon=%s, %d tags", node_id, latitude, longitude, len(tags))
    return OsmNode(node_id=node_id, latitude=latitude, longitude=longitude, tags=tags)
