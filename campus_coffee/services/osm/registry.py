import logging

from campus_coffee.exceptions import OsmNodeNotFoundError
from campus_coffee.services.osm.base import OsmDataService, OsmNode

logger = logging.getLogger(__name__)

# Заранее известные кафе (id узла -> узел)
PREDEFINED_NODES: dict[int, OsmNode] = {
    5589879349: OsmNode(
        node_id=5589879349,
        latitude=49.412345,
        longitude=8.705678,
        tags={
            "name": "Rada Coffee & Rösterei",
            "amenity": "cafe",
            "cuisine": "coffee_shop",
            "addr:street": "Untere Straße",
            "addr:housenumber": "21",
            "addr:postcode": "69117",
            "addr:city": "Heidelberg",
        },
    ),
    # Тестовое кафе с простыми значениями
    1: OsmNode(
        node_id=1,
        latitude=49.0,
        longitude=8.0,
        tags={
            "name": "Beispiel-Café",
            "amenity": "cafe",
            "addr:street": "Teststraße",
            "addr:housenumber": "1",
            "addr:postcode": "11111",
            "addr:city": "Teststadt",
        },
    ),
}


class RegistryOsmDataService(OsmDataService):
    """Статический реестр узлов в памяти, без обращения к сети."""

    def __init__(self, nodes: dict[int, OsmNode] | None = None):
        self._nodes = dict(PREDEFINED_NODES if nodes is None else nodes)

    async def fetch_node(self, node_id: int) -> OsmNode:
        logger.info("Fetching OSM node %s from registry", node_id)
        node = self._nodes.get(node_id)
        if node is None:
            logger.warning("OSM node %s not found in registry", node_id)
            raise OsmNodeNotFoundError(node_id)
        logger.info("Found OSM node %s in registry: %s", node_id, node.name)
        return node

    def get_all_nodes(self) -> dict[int, OsmNode]:
        return dict(self._nodes)
