import logging
from pathlib import Path

from campus_coffee.exceptions import OsmNodeNotFoundError
from campus_coffee.services.osm.base import OsmDataService, OsmNode
from campus_coffee.services.osm.parser import parse_osm_node_xml

logger = logging.getLogger(__name__)


class XmlFileOsmDataService(OsmDataService):
    """Читает узлы из файлов <xml_dir>/<node_id>.xml."""

    def __init__(self, xml_dir: Path | str):
        self.xml_dir = Path(xml_dir)

    async def fetch_node(self, node_id: int) -> OsmNode:
        path = self.xml_dir / f"{node_id}.xml"
        logger.debug("Reading OSM XML file %s", path)
        if not path.is_file():
            logger.error("OSM XML file not found for node %s", node_id)
            raise OsmNodeNotFoundError(node_id)
        try:
            content = path.read_bytes()
        except OSError as e:
            logger.error("Cannot read OSM XML file %s: %s", path, e)
            raise OsmNodeNotFoundError(node_id) from e

        node = parse_osm_node_xml(content, node_id)
        logger.info("Loaded OSM node %s from file: name=%s, address=%s", node_id, node.name, node.address)
        return node
