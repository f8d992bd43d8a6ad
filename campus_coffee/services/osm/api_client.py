import logging

import httpx

from campus_coffee.exceptions import OsmNodeNotFoundError
from campus_coffee.services.osm.base import OsmDataService, OsmNode
from campus_coffee.services.osm.parser import parse_osm_node_xml

logger = logging.getLogger(__name__)


class ApiOsmDataService(OsmDataService):
    """
    Получает узел из живого OSM XML API: GET {base_url}/node/{id}.
    Любой не-2xx ответ или сетевая ошибка -> OsmNodeNotFoundError (детали только в логе).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def node_url(self, node_id: int) -> str:
        return f"{self.base_url}/node/{node_id}"

    async def fetch_node(self, node_id: int) -> OsmNode:
        url = self.node_url(node_id)
        logger.info("Fetching OSM node %s from %s", node_id, url)
        headers = {"Accept": "application/xml", "User-Agent": "CampusCoffee/1.0"}
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                resp = await client.get(url, headers=headers)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("OSM API returned %s for node %s", e.response.status_code, node_id)
            raise OsmNodeNotFoundError(node_id) from e
        except httpx.HTTPError as e:
            logger.error("OSM API request for node %s failed: %s", node_id, e)
            raise OsmNodeNotFoundError(node_id) from e

        return parse_osm_node_xml(resp.content, node_id)
