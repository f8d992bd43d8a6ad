# Адаптеры OpenStreetMap: реестр, живой API и XML-файлы
from campus_coffee.core.config import Settings
from campus_coffee.services.osm.base import OsmDataService, OsmNode, combine_address
from campus_coffee.services.osm.api_client import ApiOsmDataService
from campus_coffee.services.osm.registry import RegistryOsmDataService
from campus_coffee.services.osm.xml_file import XmlFileOsmDataService


def build_osm_data_service(settings: Settings) -> OsmDataService:
    """Создаёт адаптер согласно настройке OSM_SOURCE."""
    if settings.OSM_SOURCE == "api":
        return ApiOsmDataService(settings.OSM_API_BASE_URL, timeout=settings.OSM_API_TIMEOUT)
    if settings.OSM_SOURCE == "file":
        return XmlFileOsmDataService(settings.OSM_XML_DIR)
    return RegistryOsmDataService()
