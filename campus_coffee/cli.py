import argparse
import asyncio
import sys

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from campus_coffee.core.config import settings
from campus_coffee.db.base import Base
from campus_coffee.db.models.pos import Pos
from campus_coffee.db.session import async_engine
from campus_coffee.exceptions import AppException
from campus_coffee.services import pos as pos_service
from campus_coffee.services.osm import OsmDataService, RegistryOsmDataService, build_osm_data_service


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="campus-coffee",
        description="Register campus cafés from OpenStreetMap nodes",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    imp = sub.add_parser("import", help="Import a POS from an OSM node id")
    imp.add_argument("node_id", type=int, help="OpenStreetMap node id (e.g. 5589879349)")

    sub.add_parser("list", help="List all registered POS")
    sub.add_parser("nodes", help="List predefined OSM nodes available in the registry")
    return ap


def format_pos(pos: Pos) -> str:
    return (
        f"[{pos.id}] {pos.name}\n"
        f"    {pos.street} {pos.house_number}, {pos.postal_code} {pos.city}\n"
        f"    {pos.description} | {pos.type.value} | {pos.campus.value}"
    )


def list_registry_nodes(registry: RegistryOsmDataService) -> None:
    for node_id, node in sorted(registry.get_all_nodes().items()):
        tags = node.tags
        print(f"[{node_id}] {node.name}")
        print(f"    {tags.get('addr:street')} {tags.get('addr:housenumber')}, "
              f"{tags.get('addr:postcode')} {tags.get('addr:city')}")


async def _run(args, engine: AsyncEngine, osm: OsmDataService) -> int:
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with AsyncSession(engine, expire_on_commit=False) as db:
            if args.command == "import":
                pos = await pos_service.import_from_osm_node(db, osm, args.node_id)
                print("Imported:")
                print(format_pos(pos))
            elif args.command == "list":
                items = await pos_service.get_all(db)
                if not items:
                    print("No POS registered yet.")
                for pos in items:
                    print(format_pos(pos))
    finally:
        await engine.dispose()
    return 0


def run_cli(args, engine: AsyncEngine | None = None, osm: OsmDataService | None = None) -> int:
    if args.command == "nodes":
        list_registry_nodes(osm if isinstance(osm, RegistryOsmDataService) else RegistryOsmDataService())
        return 0

    osm = osm or build_osm_data_service(settings)
    try:
        return asyncio.run(_run(args, engine or async_engine, osm))
    except AppException as e:
        print(f"[cli] Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n[cli] Interrupted.")
        return 130  # 128 + SIGINT


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return run_cli(args)


if __name__ == "__main__":
    sys.exit(main())
