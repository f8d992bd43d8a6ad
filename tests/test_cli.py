import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from campus_coffee.cli import build_parser, run_cli
from campus_coffee.services.osm import RegistryOsmDataService


@pytest.fixture
def cli_engine(tmp_path):
    return create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")


def test_parser_import():
    args = build_parser().parse_args(["import", "5589879349"])
    assert args.command == "import"
    assert args.node_id == 5589879349


def test_parser_rejects_non_numeric_node_id():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["import", "rada"])


def test_import_and_list(cli_engine, capsys):
    parser = build_parser()
    registry = RegistryOsmDataService()

    assert run_cli(parser.parse_args(["import", "1"]), engine=cli_engine, osm=registry) == 0
    out = capsys.readouterr().out
    assert "Beispiel-Café" in out
    assert "Teststraße 1, 11111 Teststadt" in out

    assert run_cli(parser.parse_args(["list"]), engine=cli_engine, osm=registry) == 0
    out = capsys.readouterr().out
    assert "[1] Beispiel-Café" in out


def test_list_empty(cli_engine, capsys):
    assert run_cli(build_parser().parse_args(["list"]), engine=cli_engine, osm=RegistryOsmDataService()) == 0
    assert "No POS registered yet." in capsys.readouterr().out


def test_import_unknown_node(cli_engine, capsys):
    args = build_parser().parse_args(["import", "9999999999"])
    assert run_cli(args, engine=cli_engine, osm=RegistryOsmDataService()) == 1
    assert "[cli] Error" in capsys.readouterr().out


def test_nodes(capsys):
    assert run_cli(build_parser().parse_args(["nodes"])) == 0
    out = capsys.readouterr().out
    assert "[1] Beispiel-Café" in out
    assert "[5589879349] Rada Coffee & Rösterei" in out
    assert "Untere Straße 21, 69117 Heidelberg" in out
