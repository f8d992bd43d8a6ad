import pytest

from campus_coffee.services.osm import OsmNode, RegistryOsmDataService
from campus_coffee.services.osm.registry import PREDEFINED_NODES


async def test_crud_pos(client, any_pos_json):
    # CREATE
    resp = await client.post("/api/pos", json=any_pos_json)
    assert resp.status_code == 201
    data = resp.json()
    pos_id = data["id"]
    assert resp.headers["location"].endswith(f"/api/pos/{pos_id}")
    assert data["name"] == any_pos_json["name"]
    assert data["type"] == "CAFE"
    assert data["created_at"] is not None
    # GET
    resp = await client.get(f"/api/pos/{pos_id}")
    assert resp.status_code == 200
    assert resp.json()["postal_code"] == 69117
    # LIST
    resp = await client.get("/api/pos")
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == [pos_id]
    # UPDATE
    body = {**any_pos_json, "id": pos_id, "name": "Schmelzpunkt (Updated)", "description": "Updated description"}
    resp = await client.put(f"/api/pos/{pos_id}", json=body)
    assert resp.status_code == 200
    assert resp.json()["name"] == "Schmelzpunkt (Updated)"
    # GET after update
    resp = await client.get(f"/api/pos/{pos_id}")
    assert resp.json()["description"] == "Updated description"


async def test_get_unknown_pos(client):
    resp = await client.get("/api/pos/4711")
    assert resp.status_code == 404


async def test_create_duplicate_name(client, any_pos_json):
    assert (await client.post("/api/pos", json=any_pos_json)).status_code == 201
    resp = await client.post("/api/pos", json=any_pos_json)
    assert resp.status_code == 409


async def test_create_with_unknown_id(client, any_pos_json):
    resp = await client.post("/api/pos", json={**any_pos_json, "id": 4711})
    assert resp.status_code == 404


async def test_update_id_mismatch(client, any_pos_json):
    created = (await client.post("/api/pos", json=any_pos_json)).json()
    resp = await client.put(f"/api/pos/{created['id']}", json={**any_pos_json, "id": created["id"] + 1})
    assert resp.status_code == 400


async def test_update_without_body_id(client, any_pos_json):
    created = (await client.post("/api/pos", json=any_pos_json)).json()
    resp = await client.put(f"/api/pos/{created['id']}", json=any_pos_json)
    assert resp.status_code == 400


async def test_update_unknown_pos(client, any_pos_json):
    resp = await client.put("/api/pos/4711", json={**any_pos_json, "id": 4711})
    assert resp.status_code == 404


async def test_invalid_enum_rejected(client, any_pos_json):
    resp = await client.post("/api/pos", json={**any_pos_json, "type": "BAR"})
    assert resp.status_code == 422


@pytest.mark.parametrize("field, value", [
    ("postal_code", 10**20),
    ("postal_code", -1),
    ("house_number", "1" * 33),
    ("name", "x" * 256),
    ("description", "d" * 1025),
])
async def test_out_of_range_fields_rejected(client, any_pos_json, field, value):
    resp = await client.post("/api/pos", json={**any_pos_json, field: value})
    assert resp.status_code == 422
    assert (await client.get("/api/pos")).json() == []


async def test_import_test_cafe(client):
    resp = await client.post("/api/pos/import/1")
    assert resp.status_code == 201
    data = resp.json()
    assert resp.headers["location"].endswith(f"/api/pos/{data['id']}")
    assert data["name"] == "Beispiel-Café"
    assert data["street"] == "Teststraße"
    assert data["house_number"] == "1"
    assert data["postal_code"] == 11111
    assert data["city"] == "Teststadt"
    assert data["campus"] == "ALTSTADT"

    resp = await client.get(f"/api/pos/{data['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Beispiel-Café"


async def test_import_unknown_node(client):
    resp = await client.post("/api/pos/import/9999999999")
    assert resp.status_code == 404


async def test_import_twice(client):
    assert (await client.post("/api/pos/import/5589879349")).status_code == 201
    resp = await client.post("/api/pos/import/5589879349")
    assert resp.status_code == 409


@pytest.fixture
def osm_registry():
    nameless = OsmNode(node_id=88, tags={"name": "Nameless corner", "addr:city": "Heidelberg"})
    oversized = OsmNode(node_id=89, tags={
        "name": "x" * 300,
        "addr:street": "Hauptstraße",
        "addr:housenumber": "1",
        "addr:postcode": "69117",
        "addr:city": "Heidelberg",
    })
    return RegistryOsmDataService({**PREDEFINED_NODES, 88: nameless, 89: oversized})


async def test_import_missing_fields(client):
    resp = await client.post("/api/pos/import/88")
    assert resp.status_code == 422
    assert "addr:street" in resp.json()["detail"]
    assert (await client.get("/api/pos")).json() == []


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"db_ok": True}


async def test_import_oversized_name(client):
    resp = await client.post("/api/pos/import/89")
    assert resp.status_code == 422
    assert "name" in resp.json()["detail"]
    assert (await client.get("/api/pos")).json() == []
