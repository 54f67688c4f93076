import pytest
import sys, os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from mapbridge import create_app
from mapbridge.repos import script_repo

SCRIPT = (
    "GameManager = {\n"
    "    stages = {\n"
    "        -- BEGIN stage1\n"
    "    stage1 = \n"
    "        { 0 }\n"
    "    ,\n"
    "-- END stage1\n"
    "    },\n"
    "}\n"
)


@pytest.fixture
def script(tmp_path):
    p = tmp_path / "resources" / "component_types" / "GameManager.lua"
    p.parent.mkdir(parents=True)
    p.write_text(SCRIPT, encoding="utf-8")
    return p


@pytest.fixture
def app(tmp_path, script):
    (tmp_path / "game_engine_web.html").write_text("<h1>editor</h1>", encoding="utf-8")
    app = create_app({
        "TESTING": True,
        "ROOT_DIR": str(tmp_path),
        "SCRIPT_PATH": str(script),
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


def test_update_map_success(client, script):
    r = client.post("/update-map", json={"mapData": "{ { 1, 2 }, { 3, 4 } }"})
    assert r.status_code == 200
    assert r.get_json() == {"message": "Map updated successfully"}
    text = script.read_text(encoding="utf-8")
    assert "        { { 1, 2 }, { 3, 4 } }\n    ,\n-- END stage1" in text
    assert "{ 0 }" not in text


def test_update_map_same_payload_twice_is_stable(client, script):
    client.post("/update-map", json={"mapData": "{ 7 }"})
    first = script.read_bytes()
    r = client.post("/update-map", json={"mapData": "{ 7 }"})
    assert r.status_code == 200
    assert script.read_bytes() == first


def test_update_map_missing_field(client, script):
    r = client.post("/update-map", json={"map": "{}"})
    assert r.status_code == 400
    assert r.get_json() == {"message": "mapData required"}
    assert script.read_text(encoding="utf-8") == SCRIPT
    # el proceso sigue atendiendo
    r = client.post("/update-map", json={"mapData": "{ 1 }"})
    assert r.status_code == 200


def test_update_map_non_string_field(client, script):
    r = client.post("/update-map", json={"mapData": {"x": 1}})
    assert r.status_code == 400
    assert r.get_json()["message"] == "mapData must be a string"
    assert script.read_text(encoding="utf-8") == SCRIPT


def test_update_map_non_json_body(client):
    r = client.post("/update-map", data="mapData=1", content_type="text/plain")
    assert r.status_code == 400
    assert r.get_json()["message"] == "JSON object body required"


def test_update_map_json_array_body(client):
    r = client.post("/update-map", json=["{ 1 }"])
    assert r.status_code == 400


def test_update_map_read_failure(app, client, tmp_path):
    missing = tmp_path / "absent" / "GameManager.lua"
    app.config["SCRIPT_PATH"] = str(missing)
    r = client.post("/update-map", json={"mapData": "{}"})
    assert r.status_code == 500
    assert r.get_json() == {"message": "Failed to read existing GameManager script"}
    assert not missing.exists()


def test_update_map_tags_missing(client, script):
    body = b"GameManager = {\n-- BEGIN stage1\n{ 0 }\n}\n"
    script.write_bytes(body)
    r = client.post("/update-map", json={"mapData": "{ 1 }"})
    assert r.status_code == 500
    assert r.get_json() == {"message": "Tags not found in GameManager.lua"}
    assert script.read_bytes() == body


def test_update_map_start_tag_missing(client, script):
    body = b"GameManager = {\n{ 0 }\n-- END stage1\n}\n"
    script.write_bytes(body)
    r = client.post("/update-map", json={"mapData": "{ 1 }"})
    assert r.status_code == 500
    assert r.get_json() == {"message": "Tags not found in GameManager.lua"}
    assert script.read_bytes() == body


def test_update_map_write_failure(client, script, monkeypatch):
    def boom(src, dst):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(script_repo.os, "replace", boom)
    r = client.post("/update-map", json={"mapData": "{ 1 }"})
    assert r.status_code == 500
    assert r.get_json() == {"message": "Failed to update GameManager script"}
    assert script.read_text(encoding="utf-8") == SCRIPT


def test_update_map_custom_markers(app, client, script):
    app.config.update({"START_TAG": "--<map>", "END_TAG": "--</map>"})
    script.write_text("a\n--<map>\nold\n--</map>\nb\n", encoding="utf-8")
    r = client.post("/update-map", json={"mapData": "{ 5 }"})
    assert r.status_code == 200
    assert script.read_text(encoding="utf-8") == (
        "a\n--<map>\n    stage1 = \n        { 5 }\n    ,\n--</map>\nb\n"
    )


def test_update_map_wrong_method_is_json(client):
    r = client.put("/update-map", json={"mapData": "{}"})
    assert r.status_code == 405
    assert r.get_json() == {"message": "method not allowed"}
    assert "POST" in r.headers["Allow"]


def test_update_map_unencodable_payload(client, script):
    # JSON válido con un surrogate suelto: no se puede escribir como UTF-8
    r = client.post(
        "/update-map",
        data='{"mapData": "{ \\ud800 }"}',
        content_type="application/json",
    )
    assert r.status_code == 500
    assert r.get_json() == {"message": "Failed to update GameManager script"}
    assert script.read_text(encoding="utf-8") == SCRIPT
