from __future__ import annotations

import json


def test_root_is_alive(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "API JSON is running"


def test_create_get_delete_scenario(client):
    resp = client.post("/teams", json={"name": "Reds", "country": "UK"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "name": "Reds", "country": "UK"}

    resp = client.get("/teams/1")
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "Reds", "country": "UK"}

    resp = client.delete("/teams/1")
    assert resp.status_code == 204
    assert resp.content == b""

    resp = client.get("/teams/1")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Team not found"}


def test_ids_follow_current_max(client, data_dir):
    (data_dir / "teams.json").write_text(
        json.dumps([{"id": 4, "name": "A", "country": "FR"}, {"id": 9, "name": "B", "country": "ES"}]),
        encoding="utf-8",
    )
    created = client.post("/teams", json={"name": "C", "country": "IT"}).json()
    assert created["id"] == 10

    assert client.delete("/teams/10").status_code == 204
    assert client.post("/teams", json={"name": "D", "country": "PT"}).json()["id"] == 10
    assert client.delete("/teams/4").status_code == 204
    assert client.post("/teams", json={"name": "E", "country": "DE"}).json()["id"] == 11

    listed = client.get("/teams").json()
    assert [t["id"] for t in listed] == [9, 10, 11]


def test_create_requires_name_and_country(client, data_dir):
    for payload in ({}, {"name": "Reds"}, {"country": "UK"}, {"name": "  ", "country": "UK"}):
        resp = client.post("/teams", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"error": "name and country required"}
    assert client.post("/teams").status_code == 400
    assert not (data_dir / "teams.json").exists()


def test_partial_update_keeps_omitted_fields(client):
    client.post("/teams", json={"name": "Reds", "country": "UK"})

    resp = client.put("/teams/1", json={"country": "IE"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "Reds", "country": "IE"}
    assert client.get("/teams/1").json() == {"id": 1, "name": "Reds", "country": "IE"}


def test_update_unknown_team(client):
    resp = client.put("/teams/42", json={"name": "X"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Team not found"}


def test_delete_unknown_team_leaves_file_untouched(client, data_dir):
    client.post("/teams", json={"name": "Reds", "country": "UK"})
    path = data_dir / "teams.json"
    before = path.read_bytes()

    resp = client.delete("/teams/99")
    assert resp.status_code == 404
    assert path.read_bytes() == before


def test_non_numeric_id_is_not_found(client):
    client.post("/teams", json={"name": "Reds", "country": "UK"})
    assert client.get("/teams/abc").status_code == 404


def test_corrupt_file_is_server_error(client, data_dir):
    (data_dir / "teams.json").write_text("[{oops", encoding="utf-8")
    resp = client.get("/teams")
    assert resp.status_code == 500
    assert "error" in resp.json()
    assert "Traceback" not in resp.text

    # the process keeps serving other requests
    assert client.get("/players").status_code == 200


def test_malformed_body_is_bad_request(client):
    resp = client.post("/teams", content=b"{broken", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_unknown_route_uses_error_shape(client):
    resp = client.get("/nowhere")
    assert resp.status_code == 404
    assert set(resp.json()) == {"error"}


def test_update_resolves_id_before_payload(client):
    resp = client.put("/teams/42", json={"name": ""})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Team not found"}


def test_update_stores_present_values_as_sent(client):
    client.post("/teams", json={"name": "Reds", "country": "UK"})

    assert client.put("/teams/1", json={"name": 7}).json() == {"id": 1, "name": 7, "country": "UK"}
    assert client.put("/teams/1", json={"name": ""}).json()["name"] == ""
    assert client.put("/teams/1", json={"stadium": "Anfield"}).json() == {"id": 1, "name": "", "country": "UK"}


def test_unexpected_failure_is_json_and_logged(data_dir, monkeypatch, caplog):
    import logging

    from fastapi.testclient import TestClient

    from roster_api.app import create_app
    from roster_api.repositories import json_storage

    def disk_full(path, records):
        raise OSError("No space left on device")

    monkeypatch.setattr(json_storage, "persist", disk_full)

    with caplog.at_level(logging.INFO, logger="roster_api"):
        with TestClient(create_app(), raise_server_exceptions=False) as client:
            resp = client.post("/teams", json={"name": "Reds", "country": "UK"})

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"error": "Internal server error"}
    assert "No space left" not in resp.text
    assert not (data_dir / "teams.json").exists()
    assert "POST /teams -> 500" in caplog.text
