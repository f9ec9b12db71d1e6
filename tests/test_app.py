"""
App factory, index/health routes and JSON error handling.
"""
import pytest

from ohs import create_app

RESOURCE_PATHS = [
    "/api/departments",
    "/api/positions",
    "/api/subprojects",
    "/api/toolbox-talks",
    "/api/environmental-factors",
    "/api/risks-and-impacts",
    "/api/acceptance-confirmations",
    "/api/involved-persons",
    "/api/investigation-participants",
    "/api/corrective-actions",
    "/api/incident-reports",
    "/api/photo-documents",
    "/api/complaints-registration",
    "/api/claim-control",
    "/api/non-compliance",
    "/api/risks/legal-requirements",
    "/api/training-plans",
]


def test_requires_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError):
        create_app()


def test_root_redirects_to_index(client):
    resp = client.get("/")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/api")


def test_index_lists_every_register(client):
    listed = [r["path"] for r in client.get("/api").get_json()["resources"]]
    assert sorted(listed) == sorted(RESOURCE_PATHS)


def test_health(client):
    body = client.get("/api/health/db").get_json()
    assert body == {"ok": True, "dialect": "sqlite"}


@pytest.mark.parametrize("path", RESOURCE_PATHS)
def test_empty_list_and_unknown_id(client, path):
    assert client.get(path).get_json() == []
    for method in (client.get, client.delete):
        resp = method(f"{path}/00000000-0000-0000-0000-000000000000")
        assert resp.status_code == 404
        assert resp.get_json()["error"].endswith("not found")
    resp = client.put(f"{path}/00000000-0000-0000-0000-000000000000", json={})
    assert resp.status_code == 404


def test_body_must_be_object(client):
    resp = client.post("/api/positions", json=["Safety Officer"])
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Request body must be a JSON object"


def test_malformed_json(client):
    resp = client.post("/api/positions", data="{not json", content_type="application/json")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_method_not_allowed_is_json(client):
    resp = client.patch("/api/positions")
    assert resp.status_code == 405
    assert "error" in resp.get_json()


def test_unknown_api_route_is_json(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert "error" in resp.get_json()
