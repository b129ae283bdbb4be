# tests/test_health.py
from tests.conftest import client


def test_health_ok():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_docs_lists_action_endpoint():
    r = client.get("/v1/api/docs")
    assert r.status_code == 200
    data = r.json()
    paths = {e["path"] for e in data["endpoints"]}
    assert "/v1/api/semantic/action" in paths
    assert data["storage"]["bucket"] == "test-bucket"
    assert "workflow-storage" in data["capabilities"]
