# tests/test_legacy.py
from tests.conftest import client


def test_legacy_store_200():
    r = client.post("/v1/api/store", json={"workflowId": "wf-a", "actionId": "act-1", "data": "hello"})
    assert r.status_code == 200, r.text
    assert r.json() == {
        "@type": "DataDownload",
        "@id": "#act-1-result",
        "contentUrl": "s3://test-bucket/workflow-results/wf-a/act-1.json",
        "encodingFormat": "application/json",
        "contentSize": 5,
    }


def test_legacy_fetch_by_key():
    client.post("/v1/api/store", json={"workflowId": "wf-a", "actionId": "act-2",
                                       "data": "plain", "format": "text/plain"})
    g = client.get("/v1/api/fetch/workflow-results/wf-a/act-2.json")
    assert g.status_code == 200, g.text
    assert g.json() == {"data": "plain", "encodingFormat": "text/plain", "contentSize": 5}


def test_legacy_store_requires_fields():
    r = client.post("/v1/api/store", json={"workflowId": "wf-a", "data": "x"})
    assert r.status_code == 400
    assert "required" in r.json()["error"]["message"]


def test_legacy_fetch_missing_404():
    g = client.get("/v1/api/fetch/workflow-results/none/none.json")
    assert g.status_code == 404
    err = g.json()["error"]
    assert err["code"] == "not_found"
    assert err["status"] == 404
