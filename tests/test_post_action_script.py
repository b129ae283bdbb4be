# tests/test_post_action_script.py
from scripts.post_action import build_action
from tests.conftest import client


def test_built_store_action_is_accepted():
    action = build_action("store", "cli-1", text='{"ok":true}', fmt="application/json")
    r = client.post("/v1/api/semantic/action", json=action, headers={"X-Workflow-ID": "cli"})
    assert r.status_code == 200, r.text
    assert r.json()["result"]["contentUrl"] == "s3://test-bucket/workflow-results/cli/cli-1.json"


def test_built_retrieve_action_carries_output_hints():
    action = build_action("retrieve", "cli-1", location="s3://b/k", output_file="/tmp/x", output_type="file")
    assert action["@type"] == "RetrieveAction"
    assert action["object"]["contentUrl"] == "s3://b/k"
    assert action["additionalProperty"] == {"outputFile": "/tmp/x", "outputType": "file"}
