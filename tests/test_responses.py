# tests/test_responses.py
from pathlib import Path

import pytest
from pydantic import ValidationError

from wf_storage_server.core.errors import ActionFailure, DecodeError, ErrorKind
from wf_storage_server.core.responses import render_result, shape_failure, shape_success
from wf_storage_server.models import (
    Action, ActionPayload, ActionVerb, RetrievedResult, StorageLocation, StoredResult
)

ACTION = Action(
    verb=ActionVerb.STORE,
    action_type="CreateAction",
    identifier="wf-1",
    namespace="default",
    payload=ActionPayload(data=b"x", format="text/plain"),
)


def test_retrieved_result_needs_exactly_one_output():
    with pytest.raises(ValidationError):
        RetrievedResult(format="a", size=1)
    with pytest.raises(ValidationError):
        RetrievedResult(format="a", size=1, inline_data=b"x", file_location=Path("/tmp/x"))


def test_render_inline_and_file_results():
    inline = render_result(RetrievedResult(format="text/plain", size=2, inline_data=b"hi"), "s3")
    assert inline == {"@type": "Dataset", "encodingFormat": "text/plain", "contentSize": 2, "text": "hi"}

    to_file = render_result(RetrievedResult(format="text/plain", size=2, file_location=Path("/tmp/o.dat")), "s3")
    assert to_file["contentUrl"] == "/tmp/o.dat"
    assert "text" not in to_file


def test_shape_success_preserves_identity():
    result = StoredResult(location=StorageLocation(bucket="b", key="k.json"), format="text/plain", size=1)
    resp = shape_success(ACTION, result, "s3")
    wire = resp.to_wire()
    assert resp.completed and resp.status == 200
    assert wire["@type"] == "CreateAction"
    assert wire["identifier"] == "wf-1"
    assert wire["result"]["contentUrl"] == "s3://b/k.json"
    assert "status" not in wire


def test_shape_failure_drops_cause():
    cause = RuntimeError("raw backend text")
    err = ActionFailure(ErrorKind.STORAGE_READ_ERROR, "Failed to fetch data", cause=cause)
    resp = shape_failure(err, action=ACTION)
    assert resp.status == 502
    assert resp.to_wire()["error"] == {"code": "storage_read_error", "message": "Failed to fetch data"}
    assert "raw backend text" not in str(resp.to_wire())


def test_shape_failure_from_raw_envelope():
    err = DecodeError(ErrorKind.UNSUPPORTED_VERB, "unsupported action type: X")
    wire = shape_failure(err, envelope={"@type": "X", "identifier": 5}).to_wire()
    assert wire["@type"] == "X"
    assert "identifier" not in wire
    assert wire["actionStatus"] == "FailedActionStatus"
