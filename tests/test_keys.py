# tests/test_keys.py
import pytest

from wf_storage_server.core.errors import DecodeError, ErrorKind
from wf_storage_server.core.keys import derive_key, parse_location
from wf_storage_server.models import StorageLocation


def test_derive_key_layout():
    assert derive_key("default", "wf-1") == "workflow-results/default/wf-1.json"
    assert derive_key("run-42", "step/a") == "workflow-results/run-42/step/a.json"


def test_derive_key_is_deterministic():
    assert derive_key("ns", "id") == derive_key("ns", "id")
    assert derive_key("ns", "a") != derive_key("ns", "b")


def test_parse_location_splits_bucket_and_key():
    loc = parse_location("s3://bucket/workflow-results/default/wf-1.json", "s3")
    assert loc == StorageLocation(bucket="bucket", key="workflow-results/default/wf-1.json")


def test_parse_location_keeps_internal_separators_verbatim():
    loc = parse_location("s3://b/a//b/c.json", "s3")
    assert loc.key == "a//b/c.json"


def test_location_uri_roundtrip():
    uri = "s3://px-semantic/workflow-results/ns/x.json"
    assert parse_location(uri, "s3").to_uri("s3") == uri


@pytest.mark.parametrize("uri", [
    "http://not-s3",
    "https://bucket/key",
    "",
    "s3://bucket-only",
    "s3://bucket/",
    "s3:///key",
])
def test_parse_location_rejects_bad_references(uri):
    with pytest.raises(DecodeError) as ei:
        parse_location(uri, "s3")
    assert ei.value.kind is ErrorKind.INVALID_LOCATION


def test_parse_location_honours_configured_scheme():
    assert parse_location("minio://b/k", "minio").bucket == "b"
    with pytest.raises(DecodeError):
        parse_location("s3://b/k", "minio")
