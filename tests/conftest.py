# tests/conftest.py
from typing import Dict, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from wf_storage_server.main import app
from wf_storage_server.config.settings import Settings, get_settings
from wf_storage_server.infra.providers import get_object_store
from wf_storage_server.ports.object_store import (
    ObjectNotFound, ObjectStoreError, ObjectStorePort, StoredObject
)


# ------------------ Fake object store used by tests ------------------

class FakeObjectStore(ObjectStorePort):
    def __init__(self):
        # each test gets a fresh store instance
        self.objects: Dict[Tuple[str, str], StoredObject] = {}
        self.calls = []
        self.fail_with: Optional[ObjectStoreError] = None

    def _maybe_fail(self):
        if self.fail_with is not None:
            raise self.fail_with

    def put(self, bucket: str, key: str, data: bytes, content_type: str) -> None:
        self.calls.append(("put", bucket, key))
        self._maybe_fail()
        self.objects[(bucket, key)] = StoredObject(data=data, content_type=content_type)

    def get(self, bucket: str, key: str) -> StoredObject:
        self.calls.append(("get", bucket, key))
        self._maybe_fail()
        if (bucket, key) not in self.objects:
            raise ObjectNotFound(f"{bucket}/{key}")
        return self.objects[(bucket, key)]

    def delete(self, bucket: str, key: str) -> None:
        self.calls.append(("delete", bucket, key))
        self._maybe_fail()
        if (bucket, key) not in self.objects:
            raise ObjectNotFound(f"{bucket}/{key}")
        del self.objects[(bucket, key)]


def make_settings(tmp_dir) -> Settings:
    return Settings(
        storage_backend="memory",
        bucket="test-bucket",
        output_file_pattern=str(tmp_dir) + "/{identifier}-result.dat",
    )


# ------------------ Per-test wiring ------------------

@pytest.fixture
def fake_store():
    return FakeObjectStore()


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture(autouse=True)
def _override_dependencies(fake_store, settings):
    """
    Give each test a fresh fake store and test settings by overriding the app dependencies.
    """
    app.dependency_overrides[get_object_store] = lambda: fake_store
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield
    finally:
        app.dependency_overrides.clear()


# Tests do `from tests.conftest import client` and call client.post(...)
# So we expose a module-level TestClient named `client` (NOT a fixture).
client = TestClient(app)


def store_action(identifier="wf-1", text='{"a":1}', fmt="application/json", **extra):
    obj = {"@type": "DigitalDocument", "text": text}
    if fmt is not None:
        obj["encodingFormat"] = fmt
    return {"@context": "https://schema.org", "@type": "StoreAction",
            "identifier": identifier, "object": obj, **extra}


def retrieve_action(location, identifier="wf-1", **extra):
    return {"@context": "https://schema.org", "@type": "RetrieveAction",
            "identifier": identifier, "object": {"contentUrl": location}, **extra}
