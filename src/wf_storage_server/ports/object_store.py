# src/wf_storage_server/ports/object_store.py
"""
ObjectStorePort — the hexagonal 'port' interface for object storage backends.

NOTE:
- Adapters are constructed once per process and shared by every in-flight
  request, so implementations must be safe for concurrent use.
- Timeouts and retries are the adapter's (or its client's) business; the
  orchestrator calls each method exactly once per action.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


class ObjectStoreError(Exception):
    """Transport / authorization / any backend failure other than 'missing'."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class ObjectNotFound(ObjectStoreError):
    """The addressed (bucket, key) holds no object."""
    pass


@dataclass(frozen=True)
class StoredObject:
    data: bytes
    content_type: Optional[str] = None


class ObjectStorePort(Protocol):
    """
    Contract that all object store adapters must implement.

    Semantics:
      - put    -> create or overwrite (bucket, key); last write wins
      - get    -> StoredObject or raise ObjectNotFound if missing
      - delete -> remove or raise ObjectNotFound if missing
    Any other failure surfaces as ObjectStoreError.
    """

    def put(self, bucket: str, key: str, data: bytes, content_type: str) -> None:
        ...

    def get(self, bucket: str, key: str) -> StoredObject:
        ...

    def delete(self, bucket: str, key: str) -> None:
        ...
