# src/wf_storage_server/infra/memory_store.py
from __future__ import annotations

import threading
from typing import Dict, Tuple

from wf_storage_server.ports.object_store import ObjectNotFound, ObjectStorePort, StoredObject


class MemoryObjectStore(ObjectStorePort):
    """
    Dev-only in-memory adapter (ephemeral).
    NOT for production. Use WFS_STORAGE_BACKEND=s3 for a real backend.
    """

    def __init__(self) -> None:
        self._objects: Dict[Tuple[str, str], StoredObject] = {}
        self._lock = threading.Lock()

    # --- Port methods ---
    def put(self, bucket: str, key: str, data: bytes, content_type: str) -> None:
        with self._lock:
            self._objects[(bucket, key)] = StoredObject(data=bytes(data), content_type=content_type)

    def get(self, bucket: str, key: str) -> StoredObject:
        with self._lock:
            obj = self._objects.get((bucket, key))
        if obj is None:
            raise ObjectNotFound(f"{bucket}/{key}")
        return obj

    def delete(self, bucket: str, key: str) -> None:
        with self._lock:
            if (bucket, key) not in self._objects:
                raise ObjectNotFound(f"{bucket}/{key}")
            del self._objects[(bucket, key)]

