# src/wf_storage_server/infra/providers.py
from __future__ import annotations

import threading
from typing import Optional

from fastapi import Depends
from loguru import logger

from wf_storage_server.config.settings import Settings, get_settings
from wf_storage_server.core.dispatcher import ActionDispatcher
from wf_storage_server.core.orchestrator import StorageOrchestrator
from wf_storage_server.ports.object_store import ObjectStorePort
from .memory_store import MemoryObjectStore
from .s3_store import S3ObjectStore

# singleton per-process
_store: Optional[ObjectStorePort] = None
_store_lock = threading.Lock()


def build_object_store(settings: Settings) -> ObjectStorePort:
    """
    Adapter selector. Default: S3-compatible backend.
    Set WFS_STORAGE_BACKEND=memory for a throwaway dev store.
    """
    backend = settings.storage_backend
    if backend in ("memory", "mem", "inmemory", "in-memory"):
        logger.warning("Using in-memory object store; data is lost on restart")
        return MemoryObjectStore()
    if backend != "s3":
        logger.warning("Unknown storage backend {!r}, falling back to s3", backend)
    return S3ObjectStore.from_settings(settings)


def get_object_store() -> ObjectStorePort:
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = build_object_store(get_settings())
    return _store


def get_orchestrator(
    store: ObjectStorePort = Depends(get_object_store),
    settings: Settings = Depends(get_settings),
) -> StorageOrchestrator:
    return StorageOrchestrator(store, settings)


def get_dispatcher(
    orchestrator: StorageOrchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_settings),
) -> ActionDispatcher:
    return ActionDispatcher(orchestrator, settings)
