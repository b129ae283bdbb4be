"""
Store / retrieve / delete orchestration.

Every method performs at most one object store call and, for retrieves routed
to a file, one local write. Nothing is retried or cached here; the object
store adapter owns timeouts and retry policy. Concurrent stores of the same
(namespace, identifier) race at the object store and the last write wins.
Output paths come from the caller (or the identifier) verbatim and are not
confined to the temp directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger

from wf_storage_server.config.settings import Settings
from wf_storage_server.core.errors import ActionFailure, ErrorKind
from wf_storage_server.core.keys import derive_key, parse_location
from wf_storage_server.core.local_files import LocalFileWriter
from wf_storage_server.models import (
    Action,
    DeletedResult,
    OutputType,
    RetrievedResult,
    StorageLocation,
    StoredResult,
)
from wf_storage_server.ports.object_store import ObjectNotFound, ObjectStoreError, ObjectStorePort


class StorageOrchestrator:
    def __init__(
        self,
        store: ObjectStorePort,
        settings: Settings,
        files: Optional[LocalFileWriter] = None,
    ) -> None:
        self.store = store
        self.settings = settings
        self.files = files or LocalFileWriter()

    # ------------------------------------------------------------------ store
    def store_action(self, action: Action) -> StoredResult:
        data = action.payload.data or b""
        fmt = action.payload.format or self.settings.default_format
        location = StorageLocation(
            bucket=self.settings.bucket,
            key=derive_key(action.namespace, action.identifier),
        )

        try:
            self.store.put(location.bucket, location.key, data, fmt)
        except ObjectStoreError as exc:
            logger.error("Failed to upload {}/{}: {!r}", location.bucket, location.key, exc.cause or exc)
            raise ActionFailure(ErrorKind.STORAGE_WRITE_ERROR, "Failed to store data", cause=exc) from exc

        logger.info("Stored workflow result: {} (size: {} bytes)", location.key, len(data))
        return StoredResult(location=location, format=fmt, size=len(data))

    # --------------------------------------------------------------- retrieve
    def retrieve_action(self, action: Action) -> RetrievedResult:
        location = parse_location(action.payload.location or "", self.settings.uri_scheme)

        try:
            obj = self.store.get(location.bucket, location.key)
        except ObjectNotFound as exc:
            logger.info("Object not found: {}/{}", location.bucket, location.key)
            raise ActionFailure(ErrorKind.NOT_FOUND, "data not found", cause=exc) from exc
        except ObjectStoreError as exc:
            logger.error("Failed to fetch {}/{}: {!r}", location.bucket, location.key, exc.cause or exc)
            raise ActionFailure(ErrorKind.STORAGE_READ_ERROR, "Failed to fetch data", cause=exc) from exc

        fmt = obj.content_type or self.settings.default_format
        logger.info("Fetched workflow result: {} (size: {} bytes)", location.key, len(obj.data))

        output_path = self.resolve_output_path(action)
        if output_path is None:
            return RetrievedResult(format=fmt, size=len(obj.data), inline_data=obj.data)

        self._write_local(output_path, obj.data)
        logger.info("Wrote workflow result to file: {}", output_path)
        return RetrievedResult(format=fmt, size=len(obj.data), file_location=output_path)

    def resolve_output_path(self, action: Action) -> Optional[Path]:
        """Explicit output file, else the default pattern when routed to a file, else None (inline)."""
        if action.output.output_file:
            return Path(action.output.output_file)
        if action.output.output_type is OutputType.FILE:
            return self.settings.default_output_path(action.identifier)
        return None

    def _write_local(self, path: Path, data: bytes) -> None:
        try:
            self.files.ensure_dir(path.parent)
        except (OSError, ValueError) as exc:
            logger.error("Failed to create output directory {}: {!r}", path.parent, exc)
            raise ActionFailure(
                ErrorKind.LOCAL_WRITE_ERROR, "Failed to create output directory", cause=exc
            ) from exc
        try:
            self.files.write(path, data)
        except (OSError, ValueError) as exc:
            logger.error("Failed to write result to {}: {!r}", path, exc)
            raise ActionFailure(ErrorKind.LOCAL_WRITE_ERROR, "Failed to write result to file", cause=exc) from exc

    # ----------------------------------------------------------------- delete
    def delete_action(self, action: Action) -> DeletedResult:
        location = parse_location(action.payload.location or "", self.settings.uri_scheme)

        try:
            self.store.delete(location.bucket, location.key)
        except ObjectNotFound as exc:
            raise ActionFailure(ErrorKind.NOT_FOUND, "data not found", cause=exc) from exc
        except ObjectStoreError as exc:
            logger.error("Failed to delete {}/{}: {!r}", location.bucket, location.key, exc.cause or exc)
            raise ActionFailure(ErrorKind.STORAGE_WRITE_ERROR, "Failed to delete data", cause=exc) from exc

        logger.info("Deleted workflow result: {}", location.key)
        return DeletedResult(location=location)
