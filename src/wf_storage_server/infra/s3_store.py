# src/wf_storage_server/infra/s3_store.py
"""S3-compatible object store adapter (Hetzner, MinIO, R2, AWS)."""

from __future__ import annotations

from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from wf_storage_server.config.settings import Settings
from wf_storage_server.core.errors import ConfigurationError
from wf_storage_server.ports.object_store import (
    ObjectNotFound,
    ObjectStoreError,
    ObjectStorePort,
    StoredObject,
)

_NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


def _error_code(exc: ClientError) -> Optional[str]:
    return (exc.response.get("Error") or {}).get("Code")


def build_s3_client(settings: Settings) -> Any:
    """Create the one boto3 client the process shares. Path-style addressing for S3-compatible hosts."""
    if not (settings.endpoint_url and settings.access_key and settings.secret_key):
        raise ConfigurationError(
            "Missing S3 credentials: HETZNER_S3_ACCESS_KEY, HETZNER_S3_SECRET_KEY, HETZNER_S3_URL"
        )
    return boto3.client(
        "s3",
        endpoint_url=settings.endpoint_url,
        aws_access_key_id=settings.access_key,
        aws_secret_access_key=settings.secret_key,
        region_name=settings.region,
        config=Config(s3={"addressing_style": "path"}),
    )


class S3ObjectStore(ObjectStorePort):
    def __init__(self, client: Any) -> None:
        # boto3 clients are thread-safe; one instance serves all requests
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "S3ObjectStore":
        store = cls(build_s3_client(settings))
        logger.info("S3 client initialized for endpoint {}", settings.endpoint_url)
        return store

    def put(self, bucket: str, key: str, data: bytes, content_type: str) -> None:
        try:
            self.client.put_object(Bucket=bucket, Key=key, Body=data, ContentType=content_type)
        except (ClientError, BotoCoreError) as exc:
            raise ObjectStoreError(f"put {bucket}/{key} failed", cause=exc) from exc

    def get(self, bucket: str, key: str) -> StoredObject:
        try:
            resp = self.client.get_object(Bucket=bucket, Key=key)
        except ClientError as exc:
            if _error_code(exc) in _NOT_FOUND_CODES:
                raise ObjectNotFound(f"{bucket}/{key}", cause=exc) from exc
            raise ObjectStoreError(f"get {bucket}/{key} failed", cause=exc) from exc
        except BotoCoreError as exc:
            raise ObjectStoreError(f"get {bucket}/{key} failed", cause=exc) from exc

        body = resp["Body"]
        try:
            data = body.read()
        except BotoCoreError as exc:
            raise ObjectStoreError(f"reading {bucket}/{key} failed", cause=exc) from exc
        finally:
            body.close()
        return StoredObject(data=data, content_type=resp.get("ContentType"))

    def delete(self, bucket: str, key: str) -> None:
        # S3 DELETE is silent on missing keys, so check first to report not-found.
        try:
            self.client.head_object(Bucket=bucket, Key=key)
            self.client.delete_object(Bucket=bucket, Key=key)
        except ClientError as exc:
            if _error_code(exc) in _NOT_FOUND_CODES:
                raise ObjectNotFound(f"{bucket}/{key}", cause=exc) from exc
            raise ObjectStoreError(f"delete {bucket}/{key} failed", cause=exc) from exc
        except BotoCoreError as exc:
            raise ObjectStoreError(f"delete {bucket}/{key} failed", cause=exc) from exc


__all__ = ["S3ObjectStore", "build_s3_client"]
