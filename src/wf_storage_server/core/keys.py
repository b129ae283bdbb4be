"""Storage key derivation and location parsing."""

from __future__ import annotations

from wf_storage_server.core.errors import DecodeError, ErrorKind
from wf_storage_server.models import StorageLocation

KEY_TEMPLATE = "workflow-results/{namespace}/{identifier}.json"


def derive_key(namespace: str, identifier: str) -> str:
    return KEY_TEMPLATE.format(namespace=namespace, identifier=identifier)


def parse_location(uri: str, scheme: str) -> StorageLocation:
    """
    Split ``{scheme}://{bucket}/{key...}`` into a StorageLocation.

    The key is everything after the bucket, joined verbatim; internal
    separators (including empty segments) are preserved.
    """
    prefix = f"{scheme}://"
    if not uri or not uri.startswith(prefix):
        raise DecodeError(ErrorKind.INVALID_LOCATION, f"only {prefix} locations are supported")

    parts = uri[len(prefix):].split("/")
    if len(parts) < 2:
        raise DecodeError(ErrorKind.INVALID_LOCATION, f"invalid {scheme} location format")

    bucket = parts[0]
    key = "/".join(parts[1:])
    if not bucket or not key:
        raise DecodeError(ErrorKind.INVALID_LOCATION, f"invalid {scheme} location format")
    return StorageLocation(bucket=bucket, key=key)


__all__ = ["KEY_TEMPLATE", "derive_key", "parse_location"]
