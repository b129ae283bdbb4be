"""
Action decoding.

Turns an inbound JSON-LD action envelope into a typed ``Action``. The open
vocabulary of schema.org action types collapses onto a small set of verbs via
``VERB_SYNONYMS``; add a synonym there, not in a branch.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from wf_storage_server.config.settings import Settings
from wf_storage_server.core.errors import DecodeError, ErrorKind
from wf_storage_server.models import (
    Action,
    ActionPayload,
    ActionVerb,
    OutputRouting,
    OutputType,
)

VERB_SYNONYMS: Dict[str, ActionVerb] = {
    "StoreAction": ActionVerb.STORE,
    "CreateAction": ActionVerb.STORE,
    "UploadAction": ActionVerb.STORE,
    "UpdateAction": ActionVerb.STORE,
    "RetrieveAction": ActionVerb.RETRIEVE,
    "FetchAction": ActionVerb.RETRIEVE,
    "DownloadAction": ActionVerb.RETRIEVE,
    "DeleteAction": ActionVerb.DELETE,
    "RemoveAction": ActionVerb.DELETE,
}


def classify(action_type: Any) -> ActionVerb:
    if not isinstance(action_type, str) or not action_type:
        raise DecodeError(ErrorKind.UNSUPPORTED_VERB, "@type is required")
    verb = VERB_SYNONYMS.get(action_type)
    if verb is None:
        raise DecodeError(ErrorKind.UNSUPPORTED_VERB, f"unsupported action type: {action_type}")
    return verb


def _str_field(obj: Mapping[str, Any], name: str) -> Optional[str]:
    value = obj.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(ErrorKind.INVALID_REQUEST, f"{name} must be a string")
    return value


def _properties(envelope: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Flatten ``additionalProperty`` into a plain dict.

    Accepts a mapping or a schema.org list of PropertyValue objects.
    """
    raw = envelope.get("additionalProperty")
    if raw is None:
        return {}
    if isinstance(raw, Mapping):
        return dict(raw)
    if isinstance(raw, list):
        props: Dict[str, Any] = {}
        for item in raw:
            if isinstance(item, Mapping) and isinstance(item.get("name"), str):
                props[item["name"]] = item.get("value")
        return props
    raise DecodeError(ErrorKind.INVALID_REQUEST, "additionalProperty must be an object or a list")


def _output_routing(envelope: Mapping[str, Any]) -> OutputRouting:
    props = _properties(envelope)

    output_file = props.get("outputFile")
    if output_file is not None and not isinstance(output_file, str):
        raise DecodeError(ErrorKind.INVALID_REQUEST, "outputFile must be a string")
    if not output_file:
        # Older clients put the destination on result.contentUrl
        result = envelope.get("result")
        if isinstance(result, Mapping) and isinstance(result.get("contentUrl"), str):
            output_file = result["contentUrl"] or None
        else:
            output_file = None

    # Only "file" changes routing; any other value (or type) means inline.
    output_type = OutputType.FILE if props.get("outputType") == OutputType.FILE.value else None

    return OutputRouting(output_file=output_file, output_type=output_type)


def _store_payload(obj: Mapping[str, Any], settings: Settings) -> ActionPayload:
    text = _str_field(obj, "text")
    content_url = _str_field(obj, "contentUrl")
    if not text:
        if content_url:
            # Accepted structurally; fetching remote content is not supported.
            raise DecodeError(ErrorKind.NOT_IMPLEMENTED, "fetching from contentUrl not yet implemented")
        raise DecodeError(ErrorKind.NO_DATA, "no data to store")
    fmt = _str_field(obj, "encodingFormat") or settings.default_format
    return ActionPayload(data=text.encode("utf-8"), format=fmt)


def _location_payload(obj: Mapping[str, Any]) -> ActionPayload:
    content_url = _str_field(obj, "contentUrl")
    if not content_url:
        raise DecodeError(ErrorKind.INVALID_LOCATION, "object.contentUrl is required (resource location)")
    return ActionPayload(location=content_url)


def decode_action(envelope: Any, settings: Settings, namespace: Optional[str] = None) -> Action:
    """
    Decode ``envelope`` into an Action, resolving every default exactly once.

    ``namespace`` is the workflow scope supplied by the transport (e.g. the
    X-Workflow-ID header); blank means the configured default namespace.
    """
    if not isinstance(envelope, Mapping):
        raise DecodeError(ErrorKind.INVALID_REQUEST, "action must be a JSON object")

    action_type = envelope.get("@type")
    verb = classify(action_type)

    identifier = envelope.get("identifier")
    if not isinstance(identifier, str) or not identifier.strip():
        raise DecodeError(ErrorKind.MISSING_IDENTIFIER, "identifier is required")

    obj = envelope.get("object")
    if obj is None:
        raise DecodeError(
            ErrorKind.NO_DATA if verb is ActionVerb.STORE else ErrorKind.INVALID_LOCATION,
            "object is required",
        )
    if not isinstance(obj, Mapping):
        raise DecodeError(ErrorKind.INVALID_REQUEST, "object must be a JSON object")

    if verb is ActionVerb.STORE:
        payload = _store_payload(obj, settings)
        output = OutputRouting()
    else:
        payload = _location_payload(obj)
        output = _output_routing(envelope) if verb is ActionVerb.RETRIEVE else OutputRouting()

    ns = (namespace or "").strip() or settings.default_namespace

    return Action(
        verb=verb,
        action_type=action_type,
        identifier=identifier,
        namespace=ns,
        payload=payload,
        output=output,
        context=envelope.get("@context"),
    )


__all__ = ["VERB_SYNONYMS", "classify", "decode_action"]
