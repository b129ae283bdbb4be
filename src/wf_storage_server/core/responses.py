from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from wf_storage_server.core.errors import WorkflowStorageError
from wf_storage_server.models import (
    SCHEMA_ORG_CONTEXT,
    Action,
    ActionError,
    ActionResponse,
    ActionResult,
    DeletedResult,
    RetrievedResult,
    StoredResult,
)

COMPLETED = "CompletedActionStatus"
FAILED = "FailedActionStatus"


def render_result(result: ActionResult, scheme: str) -> Dict[str, Any]:
    if isinstance(result, StoredResult):
        return {
            "@type": "DigitalDocument",
            "contentUrl": result.location.to_uri(scheme),
            "encodingFormat": result.format,
            "contentSize": result.size,
        }
    if isinstance(result, RetrievedResult):
        if result.file_location is not None:
            return {
                "@type": "DigitalDocument",
                "contentUrl": str(result.file_location),
                "encodingFormat": result.format,
                "contentSize": result.size,
            }
        return {
            "@type": "Dataset",
            "encodingFormat": result.format,
            "contentSize": result.size,
            "text": result.inline_data.decode("utf-8", errors="replace"),
        }
    if isinstance(result, DeletedResult):
        return {"@type": "DigitalDocument", "contentUrl": result.location.to_uri(scheme)}
    raise TypeError(f"unknown result type: {type(result).__name__}")


def shape_success(action: Action, result: ActionResult, scheme: str) -> ActionResponse:
    return ActionResponse(
        context=action.context or SCHEMA_ORG_CONTEXT,
        type=action.action_type,
        identifier=action.identifier,
        action_status=COMPLETED,
        result=render_result(result, scheme),
        status=200,
    )


def shape_failure(
    error: WorkflowStorageError,
    action: Optional[Action] = None,
    envelope: Optional[Mapping[str, Any]] = None,
) -> ActionResponse:
    """
    Render a failure. Identifying metadata comes from the decoded action when
    there is one, else best-effort from the raw envelope.

    Only ``error.message`` goes on the wire; ``error.cause`` stays in the logs.
    """
    if action is not None:
        context, action_type, identifier = action.context, action.action_type, action.identifier
    elif envelope is not None:
        context = envelope.get("@context")
        action_type = envelope.get("@type") if isinstance(envelope.get("@type"), str) else None
        identifier = envelope.get("identifier") if isinstance(envelope.get("identifier"), str) else None
    else:
        context = action_type = identifier = None

    return ActionResponse(
        context=context or SCHEMA_ORG_CONTEXT,
        type=action_type,
        identifier=identifier or None,
        action_status=FAILED,
        error=ActionError(code=error.code, message=error.message),
        status=error.status,
    )


__all__ = ["COMPLETED", "FAILED", "render_result", "shape_success", "shape_failure"]
