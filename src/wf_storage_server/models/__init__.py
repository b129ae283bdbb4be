from .actions import (
    SCHEMA_ORG_CONTEXT,
    Action,
    ActionError,
    ActionPayload,
    ActionResponse,
    ActionResult,
    ActionVerb,
    DeletedResult,
    OutputRouting,
    OutputType,
    RetrievedResult,
    StorageLocation,
    StoredResult,
)
__all__ = [
    "SCHEMA_ORG_CONTEXT",
    "Action",
    "ActionError",
    "ActionPayload",
    "ActionResponse",
    "ActionResult",
    "ActionVerb",
    "DeletedResult",
    "OutputRouting",
    "OutputType",
    "RetrievedResult",
    "StorageLocation",
    "StoredResult",
]
