from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

SCHEMA_ORG_CONTEXT = "https://schema.org"


class ActionVerb(str, Enum):
    STORE = "store"
    RETRIEVE = "retrieve"
    DELETE = "delete"


class OutputType(str, Enum):
    INLINE = "inline"
    FILE = "file"


class OutputRouting(BaseModel):
    """Retrieve-time hints selecting inline vs. local-file output."""

    output_file: Optional[str] = None
    output_type: Optional[OutputType] = None

    model_config = ConfigDict(frozen=True)


class StorageLocation(BaseModel):
    bucket: str
    key: str

    model_config = ConfigDict(frozen=True)

    def to_uri(self, scheme: str) -> str:
        return f"{scheme}://{self.bucket}/{self.key}"


class ActionPayload(BaseModel):
    """
    What the action carries.

    Store actions fill ``data`` (+ ``format``); retrieve/delete actions fill
    ``location`` with the raw reference the caller sent.
    """

    data: Optional[bytes] = None
    format: Optional[str] = None
    location: Optional[str] = None


class Action(BaseModel):
    verb: ActionVerb
    action_type: str = Field(..., description="The @type the caller sent, echoed back")
    identifier: str
    namespace: str
    payload: ActionPayload
    output: OutputRouting = Field(default_factory=OutputRouting)
    context: Optional[Any] = None

    model_config = ConfigDict(frozen=True)


class StoredResult(BaseModel):
    location: StorageLocation
    format: str
    size: int


class RetrievedResult(BaseModel):
    format: str
    size: int
    inline_data: Optional[bytes] = None
    file_location: Optional[Path] = None

    @model_validator(mode="after")
    def _exactly_one_output(self) -> "RetrievedResult":
        if (self.inline_data is None) == (self.file_location is None):
            raise ValueError("exactly one of inline_data / file_location must be set")
        return self


class DeletedResult(BaseModel):
    location: StorageLocation


ActionResult = Union[StoredResult, RetrievedResult, DeletedResult]


class ActionError(BaseModel):
    code: str
    message: str


class ActionResponse(BaseModel):
    """Envelope returned for every submitted action, completed or failed."""

    context: Optional[Any] = Field(default=SCHEMA_ORG_CONTEXT, alias="@context")
    type: Optional[str] = Field(default=None, alias="@type")
    identifier: Optional[str] = None
    action_status: str = Field(..., alias="actionStatus")
    result: Optional[Dict[str, Any]] = None
    error: Optional[ActionError] = None

    # HTTP status equivalent; not part of the wire body
    status: int = Field(default=200, exclude=True)

    model_config = ConfigDict(populate_by_name=True)

    @property
    def completed(self) -> bool:
        return self.error is None

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
