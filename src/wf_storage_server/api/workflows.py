# src/wf_storage_server/api/workflows.py
"""
REST convenience endpoints. Each one builds the equivalent JSON-LD action and
hands it to the same dispatcher as /v1/api/semantic/action.
"""
import json
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from wf_storage_server.api.actions import action_json_response
from wf_storage_server.config.settings import Settings, get_settings
from wf_storage_server.core.dispatcher import ActionDispatcher
from wf_storage_server.core.keys import derive_key
from wf_storage_server.infra.providers import get_dispatcher
from wf_storage_server.models import SCHEMA_ORG_CONTEXT


# ---------- Pydantic models ----------
class StoreWorkflowRequest(BaseModel):
    id: str = Field(..., description="Workflow identifier; becomes the storage key")
    definition: Dict[str, Any] = Field(..., description="Workflow definition, stored as JSON")
    format: Optional[str] = None


class UpdateWorkflowRequest(BaseModel):
    definition: Dict[str, Any]
    format: Optional[str] = None


router = APIRouter(prefix="/v1/api/workflows", tags=["workflows"])


def _document_action(action_type: str, identifier: str, obj: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "@context": SCHEMA_ORG_CONTEXT,
        "@type": action_type,
        "identifier": identifier,
        "object": {"@type": "DigitalDocument", **obj},
    }


def _inline_object(definition: Dict[str, Any], fmt: Optional[str], settings: Settings) -> Dict[str, Any]:
    return {"text": json.dumps(definition), "encodingFormat": fmt or settings.default_format}


def _location_object(workflow_id: str, bucket: Optional[str], namespace: Optional[str], settings: Settings) -> Dict[str, Any]:
    ns = (namespace or "").strip() or settings.default_namespace
    key = derive_key(ns, workflow_id)
    return {"contentUrl": f"{settings.uri_scheme}://{bucket or settings.bucket}/{key}"}


def _require_id(workflow_id: str) -> None:
    if not workflow_id.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id is required")


@router.post("")
async def store_workflow(
    body: StoreWorkflowRequest,
    x_workflow_id: Optional[str] = Header(default=None),
    dispatcher: ActionDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    _require_id(body.id)
    action = _document_action("CreateAction", body.id, _inline_object(body.definition, body.format, settings))
    response = await run_in_threadpool(dispatcher.submit_action, action, x_workflow_id)
    return action_json_response(response)


@router.get("/{workflow_id}")
async def get_workflow(
    workflow_id: str,
    bucket: Optional[str] = Query(default=None),
    x_workflow_id: Optional[str] = Header(default=None),
    dispatcher: ActionDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    _require_id(workflow_id)
    action = _document_action(
        "RetrieveAction", workflow_id, _location_object(workflow_id, bucket, x_workflow_id, settings)
    )
    response = await run_in_threadpool(dispatcher.submit_action, action, x_workflow_id)
    return action_json_response(response)


@router.put("/{workflow_id}")
async def update_workflow(
    workflow_id: str,
    body: UpdateWorkflowRequest,
    x_workflow_id: Optional[str] = Header(default=None),
    dispatcher: ActionDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    _require_id(workflow_id)
    action = _document_action("UpdateAction", workflow_id, _inline_object(body.definition, body.format, settings))
    response = await run_in_threadpool(dispatcher.submit_action, action, x_workflow_id)
    return action_json_response(response)


@router.delete("/{workflow_id}")
async def delete_workflow(
    workflow_id: str,
    bucket: Optional[str] = Query(default=None),
    x_workflow_id: Optional[str] = Header(default=None),
    dispatcher: ActionDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    _require_id(workflow_id)
    action = _document_action(
        "DeleteAction", workflow_id, _location_object(workflow_id, bucket, x_workflow_id, settings)
    )
    response = await run_in_threadpool(dispatcher.submit_action, action, x_workflow_id)
    return action_json_response(response)
