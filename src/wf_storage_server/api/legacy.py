# src/wf_storage_server/api/legacy.py
# Pre-action endpoints kept for older workflow runners.
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field
from starlette.concurrency import run_in_threadpool

from wf_storage_server.config.settings import Settings, get_settings
from wf_storage_server.core.decoder import decode_action
from wf_storage_server.core.orchestrator import StorageOrchestrator
from wf_storage_server.infra.providers import get_orchestrator


class StoreRequest(BaseModel):
    workflow_id: str = Field("", alias="workflowId")
    action_id: str = Field("", alias="actionId")
    data: str = ""
    format: Optional[str] = None


class StoreResponse(BaseModel):
    type: str = Field("DataDownload", alias="@type")
    id: str = Field(..., alias="@id")
    content_url: str = Field(..., alias="contentUrl")
    encoding_format: str = Field(..., alias="encodingFormat")
    content_size: int = Field(..., alias="contentSize")

    model_config = ConfigDict(populate_by_name=True)


class FetchResponse(BaseModel):
    data: str
    encoding_format: str = Field(..., alias="encodingFormat")
    content_size: int = Field(..., alias="contentSize")

    model_config = ConfigDict(populate_by_name=True)


router = APIRouter(prefix="/v1/api", tags=["legacy"])


@router.post("/store", response_model=StoreResponse, response_model_by_alias=True)
async def legacy_store(
    body: StoreRequest,
    orchestrator: StorageOrchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_settings),
) -> StoreResponse:
    if not (body.workflow_id and body.action_id and body.data):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="workflowId, actionId, and data are required",
        )
    action = decode_action(
        {
            "@type": "StoreAction",
            "identifier": body.action_id,
            "object": {"text": body.data, "encodingFormat": body.format},
        },
        settings,
        namespace=body.workflow_id,
    )
    stored = await run_in_threadpool(orchestrator.store_action, action)
    return StoreResponse(
        id=f"#{body.action_id}-result",
        content_url=stored.location.to_uri(settings.uri_scheme),
        encoding_format=stored.format,
        content_size=stored.size,
    )


@router.get("/fetch/{key:path}", response_model=FetchResponse, response_model_by_alias=True)
async def legacy_fetch(
    key: str,
    orchestrator: StorageOrchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_settings),
) -> FetchResponse:
    action = decode_action(
        {
            "@type": "FetchAction",
            "identifier": key,
            "object": {"contentUrl": f"{settings.uri_scheme}://{settings.bucket}/{key}"},
        },
        settings,
    )
    fetched = await run_in_threadpool(orchestrator.retrieve_action, action)
    return FetchResponse(
        data=fetched.inline_data.decode("utf-8", errors="replace"),
        encoding_format=fetched.format,
        content_size=fetched.size,
    )
