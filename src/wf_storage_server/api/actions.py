# src/wf_storage_server/api/actions.py
import json
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from wf_storage_server.core.dispatcher import ActionDispatcher
from wf_storage_server.infra.providers import get_dispatcher
from wf_storage_server.models import ActionResponse

router = APIRouter(prefix="/v1/api", tags=["actions"])


def action_json_response(response: ActionResponse) -> JSONResponse:
    return JSONResponse(response.to_wire(), status_code=response.status)


@router.post("/semantic/action")
async def submit_semantic_action(
    request: Request,
    x_workflow_id: Optional[str] = Header(default=None),
    dispatcher: ActionDispatcher = Depends(get_dispatcher),
) -> JSONResponse:
    """Execute a storage operation described by a JSON-LD action (primary interface)."""
    body = await request.body()
    try:
        envelope = json.loads(body) if body else None
    except ValueError:
        envelope = None
    # The dispatcher blocks on object store I/O; keep it off the event loop.
    response = await run_in_threadpool(dispatcher.submit_action, envelope, x_workflow_id)
    return action_json_response(response)
