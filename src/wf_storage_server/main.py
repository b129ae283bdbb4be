# src/wf_storage_server/main.py
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from wf_storage_server.api.actions import router as actions_router
from wf_storage_server.api.discovery import router as discovery_router
from wf_storage_server.api.legacy import router as legacy_router
from wf_storage_server.api.workflows import router as workflows_router
from wf_storage_server.api.errors import (
    http_exception_handler,
    request_validation_exception_handler,
    storage_error_handler,
)
from wf_storage_server.config.settings import SERVICE_ID, SERVICE_NAME, SERVICE_VERSION, get_settings
from wf_storage_server.core.errors import WorkflowStorageError
from wf_storage_server.logging_config import setup_logging


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(level=settings.log_level, json_format=settings.json_logs)

    app = FastAPI(
        title=SERVICE_NAME,
        description="Storage and retrieval service for workflow definitions and data",
        version=SERVICE_VERSION,
    )

    app.include_router(discovery_router)
    app.include_router(actions_router)
    app.include_router(workflows_router)
    app.include_router(legacy_router)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(WorkflowStorageError, storage_error_handler)

    logger.info("{} {} ready (backend: {}, bucket: {})", SERVICE_ID, SERVICE_VERSION,
                settings.storage_backend, settings.bucket)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "wf_storage_server.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
