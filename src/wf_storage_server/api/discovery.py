from fastapi import APIRouter, Depends

from wf_storage_server.config.settings import (
    SERVICE_ID,
    SERVICE_NAME,
    SERVICE_VERSION,
    Settings,
    get_settings,
)

router = APIRouter(tags=["system"])

CAPABILITIES = ["document-storage", "workflow-storage", "data-storage"]


@router.get("/health")
def health():
    return {"status": "ok", "service": SERVICE_ID, "version": SERVICE_VERSION}


@router.get("/v1/api/docs")
def service_docs(settings: Settings = Depends(get_settings)):
    return {
        "service_id": SERVICE_ID,
        "name": SERVICE_NAME,
        "description": "Storage and retrieval service for workflow definitions and data",
        "version": "v1",
        "port": settings.port,
        "capabilities": CAPABILITIES,
        "endpoints": [
            {"method": "POST", "path": "/v1/api/semantic/action",
             "description": "Execute storage operations via semantic actions (primary interface)"},
            {"method": "POST", "path": "/v1/api/workflows",
             "description": "Store workflow (REST convenience - converts to CreateAction)"},
            {"method": "GET", "path": "/v1/api/workflows/{id}",
             "description": "Retrieve workflow (REST convenience - converts to RetrieveAction)"},
            {"method": "PUT", "path": "/v1/api/workflows/{id}",
             "description": "Update workflow (REST convenience - converts to UpdateAction)"},
            {"method": "DELETE", "path": "/v1/api/workflows/{id}",
             "description": "Delete workflow (REST convenience - converts to DeleteAction)"},
            {"method": "POST", "path": "/v1/api/store", "description": "Store workflow data (legacy)"},
            {"method": "GET", "path": "/v1/api/fetch/{key}", "description": "Fetch workflow data by key (legacy)"},
            {"method": "GET", "path": "/health", "description": "Health check endpoint"},
        ],
        "storage": {
            "scheme": settings.uri_scheme,
            "bucket": settings.bucket,
            "key_layout": "workflow-results/{namespace}/{identifier}.json",
        },
    }
