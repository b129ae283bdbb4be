from typing import Any, Dict, Optional
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from pydantic import BaseModel, Field

from wf_storage_server.core.errors import WorkflowStorageError


class ServiceError(BaseModel):
    code: str = Field(..., description="Stable machine-readable code")
    message: str = Field(..., description="Human-readable explanation")
    status: int = Field(..., description="HTTP status code duplicated here for convenience")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Optional diagnostic details")

    @staticmethod
    def code_for_status(status: int) -> str:
        return {
            400: "bad_request",
            401: "unauthorized",
            403: "forbidden",
            404: "not_found",
            405: "method_not_allowed",
            422: "unprocessable_entity",
            500: "internal_error",
            501: "not_implemented",
            502: "bad_gateway",
            503: "unavailable",
        }.get(status, "error")


def error_response(status: int, message: str, code: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> JSONResponse:
    err = ServiceError(
        code=code or ServiceError.code_for_status(status),
        message=message,
        status=status,
        details=details,
    )
    return JSONResponse({"error": err.model_dump(exclude_none=True)}, status_code=status)


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Error"
    details = exc.detail if isinstance(exc.detail, dict) else None
    return error_response(exc.status_code, message, details=details)


def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Normalize FastAPI/Pydantic 422 into 400 with consistent shape
    return error_response(400, "Invalid request", code="bad_request", details={"errors": jsonable_encoder(exc.errors())})


def storage_error_handler(request: Request, exc: WorkflowStorageError) -> JSONResponse:
    return error_response(exc.status, exc.message, code=exc.code)
