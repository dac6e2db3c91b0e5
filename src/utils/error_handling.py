"""
Centralized error handling and logging
Every error response carries a structured body with a trace ID matching the log entry.
"""

import json
import logging
import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from contextvars import ContextVar

from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware

# Context variables for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
endpoint_context_var: ContextVar[str] = ContextVar('endpoint_context', default='')

logger = logging.getLogger(__name__)


class ErrorHandlingConfig:
    """Error handling behavior"""

    SENSITIVE_FIELD_PATTERNS = ['password', 'pass', 'token', 'secret', 'authorization']
    LOG_REQUEST_BODIES = True
    MAX_BODY_LOG_SIZE = 2000

    @classmethod
    def is_sensitive_field(cls, field_name: str) -> bool:
        field_lower = field_name.lower()
        return any(pattern in field_lower for pattern in cls.SENSITIVE_FIELD_PATTERNS)

    @classmethod
    def sanitize_data(cls, data: Any) -> Any:
        """Redact sensitive keys and truncate long strings before logging"""
        if isinstance(data, dict):
            return {
                key: "***REDACTED***" if cls.is_sensitive_field(str(key)) else cls.sanitize_data(value)
                for key, value in data.items()
            }
        if isinstance(data, list):
            return [cls.sanitize_data(item) for item in data]
        if isinstance(data, str) and len(data) > cls.MAX_BODY_LOG_SIZE:
            return data[:cls.MAX_BODY_LOG_SIZE] + "...[TRUNCATED]"
        return data


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _captured_body(request: Request) -> Optional[str]:
    body = getattr(request.state, 'captured_body', None)
    if not body:
        return None
    try:
        return body.decode('utf-8')
    except UnicodeDecodeError:
        return "DECODE_ERROR"


class StructuredLogger:
    """Structured JSON log entries for errors"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[Exception] = None,
        extra_context: Optional[Dict] = None,
        include_traceback: bool = True
    ) -> str:
        """Log an error entry and return its trace ID"""
        trace_id = request_id_var.get('') or str(uuid.uuid4())[:8]

        log_entry: Dict[str, Any] = {
            "timestamp": _now(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
        }

        if request is not None:
            log_entry["request"] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "client_ip": request.client.host if request.client else None,
            }

        if exception is not None:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception),
            }
            if include_traceback:
                log_entry["exception"]["traceback"] = "".join(
                    traceback.format_exception(type(exception), exception, exception.__traceback__)
                )

        if extra_context:
            log_entry["context"] = ErrorHandlingConfig.sanitize_data(extra_context)

        endpoint_context = endpoint_context_var.get('')
        if endpoint_context:
            log_entry["endpoint_context"] = endpoint_context

        logger.error(json.dumps(log_entry, indent=2, default=str))
        return trace_id


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a trace ID per request and keeps the body for error logs"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)
        endpoint_context_var.set('')

        body = None
        if ErrorHandlingConfig.LOG_REQUEST_BODIES and request.method in ("POST", "PUT"):
            body = await request.body()

        request.state.captured_body = body
        request.state.trace_id = trace_id

        response = await call_next(request)
        response.headers["X-Trace-ID"] = trace_id
        return response


def _error_body(error: str, message: Any, trace_id: Optional[str]) -> Dict[str, Any]:
    content = {"error": error, "message": message}
    if trace_id:
        content["trace_id"] = trace_id
    content["timestamp"] = _now()
    return content


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Structured body for HTTP exceptions raised by route handlers"""
    trace_id = getattr(request.state, 'trace_id', None)

    if exc.status_code >= 500:
        body_str = _captured_body(request)
        trace_id = StructuredLogger.log_error(
            f"http_{exc.status_code}",
            f"HTTP {exc.status_code}: {exc.detail}",
            request=request,
            exception=exc,
            extra_context={"request_body": body_str} if body_str else None,
            include_traceback=False
        )
    else:
        logger.info(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(f"HTTP {exc.status_code}", exc.detail, trace_id),
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors (HTTP 422)"""
    validation_details = [
        {
            "field": " -> ".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Unknown validation error"),
            "type": error.get("type", "unknown"),
        }
        for error in exc.errors()
    ]

    body_str = _captured_body(request)
    trace_id = StructuredLogger.log_error(
        "validation_error_422",
        f"Request validation failed: {len(validation_details)} validation errors",
        request=request,
        extra_context={
            "validation_errors": validation_details,
            "request_body": body_str,
        },
        include_traceback=False
    )

    content = _error_body("Validation Error", "Request validation failed", trace_id)
    content["detail"] = validation_details
    content["error_count"] = len(validation_details)
    return JSONResponse(status_code=422, content=content)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions without exposing internal details"""
    body_str = _captured_body(request)
    trace_id = StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {str(exc)}",
        request=request,
        exception=exc,
        extra_context={"request_body": body_str} if body_str else None
    )

    return JSONResponse(
        status_code=500,
        content=_error_body("Internal Server Error", "An unexpected error occurred", trace_id)
    )


def setup_error_handling(app):
    """Install the request context middleware and the exception handlers"""
    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling initialized")


def set_endpoint_context(context: str):
    """Set context for current endpoint (call at start of endpoint functions)"""
    endpoint_context_var.set(context)
