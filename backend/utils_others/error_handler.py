import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# raised by FastAPI itself when the body bytes cannot be read as JSON (e.g. invalid UTF-8)
BODY_PARSE_DETAIL = "There was an error parsing the body"

class AppError(Exception):
    def __init__(self, message: str, status_code: int = 400, code: str = "app_error"):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message

class DecodeError(AppError):
    def __init__(self, message: str = "Request body could not be decoded"):
        super().__init__(message, status_code=400, code="decode_error")

class ValidationError(AppError):
    def __init__(self, message: str = "Validation error"):
        super().__init__(message, status_code=400, code="validation_error")

class RecordingError(AppError):
    def __init__(self, message: str = "Failed to record notification"):
        super().__init__(message, status_code=500, code="recording_error")

def _field_name(err: Dict[str, Any]) -> str:
    # loc looks like ("body", "chatId"); a bare ("body",) means the whole body
    loc = [str(part) for part in err.get("loc", ()) if part != "body"]
    return ".".join(loc) or "body"

def translate_validation_error(exc: RequestValidationError) -> AppError:
    """Map FastAPI's request validation failure onto our error taxonomy."""
    errors: List[Dict[str, Any]] = list(exc.errors())
    if any(err.get("type") == "json_invalid" for err in errors):
        return DecodeError("Request body is not valid JSON")

    missing = [_field_name(err) for err in errors if err.get("type") == "missing"]
    if missing:
        return ValidationError("Missing required field: " + ", ".join(missing))

    invalid = sorted({_field_name(err) for err in errors})
    return ValidationError("Invalid value for: " + ", ".join(invalid))

def error_body(exc: AppError) -> Dict[str, Any]:
    return {"ok": False, "error": exc.code, "message": exc.message}

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message,
                         exc_info=exc.__cause__ or exc)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return await handle_app_error(request, translate_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 400 and exc.detail == BODY_PARSE_DETAIL:
            return await handle_app_error(request, DecodeError("Request body could not be decoded"))
        return await http_exception_handler(request, exc)
