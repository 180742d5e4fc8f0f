"""Centralized mapping of failures to HTTP status codes and error envelopes."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from medocr.api.schemas import ErrorDetail, ErrorResponse
from medocr.extraction.exceptions import (
    AuthenticationFailedError,
    ExtractionError,
    MalformedProviderResponseError,
    ModelNotFoundError,
    ProviderError,
    ProviderUnreachableError,
    QuotaExceededError,
)
from medocr.ingest.exceptions import (
    DocumentConversionError,
    IngestError,
    InvalidRequestBodyError,
    MalformedBase64Error,
    MissingInputError,
    PayloadTooLargeError,
    UnsupportedMediaTypeError,
)
from medocr.logging.logger import Log

INVALID_INPUT = "INVALID_INPUT"
AUTH_FAILED = "AUTH_FAILED"
QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
MODEL_NOT_FOUND = "MODEL_NOT_FOUND"
OCR_PROCESSING_FAILED = "OCR_PROCESSING_FAILED"
NOT_FOUND = "NOT_FOUND"

ERROR_MAP: dict[type[Exception], tuple[int, str]] = {
    MissingInputError: (400, INVALID_INPUT),
    MalformedBase64Error: (400, INVALID_INPUT),
    InvalidRequestBodyError: (400, INVALID_INPUT),
    UnsupportedMediaTypeError: (400, INVALID_INPUT),
    DocumentConversionError: (400, INVALID_INPUT),
    PayloadTooLargeError: (413, INVALID_INPUT),
    IngestError: (400, INVALID_INPUT),
    QuotaExceededError: (429, QUOTA_EXCEEDED),
    AuthenticationFailedError: (401, AUTH_FAILED),
    ModelNotFoundError: (404, MODEL_NOT_FOUND),
    ProviderUnreachableError: (502, OCR_PROCESSING_FAILED),
    MalformedProviderResponseError: (502, OCR_PROCESSING_FAILED),
    ProviderError: (502, OCR_PROCESSING_FAILED),
    ExtractionError: (500, OCR_PROCESSING_FAILED),
}


def classify(exc: Exception) -> tuple[int, str]:
    """Return (http_status, error_code) for the most specific mapped exception type."""
    for cls in type(exc).__mro__:
        if cls in ERROR_MAP:
            return ERROR_MAP[cls]
    return 500, OCR_PROCESSING_FAILED


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    status_code, code = classify(exc)
    Log.error(
        f"{request.method} {request.url.path} failed with {type(exc).__name__} "
        f"-> {status_code} {code}: {exc}"
    )
    return error_response(status_code, code, str(exc))


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (404, 405):
        return error_response(404, NOT_FOUND, f"Route {request.url.path} not found")
    code = INVALID_INPUT if exc.status_code < 500 else OCR_PROCESSING_FAILED
    Log.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return error_response(exc.status_code, code, str(exc.detail))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    Log.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    return error_response(400, INVALID_INPUT, "Invalid request")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return error_response(500, OCR_PROCESSING_FAILED, "Internal Server Error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IngestError, handle_domain_error)
    app.add_exception_handler(ExtractionError, handle_domain_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
