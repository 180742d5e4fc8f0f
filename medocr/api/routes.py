from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from medocr.api.request_context import read_request_context
from medocr.api.schemas import ErrorResponse, HealthResponse, OcrSuccessResponse
from medocr.logging.logger import Log
from medocr.processor.processor import utc_timestamp

router = APIRouter()


@router.post(
    "/api/medical-ocr",
    response_model=OcrSuccessResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def medical_ocr(request: Request) -> OcrSuccessResponse:
    """Extract structured medical data from an uploaded or base64-embedded document."""
    Log.info("--- Medical OCR Request Received ---")
    settings = request.app.state.settings
    processor = request.app.state.processor

    context = await read_request_context(request, settings.max_upload_bytes)
    envelope = await run_in_threadpool(processor.process, context)
    return OcrSuccessResponse(**envelope)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="OK", timestamp=utc_timestamp())
