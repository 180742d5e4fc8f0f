"""Reads the OCR request body and headers into a RequestContext."""

import json
from typing import Any

from fastapi import Request
from starlette.datastructures import UploadFile

from medocr.ingest.exceptions import InvalidRequestBodyError, PayloadTooLargeError
from medocr.ingest.models import RequestContext

FILE_FIELD = "file"
API_KEY_HEADER = "x-gemini-api-key"
MODEL_HEADER = "x-gemini-model"

_FORM_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


async def read_request_context(request: Request, max_upload_bytes: int) -> RequestContext:
    """Collect body fields and override headers, enforcing the upload size limit.

    Raises:
        InvalidRequestBodyError: if a JSON body is not a JSON object.
        PayloadTooLargeError: if the file exceeds ``max_upload_bytes``.
    """
    content_type = request.headers.get("content-type", "").lower()
    fields: dict[str, Any] = {}

    if content_type.startswith(_FORM_TYPES):
        fields = await _read_form(request, max_upload_bytes)
    elif content_type.startswith("application/json"):
        fields = await _read_json(request)

    file_base64 = _as_str(fields.get("file_base64"))
    if file_base64 is not None:
        _check_size(_decoded_size(file_base64), max_upload_bytes)

    return RequestContext(
        file_bytes=fields.get("file_bytes"),
        file_content_type=fields.get("file_content_type"),
        file_name=fields.get("file_name"),
        file_base64=file_base64,
        mime_type=_as_str(fields.get("mime_type")),
        api_key=request.headers.get(API_KEY_HEADER),
        model=request.headers.get(MODEL_HEADER),
    )


async def _read_form(request: Request, max_upload_bytes: int) -> dict[str, Any]:
    form = await request.form()
    fields: dict[str, Any] = {
        "file_base64": form.get("file_base64"),
        "mime_type": form.get("mime_type"),
    }
    upload = form.get(FILE_FIELD)
    if isinstance(upload, UploadFile):
        if upload.size is not None:
            _check_size(upload.size, max_upload_bytes)
        data = await upload.read()
        _check_size(len(data), max_upload_bytes)
        fields["file_bytes"] = data
        fields["file_content_type"] = upload.content_type or ""
        fields["file_name"] = upload.filename
    return fields


async def _read_json(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidRequestBodyError(f"Request body is not valid JSON: {exc}") from exc
    if not isinstance(body, dict):
        raise InvalidRequestBodyError("Request body must be a JSON object")
    return {"file_base64": body.get("file_base64"), "mime_type": body.get("mime_type")}


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _decoded_size(file_base64: str) -> int:
    payload = file_base64.split(",", 1)[1] if "," in file_base64 else file_base64
    return len(payload) * 3 // 4


def _check_size(size: int, max_upload_bytes: int) -> None:
    if size > max_upload_bytes:
        raise PayloadTooLargeError(
            f"File too large: {size} bytes exceeds the {max_upload_bytes} byte limit"
        )
