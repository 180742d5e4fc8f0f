from typing import Any

from pydantic import BaseModel


class OcrMeta(BaseModel):
    model: str
    input_method: str
    processed_at: str


class OcrSuccessResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]
    meta: OcrMeta


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorDetail


class HealthResponse(BaseModel):
    status: str
    timestamp: str
