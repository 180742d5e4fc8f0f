from dataclasses import dataclass
from enum import Enum


class SourceKind(str, Enum):
    """Where in the request the document bytes came from."""

    MULTIPART = "multipart"
    BASE64_JSON = "base64_json"


class InputMethod(str, Enum):
    """How the document is presented to the extraction provider."""

    IMAGE = "image"
    PDF = "pdf"
    DOCX_AS_TEXT = "docx_as_text"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class RequestContext:
    """Request-scoped inputs for one OCR call (body fields and header overrides)."""

    file_bytes: bytes | None = None
    file_content_type: str | None = None
    file_name: str | None = None
    file_base64: str | None = None
    mime_type: str | None = None
    api_key: str | None = None
    model: str | None = None

    @property
    def has_file_part(self) -> bool:
        return self.file_bytes is not None

    @property
    def has_base64_fields(self) -> bool:
        return bool(self.file_base64) and bool(self.mime_type)


@dataclass(frozen=True)
class UploadedDocument:
    """Raw document exactly as received, before any conversion."""

    raw_bytes: bytes
    declared_mime_type: str
    source_kind: SourceKind
    filename: str | None = None


@dataclass(frozen=True)
class NormalizedPayload:
    """Document content ready to be embedded as inline data in a provider request."""

    base64_content: str
    effective_mime_type: str
    input_method: InputMethod
