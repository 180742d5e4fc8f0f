import base64
import binascii

from medocr.ingest.exceptions import MalformedBase64Error, MissingInputError
from medocr.ingest.models import RequestContext, SourceKind, UploadedDocument
from medocr.logging.logger import Log


def strip_data_uri(value: str) -> str:
    """Drop a leading ``data:<mime>;base64,`` prefix, if any."""
    if "," in value:
        return value.split(",", 1)[1]
    return value


def decode_base64(value: str) -> bytes:
    """Decode a (possibly data-URI prefixed) base64 string.

    Whitespace is ignored and missing trailing ``=`` padding is restored.

    Raises:
        MalformedBase64Error: if the payload is not valid base64.
    """
    payload = "".join(strip_data_uri(value).split())
    payload += "=" * (-len(payload) % 4)
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedBase64Error(f"Invalid base64 payload: {exc}") from exc


def resolve_document(context: RequestContext) -> UploadedDocument:
    """Pick the document out of the request context.

    A multipart file part wins over base64 JSON fields when both are present.

    Raises:
        MissingInputError: if neither source is present.
        MalformedBase64Error: if the base64 field cannot be decoded.
    """
    if context.has_file_part:
        if context.has_base64_fields:
            Log.warning("Request carries both a file part and file_base64; using the file part")
        return UploadedDocument(
            raw_bytes=context.file_bytes or b"",
            declared_mime_type=context.file_content_type or "",
            source_kind=SourceKind.MULTIPART,
            filename=context.file_name,
        )

    if context.has_base64_fields:
        return UploadedDocument(
            raw_bytes=decode_base64(context.file_base64 or ""),
            declared_mime_type=context.mime_type or "",
            source_kind=SourceKind.BASE64_JSON,
        )

    raise MissingInputError("No file provided in request.")
