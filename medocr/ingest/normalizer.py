"""Turns an uploaded document into a provider-ready base64 payload."""

import base64

from medocr.docx.base import BaseDocxExtractor
from medocr.docx.exceptions import DocxExtractionError
from medocr.ingest.exceptions import DocumentConversionError, UnsupportedMediaTypeError
from medocr.ingest.models import InputMethod, NormalizedPayload, UploadedDocument
from medocr.logging.logger import Log

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PDF_MIME_TYPE = "application/pdf"
TEXT_MIME_TYPE = "text/plain"

SUPPORTED_MIME_TYPES = frozenset({
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/heic",
    "image/heif",
    PDF_MIME_TYPE,
    DOCX_MIME_TYPE,
    TEXT_MIME_TYPE,
})


def canonical_mime_type(mime_type: str) -> str:
    """Lowercase a MIME type and drop parameters such as ``; charset=utf-8``."""
    return mime_type.split(";", 1)[0].strip().lower()


class FileNormalizer:
    """Validates the MIME type and converts DOCX to plain text; passes everything else through."""

    def __init__(self, docx_extractor: BaseDocxExtractor) -> None:
        self._docx_extractor = docx_extractor

    def normalize(self, document: UploadedDocument) -> NormalizedPayload:
        """Build the NormalizedPayload for a document.

        Raises:
            UnsupportedMediaTypeError: if the MIME type is not supported.
            DocumentConversionError: if DOCX text extraction fails.
        """
        mime_type = canonical_mime_type(document.declared_mime_type)
        if mime_type not in SUPPORTED_MIME_TYPES:
            raise UnsupportedMediaTypeError(
                f"Unsupported MIME type: {document.declared_mime_type or '<empty>'}"
            )

        if mime_type == DOCX_MIME_TYPE:
            return self._docx_as_text(document)

        if mime_type.startswith("image/"):
            input_method = InputMethod.IMAGE
        elif mime_type == PDF_MIME_TYPE:
            input_method = InputMethod.PDF
        else:
            input_method = InputMethod.PLAIN_TEXT

        return NormalizedPayload(
            base64_content=_b64(document.raw_bytes),
            effective_mime_type=mime_type,
            input_method=input_method,
        )

    def _docx_as_text(self, document: UploadedDocument) -> NormalizedPayload:
        try:
            text = self._docx_extractor.extract(document.raw_bytes)
        except DocxExtractionError as exc:
            raise DocumentConversionError(f"Failed to convert DOCX to text: {exc}") from exc
        Log.info(f"Converted DOCX to {len(text)} chars of plain text")
        return NormalizedPayload(
            base64_content=_b64(text.encode("utf-8")),
            effective_mime_type=TEXT_MIME_TYPE,
            input_method=InputMethod.DOCX_AS_TEXT,
        )


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
