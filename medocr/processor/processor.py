from datetime import datetime, timezone
from typing import Any

from medocr.config.settings import Settings
from medocr.docx.factory import DocxExtractorFactory
from medocr.extraction.base import BaseExtractor
from medocr.extraction.factory import ExtractorFactory
from medocr.extraction.models import Credentials
from medocr.ingest.file_resolver import resolve_document
from medocr.ingest.models import RequestContext
from medocr.ingest.normalizer import FileNormalizer
from medocr.logging.logger import Log


class OcrProcessor:
    """Orchestrates one OCR request.

    Pipeline: resolve -> normalize -> extract -> envelope.
    Errors from any step propagate to the caller unchanged.
    """

    def __init__(self, normalizer: FileNormalizer, extractor: BaseExtractor) -> None:
        self._normalizer = normalizer
        self._extractor = extractor

    def process(self, context: RequestContext) -> dict[str, Any]:
        """Run the pipeline and return the success envelope."""
        document = resolve_document(context)
        payload = self._normalizer.normalize(document)
        Log.info(
            f"File resolved: mimeType={payload.effective_mime_type}, "
            f"inputMethod={payload.input_method.value}, "
            f"base64Length={len(payload.base64_content)}"
        )

        data = self._extractor.extract(
            payload,
            Credentials(api_key=context.api_key),
            model_override=context.model,
        )

        return {
            "success": True,
            "data": data,
            "meta": {
                "model": self._extractor.resolve_model(context.model),
                "input_method": payload.input_method.value,
                "processed_at": utc_timestamp(),
            },
        }

    def close(self) -> None:
        self._extractor.close()


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_processor(settings: Settings) -> OcrProcessor:
    """Build an OcrProcessor with all required adapters."""
    normalizer = FileNormalizer(DocxExtractorFactory.create(settings))
    extractor = ExtractorFactory.create(settings)
    return OcrProcessor(normalizer=normalizer, extractor=extractor)
