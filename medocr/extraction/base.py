from abc import ABC, abstractmethod

from medocr.extraction.models import Credentials, ExtractionResult
from medocr.ingest.models import NormalizedPayload


class BaseExtractor(ABC):
    """Contract for structured medical data extraction."""

    @abstractmethod
    def extract(
        self,
        payload: NormalizedPayload,
        credentials: Credentials,
        model_override: str | None = None,
    ) -> ExtractionResult:
        """Extract structured medical data from a normalized document.

        Args:
            payload: Base64 document content with its effective MIME type.
            credentials: Caller-supplied credentials (may be empty).
            model_override: Caller-selected model identifier, if any.

        Returns:
            The provider's JSON object, shaped by the extraction schema.

        Raises:
            ExtractionError: on any failure.
        """

    @abstractmethod
    def resolve_model(self, model_override: str | None = None) -> str:
        """Name the model that a call with this override would actually use."""

    def close(self) -> None:
        """Release resources held by the underlying provider client."""
