from abc import ABC, abstractmethod


class BaseDocxExtractor(ABC):
    """Contract for all DOCX text extraction adapters."""

    @abstractmethod
    def extract(self, docx_bytes: bytes) -> str:
        """Extract raw text from DOCX bytes.

        Formatting, images and embedded objects are discarded.

        Args:
            docx_bytes: Raw DOCX file content.

        Returns:
            Extracted text with paragraphs separated by blank lines.

        Raises:
            DocxExtractionError: if extraction fails for any reason.
        """


def tidy_text(text: str) -> str:
    """Drop trailing whitespace on each line and surrounding blank lines."""
    lines = [line.rstrip() for line in text.splitlines()]
    return "\n".join(lines).strip()
