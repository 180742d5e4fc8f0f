import io

import mammoth  # type: ignore[import-untyped]

from medocr.docx.base import BaseDocxExtractor, tidy_text
from medocr.docx.exceptions import DocxExtractionError


class MammothAdapter(BaseDocxExtractor):
    """Extracts raw text from DOCX using mammoth."""

    def extract(self, docx_bytes: bytes) -> str:
        try:
            result = mammoth.extract_raw_text(io.BytesIO(docx_bytes))
        except Exception as exc:
            raise DocxExtractionError(f"mammoth extraction failed: {exc}") from exc
        return tidy_text(result.value)
