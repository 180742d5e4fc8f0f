class DocxExtractionError(Exception):
    """Raised when text cannot be extracted from a DOCX archive."""
