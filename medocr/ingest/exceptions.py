class IngestError(Exception):
    """Base exception for all input resolution and normalization errors."""


class MissingInputError(IngestError):
    """Raised when the request carries neither a file part nor base64 + MIME fields."""


class MalformedBase64Error(IngestError):
    """Raised when the base64 payload of a JSON request cannot be decoded."""


class UnsupportedMediaTypeError(IngestError):
    """Raised when the document MIME type is not in the supported set."""


class DocumentConversionError(IngestError):
    """Raised when a DOCX document cannot be converted to plain text."""


class PayloadTooLargeError(IngestError):
    """Raised by the ingress layer when an upload exceeds the configured size limit."""


class InvalidRequestBodyError(IngestError):
    """Raised when a JSON request body cannot be parsed into an object."""
