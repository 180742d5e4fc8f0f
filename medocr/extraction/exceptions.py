class ExtractionError(Exception):
    """Raised when structured extraction fails."""


class ProviderUnreachableError(ExtractionError):
    """Raised when the AI provider cannot be reached or does not answer in time."""


class MalformedProviderResponseError(ExtractionError):
    """Raised when the provider answers but its output is not a usable JSON object."""


class ProviderError(ExtractionError):
    """Raised when the AI provider rejects the request with an HTTP error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class QuotaExceededError(ProviderError):
    """Raised on HTTP 429 from the provider."""


class AuthenticationFailedError(ProviderError):
    """Raised on HTTP 401/403 from the provider, or when no API key is available."""


class ModelNotFoundError(ProviderError):
    """Raised on HTTP 404 from the provider (unknown model for this key or region)."""
