from abc import ABC, abstractmethod
from typing import Any


class BaseExtractionClient(ABC):
    """Contract for provider-specific extraction AI clients."""

    @abstractmethod
    def generate_content(
        self,
        *,
        api_url: str,
        api_key: str,
        body: dict[str, Any],
    ) -> dict[str, Any]:
        """Send one generateContent request and return the decoded response body."""

    def close(self) -> None:
        """Release network resources held by the client."""
