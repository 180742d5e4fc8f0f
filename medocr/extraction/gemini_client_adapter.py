import json
from typing import Any

import httpx

from medocr.extraction.client_base import BaseExtractionClient
from medocr.extraction.exceptions import (
    AuthenticationFailedError,
    MalformedProviderResponseError,
    ModelNotFoundError,
    ProviderError,
    ProviderUnreachableError,
    QuotaExceededError,
)
from medocr.logging.logger import Log


class GeminiClientAdapter(BaseExtractionClient):
    """Extraction client built on the Gemini generateContent REST API."""

    def __init__(
        self,
        *,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            timeout=httpx.Timeout(float(timeout_seconds)),
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    def generate_content(
        self,
        *,
        api_url: str,
        api_key: str,
        body: dict[str, Any],
    ) -> dict[str, Any]:
        try:
            response = self._client.post(api_url, params={"key": api_key}, json=body)
        except httpx.TimeoutException as exc:
            raise ProviderUnreachableError(
                f"Failed to process medical document: provider timed out ({exc})"
            ) from exc
        except httpx.TransportError as exc:
            raise ProviderUnreachableError(
                f"Failed to process medical document: {exc}"
            ) from exc

        if response.status_code >= 400:
            raise self._error_for(response)

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedProviderResponseError(
                f"Gemini API returned a non-JSON body: {exc}"
            ) from exc
        if not isinstance(payload, dict):
            raise MalformedProviderResponseError("Gemini API response must be an object")
        return payload

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _error_for(response: httpx.Response) -> ProviderError:
        status = response.status_code
        message = _provider_message(response)
        Log.error(f"Gemini API Error details (HTTP {status}): {response.text}")

        if status == 429:
            return QuotaExceededError(f"Gemini API Quota Exceeded: {message}", status)
        if status in (401, 403):
            return AuthenticationFailedError(
                f"Gemini API Auth Error: {message} (Check your API Key)", status
            )
        if status == 404:
            return ModelNotFoundError(
                f"Gemini API Model Error: {message} "
                "(Selected model might not exist for your region/key)",
                status,
            )
        return ProviderError(f"Gemini API Error ({status}): {message}", status)


def _provider_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text.strip() or "Unknown Gemini API Error"
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return "Unknown Gemini API Error"
