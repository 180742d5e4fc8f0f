"""Gemini-backed structured extraction of medical documents."""

import json
import re
from pathlib import Path
from typing import Any

from medocr.extraction.base import BaseExtractor
from medocr.extraction.client_base import BaseExtractionClient
from medocr.extraction.exceptions import (
    AuthenticationFailedError,
    MalformedProviderResponseError,
)
from medocr.extraction.models import Credentials, ExtractionResult
from medocr.extraction.prompt_loader import load_json_schema, load_prompt
from medocr.extraction.validator import schema_warnings
from medocr.ingest.models import NormalizedPayload
from medocr.logging.logger import Log

_MODEL_IN_URL = re.compile(r"/models/([^/:]+):generateContent")


def is_usable_model(model: str | None) -> bool:
    """True for a non-blank override that is not the literal string 'undefined'."""
    if model is None:
        return False
    stripped = model.strip()
    return bool(stripped) and stripped != "undefined"


class Extractor(BaseExtractor):
    """Builds a generateContent request and turns the answer into an ExtractionResult."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        api_base_url: str,
        default_model: str,
        default_api_key: str = "",
        default_api_url: str = "",
        temperature: float = 0.1,
        max_output_tokens: int = 4096,
        prompt_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._api_base_url = api_base_url.rstrip("/")
        self._default_model = default_model
        self._default_api_key = default_api_key
        self._default_api_url = default_api_url.strip()
        self._temperature = max(0.0, min(0.2, temperature))
        if self._temperature != temperature:
            Log.warning(
                f"Temperature {temperature} is outside 0.0-0.2, using {self._temperature}"
            )
        self._max_output_tokens = max_output_tokens
        self._prompt = load_prompt(prompt_path)
        self._response_schema = json.loads(load_json_schema(json_schema_path))

    def extract(
        self,
        payload: NormalizedPayload,
        credentials: Credentials,
        model_override: str | None = None,
    ) -> ExtractionResult:
        api_key, key_source = credentials.resolve(self._default_api_key)
        model = self.resolve_model(model_override)
        Log.info(f"Processing with API Key: {key_source} and Model: {model}")
        if not api_key:
            raise AuthenticationFailedError(
                "Gemini API Auth Error: no API key configured (Check your API Key)"
            )

        api_url = self._api_url(model_override)
        Log.info(f"Using API URL: {api_url}")

        response = self._client.generate_content(
            api_url=api_url,
            api_key=api_key,
            body=self.build_request(payload),
        )
        result = self._parse_json(self._candidate_text(response))

        for warning in schema_warnings(result):
            Log.warning(f"Extraction result deviates from schema: {warning}")
        Log.info(
            f"Extraction complete: document_type={result.get('document_type')}, "
            f"confidence={result.get('confidence')}"
        )
        return result

    def close(self) -> None:
        self._client.close()

    def resolve_model(self, model_override: str | None = None) -> str:
        if is_usable_model(model_override):
            return (model_override or "").strip()
        if self._default_api_url:
            match = _MODEL_IN_URL.search(self._default_api_url)
            if match:
                return match.group(1)
        return self._default_model

    def build_request(self, payload: NormalizedPayload) -> dict[str, Any]:
        """Assemble the generateContent body for one document."""
        return {
            "contents": [
                {
                    "parts": [
                        {
                            "inline_data": {
                                "mime_type": payload.effective_mime_type,
                                "data": payload.base64_content,
                            }
                        },
                        {"text": self._prompt},
                    ]
                }
            ],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": self._response_schema,
                "temperature": self._temperature,
                "maxOutputTokens": self._max_output_tokens,
            },
        }

    def _api_url(self, model_override: str | None) -> str:
        if is_usable_model(model_override):
            return f"{self._api_base_url}/models/{(model_override or '').strip()}:generateContent"
        if self._default_api_url:
            return self._default_api_url
        return f"{self._api_base_url}/models/{self._default_model}:generateContent"

    @staticmethod
    def _candidate_text(response: dict[str, Any]) -> str:
        try:
            text = response["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise MalformedProviderResponseError(
                f"Gemini API response has no candidate text: {exc!r}"
            ) from exc
        if not isinstance(text, str):
            raise MalformedProviderResponseError("Gemini API candidate text must be a string")
        return text

    @staticmethod
    def _parse_json(raw: str) -> ExtractionResult:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            newline = cleaned.find("\n")
            if newline == -1:
                cleaned = cleaned[3:].removeprefix("json")
            else:
                cleaned = cleaned[newline + 1:]
        cleaned = cleaned.strip().removesuffix("```")

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise MalformedProviderResponseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise MalformedProviderResponseError("JSON response must be an object")
        return parsed
