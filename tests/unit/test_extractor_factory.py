"""Tests for ExtractorFactory."""

from unittest.mock import patch

import pytest

from medocr.config.settings import Settings
from medocr.extraction.base import BaseExtractor
from medocr.extraction.extractor import Extractor
from medocr.extraction.factory import ExtractorFactory
from medocr.extraction.models import Credentials
from medocr.ingest.models import InputMethod, NormalizedPayload


class TestExtractorFactory:
    def test_example_provider_works_without_api_key(self) -> None:
        settings = Settings(extraction_provider="example", gemini_api_key="")
        extractor = ExtractorFactory.create(settings)
        assert isinstance(extractor, BaseExtractor)
        payload = NormalizedPayload("QQ==", "text/plain", InputMethod.PLAIN_TEXT)
        result = extractor.extract(payload, Credentials())
        assert result["document_type"] == "unknown"

    def test_creates_gemini_extractor(self) -> None:
        settings = Settings(extraction_provider="gemini", gemini_api_key="k")
        with patch("medocr.extraction.factory.GeminiClientAdapter"):
            extractor = ExtractorFactory.create(settings)
        assert isinstance(extractor, Extractor)

    def test_uses_timeout_setting(self) -> None:
        settings = Settings(extraction_provider="gemini", gemini_timeout_seconds=42)
        with patch("medocr.extraction.factory.GeminiClientAdapter") as mock_adapter:
            ExtractorFactory.create(settings)
        mock_adapter.assert_called_once_with(timeout_seconds=42)

    def test_uses_model_settings(self) -> None:
        settings = Settings(
            extraction_provider="gemini",
            gemini_model_name="gemini-1.5-pro",
            gemini_api_url="",
        )
        with patch("medocr.extraction.factory.GeminiClientAdapter"):
            extractor = ExtractorFactory.create(settings)
        assert extractor.resolve_model(None) == "gemini-1.5-pro"

    def test_provider_is_case_insensitive(self) -> None:
        settings = Settings(extraction_provider="Example")
        assert isinstance(ExtractorFactory.create(settings), Extractor)

    def test_raises_for_unknown_provider(self) -> None:
        settings = Settings(extraction_provider="openai")
        with pytest.raises(ValueError, match="Unknown extraction provider"):
            ExtractorFactory.create(settings)
