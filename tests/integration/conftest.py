import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from medocr.api.app import create_app
from medocr.config.settings import Settings
from medocr.docx.zipxml_adapter import ZipXmlAdapter
from medocr.extraction.extractor import Extractor
from medocr.extraction.gemini_client_adapter import GeminiClientAdapter
from medocr.ingest.normalizer import FileNormalizer
from medocr.processor.processor import OcrProcessor

Handler = Callable[[httpx.Request], httpx.Response]


class ProviderStub:
    """Records Gemini requests and answers them with a configurable handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Handler = lambda request: httpx.Response(500)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def respond_with_result(self, result: dict[str, Any]) -> None:
        text = json.dumps(result)
        self.handler = lambda request: httpx.Response(
            200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]}
        )

    def respond_with_error(self, status: int, message: str) -> None:
        self.handler = lambda request: httpx.Response(
            status, json={"error": {"code": status, "message": message}}
        )

    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture()
def provider() -> ProviderStub:
    return ProviderStub()


@pytest.fixture()
def settings(tmp_path: Any) -> Settings:
    return Settings(
        gemini_api_key="server-key",
        gemini_api_url="",
        gemini_model_name="gemini-2.0-flash",
        max_upload_bytes=1024 * 1024,
        static_dir=str(tmp_path / "no-ui"),
    )


@pytest.fixture()
def client(settings: Settings, provider: ProviderStub) -> TestClient:
    extractor = Extractor(
        client=GeminiClientAdapter(timeout_seconds=5, transport=httpx.MockTransport(provider)),
        api_base_url=settings.gemini_api_base_url,
        default_model=settings.gemini_model_name,
        default_api_key=settings.gemini_api_key,
    )
    processor = OcrProcessor(normalizer=FileNormalizer(ZipXmlAdapter()), extractor=extractor)
    app = create_app(settings, processor=processor)
    return TestClient(app, raise_server_exceptions=False)
