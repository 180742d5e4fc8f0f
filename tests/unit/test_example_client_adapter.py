"""Tests for ExampleClientAdapter (template/reference adapter)."""

import json

from medocr.extraction.example_client_adapter import ExampleClientAdapter
from medocr.extraction.models import REQUIRED_FIELDS


class TestExampleClientAdapter:
    def test_returns_candidate_with_json_text(self) -> None:
        response = ExampleClientAdapter().generate_content(api_url="u", api_key="k", body={})
        text = response["candidates"][0]["content"]["parts"][0]["text"]
        data = json.loads(text)
        for field in REQUIRED_FIELDS:
            assert field in data

    def test_ignores_input_parameters(self) -> None:
        adapter = ExampleClientAdapter()
        r1 = adapter.generate_content(api_url="a", api_key="k1", body={"x": 1})
        r2 = adapter.generate_content(api_url="b", api_key="k2", body={})
        assert r1 == r2
