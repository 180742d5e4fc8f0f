"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import Any, ClassVar

from medocr.extraction.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that answers with a fixed, schema-valid extraction.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESULT: ClassVar[dict[str, object]] = {
        "document_type": "unknown",
        "patient_info": {"name": None, "age": None, "gender": None},
        "date": None,
        "medications": [],
        "findings": [],
        "lab_results": [],
        "notes": None,
        "confidence": "low",
    }

    def generate_content(
        self,
        *,
        api_url: str,
        api_key: str,
        body: dict[str, Any],
    ) -> dict[str, Any]:
        _ = api_url, api_key, body
        return {
            "candidates": [
                {"content": {"parts": [{"text": json.dumps(self.DEFAULT_RESULT)}]}}
            ]
        }
