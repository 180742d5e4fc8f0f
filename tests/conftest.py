import io
import json
import zipfile
from collections.abc import Callable
from typing import Any

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

_CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '<Override PartName="/word/document.xml" '
    'ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
    "</Types>"
)
_ROOT_RELS = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    '<Relationship Id="rId1" '
    'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument" '
    'Target="word/document.xml"/>'
    "</Relationships>"
)


def build_docx(paragraphs: list[str]) -> bytes:
    """Build a minimal valid DOCX whose body holds one run per paragraph."""
    body = "".join(
        f'<w:p><w:r><w:t xml:space="preserve">{text}</w:t></w:r></w:p>' for text in paragraphs
    )
    document = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        f"<w:body>{body}</w:body></w:document>"
    )
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as archive:
        archive.writestr("[Content_Types].xml", _CONTENT_TYPES)
        archive.writestr("_rels/.rels", _ROOT_RELS)
        archive.writestr("word/document.xml", document)
    return buf.getvalue()


def gemini_response(result: dict[str, Any]) -> dict[str, Any]:
    """Wrap an extraction result the way generateContent returns it."""
    return {"candidates": [{"content": {"parts": [{"text": json.dumps(result)}]}}]}


@pytest.fixture()
def docx_factory() -> Callable[[list[str]], bytes]:
    return build_docx


@pytest.fixture()
def patient_docx_bytes() -> bytes:
    return build_docx(["Patient: John Doe"])


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hemoglobin 13.5 g/dL")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def minimal_result() -> dict[str, Any]:
    """Smallest extraction result that satisfies the response schema."""
    return {
        "document_type": "clinical_note",
        "patient_info": {"name": "John Doe"},
        "date": "2025-01-10",
        "findings": ["BP: 120/80"],
        "confidence": "high",
    }


@pytest.fixture()
def gemini_envelope() -> Callable[[dict[str, Any]], dict[str, Any]]:
    return gemini_response
