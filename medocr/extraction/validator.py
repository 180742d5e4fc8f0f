"""Soft checks of the provider output against the response schema.

The provider's structured-output mode already constrains the shape, so the
result is passed through as-is; these checks only report drift.
"""

from typing import Any

from medocr.extraction.models import (
    CONFIDENCE_LEVELS,
    DOCUMENT_TYPES,
    LAB_STATUSES,
    REQUIRED_FIELDS,
)


def schema_warnings(data: dict[str, Any]) -> list[str]:
    """Return human-readable descriptions of schema deviations in ``data``."""
    warnings = [f"missing required field '{name}'" for name in REQUIRED_FIELDS if name not in data]

    document_type = data.get("document_type")
    if document_type is not None and document_type not in DOCUMENT_TYPES:
        warnings.append(f"unexpected document_type {document_type!r}")

    confidence = data.get("confidence")
    if confidence is not None and confidence not in CONFIDENCE_LEVELS:
        warnings.append(f"unexpected confidence {confidence!r}")

    lab_results = data.get("lab_results") or []
    if not isinstance(lab_results, list):
        warnings.append("'lab_results' is not a list")
        return warnings
    for i, lab in enumerate(lab_results):
        status = lab.get("status") if isinstance(lab, dict) else None
        if status is not None and status not in LAB_STATUSES:
            warnings.append(f"lab_results[{i}] has unexpected status {status!r}")
    return warnings
