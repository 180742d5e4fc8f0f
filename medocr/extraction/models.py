from dataclasses import dataclass
from typing import Any

ExtractionResult = dict[str, Any]

DOCUMENT_TYPES = (
    "prescription",
    "lab_report",
    "radiology_report",
    "discharge_summary",
    "clinical_note",
    "unknown",
)
LAB_STATUSES = ("normal", "high", "low", "critical")
CONFIDENCE_LEVELS = ("high", "medium", "low")
REQUIRED_FIELDS = ("document_type", "patient_info", "date", "confidence")


@dataclass(frozen=True)
class Credentials:
    """Caller-supplied provider credentials; empty means use the server default."""

    api_key: str | None = None

    def resolve(self, default_api_key: str) -> tuple[str, str]:
        """Return (api_key, source) where source is USER-PROVIDED or SERVER-DEFAULT."""
        if self.api_key and self.api_key.strip():
            return self.api_key.strip(), "USER-PROVIDED"
        return default_api_key, "SERVER-DEFAULT"
