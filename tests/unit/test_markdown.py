from medocr.render.markdown import render_markdown


def _full_result() -> dict[str, object]:
    return {
        "document_type": "lab_report",
        "patient_info": {"name": "Jane Roe", "age": "42", "gender": "F", "patient_id": "P-7"},
        "doctor_info": {"name": "Dr. Who", "specialization": "Pathology", "hospital": "General"},
        "date": "2025-03-04",
        "diagnosis": "Iron deficiency",
        "medications": [{"name": "Ferrous sulfate", "dosage": "325 mg", "frequency": "daily"}],
        "lab_results": [
            {"test_name": "Hemoglobin", "value": "10.1", "unit": "g/dL",
             "reference_range": "12-16", "status": "low"},
        ],
        "findings": ["Pale conjunctiva"],
        "notes": "Recheck in 6 weeks",
        "confidence": "high",
    }


class TestRenderMarkdown:
    def test_title_and_header_line(self) -> None:
        md = render_markdown(_full_result())
        assert md.startswith("# LAB REPORT\n")
        assert "**Confidence:** HIGH | **Date:** 2025-03-04" in md

    def test_renders_all_sections(self) -> None:
        md = render_markdown(_full_result())
        for heading in (
            "## Patient Information",
            "## Doctor Information",
            "## Diagnosis",
            "## Medications",
            "### Ferrous sulfate",
            "## Lab Results",
            "## Clinical Findings",
            "## Additional Notes",
        ):
            assert heading in md

    def test_lab_row(self) -> None:
        md = render_markdown(_full_result())
        assert "| Hemoglobin | 10.1 | g/dL | 12-16 | **LOW** |" in md

    def test_missing_values_render_as_na(self) -> None:
        md = render_markdown({"document_type": "prescription", "confidence": "low"})
        assert "**Date:** N/A" in md
        assert "- **Name:** N/A" in md
        assert "- **Duration:** N/A" not in md

    def test_optional_sections_are_omitted(self) -> None:
        md = render_markdown({"document_type": "unknown", "confidence": "low", "patient_info": {}})
        assert "## Doctor Information" not in md
        assert "## Medications" not in md
        assert "## Lab Results" not in md
        assert md.endswith("\n")

    def test_escapes_pipes_in_table_cells(self) -> None:
        data = _full_result() | {"lab_results": [{"test_name": "A|B", "value": "1", "status": "normal"}]}
        assert "| A\\|B | 1 | N/A | N/A | **NORMAL** |" in render_markdown(data)
