"""Human-readable markdown summary of an extraction result."""

from typing import Any

_NA = "N/A"


def render_markdown(data: dict[str, Any]) -> str:
    """Render an ExtractionResult as a markdown document.

    Sections without data (doctor, diagnosis, medications, lab results,
    findings, notes) are omitted.
    """
    document_type = str(data.get("document_type") or "unknown")
    confidence = str(data.get("confidence") or "unknown")
    lines = [
        f"# {document_type.replace('_', ' ').upper()}",
        "",
        f"**Confidence:** {confidence.upper()} | **Date:** {_value(data.get('date'))}",
        "",
    ]

    patient = data.get("patient_info") or {}
    lines += [
        "## Patient Information",
        f"- **Name:** {_value(patient.get('name'))}",
        f"- **Age:** {_value(patient.get('age'))}",
        f"- **Gender:** {_value(patient.get('gender'))}",
        f"- **Patient ID:** {_value(patient.get('patient_id'))}",
        "",
    ]

    doctor = data.get("doctor_info") or {}
    if doctor.get("name"):
        lines += [
            "## Doctor Information",
            f"- **Doctor:** {doctor['name']}",
            f"- **Specialization:** {_value(doctor.get('specialization'))}",
            f"- **Hospital:** {_value(doctor.get('hospital'))}",
            "",
        ]

    if data.get("diagnosis"):
        lines += ["## Diagnosis", str(data["diagnosis"]), ""]

    medications = data.get("medications") or []
    if medications:
        lines.append("## Medications")
        for med in medications:
            lines += [
                f"### {_value(med.get('name'))}",
                f"- **Dosage:** {_value(med.get('dosage'))}",
                f"- **Frequency:** {_value(med.get('frequency'))}",
                f"- **Duration:** {_value(med.get('duration'))}",
                f"- **Instructions:** {_value(med.get('instructions'))}",
                "",
            ]

    lab_results = data.get("lab_results") or []
    if lab_results:
        lines += [
            "## Lab Results",
            "| Test Name | Value | Unit | Reference Range | Status |",
            "| :--- | :--- | :--- | :--- | :--- |",
        ]
        for lab in lab_results:
            status = str(lab.get("status") or _NA).upper()
            lines.append(
                f"| {_cell(lab.get('test_name'))} | {_cell(lab.get('value'))} "
                f"| {_cell(lab.get('unit'))} | {_cell(lab.get('reference_range'))} "
                f"| **{status}** |"
            )
        lines.append("")

    findings = data.get("findings") or []
    if findings:
        lines.append("## Clinical Findings")
        lines += [f"- {finding}" for finding in findings]
        lines.append("")

    if data.get("notes"):
        lines += ["## Additional Notes", str(data["notes"])]

    return "\n".join(lines).rstrip() + "\n"


def _value(value: Any) -> str:
    if value is None or value == "":
        return _NA
    return str(value)


def _cell(value: Any) -> str:
    return _value(value).replace("|", "\\|")
