from __future__ import annotations

from medassist.core.actions.schemas import Sequence

CHAT_REPLY = "I understand your concern. Let me help you with that..."

REPORT_UPLOAD_TITLE = "New Report"
REPORT_UPLOAD_TYPE = "Uploaded"
REPORT_SUMMARY = "All parameters within normal range. No follow-up required."

SCAN_UPLOAD_TYPE = "MRI"
SCAN_RESULT = "No tumor detected"
SCAN_CONFIDENCE = 98.5


def upload_defaults(sequence: Sequence) -> dict[str, object]:
    if sequence == Sequence.REPORTS:
        return {"title": REPORT_UPLOAD_TITLE, "report_type": REPORT_UPLOAD_TYPE}
    if sequence == Sequence.SCANS:
        return {"scan_type": SCAN_UPLOAD_TYPE}
    raise ValueError(f"uploads are not accepted for {sequence.value}")


def analysis_for(sequence: Sequence) -> tuple[str, dict[str, object]]:
    if sequence == Sequence.REPORTS:
        return REPORT_SUMMARY, {}
    return SCAN_RESULT, {"confidence": SCAN_CONFIDENCE}
