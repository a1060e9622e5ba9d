from __future__ import annotations

from medassist.core.actions.schemas import ActionKind, ActionRecord, ActionStatus, Sequence, UploadedFile


def _analyzed_upload(record_id: str, sequence: Sequence, filename: str, **fields) -> ActionRecord:
    return ActionRecord(
        id=record_id,
        kind=ActionKind.UPLOAD,
        sequence=sequence,
        payload=UploadedFile(filename=filename, content_type="image/jpeg", size_bytes=0),
        status=ActionStatus.COMPLETE,
        created_at_iso=f"{fields['date']}T00:00:00+00:00",
        completed_at_iso=f"{fields['date']}T00:00:00+00:00",
        **fields,
    )


def seed_reports() -> list[ActionRecord]:
    return [
        _analyzed_upload(
            "report-1",
            Sequence.REPORTS,
            "blood-test.jpg",
            title="Blood Test Report",
            report_type="Blood Test",
            date="2024-03-15",
            result="All parameters within normal range. Vitamin D levels slightly low.",
        ),
        _analyzed_upload(
            "report-2",
            Sequence.REPORTS,
            "mri-scan.jpg",
            title="MRI Scan",
            report_type="MRI",
            date="2024-03-10",
            result="No abnormalities detected. Normal brain structure.",
        ),
    ]


def seed_scans() -> list[ActionRecord]:
    return [
        _analyzed_upload(
            "scan-1",
            Sequence.SCANS,
            "mri.jpg",
            scan_type="MRI",
            date="2024-03-15",
            result="No tumor detected",
            confidence=98.5,
        ),
        _analyzed_upload(
            "scan-2",
            Sequence.SCANS,
            "ct.jpg",
            scan_type="CT",
            date="2024-03-10",
            result="Small benign tumor detected",
            confidence=95.2,
        ),
    ]


def default_seed() -> dict[Sequence, list[ActionRecord]]:
    return {
        Sequence.CHAT: [],
        Sequence.REPORTS: seed_reports(),
        Sequence.SCANS: seed_scans(),
    }
