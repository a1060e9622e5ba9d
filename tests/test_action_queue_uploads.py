from __future__ import annotations

import pytest

from medassist.core.actions.canned import REPORT_SUMMARY, SCAN_CONFIDENCE, SCAN_RESULT
from medassist.core.actions.queue import OptimisticActionQueue
from medassist.core.actions.schemas import ActionKind, ActionStatus, Sequence, UploadedFile
from medassist.core.scheduler.scheduler import ManualScheduler
from medassist.core.session.seeds import default_seed
from medassist.core.session.store import SessionStore


def _image(name: str = "report.jpg") -> UploadedFile:
    return UploadedFile(filename=name, content_type="image/jpeg", size_bytes=2048)


def _queue(delay_s: float = 3.0) -> tuple[SessionStore, ManualScheduler, OptimisticActionQueue]:
    store = SessionStore(session_id="s1", seed=default_seed())
    scheduler = ManualScheduler()
    queue = OptimisticActionQueue(store=store, scheduler=scheduler, analysis_delay_s=delay_s)
    return store, scheduler, queue


def test_report_upload_is_prepended_then_analyzed() -> None:
    store, scheduler, queue = _queue()

    record = queue.submit(ActionKind.UPLOAD, _image(), sequence="reports")

    reports = store.list_records(Sequence.REPORTS)
    assert [item.id for item in reports] == [record.id, "report-1", "report-2"]
    assert reports[0].status == ActionStatus.PENDING
    assert reports[0].title == "New Report"
    assert reports[0].report_type == "Uploaded"
    assert reports[0].result is None
    assert reports[0].payload.filename == "report.jpg"

    scheduler.advance(3.0)

    analyzed = store.get(Sequence.REPORTS, record.id)
    assert analyzed.status == ActionStatus.COMPLETE
    assert analyzed.result == REPORT_SUMMARY
    assert analyzed.completed_at_iso is not None
    assert [item.id for item in store.list_records(Sequence.REPORTS)][0] == record.id


def test_scan_upload_gets_result_and_confidence() -> None:
    store, scheduler, queue = _queue(delay_s=0.5)

    record = queue.submit_upload(Sequence.SCANS, _image("brain.png"))
    assert record.scan_type == "MRI"
    assert record.confidence is None

    scheduler.advance(0.5)

    analyzed = store.get(Sequence.SCANS, record.id)
    assert analyzed.result == SCAN_RESULT
    assert analyzed.confidence == SCAN_CONFIDENCE
    assert len(store.list_records(Sequence.SCANS)) == 3


def test_chat_is_not_an_upload_target() -> None:
    _, scheduler, queue = _queue()
    with pytest.raises(ValueError):
        queue.submit_upload(Sequence.CHAT, _image())
    assert scheduler.pending_count == 0


def test_upload_date_is_the_utc_day_of_creation() -> None:
    _, _, queue = _queue()

    record = queue.submit_upload(Sequence.REPORTS, _image())

    assert record.date == record.created_at_iso[:10]
