from __future__ import annotations

import pytest

from medassist.core.actions.queue import OptimisticActionQueue
from medassist.core.actions.schemas import ActionStatus, Sequence
from medassist.core.scheduler.scheduler import ManualScheduler
from medassist.core.session.registry import SessionRegistry


def test_new_sessions_are_seeded_and_independent() -> None:
    registry = SessionRegistry()
    first = registry.create()
    second = registry.create()

    assert first.session_id != second.session_id
    assert len(registry) == 2
    assert registry.get(first.session_id) is first

    reports = first.list_records(Sequence.REPORTS)
    scans = first.list_records(Sequence.SCANS)
    assert [record.title for record in reports] == ["Blood Test Report", "MRI Scan"]
    assert [record.scan_type for record in scans] == ["MRI", "CT"]
    assert all(record.status == ActionStatus.COMPLETE for record in reports + scans)
    assert first.list_records(Sequence.CHAT) == []

    first.list_records(Sequence.REPORTS).clear()
    assert len(first.list_records(Sequence.REPORTS)) == 2
    assert len(second.list_records(Sequence.REPORTS)) == 2


def test_closed_sessions_are_gone() -> None:
    registry = SessionRegistry()
    store = registry.create()

    registry.close(store.session_id)

    assert store.closed is True
    with pytest.raises(KeyError):
        registry.get(store.session_id)
    with pytest.raises(KeyError):
        registry.close(store.session_id)


def test_completions_in_flight_land_on_a_closed_session() -> None:
    registry = SessionRegistry()
    store = registry.create()
    scheduler = ManualScheduler()
    queue = OptimisticActionQueue(store=store, scheduler=scheduler)

    record = queue.submit_message("hi")
    registry.close(store.session_id)
    scheduler.run_all()

    chat = store.list_records(Sequence.CHAT)
    assert len(chat) == 2
    assert chat[0].id == record.id
    assert chat[0].status == ActionStatus.COMPLETE
    assert chat[1].sender == "ai"
    assert chat[1].reply_to == record.id
    with pytest.raises(KeyError):
        registry.get(store.session_id)
