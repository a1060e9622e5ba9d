from __future__ import annotations

import pytest

from medassist.core.actions.schemas import ActionKind, ActionRecord, ActionStatus, InvalidTransition, Sequence


def test_pending_record_completes_once() -> None:
    record = ActionRecord(id="1", kind=ActionKind.MESSAGE, sequence=Sequence.CHAT, payload="hi", sender="user")
    assert record.status == ActionStatus.PENDING

    done = record.completed(result="ok")

    assert done.status == ActionStatus.COMPLETE
    assert done.result == "ok"
    assert record.status == ActionStatus.PENDING
    with pytest.raises(InvalidTransition):
        done.completed(result="again")


def test_upload_payload_parses_file_handle() -> None:
    record = ActionRecord.model_validate(
        {
            "id": "2",
            "kind": "upload",
            "sequence": "scans",
            "payload": {"filename": "ct.png", "content_type": "image/png", "size_bytes": 10},
        }
    )
    assert record.payload.filename == "ct.png"
    assert record.model_dump(mode="json")["status"] == "pending"
