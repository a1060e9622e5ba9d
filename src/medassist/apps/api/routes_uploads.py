from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile

from medassist.core.actions.queue import OptimisticActionQueue
from medassist.core.actions.schemas import Sequence
from medassist.core.session.store import SessionStore

from .deps import get_action_queue, get_session_store
from .media_validation import read_image_handle

router = APIRouter()


def _dump(records) -> list[dict]:
    return [record.model_dump(mode="json") for record in records]


async def _upload(sequence: Sequence, image: UploadFile, queue: OptimisticActionQueue) -> dict:
    handle = await read_image_handle(image)
    record = queue.submit_upload(sequence, handle)
    return {"record": record.model_dump(mode="json"), sequence.value: _dump(queue.store.list_records(sequence))}


@router.get("/{session_id}/reports")
def list_reports(store: SessionStore = Depends(get_session_store)) -> list[dict]:
    return _dump(store.list_records(Sequence.REPORTS))


@router.post("/{session_id}/reports", status_code=202)
async def upload_report(
    image: UploadFile = File(...),
    queue: OptimisticActionQueue = Depends(get_action_queue),
) -> dict:
    return await _upload(Sequence.REPORTS, image, queue)


@router.get("/{session_id}/scans")
def list_scans(store: SessionStore = Depends(get_session_store)) -> list[dict]:
    return _dump(store.list_records(Sequence.SCANS))


@router.post("/{session_id}/scans", status_code=202)
async def upload_scan(
    image: UploadFile = File(...),
    queue: OptimisticActionQueue = Depends(get_action_queue),
) -> dict:
    return await _upload(Sequence.SCANS, image, queue)
