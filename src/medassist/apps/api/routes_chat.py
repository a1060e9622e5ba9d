from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from medassist.core.actions.queue import OptimisticActionQueue
from medassist.core.actions.schemas import MessageRequest, Sequence
from medassist.core.session.store import SessionStore

from .deps import get_action_queue, get_session_store

router = APIRouter()


class ChatResponse(BaseModel):
    record: dict
    chat: list[dict]


@router.get("/{session_id}/chat")
def list_chat(store: SessionStore = Depends(get_session_store)) -> list[dict]:
    return [record.model_dump(mode="json") for record in store.list_records(Sequence.CHAT)]


@router.post("/{session_id}/chat", status_code=202, response_model=ChatResponse)
def send_message(request: MessageRequest, queue: OptimisticActionQueue = Depends(get_action_queue)) -> ChatResponse:
    try:
        record = queue.submit_message(request.text, language=request.language)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ChatResponse(
        record=record.model_dump(mode="json"),
        chat=[item.model_dump(mode="json") for item in queue.store.list_records(Sequence.CHAT)],
    )
