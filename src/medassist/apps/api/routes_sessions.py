from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from medassist.core.session.registry import SessionRegistry
from medassist.core.session.store import SessionStore

from .deps import get_session_registry, get_session_store

router = APIRouter()


def _snapshot(store: SessionStore) -> dict:
    return {
        "session_id": store.session_id,
        **{
            name: [record.model_dump(mode="json") for record in records]
            for name, records in store.snapshot().items()
        },
    }


@router.post("", status_code=201)
def create_session(registry: SessionRegistry = Depends(get_session_registry)) -> dict:
    return _snapshot(registry.create())


@router.get("/{session_id}")
def get_session(store: SessionStore = Depends(get_session_store)) -> dict:
    return _snapshot(store)


@router.delete("/{session_id}")
def close_session(session_id: str, registry: SessionRegistry = Depends(get_session_registry)) -> dict[str, str]:
    try:
        registry.close(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"session not found: {session_id}") from exc
    return {"status": "closed", "session_id": session_id}
