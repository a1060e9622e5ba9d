from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, HTTPException

from medassist.core.actions.queue import OptimisticActionQueue
from medassist.core.config import Settings, load_settings
from medassist.core.scheduler.scheduler import DeferredScheduler, ManualScheduler, SchedulerService
from medassist.core.session.registry import SessionRegistry
from medassist.core.session.store import SessionStore


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


@lru_cache(maxsize=1)
def get_scheduler_service() -> DeferredScheduler:
    settings = get_settings()
    if settings.test_mode:
        return ManualScheduler()
    return SchedulerService(timezone_name=settings.timezone)


@lru_cache(maxsize=1)
def get_session_registry() -> SessionRegistry:
    return SessionRegistry()


def get_session_store(session_id: str, registry: SessionRegistry = Depends(get_session_registry)) -> SessionStore:
    try:
        return registry.get(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"session not found: {session_id}") from exc


def get_action_queue(
    store: SessionStore = Depends(get_session_store),
    scheduler: DeferredScheduler = Depends(get_scheduler_service),
    settings: Settings = Depends(get_settings),
) -> OptimisticActionQueue:
    return OptimisticActionQueue(
        store=store,
        scheduler=scheduler,
        reply_delay_s=settings.reply_delay_s,
        analysis_delay_s=settings.analysis_delay_s,
    )


def reset_caches() -> None:
    get_settings.cache_clear()
    get_scheduler_service.cache_clear()
    get_session_registry.cache_clear()
