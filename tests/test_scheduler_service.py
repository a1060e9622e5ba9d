from __future__ import annotations

import threading
import time

from medassist.core.actions.queue import OptimisticActionQueue
from medassist.core.actions.schemas import ActionStatus, Sequence
from medassist.core.scheduler.scheduler import SchedulerService
from medassist.core.session.store import SessionStore


def _wait_for(predicate, timeout_s: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return predicate()


def test_submit_returns_before_the_simulated_delay() -> None:
    scheduler = SchedulerService()
    scheduler.start()
    try:
        store = SessionStore(session_id="s1")
        queue = OptimisticActionQueue(store=store, scheduler=scheduler, reply_delay_s=30.0)

        started = time.monotonic()
        record = queue.submit_message("hello")
        elapsed = time.monotonic() - started

        assert elapsed < 1.0
        assert store.get(Sequence.CHAT, record.id).status == ActionStatus.PENDING
        assert [job.id for job in scheduler.list_jobs()] == [f"s1:chat:{record.id}"]
    finally:
        scheduler.shutdown()


def test_background_completions_run_on_one_worker_in_order() -> None:
    scheduler = SchedulerService()
    scheduler.start()
    try:
        store = SessionStore(session_id="s1")
        queue = OptimisticActionQueue(store=store, scheduler=scheduler, reply_delay_s=0.05)
        threads: set[int] = set()
        store.subscribe(lambda sequence, records: threads.add(threading.get_ident()))

        sent = [queue.submit_message(f"m{idx}") for idx in range(3)]
        threads.clear()

        assert _wait_for(lambda: len(store.list_records(Sequence.CHAT)) == 6)
        replies = [record for record in store.list_records(Sequence.CHAT) if record.sender == "ai"]
        assert [reply.reply_to for reply in replies] == [record.id for record in sent]
        assert all(record.status == ActionStatus.COMPLETE for record in store.list_records(Sequence.CHAT))
        assert len(threads) == 1
    finally:
        scheduler.shutdown()
