from __future__ import annotations

import heapq
import itertools
import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Protocol
from zoneinfo import ZoneInfo

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.schedulers.background import BackgroundScheduler

from .schemas import JobInfo

logger = logging.getLogger("medassist.scheduler")


class DeferredScheduler(Protocol):
    def call_later(self, job_id: str, delay_s: float, func: Callable[..., Any], kwargs: dict[str, Any]) -> None:
        ...

    def list_jobs(self) -> list[JobInfo]:
        ...

    def start(self) -> None:
        ...

    def shutdown(self) -> None:
        ...


class SchedulerService:
    """Runs deferred callbacks on a single APScheduler worker thread, in due order."""

    def __init__(self, timezone_name: str = "UTC") -> None:
        self.timezone = ZoneInfo(timezone_name)
        self.scheduler = BackgroundScheduler(
            jobstores={"default": MemoryJobStore()},
            executors={"default": ThreadPoolExecutor(max_workers=1)},
            job_defaults={"coalesce": False, "misfire_grace_time": None, "max_instances": 1},
            timezone=self.timezone,
        )
        self._started = False

    def start(self) -> None:
        if self._started:
            return
        self.scheduler.start()
        self._started = True

    def shutdown(self) -> None:
        if self._started:
            self.scheduler.shutdown(wait=False)
            self._started = False

    def list_jobs(self) -> list[JobInfo]:
        jobs: list[JobInfo] = []
        for job in self.scheduler.get_jobs():
            try:
                next_run_time = job.next_run_time
            except AttributeError:
                next_run_time = None
            jobs.append(
                JobInfo(
                    id=job.id,
                    next_run_time_iso=next_run_time.isoformat() if next_run_time else None,
                    trigger=str(job.trigger),
                    kwargs={key: str(value) for key, value in job.kwargs.items()},
                )
            )
        return jobs

    def call_later(self, job_id: str, delay_s: float, func: Callable[..., Any], kwargs: dict[str, Any]) -> None:
        run_at = datetime.now(self.timezone) + timedelta(seconds=delay_s)
        self.scheduler.add_job(
            func,
            trigger="date",
            id=job_id,
            run_date=run_at,
            kwargs=kwargs,
            replace_existing=True,
        )


class ManualScheduler:
    """Virtual-clock scheduler; nothing fires until the clock is advanced."""

    def __init__(self) -> None:
        self.now_s = 0.0
        self._queue: list[tuple[float, int, str, Callable[..., Any], dict[str, Any]]] = []
        self._seq = itertools.count()
        self._lock = threading.Lock()

    def start(self) -> None:
        return None

    def shutdown(self) -> None:
        return None

    @property
    def pending_count(self) -> int:
        return len(self._queue)

    def list_jobs(self) -> list[JobInfo]:
        epoch = datetime.fromtimestamp(0, timezone.utc)
        return [
            JobInfo(
                id=job_id,
                next_run_time_iso=(epoch + timedelta(seconds=due)).isoformat(),
                trigger="manual",
                kwargs={key: str(value) for key, value in kwargs.items()},
            )
            for due, _, job_id, _, kwargs in sorted(self._queue)
        ]

    def call_later(self, job_id: str, delay_s: float, func: Callable[..., Any], kwargs: dict[str, Any]) -> None:
        with self._lock:
            heapq.heappush(self._queue, (self.now_s + delay_s, next(self._seq), job_id, func, kwargs))

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run every job that came due, returning how many ran."""
        target = self.now_s + seconds
        fired = 0
        while True:
            with self._lock:
                if not self._queue or self._queue[0][0] > target:
                    break
                due, _, job_id, func, kwargs = heapq.heappop(self._queue)
                self.now_s = max(self.now_s, due)
            logger.debug("manual job fired", extra={"extra_fields": {"job_id": job_id}})
            func(**kwargs)
            fired += 1
        self.now_s = target
        return fired

    def run_all(self) -> int:
        fired = 0
        while self._queue:
            fired += self.advance(self._queue[0][0] - self.now_s)
        return fired
