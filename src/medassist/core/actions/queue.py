from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable

from medassist.core.catalog.languages import is_supported_language
from medassist.core.logging.context import log_context
from medassist.core.scheduler.scheduler import DeferredScheduler
from medassist.core.session.store import SessionStore

from .canned import CHAT_REPLY, analysis_for, upload_defaults
from .ids import RecordIdGenerator
from .schemas import ActionKind, ActionRecord, Sequence, UploadedFile

logger = logging.getLogger("medassist.actions")


class OptimisticActionQueue:
    """Records user actions as pending right away and completes them after a simulated delay.

    The simulated operation always succeeds; there is no retry, cancellation or
    failure state. Completions for one session fire in the order their delays
    elapse, so same-kind actions complete in submission order.
    """

    def __init__(
        self,
        store: SessionStore,
        scheduler: DeferredScheduler,
        ids: RecordIdGenerator | None = None,
        reply_delay_s: float = 1.0,
        analysis_delay_s: float = 3.0,
    ) -> None:
        self.store = store
        self.scheduler = scheduler
        self.ids = ids or store.ids
        self.reply_delay_s = reply_delay_s
        self.analysis_delay_s = analysis_delay_s

    def submit(self, kind: ActionKind, payload: Any, **options: Any) -> ActionRecord:
        if kind == ActionKind.MESSAGE:
            return self.submit_message(payload, language=options.get("language", "en"))
        sequence = options.get("sequence")
        if sequence is None:
            raise ValueError("uploads need a target sequence")
        return self.submit_upload(Sequence(sequence), payload)

    def submit_message(self, text: str, language: str = "en") -> ActionRecord:
        if not text.strip():
            raise ValueError("text must not be blank")
        if not is_supported_language(language):
            raise ValueError(f"unsupported language: {language}")
        record = ActionRecord(
            id=self.ids.next_id(),
            kind=ActionKind.MESSAGE,
            sequence=Sequence.CHAT,
            payload=text,
            sender="user",
            language=language,
        )
        self.store.append(record)
        self._schedule(record, self.reply_delay_s, self._complete_message)
        return record

    def submit_upload(self, sequence: Sequence, file: UploadedFile) -> ActionRecord:
        defaults = upload_defaults(sequence)
        record = ActionRecord(
            id=self.ids.next_id(),
            kind=ActionKind.UPLOAD,
            sequence=sequence,
            payload=file,
            # UTC calendar day, same clock as created_at_iso.
            date=datetime.now(timezone.utc).date().isoformat(),
            **defaults,
        )
        # Newest upload first, matching how the lists are shown.
        self.store.prepend(record)
        self._schedule(record, self.analysis_delay_s, self._complete_upload)
        return record

    def _job_id(self, record: ActionRecord) -> str:
        return f"{self.store.session_id}:{record.sequence.value}:{record.id}"

    def _schedule(self, record: ActionRecord, delay_s: float, func: Callable[..., None]) -> None:
        job_id = self._job_id(record)
        self.scheduler.call_later(
            job_id,
            delay_s,
            func,
            {"sequence": record.sequence, "record_id": record.id, "job_id": job_id},
        )
        with log_context(session_id=self.store.session_id, action_id=record.id, job_id=job_id):
            logger.info(
                "action submitted",
                extra={"extra_fields": {"kind": record.kind.value, "sequence": record.sequence.value, "delay_s": delay_s}},
            )

    def _complete_message(self, sequence: Sequence, record_id: str, job_id: str) -> None:
        with log_context(session_id=self.store.session_id, action_id=record_id, job_id=job_id):
            reply = ActionRecord(
                id=self.ids.next_id(),
                kind=ActionKind.MESSAGE,
                sequence=sequence,
                payload=CHAT_REPLY,
                sender="ai",
                reply_to=record_id,
            )
            pending = self.store.get(sequence, record_id)
            self.store.replace(pending.completed(result=reply.id))
            self.store.append(reply.completed(result=CHAT_REPLY))
            logger.info("action completed", extra={"extra_fields": {"reply_id": reply.id}})

    def _complete_upload(self, sequence: Sequence, record_id: str, job_id: str) -> None:
        with log_context(session_id=self.store.session_id, action_id=record_id, job_id=job_id):
            result, extra = analysis_for(sequence)
            pending = self.store.get(sequence, record_id)
            self.store.replace(pending.completed(result=result, **extra))
            logger.info("action completed", extra={"extra_fields": {"sequence": sequence.value}})
