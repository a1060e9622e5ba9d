from __future__ import annotations

import threading
from collections.abc import Callable, Iterable

from medassist.core.actions.ids import RecordIdGenerator
from medassist.core.actions.schemas import ActionRecord, Sequence

Listener = Callable[[Sequence, list[ActionRecord]], None]


class SessionStore:
    """Ordered record lists for one client session, kept in memory only."""

    def __init__(self, session_id: str, seed: dict[Sequence, Iterable[ActionRecord]] | None = None) -> None:
        self.session_id = session_id
        self.closed = False
        self.ids = RecordIdGenerator()
        self._sequences: dict[Sequence, list[ActionRecord]] = {sequence: [] for sequence in Sequence}
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()
        for sequence, records in (seed or {}).items():
            self._sequences[sequence].extend(records)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback that receives every updated list; returns an unsubscribe function."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, sequence: Sequence, snapshot: list[ActionRecord]) -> None:
        for listener in list(self._listeners):
            listener(sequence, snapshot)

    def append(self, record: ActionRecord) -> ActionRecord:
        with self._lock:
            self._sequences[record.sequence].append(record)
            snapshot = list(self._sequences[record.sequence])
        self._emit(record.sequence, snapshot)
        return record

    def prepend(self, record: ActionRecord) -> ActionRecord:
        with self._lock:
            self._sequences[record.sequence].insert(0, record)
            snapshot = list(self._sequences[record.sequence])
        self._emit(record.sequence, snapshot)
        return record

    def replace(self, record: ActionRecord) -> ActionRecord:
        """Swap a record in place, keeping its position in the list."""
        with self._lock:
            records = self._sequences[record.sequence]
            for idx, current in enumerate(records):
                if current.id == record.id:
                    records[idx] = record
                    break
            else:
                raise KeyError(f"Record {record.id} not found in {record.sequence.value}")
            snapshot = list(records)
        self._emit(record.sequence, snapshot)
        return record

    def get(self, sequence: Sequence, record_id: str) -> ActionRecord:
        with self._lock:
            for record in self._sequences[sequence]:
                if record.id == record_id:
                    return record
        raise KeyError(f"Record {record_id} not found in {sequence.value}")

    def list_records(self, sequence: Sequence) -> list[ActionRecord]:
        with self._lock:
            return list(self._sequences[sequence])

    def snapshot(self) -> dict[str, list[ActionRecord]]:
        with self._lock:
            return {sequence.value: list(records) for sequence, records in self._sequences.items()}
