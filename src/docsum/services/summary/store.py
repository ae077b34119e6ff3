from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from threading import Lock

from docsum.services.summary.errors import DuplicateIDError
from docsum.services.summary.types import DocumentRecord


@dataclass(frozen=True)
class StoreEntry:
    sequence: int
    record: DocumentRecord


class DocumentStore:
    """In-memory document history guarded by a single lock.

    Listing order follows insertion order. Entries taken out with
    ``pop_entry`` keep their sequence number, so ``reinstate`` puts them back
    at the position they were listed at before.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._entries: dict[str, StoreEntry] = {}
        self._sequence = count()

    def insert(self, record: DocumentRecord) -> None:
        with self._lock:
            if record.id in self._entries:
                raise DuplicateIDError(f"Document id already registered: {record.id}")
            self._entries[record.id] = StoreEntry(sequence=next(self._sequence), record=record)

    def get(self, doc_id: str) -> DocumentRecord | None:
        with self._lock:
            entry = self._entries.get(doc_id)
        return entry.record if entry is not None else None

    def list(self) -> list[DocumentRecord]:
        with self._lock:
            entries = list(self._entries.values())
        entries.sort(key=lambda entry: entry.sequence)
        return [entry.record for entry in entries]

    def remove(self, doc_id: str) -> DocumentRecord | None:
        entry = self.pop_entry(doc_id)
        return entry.record if entry is not None else None

    def pop_entry(self, doc_id: str) -> StoreEntry | None:
        with self._lock:
            return self._entries.pop(doc_id, None)

    def reinstate(self, entry: StoreEntry) -> None:
        with self._lock:
            if entry.record.id in self._entries:
                raise DuplicateIDError(f"Document id already registered: {entry.record.id}")
            self._entries[entry.record.id] = entry

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, doc_id: object) -> bool:
        with self._lock:
            return doc_id in self._entries
