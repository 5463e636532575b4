"""In-memory store for generated documents awaiting download."""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional

from cvletter.utils.session import SESSION_TTL_SECONDS, now_millis


class DocumentStore:
    """Generated PDFs keyed by document id, evicted after the TTL."""

    def __init__(self, ttl_seconds: int = SESSION_TTL_SECONDS, clock: Callable[[], int] = now_millis) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._documents: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def put(self, record: Dict[str, Any]) -> None:
        record.setdefault("createdAt", self._clock())
        with self._lock:
            self._documents[record["id"]] = record

    def get(self, document_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self._documents.get(document_id)

    def prune_expired(self, now: Optional[int] = None) -> int:
        current = now if now is not None else self._clock()
        cutoff = current - self.ttl_seconds * 1000
        removed = 0
        with self._lock:
            for document_id, record in list(self._documents.items()):
                if record["createdAt"] <= cutoff:
                    self._documents.pop(document_id, None)
                    removed += 1
        return removed

    def count(self) -> int:
        with self._lock:
            return len(self._documents)
