# sitecontent/services/history.py
"""
Bounded content history.

Every content update first copies the live documents into
``history:<timestamp>`` (expiring after ``ttl_seconds``) and pushes that key
onto the ``content_history`` list, which is trimmed to ``max_entries``.
The list is the only index of snapshots; nothing scans the key space.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from sitecontent.domain.exceptions import StoreError
from sitecontent.models.content import (
    HISTORY_INDEX_KEY,
    HISTORY_KEY_PREFIX,
    HistorySnapshot,
)
from sitecontent.store.kv import KeyValueStore
from sitecontent.utils.transaction import transactional

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 10
DEFAULT_TTL_SECONDS = 60 * 60 * 24 * 30


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with a trailing ``Z``, e.g. ``2024-05-01T09:30:00.123456Z``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def history_key(timestamp: str) -> str:
    return f"{HISTORY_KEY_PREFIX}{timestamp}"


def timestamp_from_key(key: str) -> str:
    if key.startswith(HISTORY_KEY_PREFIX):
        return key[len(HISTORY_KEY_PREFIX):]
    return key


class HistoryManager:
    def __init__(
        self,
        store: KeyValueStore,
        *,
        clock: Callable[[], datetime] = utcnow,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        prune_evicted: bool = True,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")

        self._store = store
        self._clock = clock
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self.prune_evicted = prune_evicted

    def record_snapshot(
        self,
        page_content: Dict[str, Any],
        gallery_images: List[Dict[str, Any]],
    ) -> str:
        """
        Store the given (pre-update) documents as a new history entry.

        Returns the bare timestamp of the entry. The write, the push onto the
        index and the trim are applied as one transaction, so the index never
        holds more than ``max_entries`` keys.
        """
        timestamp = format_timestamp(self._clock())
        key = history_key(timestamp)
        snapshot: HistorySnapshot = {
            "pageContent": page_content,
            "galleryImages": gallery_images,
        }

        evicted: List[str] = []
        if self.prune_evicted:
            # The entry about to be pushed shifts every index by one.
            evicted = [
                k
                for k in self._store.list_range(HISTORY_INDEX_KEY, self.max_entries - 1, -1)
                if k != key
            ]

        with transactional(self._store) as tx:
            tx.set(key, snapshot, ex=self.ttl_seconds)
            tx.list_push(HISTORY_INDEX_KEY, key)
            tx.list_trim(HISTORY_INDEX_KEY, 0, self.max_entries - 1)
            tx.delete(*evicted)

        logger.debug(
            "Recorded content snapshot %s (pruned %d evicted entries)",
            key,
            len(evicted),
        )
        return timestamp

    def list_history(self) -> List[str]:
        """Snapshot timestamps, most recent first."""
        keys = self._store.list_range(HISTORY_INDEX_KEY, 0, -1)
        return [timestamp_from_key(key) for key in keys]

    def get_snapshot(self, timestamp: str) -> Optional[HistorySnapshot]:
        # Looked up directly; the index is not consulted.
        key = history_key(timestamp)
        snapshot = self._store.get(key)
        if not snapshot:
            return None

        if not isinstance(snapshot, dict) or not {"pageContent", "galleryImages"} <= snapshot.keys():
            raise StoreError(f"Malformed history snapshot stored under '{key}'")
        return snapshot
