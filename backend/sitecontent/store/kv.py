# sitecontent/store/kv.py
"""
JSON key-value store on top of a Redis-protocol client.

Values are JSON-encoded on write and decoded on read, so callers only ever
see dicts, lists and scalars. Redis failures surface as StoreError.
"""
from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Sequence

import redis

from sitecontent.domain.exceptions import StoreError


def _encode(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _decode(key: str, raw: Optional[str]) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise StoreError(f"Malformed value stored under '{key}'") from exc


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    try:
        yield
    except redis.RedisError as exc:
        raise StoreError(f"KV store {action} failed: {exc}") from exc


class KeyValueStore:
    """Thin JSON-aware wrapper around a ``redis.Redis`` client."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    # -------------------------------
    # Scalar documents
    # -------------------------------
    def get(self, key: str) -> Any:
        with _store_errors("get"):
            raw = self._client.get(key)
        return _decode(key, raw)

    def get_many(self, keys: Sequence[str]) -> List[Any]:
        with _store_errors("mget"):
            raws = self._client.mget(list(keys))
        return [_decode(key, raw) for key, raw in zip(keys, raws)]

    def set(self, key: str, value: Any, *, ex: Optional[int] = None) -> None:
        with _store_errors("set"):
            self._client.set(key, _encode(value), ex=ex)

    def exists(self, key: str) -> bool:
        with _store_errors("exists"):
            return bool(self._client.exists(key))

    def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        with _store_errors("delete"):
            return int(self._client.delete(*keys))

    def scan_keys(self, pattern: str) -> List[str]:
        with _store_errors("scan"):
            return sorted(self._client.scan_iter(match=pattern))

    # -------------------------------
    # Lists (plain strings, not JSON)
    # -------------------------------
    def list_range(self, key: str, start: int = 0, end: int = -1) -> List[str]:
        with _store_errors("lrange"):
            return list(self._client.lrange(key, start, end))

    def list_push(self, key: str, *values: str) -> int:
        with _store_errors("lpush"):
            return int(self._client.lpush(key, *values))

    def list_trim(self, key: str, start: int, end: int) -> None:
        with _store_errors("ltrim"):
            self._client.ltrim(key, start, end)

    def ping(self) -> bool:
        with _store_errors("ping"):
            return bool(self._client.ping())

    def pipeline(self) -> "StoreTransaction":
        return StoreTransaction(self._client.pipeline(transaction=True))


class StoreTransaction:
    """
    Commands queued on a MULTI/EXEC pipeline.

    Nothing reaches the store until ``execute`` runs.
    """

    def __init__(self, pipe) -> None:
        self._pipe = pipe
        self._queued = 0

    def __len__(self) -> int:
        return self._queued

    def set(self, key: str, value: Any, *, ex: Optional[int] = None) -> None:
        self._pipe.set(key, _encode(value), ex=ex)
        self._queued += 1

    def delete(self, *keys: str) -> None:
        if keys:
            self._pipe.delete(*keys)
            self._queued += 1

    def list_push(self, key: str, *values: str) -> None:
        self._pipe.lpush(key, *values)
        self._queued += 1

    def list_trim(self, key: str, start: int, end: int) -> None:
        self._pipe.ltrim(key, start, end)
        self._queued += 1

    def execute(self) -> List[Any]:
        with _store_errors("transaction"):
            return self._pipe.execute()

    def discard(self) -> None:
        self._pipe.reset()
