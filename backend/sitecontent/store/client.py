"""Key-value store client initialization."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

import redis
from flask import Flask, current_app

from sitecontent.domain.exceptions import StoreError
from sitecontent.store.kv import KeyValueStore

EXTENSION_KEY = "kv_store"


def build_redis_url(url: str, token: str | None = None) -> str:
    """
    Normalize the configured KV URL into a redis-py connection URL.

    Hosted stores hand out an ``https://`` REST endpoint next to the
    ``rediss://`` connection string; the REST form is mapped onto TLS Redis
    and the REST token is used as the password when the URL carries none.
    """
    parts = urlsplit(url)
    scheme = parts.scheme
    netloc = parts.netloc

    if scheme in ("https", "http"):
        scheme = "rediss" if scheme == "https" else "redis"

    if token and "@" not in netloc:
        netloc = f"default:{token}@{netloc}"

    return urlunsplit((scheme, netloc, parts.path, parts.query, parts.fragment))


def create_redis_client(config) -> redis.Redis | None:
    url = config.get("KV_URL")
    if not url:
        return None

    return redis.Redis.from_url(
        build_redis_url(url, config.get("KV_REST_API_TOKEN")),
        decode_responses=True,
        socket_timeout=config.get("KV_SOCKET_TIMEOUT"),
        socket_connect_timeout=config.get("KV_SOCKET_TIMEOUT"),
    )


def init_store(app: Flask, client: redis.Redis | None = None) -> None:
    """Attach a KeyValueStore to the app, building a client from config if none is given."""
    if client is None:
        client = create_redis_client(app.config)

    if client is None:
        app.logger.warning("KV_URL is not set; store-backed endpoints will fail")
        app.extensions[EXTENSION_KEY] = None
        return

    app.extensions[EXTENSION_KEY] = KeyValueStore(client)


def get_store() -> KeyValueStore:
    store = current_app.extensions.get(EXTENSION_KEY)
    if store is None:
        raise StoreError(
            "Server configuration error: KV store credentials are not set."
        )
    return store
