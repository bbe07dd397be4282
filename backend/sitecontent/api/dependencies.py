from flask import current_app

from sitecontent.services.content_repository import ContentRepository
from sitecontent.services.history import HistoryManager, utcnow
from sitecontent.services.users import UserRepository
from sitecontent.store.client import get_store


def content_repository() -> ContentRepository:
    return ContentRepository(get_store())


def history_manager() -> HistoryManager:
    config = current_app.config
    return HistoryManager(
        get_store(),
        clock=current_app.extensions.get("history_clock", utcnow),
        max_entries=config["HISTORY_MAX_ENTRIES"],
        ttl_seconds=config["HISTORY_TTL_SECONDS"],
        prune_evicted=config["HISTORY_PRUNE_EVICTED"],
    )


def user_repository() -> UserRepository:
    return UserRepository(get_store())
