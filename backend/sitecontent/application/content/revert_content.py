# sitecontent/application/content/revert_content.py
from typing import Dict, Optional

from sitecontent.domain.exceptions import NotFoundError
from sitecontent.services.content_repository import ContentRepository
from sitecontent.services.history import HistoryManager
from sitecontent.utils.audit import log_action


def revert_content(
    *,
    repository: ContentRepository,
    history: HistoryManager,
    timestamp: str,
    actor: Optional[str] = None,
) -> Dict[str, str]:
    """
    Restore the live content from the snapshot taken at ``timestamp``.

    Reverts do not record a snapshot of their own, so the history list is
    left exactly as it was. Reverting to the same timestamp twice gives the
    same live content.
    """

    snapshot = history.get_snapshot(timestamp)
    if snapshot is None:
        raise NotFoundError("Historical version not found.")

    repository.set_live_content(
        snapshot["pageContent"],
        snapshot["galleryImages"],
    )

    log_action(
        action="content.revert",
        entity_type="content",
        entity_id="live",
        actor=actor,
        payload={"timestamp": timestamp},
    )

    return {"timestamp": timestamp}
