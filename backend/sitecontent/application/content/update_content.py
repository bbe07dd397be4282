# sitecontent/application/content/update_content.py
import logging
from typing import Any, Dict, List, Optional

from sitecontent.domain.exceptions import StoreError
from sitecontent.services.content_repository import ContentRepository
from sitecontent.services.history import HistoryManager
from sitecontent.utils.audit import log_action

logger = logging.getLogger(__name__)


def update_content(
    *,
    repository: ContentRepository,
    history: HistoryManager,
    page_content: Dict[str, Any],
    gallery_images: List[Dict[str, Any]],
    actor: Optional[str] = None,
) -> Dict[str, Optional[str]]:
    """
    Replace the live content, snapshotting the previous state first.

    Responsibilities:
    - snapshot the current live content (skipped on the very first write)
    - overwrite both live documents
    - audit logging

    The snapshot is best-effort: a store failure while recording it is
    logged and the update goes ahead. A failure writing the live content
    propagates and fails the request.
    """

    # 1️⃣ Read what is live right now
    current = repository.get_live_content()

    # 2️⃣ Snapshot it, unless there is nothing to preserve yet
    snapshot = None
    if current.is_initialized:
        try:
            snapshot = history.record_snapshot(
                current.page_content,
                current.gallery_images,
            )
        except StoreError as exc:
            logger.warning("Content snapshot failed, saving update without it: %s", exc)

    # 3️⃣ Overwrite live content
    repository.set_live_content(page_content, gallery_images)

    # 4️⃣ Audit logging
    log_action(
        action="content.update",
        entity_type="content",
        entity_id="live",
        actor=actor,
        payload={
            "snapshot": snapshot,
            "gallery_images": len(gallery_images),
        },
    )

    return {"snapshot": snapshot}
