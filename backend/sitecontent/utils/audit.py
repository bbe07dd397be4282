import logging
from typing import Optional

audit_logger = logging.getLogger("sitecontent.audit")


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    actor: Optional[str] = None,
    payload: dict | None = None
):
    audit_logger.info(
        "%s %s=%s actor=%s payload=%s",
        action,
        entity_type,
        entity_id,
        actor or "anonymous",
        payload or {},
        extra={
            "audit_action": action,
            "audit_entity_type": entity_type,
            "audit_entity_id": entity_id,
            "audit_actor": actor,
        },
    )
