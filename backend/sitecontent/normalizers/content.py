# sitecontent/normalizers/content.py
from __future__ import annotations

from typing import Any, Dict, List


def normalize_content(content: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "pageContent": content["pageContent"],
        "galleryImages": content["galleryImages"],
    }


def normalize_history(timestamps: List[str]) -> Dict[str, Any]:
    """
    Normalizes the history index for the admin panel.

    Notes:
    - timestamps are bare ISO-8601 strings, most recent first
    - the ``history:`` key prefix never leaves the server
    """
    return {"history": list(timestamps)}


def normalize_success(message: str, **extra: Any) -> Dict[str, Any]:
    response: Dict[str, Any] = {"success": True, "message": message}
    response.update(extra)
    return response
