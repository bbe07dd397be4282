from typing import Any, Dict, List


def normalize_user(user) -> Dict[str, Any]:
    # Password hashes are never serialized
    return {"username": user["username"]}


def normalize_user_list(usernames: List[str]) -> Dict[str, Any]:
    return {"users": sorted(usernames)}
