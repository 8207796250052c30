import time

from app.core.clothing import sanitize_filename


def user_prefix(user_id: str) -> str:
    return f"{user_id}/"


def photo_key(user_id: str, item_id: str, filename: str | None = None) -> str:
    """Object key for a closet photo: ``{user}/{item}/{epoch_ms}-{safe name}``."""
    safe_name = sanitize_filename(filename or "photo.jpg")
    return f"{user_prefix(user_id)}{item_id}/{int(time.time() * 1000)}-{safe_name}"


def owns_key(user_id: str, key: str) -> bool:
    return bool(user_id) and key.startswith(user_prefix(user_id)) and len(key) > len(user_prefix(user_id))
