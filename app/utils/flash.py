"""Session-backed flash messages."""

from fastapi import Request

FLASH_SESSION_KEY = "_flashes"


def flash(request: Request, message: str, category: str = "info") -> None:
    """Store a message in the session for display on the next page."""
    bucket = request.session.get(FLASH_SESSION_KEY, [])
    bucket.append({"message": message, "category": category})
    request.session[FLASH_SESSION_KEY] = bucket


def pop_flashes(request: Request) -> list[dict[str, str]]:
    """Remove and return the queued messages."""
    return request.session.pop(FLASH_SESSION_KEY, [])
