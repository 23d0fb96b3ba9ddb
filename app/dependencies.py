"""Shared FastAPI dependencies."""

from collections.abc import Callable

from fastapi import Depends, Request

from app.exceptions import AuthenticationRequired
from app.hooks import ScriptHooks
from app.schemas.common import Identity


def get_identity(request: Request) -> Identity | None:
    """Read the caller identity stored in the session at login."""
    user_id = request.session.get("user_id")
    role = request.session.get("user_type")
    if user_id is None or not role:
        return None
    try:
        return Identity(user_id=int(user_id), role=role)
    except ValueError:
        return None


def require_role(role: str) -> Callable[..., Identity]:
    """Build a dependency that only lets callers with ``role`` through."""

    def check_identity(identity: Identity | None = Depends(get_identity)) -> Identity:
        if identity is None or identity.role != role:
            raise AuthenticationRequired(role)
        return identity

    return check_identity


require_admin = require_role("admin")
require_reseller = require_role("reseller")


def get_admin_hooks(request: Request) -> ScriptHooks:
    """Admin area callbacks registered on the application."""
    return request.app.state.hooks["admin"]


def get_reseller_hooks(request: Request) -> ScriptHooks:
    """Reseller area callbacks registered on the application."""
    return request.app.state.hooks["reseller"]
