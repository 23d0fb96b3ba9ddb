"""Admin area pages."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_session
from app.dependencies import get_admin_hooks, require_admin
from app.hooks import ScriptHooks
from app.schemas.common import Identity
from app.services import domain_status_service
from app.utils.flash import flash

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")
templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")


@router.get("/domain_status_change", response_class=RedirectResponse)
async def domain_status_change(
    request: Request,
    domain_id: str | None = Query(None, description="Domain to toggle"),
    identity: Identity = Depends(require_admin),
    hooks: ScriptHooks = Depends(get_admin_hooks),
    db: AsyncSession = Depends(get_session),
) -> RedirectResponse:
    """
    Toggle a domain between ok and disabled.

    **Query Parameter:**
    - `domain_id`: Integer id of the domain

    **Behavior:**
    - Status `ok`: the owner's domains are scheduled for deactivation
    - Status `disabled`: the owner's domains are scheduled for activation
    - Any other status, or a missing, invalid or unknown domain: 400 bad
      request page

    Redirects to the users listing on success.
    """
    _, result = await domain_status_service.toggle_domain_status(
        db,
        identity,
        domain_id,
        hooks=hooks,
    )

    for notice in result.notices:
        flash(request, notice, "success")

    return RedirectResponse(request.url_for("users_list"), status_code=303)


@router.get("/users", response_class=HTMLResponse)
async def users_list(
    request: Request,
    identity: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_session),
) -> HTMLResponse:
    """Render the customer domains listing with status toggle links."""
    domains = await domain_status_service.list_domains(db)

    return templates.TemplateResponse(
        request,
        "admin/users.html",
        {
            "page_title": "Admin / Users / Overview",
            "domains": domains,
            "messages": request.state.flash_messages,
        },
    )
