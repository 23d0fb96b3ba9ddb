"""Reseller area pages."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_session
from app.dependencies import get_reseller_hooks, require_reseller
from app.hooks import ScriptHooks
from app.schemas.common import HandlerResult, Identity
from app.schemas.email_template import LostPasswordForm, LostPasswordPage
from app.services import email_template_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reseller")
templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")

PAGE_TITLE = "Reseller / Customers / Lost Password Email"


def _render(
    request: Request,
    page: LostPasswordPage,
    result: HandlerResult | None = None,
) -> HTMLResponse:
    messages = list(request.state.flash_messages)
    if result is not None:
        messages.extend(result.messages())

    return templates.TemplateResponse(
        request,
        "reseller/settings_lostpassword.html",
        {
            "page_title": PAGE_TITLE,
            "form": page,
            "messages": messages,
        },
    )


@router.get("/settings_lostpassword", response_class=HTMLResponse)
async def settings_lostpassword(
    request: Request,
    identity: Identity = Depends(require_reseller),
    hooks: ScriptHooks = Depends(get_reseller_hooks),
    db: AsyncSession = Depends(get_session),
) -> HTMLResponse:
    """Render the lost password email templates form."""
    page = await email_template_service.render_lostpassword_page(db, identity, hooks=hooks)
    return _render(request, page)


@router.post("/settings_lostpassword", response_class=HTMLResponse)
async def settings_lostpassword_submit(
    request: Request,
    uaction: str | None = Form(None),
    subject1: str = Form(""),
    message1: str = Form(""),
    subject2: str = Form(""),
    message2: str = Form(""),
    identity: Identity = Depends(require_reseller),
    hooks: ScriptHooks = Depends(get_reseller_hooks),
    db: AsyncSession = Depends(get_session),
) -> HTMLResponse:
    """
    Update the activation and lost password email templates.

    **Form Fields:**
    - `uaction`: must be `apply`, otherwise the form is only displayed
    - `subject1`, `message1`: activation email
    - `subject2`, `message2`: lost password email

    Empty subjects or messages are reported on the page and nothing is
    saved; the form keeps the submitted values.
    """
    if uaction != "apply":
        page = await email_template_service.render_lostpassword_page(db, identity, hooks=hooks)
        return _render(request, page)

    form = LostPasswordForm(
        subject1=subject1,
        message1=message1,
        subject2=subject2,
        message2=message2,
    )
    page, result = await email_template_service.submit_lostpassword_templates(
        db,
        identity,
        form,
        hooks=hooks,
    )
    return _render(request, page, result)
