"""Lost password email templates of reseller accounts."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.hooks import ScriptHooks
from app.models.email_template import EmailTemplate, TemplateKind
from app.schemas.common import HandlerResult, Identity
from app.schemas.email_template import EmailTemplateData, LostPasswordForm, LostPasswordPage
from app.services import account_service
from app.utils.input_cleaner import clean_input

logger = logging.getLogger(__name__)

SUBJECT_REQUIRED = "You must specify a subject."
MESSAGE_REQUIRED = "You must specify a message."
TEMPLATES_UPDATED = "Lost password email templates were updated."

# Used until the account saves its own version
DEFAULT_TEMPLATES: dict[TemplateKind, tuple[str, str]] = {
    TemplateKind.ACTIVATION: (
        "Please activate your new control panel password",
        "Dear {NAME},\n"
        "\n"
        "Please click on the link below to renew your password for the "
        "control panel account '{USERNAME}':\n"
        "\n"
        "{LINK}\n"
        "\n"
        "If you did not request a new password, you can ignore this email.\n"
        "\n"
        "Please do not reply to this email.\n",
    ),
    TemplateKind.LOST_PASSWORD: (
        "Your new control panel password",
        "Dear {NAME},\n"
        "\n"
        "Your new password for the control panel account '{USERNAME}' is: "
        "{PASSWORD}\n"
        "\n"
        "You can log in at {BASE_SERVER_VHOST_PREFIX}{BASE_SERVER_VHOST}"
        "{BASE_SERVER_VHOST_PORT}\n"
        "\n"
        "Please do not reply to this email.\n",
    ),
}


async def _get_row(
    db: AsyncSession,
    owner_id: int,
    kind: TemplateKind,
) -> EmailTemplate | None:
    result = await db.execute(
        select(EmailTemplate).where(
            EmailTemplate.owner_id == owner_id,
            EmailTemplate.kind == kind.value,
        )
    )
    return result.scalar_one_or_none()


async def _get_sender(db: AsyncSession, owner_id: int) -> tuple[str, str]:
    """Sender email and name of the account owning the templates."""
    account = await account_service.get_account(db, owner_id)
    if account is None:
        return "", settings.DEFAULT_SENDER_NAME
    return account.email, account.display_name


async def _build_template(
    db: AsyncSession,
    owner_id: int,
    kind: TemplateKind,
    sender: tuple[str, str],
) -> EmailTemplateData:
    row = await _get_row(db, owner_id, kind)
    if row is not None:
        subject, message = row.subject, row.message
    else:
        subject, message = DEFAULT_TEMPLATES[kind]

    sender_email, sender_name = sender
    return EmailTemplateData(
        subject=subject,
        message=message,
        sender_email=sender_email,
        sender_name=sender_name,
    )


async def _load_templates(
    db: AsyncSession,
    owner_id: int,
) -> tuple[EmailTemplateData, EmailTemplateData]:
    """Activation and lost password templates, reading the owner once."""
    sender = await _get_sender(db, owner_id)
    activation = await _build_template(db, owner_id, TemplateKind.ACTIVATION, sender)
    lost_password = await _build_template(db, owner_id, TemplateKind.LOST_PASSWORD, sender)
    return activation, lost_password


async def get_template(
    db: AsyncSession,
    owner_id: int,
    kind: TemplateKind,
) -> EmailTemplateData:
    """
    Get an account's email template, falling back to the default text.

    Sender fields are taken from the owning account.

    Args:
        db: Database session
        owner_id: Account owning the template
        kind: Which template to load

    Returns:
        Template data with sender fields filled in
    """
    sender = await _get_sender(db, owner_id)
    return await _build_template(db, owner_id, kind, sender)


async def set_template(
    db: AsyncSession,
    owner_id: int,
    kind: TemplateKind,
    data: EmailTemplateData,
) -> EmailTemplate:
    """
    Store subject and message of an account's email template.

    Creates the row on first save; sender fields of ``data`` are ignored.

    Args:
        db: Database session
        owner_id: Account owning the template
        kind: Which template to store
        data: New template content

    Returns:
        The stored template row
    """
    row = await _get_row(db, owner_id, kind)
    if row is None:
        row = EmailTemplate(owner_id=owner_id, kind=kind.value)
        db.add(row)

    row.subject = data.subject
    row.message = data.message

    await db.flush()
    await db.refresh(row)

    logger.info(f"Email template {kind.value} of account {owner_id} saved")
    return row


async def get_lostpassword_activation_email(db: AsyncSession, owner_id: int) -> EmailTemplateData:
    return await get_template(db, owner_id, TemplateKind.ACTIVATION)


async def get_lostpassword_email(db: AsyncSession, owner_id: int) -> EmailTemplateData:
    return await get_template(db, owner_id, TemplateKind.LOST_PASSWORD)


async def set_lostpassword_activation_email(
    db: AsyncSession, owner_id: int, data: EmailTemplateData
) -> EmailTemplate:
    return await set_template(db, owner_id, TemplateKind.ACTIVATION, data)


async def set_lostpassword_email(
    db: AsyncSession, owner_id: int, data: EmailTemplateData
) -> EmailTemplate:
    return await set_template(db, owner_id, TemplateKind.LOST_PASSWORD, data)


async def render_lostpassword_page(
    db: AsyncSession,
    identity: Identity,
    hooks: ScriptHooks | None = None,
) -> LostPasswordPage:
    """
    Load the current templates of the caller for display.

    Args:
        db: Database session
        identity: Reseller owning the templates
        hooks: Optional reseller area start/end callbacks

    Returns:
        Form values
    """
    hooks = hooks or ScriptHooks()
    await hooks.run_start(identity)

    activation, lost_password = await _load_templates(db, identity.user_id)
    page = LostPasswordPage.from_templates(activation, lost_password)

    await hooks.run_end(identity, page.model_dump())
    return page


async def submit_lostpassword_templates(
    db: AsyncSession,
    identity: Identity,
    form: LostPasswordForm,
    hooks: ScriptHooks | None = None,
) -> tuple[LostPasswordPage, HandlerResult]:
    """
    Validate and store both lost password templates of the caller.

    Every field goes through clean_input. Both subjects and both messages
    must be non-empty; all violations are reported together and nothing is
    stored unless every check passes. The returned page holds the submitted
    values in either case.

    Args:
        db: Database session
        identity: Reseller owning the templates
        form: Raw submitted fields
        hooks: Optional reseller area start/end callbacks

    Returns:
        Tuple of (form values to render, handler result)
    """
    hooks = hooks or ScriptHooks()
    await hooks.run_start(identity)

    user_id = identity.user_id
    activation, lost_password = await _load_templates(db, user_id)

    activation.subject = clean_input(form.subject1)
    activation.message = clean_input(form.message1)
    lost_password.subject = clean_input(form.subject2)
    lost_password.message = clean_input(form.message2)

    result = HandlerResult()

    if not activation.subject or not lost_password.subject:
        result.add_error(SUBJECT_REQUIRED)

    if not activation.message or not lost_password.message:
        result.add_error(MESSAGE_REQUIRED)

    page = LostPasswordPage.from_templates(activation, lost_password)

    if not result.ok:
        logger.warning(
            f"Lost password templates of account {user_id} not saved: {result.errors}"
        )
    else:
        await set_lostpassword_activation_email(db, user_id, activation)
        await set_lostpassword_email(db, user_id, lost_password)
        result.add_notice(TEMPLATES_UPDATED)

    await hooks.run_end(identity, page.model_dump())
    return page, result


