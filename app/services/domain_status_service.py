"""Domain status toggle and listing for the admin area."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import BadRequestError
from app.hooks import ScriptHooks
from app.models.account import Account
from app.models.domain import Domain
from app.schemas.common import HandlerResult, Identity
from app.schemas.domain import TOGGLE_ACTIONS, DomainAction, DomainItem
from app.services import account_service

logger = logging.getLogger(__name__)

# Domain.domain_id is a signed 32-bit column
MAX_DOMAIN_ID = 2**31 - 1


def parse_domain_id(raw: int | str | None) -> int:
    """
    Convert a submitted domain_id to a usable primary key.

    Args:
        raw: Query value, or an already converted id

    Returns:
        The domain id

    Raises:
        BadRequestError: Missing, non-numeric, or outside the column range
    """
    if raw is None:
        raise BadRequestError("Missing domain_id")
    try:
        value = int(raw.strip()) if isinstance(raw, str) else int(raw)
    except ValueError:
        raise BadRequestError(f"Invalid domain_id {raw!r}") from None
    if not 0 < value <= MAX_DOMAIN_ID:
        raise BadRequestError(f"domain_id {raw!r} out of range")
    return value


async def toggle_domain_status(
    db: AsyncSession,
    identity: Identity,
    domain_id: int | str | None,
    hooks: ScriptHooks | None = None,
) -> tuple[DomainAction, HandlerResult]:
    """
    Flip a domain between ok and disabled.

    Reads the current status and asks the account lifecycle to deactivate
    (status ok) or activate (status disabled) the owner's domains. Errors
    raised by the lifecycle operation are not handled here.

    Args:
        db: Database session
        identity: Admin performing the change
        domain_id: Domain to toggle, as submitted
        hooks: Optional admin area start/end callbacks

    Returns:
        Tuple of (action requested, handler result with a notice)

    Raises:
        BadRequestError: Invalid or unknown domain, or status neither ok
            nor disabled
    """
    hooks = hooks or ScriptHooks()
    await hooks.run_start(identity)

    domain_id = parse_domain_id(domain_id)

    result = await db.execute(
        select(Domain.domain_admin_id, Domain.domain_status).where(
            Domain.domain_id == domain_id
        )
    )
    row = result.one_or_none()

    if row is None:
        logger.warning(f"Status change refused: domain {domain_id} not found")
        raise BadRequestError(f"Domain {domain_id} not found")

    action = TOGGLE_ACTIONS.get(row.domain_status)
    if action is None:
        logger.warning(
            f"Status change refused: domain {domain_id} has status {row.domain_status!r}"
        )
        raise BadRequestError(
            f"Domain {domain_id} status {row.domain_status!r} cannot be toggled"
        )

    await account_service.change_domain_status(db, row.domain_admin_id, action)

    logger.info(
        f"Admin {identity.user_id} requested {action.value} for domain {domain_id} "
        f"(account {row.domain_admin_id})"
    )

    handler_result = HandlerResult()
    if action is DomainAction.DEACTIVATE:
        handler_result.add_notice("Domain deactivation scheduled.")
    else:
        handler_result.add_notice("Domain activation scheduled.")

    await hooks.run_end(identity, {"domain_id": domain_id, "action": action.value})
    return action, handler_result


async def list_domains(db: AsyncSession) -> list[DomainItem]:
    """
    List all domains with their owner, for the users listing.

    Args:
        db: Database session

    Returns:
        Domain items ordered by name
    """
    result = await db.execute(
        select(
            Domain.domain_id,
            Domain.domain_name,
            Domain.domain_status,
            Account.admin_name.label("owner_name"),
        )
        .join(Account, Account.admin_id == Domain.domain_admin_id)
        .order_by(Domain.domain_name)
    )
    return [DomainItem.model_validate(row) for row in result.all()]
