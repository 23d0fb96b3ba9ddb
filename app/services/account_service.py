"""Account lookup and domain lifecycle operations."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import AccountNotFoundError
from app.models.account import Account
from app.models.domain import Domain, DomainStatus
from app.schemas.domain import DomainAction

logger = logging.getLogger(__name__)

# Pending status written for each action; the provisioning backend
# completes the transition to ok/disabled.
PENDING_STATUS: dict[DomainAction, DomainStatus] = {
    DomainAction.ACTIVATE: DomainStatus.TOENABLE,
    DomainAction.DEACTIVATE: DomainStatus.TODISABLE,
}


async def get_account(db: AsyncSession, account_id: int) -> Account | None:
    """
    Get an account by id.

    Args:
        db: Database session
        account_id: Account primary key

    Returns:
        Account if found, None otherwise
    """
    result = await db.execute(
        select(Account).where(Account.admin_id == account_id)
    )
    return result.scalar_one_or_none()


async def change_domain_status(
    db: AsyncSession,
    account_id: int,
    action: DomainAction | str,
) -> int:
    """
    Schedule activation or deactivation of all domains of an account.

    Args:
        db: Database session
        account_id: Customer account owning the domains
        action: "activate" or "deactivate"

    Returns:
        Number of domains marked

    Raises:
        ValueError: If action is not a known DomainAction
        AccountNotFoundError: If the account owns no domain
    """
    action = DomainAction(action)
    pending = PENDING_STATUS[action]

    result = await db.execute(
        select(Domain).where(Domain.domain_admin_id == account_id)
    )
    domains = result.scalars().all()

    if not domains:
        raise AccountNotFoundError(f"Account {account_id} owns no domain")

    for domain in domains:
        domain.domain_status = pending.value

    await db.flush()

    logger.info(
        f"Account {account_id}: {len(domains)} domain(s) scheduled to "
        f"{action.value} (status={pending.value})"
    )
    return len(domains)
