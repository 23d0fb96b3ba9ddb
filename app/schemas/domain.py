"""Domain-related Pydantic schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, computed_field

from app.models.domain import DomainStatus


class DomainAction(str, Enum):
    """Lifecycle actions that can be requested for an account's domains."""

    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"


# Status a toggle reads -> action it requests
TOGGLE_ACTIONS: dict[str, DomainAction] = {
    DomainStatus.OK.value: DomainAction.DEACTIVATE,
    DomainStatus.DISABLED.value: DomainAction.ACTIVATE,
}


class DomainItem(BaseModel):
    """Domain row of the users listing."""

    model_config = ConfigDict(from_attributes=True)

    domain_id: int
    domain_name: str
    domain_status: str
    owner_name: str

    @computed_field
    @property
    def can_toggle(self) -> bool:
        """Whether the status toggle applies to this domain."""
        return self.domain_status in TOGGLE_ACTIONS
