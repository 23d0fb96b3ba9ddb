"""SQLAlchemy models."""

from app.models.account import Account
from app.models.domain import Domain, DomainStatus
from app.models.email_template import EmailTemplate, TemplateKind

__all__ = [
    "Account",
    "Domain",
    "DomainStatus",
    "EmailTemplate",
    "TemplateKind",
]
