"""Email template model for per-account customizable emails."""

from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class TemplateKind(str, Enum):
    """Which stored email a template row holds."""

    ACTIVATION = "activation"
    LOST_PASSWORD = "lost_password"


class EmailTemplate(Base):
    """Subject and body of one email, owned by an account."""

    __tablename__ = "email_templates"

    # Primary key
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Owning account
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("accounts.admin_id"),
        nullable=False,
    )

    # TemplateKind value
    kind: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )

    subject: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    message: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # Timestamps
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("owner_id", "kind", name="uq_email_templates_owner_kind"),
    )

    def __repr__(self) -> str:
        return f"<EmailTemplate(owner_id={self.owner_id}, kind={self.kind})>"
