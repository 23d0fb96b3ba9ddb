"""Domain model for hosted customer domains."""

from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class DomainStatus(str, Enum):
    """Known values of Domain.domain_status."""

    OK = "ok"
    DISABLED = "disabled"
    TODISABLE = "todisable"
    TOENABLE = "toenable"


class Domain(Base):
    """Represents a customer's main domain."""

    __tablename__ = "domains"

    # Primary key
    domain_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Domain name (unique)
    domain_name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
    )

    # Owning customer account
    domain_admin_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("accounts.admin_id"),
        index=True,
        nullable=False,
    )

    # Status; other values than DomainStatus are possible (errors, backend states)
    domain_status: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default=DomainStatus.OK.value,
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Domain(domain={self.domain_name}, status={self.domain_status})>"
