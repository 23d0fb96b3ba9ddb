"""Account model for panel users (admins, resellers and customers)."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

ACCOUNT_TYPES = ("admin", "reseller", "user")


class Account(Base):
    """Represents a panel account."""

    __tablename__ = "accounts"

    # Primary key
    admin_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Login name (unique)
    admin_name: Mapped[str] = mapped_column(
        String(200),
        unique=True,
        nullable=False,
    )

    # One of ACCOUNT_TYPES
    admin_type: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default="user",
    )

    # Reseller (or admin) that created this account
    created_by: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("accounts.admin_id"),
        nullable=True,
    )

    # Contact details
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
    )
    first_name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        default="",
    )
    last_name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        default="",
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    @property
    def display_name(self) -> str:
        """First and last name, or the login name when both are empty."""
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.admin_name

    def __repr__(self) -> str:
        return f"<Account(admin_name={self.admin_name}, type={self.admin_type})>"
