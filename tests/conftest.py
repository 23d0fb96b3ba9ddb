"""Test fixtures for the hosting panel test suite."""

import os
from collections.abc import AsyncGenerator
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment variables BEFORE importing app modules
os.environ.update({
    "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "SESSION_SECRET": "test-session-secret",
    "LOGIN_URL": "/login",
    "DEFAULT_SENDER_NAME": "Test Panel",
    "ENVIRONMENT": "test",
    "LOG_LEVEL": "WARNING",
})

from app.database import Base, get_session  # noqa: E402
from app.dependencies import get_identity  # noqa: E402
from app.main import create_app  # noqa: E402
from app.models.account import Account  # noqa: E402
from app.models.domain import Domain  # noqa: E402
from app.schemas.common import Identity  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    """Provide a session on a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    async with factory() as session:
        yield session
        await session.rollback()
    await engine.dispose()


@pytest.fixture
def app():
    """Application instance with empty hooks."""
    return create_app()


@pytest.fixture
async def client(app, db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client with database session override."""

    async def override_get_session():
        yield db

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def login_as(app, identity: Identity | None) -> None:
    """Make every request of the test client run as ``identity``."""
    app.dependency_overrides[get_identity] = lambda: identity


async def create_account(
    db: AsyncSession,
    admin_type: str = "user",
    created_by: int | None = None,
    email: str = "",
    first_name: str = "",
    last_name: str = "",
) -> Account:
    """Helper to create a test account."""
    account = Account(
        admin_name=f"{admin_type}-{uuid4().hex[:8]}",
        admin_type=admin_type,
        created_by=created_by,
        email=email,
        first_name=first_name,
        last_name=last_name,
    )
    db.add(account)
    await db.flush()
    return account


async def create_domain(
    db: AsyncSession,
    owner: Account,
    domain_status: str = "ok",
    domain_name: str | None = None,
) -> Domain:
    """Helper to create a test domain."""
    domain = Domain(
        domain_name=domain_name or f"{uuid4().hex[:8]}.example.com",
        domain_admin_id=owner.admin_id,
        domain_status=domain_status,
    )
    db.add(domain)
    await db.flush()
    return domain


@pytest.fixture
async def admin(db: AsyncSession) -> Account:
    return await create_account(db, admin_type="admin")


@pytest.fixture
async def reseller(db: AsyncSession, admin: Account) -> Account:
    return await create_account(
        db,
        admin_type="reseller",
        created_by=admin.admin_id,
        email="reseller@example.com",
        first_name="Rita",
        last_name="Seller",
    )


@pytest.fixture
async def customer(db: AsyncSession, reseller: Account) -> Account:
    return await create_account(db, admin_type="user", created_by=reseller.admin_id)


@pytest.fixture
def admin_identity(admin: Account) -> Identity:
    return Identity(user_id=admin.admin_id, role="admin")


@pytest.fixture
def reseller_identity(reseller: Account) -> Identity:
    return Identity(user_id=reseller.admin_id, role="reseller")
