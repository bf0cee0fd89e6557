"""Pytest configuration shared by all tests."""

from datetime import datetime, timedelta
from email.message import EmailMessage
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from bureau.core.config import MailSettings, SecuritySettings, Settings
from bureau.core.container import ApplicationContainer
from bureau.core.security import JwtTokenIssuer
from bureau.core.timeutils import utcnow
from bureau.db import models  # noqa: F401
from bureau.infrastructure.database import Base
from bureau.interfaces.http.deps import get_db_session
from bureau.main import create_app
from bureau.modules.accounts import ROLE_ADMIN, ROLE_SUPER_ADMIN, AccountCreateInput, AccountService

TEST_PASSWORD = "correct-horse"


class FrozenClock:
    """Callable clock that only moves when a test advances it."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class RecordingTransport:
    def __init__(self) -> None:
        self.messages: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        self.messages.append(message)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        security=SecuritySettings(secret_key="test-secret-key-for-jwt", bcrypt_rounds=4),
        mail=MailSettings(admin_email="inbox@bureau.test", from_email="no-reply@bureau.test"),
    )


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(utcnow().replace(microsecond=0))


@pytest.fixture
def mail_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def token_issuer(settings: Settings, clock: FrozenClock) -> JwtTokenIssuer:
    return JwtTokenIssuer(settings.secret_key, settings.algorithm, clock=clock)


@pytest.fixture
def container(settings, token_issuer, mail_transport, clock) -> ApplicationContainer:
    return ApplicationContainer(
        settings=settings,
        token_issuer=token_issuer,
        mail_transport=mail_transport,
        clock=clock,
    )


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """In-memory SQLite database shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(settings, container, session_factory) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(settings, container)

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def make_account(session_factory, settings):
    """Factory that persists an account and returns its domain model."""

    async def _make(
        username: str = "editor",
        email: str = "editor@bureau.test",
        password: str = TEST_PASSWORD,
        role: str = ROLE_ADMIN,
        is_active: bool = True,
    ):
        async with session_factory() as session:
            service = AccountService.with_session(session, settings.security.bcrypt_rounds)
            account = await service.create_account(
                AccountCreateInput(
                    username=username,
                    email=email,
                    password=password,
                    name=username.title(),
                    role=role,
                    is_active=is_active,
                )
            )
            await session.commit()
        return account

    return _make


@pytest_asyncio.fixture
async def super_admin(make_account):
    return await make_account(username="root", email="root@bureau.test", role=ROLE_SUPER_ADMIN)


@pytest_asyncio.fixture
async def admin(make_account):
    return await make_account()


@pytest.fixture
def auth_headers(token_issuer, settings):
    def _headers(account) -> dict[str, str]:
        token = token_issuer.sign(account.id, timedelta(minutes=settings.access_token_expire_minutes))
        return {"Authorization": f"Bearer {token}"}

    return _headers
