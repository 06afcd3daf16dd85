"""
Pytest fixtures and configuration for UNiDBox backend tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2026-01-30
"""
import os

# Keep the application engine off the developer's database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from unidbox import models  # noqa: F401
from unidbox.core.auth import SessionUser
from unidbox.core.database import Base, get_db
from unidbox.domain.chat import ChatResponse
from unidbox.repositories.reference_repository import init_reference_data
from unidbox.rpc.procedure import RPCContext, create_caller
from unidbox.rpc.routers import app_router
from unidbox.seed import seed_database


@pytest.fixture(scope="function")
def db_engine():
    """
    Provides an in-memory SQLite engine with all tables created

    Scope: function (fresh database per test)
    StaticPool keeps a single connection so every session sees the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """
    Provides a session on the seeded sample database

    8 products, orders ORD-2026-0042 and ORD-2026-0043 with 3 items each,
    one delivery order and one invoice per order.
    """
    session = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)()
    seed_database(session)
    yield session
    session.close()


@pytest.fixture(scope="session", autouse=True)
def reference_data():
    """Reference data is initialized once, as the application lifespan does"""
    return init_reference_data()


# ============================================================================
# Users and RPC contexts
# ============================================================================

@pytest.fixture
def dealer_user():
    return SessionUser(open_id="dealer-open-id", name="Steven Lim", email="steven@steadyelectrical.com",
                       role="user", dealer_id="dealer-001")


@pytest.fixture
def admin_user():
    return SessionUser(open_id="admin-open-id", name="Ops Admin", email="ops@unidbox.com", role="admin")


class FakeChatService:
    """Stands in for ChatService; records calls and returns a canned reply"""

    def __init__(self, reply=None):
        self.calls = []
        self.reply = reply or ChatResponse(message="We have several cable boxes in stock.")

    def process_chat(self, catalog, messages, user_query):
        self.calls.append((list(catalog), list(messages), user_query))
        return self.reply


@pytest.fixture
def fake_chat_service():
    return FakeChatService()


@pytest.fixture
def anonymous_ctx(db_session, fake_chat_service):
    return RPCContext(db=db_session, chat_service_factory=lambda: fake_chat_service)


@pytest.fixture
def dealer_ctx(db_session, dealer_user, fake_chat_service):
    return RPCContext(db=db_session, user=dealer_user, chat_service_factory=lambda: fake_chat_service)


@pytest.fixture
def admin_ctx(db_session, admin_user, fake_chat_service):
    return RPCContext(db=db_session, user=admin_user, chat_service_factory=lambda: fake_chat_service)


@pytest.fixture
def anonymous_caller(anonymous_ctx):
    return create_caller(app_router, anonymous_ctx)


@pytest.fixture
def dealer_caller(dealer_ctx):
    return create_caller(app_router, dealer_ctx)


@pytest.fixture
def admin_caller(admin_ctx):
    return create_caller(app_router, admin_ctx)


# ============================================================================
# HTTP
# ============================================================================

@pytest.fixture
def client(db_session):
    """
    FastAPI TestClient bound to the seeded test database
    """
    from unidbox.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
