# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator, Iterator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from agentxrp.db.session import Base, configure_sqlite
from agentxrp.db.session import get_db as app_get_session
from agentxrp.main import app as fastapi_app
from agentxrp.models import Agent, Post
from tests.factories import create_agent, create_post, make_xrp_address

TEST_DB_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = configure_sqlite(
        create_engine(
            TEST_DB_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    # Service commits and rollbacks only release or unwind a SAVEPOINT; the
    # outer transaction is discarded when the test ends.
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def alice_account(db_session: Session) -> tuple[Agent, str]:
    return create_agent(db_session, "alice")


@pytest.fixture()
def bob_account(db_session: Session) -> tuple[Agent, str]:
    return create_agent(db_session, "bob")


@pytest.fixture()
def carol_account(db_session: Session) -> tuple[Agent, str]:
    return create_agent(db_session, "carol")


@pytest.fixture()
def alice(alice_account: tuple[Agent, str]) -> Agent:
    return alice_account[0]


@pytest.fixture()
def bob(bob_account: tuple[Agent, str]) -> Agent:
    return bob_account[0]


@pytest.fixture()
def carol(carol_account: tuple[Agent, str]) -> Agent:
    return carol_account[0]


@pytest.fixture()
def alice_headers(alice_account: tuple[Agent, str]) -> dict[str, str]:
    """Return authorization headers for alice."""
    return {"Authorization": f"Bearer {alice_account[1]}"}


@pytest.fixture()
def bob_headers(bob_account: tuple[Agent, str]) -> dict[str, str]:
    """Return authorization headers for bob."""
    return {"Authorization": f"Bearer {bob_account[1]}"}


@pytest.fixture()
def carol_headers(carol_account: tuple[Agent, str]) -> dict[str, str]:
    """Return authorization headers for carol."""
    return {"Authorization": f"Bearer {carol_account[1]}"}


@pytest.fixture()
def alice_post(db_session: Session, alice: Agent) -> Post:
    """A baseline post authored by alice."""
    return create_post(db_session, alice, "Hello from alice")


@pytest.fixture()
def registration_payload() -> dict[str, Any]:
    return {
        "name": "dave_bot",
        "xrp_address": make_xrp_address(),
        "description": "Test registrant",
    }
