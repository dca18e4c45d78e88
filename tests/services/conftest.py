# tests/services/conftest.py
from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from agentxrp.db.session import Base, configure_sqlite


@pytest.fixture()
def file_sessions(tmp_path) -> Iterator[sessionmaker]:
    """Session factory over a file-backed database shared by worker threads."""
    engine = configure_sqlite(
        create_engine(
            f"sqlite:///{tmp_path / 'ledger.db'}",
            connect_args={"check_same_thread": False, "timeout": 30},
        )
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
