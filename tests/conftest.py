"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Minimal environment for Settings; must be set before importing the package
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RPC_URL", "http://127.0.0.1:8545")
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("ENVIRONMENT", "test")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from ledger_indexer.config.database import create_session_maker  # noqa: E402
from ledger_indexer.models import Base  # noqa: E402
from ledger_indexer.repositories.indexer_state_repository import (  # noqa: E402
    IndexerStateRepository,
)
from tests.factories import FakeChainClient, LogFactory  # noqa: E402


@pytest.fixture
def log_factory():
    """Factory for ABI-encoded raw logs."""
    return LogFactory()


@pytest.fixture
def fake_chain():
    """Scriptable chain client."""
    return FakeChainClient()


@pytest.fixture
async def db_engine(tmp_path):
    """SQLite database file with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    """Session factory bound to the test database."""
    return create_session_maker(db_engine)


@pytest.fixture
def seed_checkpoint(session_maker):
    """Seed the indexer_state row at a given block."""

    async def _seed(block: int) -> None:
        async with session_maker() as session:
            await IndexerStateRepository(session).seed(block)
            await session.commit()

    return _seed
