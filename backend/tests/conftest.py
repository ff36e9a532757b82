import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from portal.db.bootstrap import ensure_schema
from portal.db.session import build_engine, build_session_factory
from portal.main import create_app
from portal.services.seeder import seed_if_empty


@pytest.fixture()
def engine(tmp_path):
    # File-backed so concurrent sessions each get their own connection.
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'portal.db'}", poolclass=NullPool)
    asyncio.run(ensure_schema(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def seeded(session_factory):
    asyncio.run(seed_if_empty(session_factory))
    return session_factory


@pytest.fixture()
def client(engine):
    app = create_app(engine=engine)
    with TestClient(app) as test_client:
        yield test_client
