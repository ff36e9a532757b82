import asyncio

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import NullPool

from portal.core.exceptions import StoreError
from portal.db.session import build_engine, build_session_factory
from portal.services.store import store_errors
from portal.services.syllabus_tree import assemble_syllabus
from portal.services.timetable_grid import assemble_grid


def test_store_errors_wraps_sqlalchemy_failures():
    async def _fail():
        async with store_errors():
            raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    with pytest.raises(StoreError) as excinfo:
        asyncio.run(_fail())

    assert isinstance(excinfo.value.cause, OperationalError)
    assert excinfo.value.status_code == 500


def test_store_errors_leaves_other_exceptions_alone():
    async def _fail():
        async with store_errors():
            raise KeyError("branch")

    with pytest.raises(KeyError):
        asyncio.run(_fail())


@pytest.fixture()
def schemaless_factory(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}", poolclass=NullPool)
    yield build_session_factory(engine)
    asyncio.run(engine.dispose())


def test_composition_aborts_with_store_error(schemaless_factory):
    with pytest.raises(StoreError):
        asyncio.run(assemble_grid(schemaless_factory, "CSE", 6, "A"))

    with pytest.raises(StoreError):
        asyncio.run(assemble_syllabus(schemaless_factory, "CSE", 1))
