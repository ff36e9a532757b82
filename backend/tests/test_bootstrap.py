import asyncio

import pytest
from sqlalchemy import text

from portal.db import bootstrap


def _raise_error(*args, **kwargs):
    raise RuntimeError("create_all exploded")


def test_schema_bootstrap_raises_on_failure(engine, monkeypatch):
    monkeypatch.setattr(bootstrap.Base.metadata, "create_all", _raise_error)

    with pytest.raises(RuntimeError, match="Runtime schema bootstrap failed"):
        asyncio.run(bootstrap.ensure_schema(engine))


def test_schema_bootstrap_reports_missing_tables(engine, monkeypatch):
    monkeypatch.setattr(bootstrap, "REQUIRED_TABLES", bootstrap.REQUIRED_TABLES | {"lecture_halls"})

    with pytest.raises(RuntimeError) as excinfo:
        asyncio.run(bootstrap.ensure_schema(engine))

    assert "lecture_halls" in str(excinfo.value.__cause__)


def test_slot_variant_defaults_on_the_server(engine):
    async def _insert_bare_slot():
        async with engine.begin() as connection:
            await connection.execute(
                text("INSERT INTO timetable_slots (name, time_range) VALUES ('Extra', '4:30 pm - 5:20 pm')")
            )
            return (await connection.execute(text("SELECT semester_type FROM timetable_slots"))).scalar_one()

    assert asyncio.run(_insert_bare_slot()) == "default"
