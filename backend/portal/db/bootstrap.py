from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine

import portal.models  # noqa: F401
from portal.db.base import Base

logger = logging.getLogger(__name__)

REQUIRED_TABLES: set[str] = {
    "branches",
    "sections",
    "semesters",
    "subjects",
    "timetable_slots",
    "timetables",
    "previous_year_papers",
    "syllabus",
    "syllabus_sections",
    "syllabus_topics",
}


def _assert_required_tables(connection) -> None:
    table_names = set(inspect(connection).get_table_names())
    missing_tables = sorted(REQUIRED_TABLES - table_names)
    if missing_tables:
        raise RuntimeError(f"Missing required tables: {', '.join(missing_tables)}")


async def ensure_schema(engine: AsyncEngine) -> None:
    try:
        async with engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)
            await connection.run_sync(_assert_required_tables)
    except Exception as exc:
        logger.exception("Runtime schema bootstrap failed")
        raise RuntimeError("Runtime schema bootstrap failed") from exc
