from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portal.core.exceptions import NotFoundError, StoreError
from portal.models.academic import Branch, Section, Semester

logger = logging.getLogger(__name__)

SessionFactory = async_sessionmaker[AsyncSession]

# Largest value accepted by a 32-bit INTEGER column.
MAX_SEMESTER_NUMBER = 2**31 - 1


@asynccontextmanager
async def store_errors() -> AsyncIterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Store operation failed: %s", exc)
        raise StoreError(exc) from exc


async def branch_id_for(session: AsyncSession, name: str) -> int:
    branch_id = (await session.execute(select(Branch.id).where(Branch.name == name))).scalar_one_or_none()
    if branch_id is None:
        raise NotFoundError("branch")
    return branch_id


async def semester_id_for(session: AsyncSession, number: int) -> int:
    if not 1 <= number <= MAX_SEMESTER_NUMBER:
        raise NotFoundError("semester")
    semester_id = (
        await session.execute(select(Semester.id).where(Semester.number == number).order_by(Semester.id))
    ).scalars().first()
    if semester_id is None:
        raise NotFoundError("semester")
    return semester_id


async def section_id_for(session: AsyncSession, name: str) -> int:
    section_id = (
        await session.execute(select(Section.id).where(Section.name == name).order_by(Section.id))
    ).scalars().first()
    if section_id is None:
        raise NotFoundError("section")
    return section_id
