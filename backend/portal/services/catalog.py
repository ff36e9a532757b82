from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.academic import Branch, Section, Semester
from portal.models.paper import PastPaper
from portal.models.subject import Subject
from portal.models.timetable import SlotTemplate
from portal.schemas.catalog import PaperOut
from portal.services.slot_variants import fetch_slots
from portal.services.store import branch_id_for, store_errors


async def list_branches(session: AsyncSession) -> list[Branch]:
    async with store_errors():
        return list((await session.execute(select(Branch).order_by(Branch.id))).scalars())


async def list_sections(session: AsyncSession) -> list[Section]:
    async with store_errors():
        return list((await session.execute(select(Section).order_by(Section.id))).scalars())


async def list_semesters(session: AsyncSession) -> list[Semester]:
    async with store_errors():
        return list((await session.execute(select(Semester).order_by(Semester.number))).scalars())


async def list_subjects(session: AsyncSession) -> list[Subject]:
    async with store_errors():
        return list((await session.execute(select(Subject).order_by(Subject.id))).scalars())


async def list_slots(session: AsyncSession, semester_type: str) -> list[SlotTemplate]:
    async with store_errors():
        return await fetch_slots(session, semester_type)


async def list_papers(session: AsyncSession, branch: str) -> list[PaperOut]:
    async with store_errors():
        branch_id = await branch_id_for(session, branch)
        rows = (
            await session.execute(
                select(PastPaper.title, PastPaper.year, Semester.number)
                .join(Semester, PastPaper.semester_id == Semester.id)
                .where(PastPaper.branch_id == branch_id)
                .order_by(Semester.number, PastPaper.year.desc(), PastPaper.id)
            )
        ).all()
    return [PaperOut(title=title, year=year, semester=number) for title, year, number in rows]
