from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.db import sample_data
from portal.models.academic import Branch, Section, Semester
from portal.models.paper import PastPaper
from portal.models.subject import Subject
from portal.models.syllabus import SyllabusDoc, SyllabusSection, SyllabusTopic
from portal.models.timetable import SlotTemplate, TimetableCell
from portal.schemas.timetable import DAYS
from portal.services.slot_variants import fetch_slots, resolve_variant
from portal.services.store import SessionFactory, store_errors

logger = logging.getLogger(__name__)


def resolve_subject_id(
    hint: str,
    subjects: Sequence[Subject],
    aliases: Mapping[str, str] | None = None,
) -> int | None:
    """Map a timetable hint such as ``"ML"`` to a subject id.

    The alias table (``sample_data.SUBJECT_ALIASES`` unless given) is
    consulted first. Hints without an alias fall back to the first subject
    (by id) whose name contains the hint, case-sensitively.
    Returns ``None`` for break hints and for hints that match nothing.
    """
    if hint in sample_data.BREAK_HINTS:
        return None

    if aliases is None:
        aliases = sample_data.SUBJECT_ALIASES
    code = aliases.get(hint)
    if code is not None:
        for subject in subjects:
            if subject.code == code:
                return subject.id

    for subject in subjects:
        if hint in subject.name:
            return subject.id
    return None


async def _insert_catalog(session: AsyncSession) -> None:
    session.add_all(Branch(name=name) for name in sample_data.BRANCHES)
    session.add_all(Section(name=name) for name in sample_data.SECTIONS)
    session.add_all(Semester(number=number) for number in sample_data.SEMESTER_NUMBERS)
    session.add_all(Subject(**subject) for subject in sample_data.SUBJECTS)
    for variant, templates in sample_data.SLOT_TEMPLATES.items():
        # One flush per template so ids follow period order.
        for name, time_range in templates:
            session.add(SlotTemplate(name=name, time_range=time_range, semester_type=variant.value))
            await session.flush()


async def _id_map(session: AsyncSession, key_column, id_column) -> dict:
    rows = (await session.execute(select(key_column, id_column))).all()
    return {row[0]: row[1] for row in rows}


async def _insert_timetables(session: AsyncSession, subjects: Sequence[Subject]) -> None:
    branch_ids = await _id_map(session, Branch.name, Branch.id)
    section_ids = await _id_map(session, Section.name, Section.id)
    semester_ids = await _id_map(session, Semester.number, Semester.id)

    for timetable in sample_data.SAMPLE_TIMETABLES:
        slots = await fetch_slots(session, resolve_variant(timetable["semester"]))
        week = timetable["week"]
        for day in DAYS:
            hints = week[day]
            if len(hints) != len(slots):
                raise ValueError(
                    f"{timetable['branch']}-{timetable['semester']}-{timetable['section']} {day} has "
                    f"{len(hints)} period(s) but the slot template has {len(slots)}"
                )
            for slot, hint in zip(slots, hints):
                subject_id = resolve_subject_id(hint, subjects)
                if subject_id is None and hint not in sample_data.BREAK_HINTS:
                    logger.warning("No subject matches timetable hint %r (%s, %s)", hint, day, slot.name)
                session.add(
                    TimetableCell(
                        branch_id=branch_ids[timetable["branch"]],
                        section_id=section_ids[timetable["section"]],
                        semester_id=semester_ids[timetable["semester"]],
                        day=day,
                        slot_id=slot.id,
                        subject_id=subject_id,
                    )
                )


async def _insert_papers(session: AsyncSession) -> None:
    branch_ids = await _id_map(session, Branch.name, Branch.id)
    semester_ids = await _id_map(session, Semester.number, Semester.id)
    for branch, papers in sample_data.SAMPLE_PAPERS.items():
        for paper in papers:
            session.add(
                PastPaper(
                    branch_id=branch_ids[branch],
                    title=paper["title"],
                    year=paper["year"],
                    semester_id=semester_ids[paper["semester"]],
                )
            )


async def _insert_syllabi(session: AsyncSession) -> None:
    branch_ids = await _id_map(session, Branch.name, Branch.id)
    semester_ids = await _id_map(session, Semester.number, Semester.id)
    for syllabus in sample_data.SAMPLE_SYLLABI:
        document = SyllabusDoc(
            branch_id=branch_ids[syllabus["branch"]],
            semester_id=semester_ids[syllabus["semester"]],
            title=syllabus["title"],
        )
        session.add(document)
        await session.flush()
        for section_data in syllabus["sections"]:
            section = SyllabusSection(syllabus_id=document.id, title=section_data["title"])
            session.add(section)
            await session.flush()
            session.add_all(SyllabusTopic(section_id=section.id, topic=topic) for topic in section_data["topics"])
            await session.flush()


async def seed_if_empty(session_factory: SessionFactory) -> bool:
    """Insert the sample dataset when the branch table is empty.

    Runs as one transaction. Returns ``True`` when data was written and
    ``False`` when the store already held data.
    """
    async with session_factory() as session:
        async with store_errors():
            branch_count = await session.scalar(select(func.count()).select_from(Branch))
            if branch_count:
                logger.info("Database already contains data; skipping seed")
                return False

            logger.info("Database is empty, inserting sample data")
            try:
                await _insert_catalog(session)
                subjects = list((await session.execute(select(Subject).order_by(Subject.id))).scalars())
                await _insert_timetables(session, subjects)
                await _insert_papers(session)
                await _insert_syllabi(session)
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    logger.info("Sample data inserted successfully")
    return True
