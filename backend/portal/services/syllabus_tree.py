from __future__ import annotations

import asyncio
import logging

from sqlalchemy import select

from portal.core.exceptions import NotFoundError
from portal.models.syllabus import SyllabusDoc, SyllabusSection, SyllabusTopic
from portal.schemas.syllabus import SyllabusOut, SyllabusSectionOut
from portal.services.store import SessionFactory, branch_id_for, semester_id_for, store_errors

logger = logging.getLogger(__name__)


async def fetch_topics(session_factory: SessionFactory, section_id: int) -> list[str]:
    # One session per fetch: an AsyncSession cannot run concurrent statements.
    async with session_factory() as session:
        async with store_errors():
            result = await session.execute(
                select(SyllabusTopic.topic)
                .where(SyllabusTopic.section_id == section_id)
                .order_by(SyllabusTopic.id)
            )
            return list(result.scalars())


async def assemble_syllabus(
    session_factory: SessionFactory,
    branch: str,
    semester_number: int,
) -> SyllabusOut:
    """Rebuild the syllabus -> sections -> topics tree for one branch/semester.

    Topics for every section are fetched concurrently and joined with
    ``asyncio.gather``, which returns results in the order the fetches were
    issued. Sections therefore come back in creation order regardless of which
    fetch completes first. If any fetch fails, the remaining ones are cancelled
    and the error propagates without a partial result.
    """
    async with session_factory() as session:
        async with store_errors():
            branch_id = await branch_id_for(session, branch)
            semester_id = await semester_id_for(session, semester_number)

            document = (
                await session.execute(
                    select(SyllabusDoc)
                    .where(SyllabusDoc.branch_id == branch_id, SyllabusDoc.semester_id == semester_id)
                    .order_by(SyllabusDoc.id)
                )
            ).scalars().first()
            if document is None:
                raise NotFoundError("syllabus")

            sections = list(
                (
                    await session.execute(
                        select(SyllabusSection)
                        .where(SyllabusSection.syllabus_id == document.id)
                        .order_by(SyllabusSection.id)
                    )
                ).scalars()
            )

    if not sections:
        return SyllabusOut(title=document.title, sections=[])

    tasks = [asyncio.ensure_future(fetch_topics(session_factory, section.id)) for section in sections]
    try:
        topic_lists = await asyncio.gather(*tasks)
    except Exception:
        # First failure aborts the tree; cancel fetches still in flight.
        for task in tasks:
            task.cancel()
        raise

    logger.debug("Assembled syllabus %r with %d section(s)", document.title, len(sections))
    return SyllabusOut(
        title=document.title,
        sections=[
            SyllabusSectionOut(title=section.title, topics=topics)
            for section, topics in zip(sections, topic_lists)
        ],
    )
