from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from sqlalchemy import select

from portal.models.subject import Subject
from portal.models.timetable import SlotTemplate, TimetableCell
from portal.schemas.catalog import SlotOut
from portal.schemas.timetable import DAYS, FREE_PERIOD, SubjectDetail, TimetableGrid
from portal.services.slot_variants import fetch_slots, resolve_variant
from portal.services.store import (
    SessionFactory,
    branch_id_for,
    section_id_for,
    semester_id_for,
    store_errors,
)

logger = logging.getLogger(__name__)

CellKey = tuple[str, int]


def is_break_label(label: str) -> bool:
    lowered = label.lower()
    return "break" in lowered or "lunch" in lowered


def build_grid(
    slots: Sequence[SlotTemplate | SlotOut],
    cells: Mapping[CellKey, str | None],
) -> dict[str, list[str]]:
    """Lay ``cells`` (keyed by ``(day, slot_id)``) out as a day x slot matrix.

    Every day gets exactly ``len(slots)`` entries in slot order. A cell with a
    subject shows the subject name; a subject-less cell shows the slot label for
    break/lunch slots and ``"Free"`` otherwise; a missing cell is ``"Free"``.
    """
    grid: dict[str, list[str]] = {}
    for day in DAYS:
        row: list[str] = []
        for slot in slots:
            key = (day, slot.id)
            if key not in cells:
                row.append(FREE_PERIOD)
                continue
            subject_name = cells[key]
            if subject_name:
                row.append(subject_name)
            elif is_break_label(slot.name):
                row.append(slot.name)
            else:
                row.append(FREE_PERIOD)
        grid[day] = row
    return grid


def build_subject_catalog(subjects: Sequence[Subject]) -> dict[str, SubjectDetail]:
    catalog: dict[str, SubjectDetail] = {}
    # Keyed by display name; a later subject with the same name replaces an earlier one.
    for subject in subjects:
        catalog[subject.name] = SubjectDetail(code=subject.code, name=subject.name, faculty=subject.faculty)
    return catalog


async def assemble_grid(
    session_factory: SessionFactory,
    branch: str,
    semester_number: int,
    section: str,
) -> TimetableGrid:
    async with session_factory() as session:
        async with store_errors():
            branch_id = await branch_id_for(session, branch)
            semester_id = await semester_id_for(session, semester_number)
            section_id = await section_id_for(session, section)

            slots = await fetch_slots(session, resolve_variant(semester_number))

            rows = (
                await session.execute(
                    select(TimetableCell.day, TimetableCell.slot_id, Subject.name)
                    .join(SlotTemplate, TimetableCell.slot_id == SlotTemplate.id)
                    .outerjoin(Subject, TimetableCell.subject_id == Subject.id)
                    .where(
                        TimetableCell.branch_id == branch_id,
                        TimetableCell.semester_id == semester_id,
                        TimetableCell.section_id == section_id,
                    )
                    .order_by(TimetableCell.day, SlotTemplate.id, TimetableCell.id)
                )
            ).all()

            subjects = list((await session.execute(select(Subject).order_by(Subject.id))).scalars())

    cells: dict[CellKey, str | None] = {}
    for day, slot_id, subject_name in rows:
        # Duplicate cells are a seeding bug; the first one wins.
        cells.setdefault((day, slot_id), subject_name)

    logger.debug(
        "Assembled %s-%s-%s grid from %d cell(s) over %d slot(s)",
        branch,
        semester_number,
        section,
        len(cells),
        len(slots),
    )
    return TimetableGrid(
        grid=build_grid(slots, cells),
        subject_catalog=build_subject_catalog(subjects),
        slots=[SlotOut.model_validate(slot) for slot in slots],
    )
