from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.timetable import SlotTemplate, SlotVariant

FIRST_SEMESTER = 1


def resolve_variant(semester_number: int) -> SlotVariant:
    """Pick the slot template variant used for ``semester_number``.

    The seeder and the grid assembler both go through this function so the
    cells written at seed time line up with the slots read back per request.
    """
    if semester_number == FIRST_SEMESTER:
        return SlotVariant.first_semester
    return SlotVariant.default


async def fetch_slots(session: AsyncSession, variant: SlotVariant | str) -> list[SlotTemplate]:
    tag = variant.value if isinstance(variant, SlotVariant) else variant
    result = await session.execute(
        select(SlotTemplate).where(SlotTemplate.semester_type == tag).order_by(SlotTemplate.id)
    )
    return list(result.scalars())
