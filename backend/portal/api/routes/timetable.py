from typing import Annotated

from fastapi import APIRouter, Depends, Path

from portal.api.deps import get_session_factory
from portal.schemas.timetable import TimetableGrid
from portal.services.store import MAX_SEMESTER_NUMBER, SessionFactory
from portal.services.timetable_grid import assemble_grid

router = APIRouter()


@router.get("/{branch}/{semester}/{section}", response_model=TimetableGrid)
async def get_timetable(
    branch: str,
    semester: Annotated[int, Path(ge=1, le=MAX_SEMESTER_NUMBER)],
    section: str,
    session_factory: SessionFactory = Depends(get_session_factory),
) -> TimetableGrid:
    return await assemble_grid(session_factory, branch, semester, section)
