from typing import Annotated

from fastapi import APIRouter, Depends, Path

from portal.api.deps import get_session_factory
from portal.schemas.syllabus import SyllabusOut
from portal.services.store import MAX_SEMESTER_NUMBER, SessionFactory
from portal.services.syllabus_tree import assemble_syllabus

router = APIRouter()


@router.get("/{branch}/{semester}", response_model=SyllabusOut)
async def get_syllabus(
    branch: str,
    semester: Annotated[int, Path(ge=1, le=MAX_SEMESTER_NUMBER)],
    session_factory: SessionFactory = Depends(get_session_factory),
) -> SyllabusOut:
    return await assemble_syllabus(session_factory, branch, semester)
