from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.deps import get_db
from portal.schemas.catalog import BranchOut, SectionOut, SemesterOut, SlotOut, SubjectOut
from portal.services import catalog

router = APIRouter()


@router.get("/branches", response_model=list[BranchOut])
async def list_branches(db: AsyncSession = Depends(get_db)) -> list[BranchOut]:
    return await catalog.list_branches(db)


@router.get("/sections", response_model=list[SectionOut])
async def list_sections(db: AsyncSession = Depends(get_db)) -> list[SectionOut]:
    return await catalog.list_sections(db)


@router.get("/semesters", response_model=list[SemesterOut])
async def list_semesters(db: AsyncSession = Depends(get_db)) -> list[SemesterOut]:
    return await catalog.list_semesters(db)


@router.get("/subjects", response_model=list[SubjectOut])
async def list_subjects(db: AsyncSession = Depends(get_db)) -> list[SubjectOut]:
    return await catalog.list_subjects(db)


@router.get("/timetable-slots/{semester_type}", response_model=list[SlotOut])
async def list_timetable_slots(semester_type: str, db: AsyncSession = Depends(get_db)) -> list[SlotOut]:
    return await catalog.list_slots(db, semester_type)
