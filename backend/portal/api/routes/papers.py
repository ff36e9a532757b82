from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.deps import get_db
from portal.schemas.catalog import PaperOut
from portal.services.catalog import list_papers

router = APIRouter()


@router.get("/{branch}", response_model=list[PaperOut])
async def get_papers(branch: str, db: AsyncSession = Depends(get_db)) -> list[PaperOut]:
    return await list_papers(db, branch)
