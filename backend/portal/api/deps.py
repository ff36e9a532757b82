from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from portal.services.store import SessionFactory


def get_session_factory(request: Request) -> SessionFactory:
    return request.app.state.session_factory


async def get_db(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as db:
        yield db
