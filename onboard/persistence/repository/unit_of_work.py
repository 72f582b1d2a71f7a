"""SQLAlchemy session backed unit of work."""

from sqlalchemy.ext.asyncio import AsyncSession

from onboard.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits the request session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
