"""Database engine and session factory for PostgreSQL.

Request sessions are opened and committed by the persistence provider, one
per request scope.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from onboard.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Every connection is tagged with the application name and carries the
    configured statement timeout.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    server_settings = {"application_name": settings.database.application_name}
    if settings.database.statement_timeout_ms:
        server_settings["statement_timeout"] = str(
            settings.database.statement_timeout_ms
        )

    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": server_settings},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Objects stay usable after commit: repositories map rows to immutable
    domain models and never rely on lazy reloads.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
