import logging
import typing

from sqlalchemy.ext.asyncio import AsyncSession as SQLAlchemyAsyncSession

from dynamic_draft.repository.database import async_db

logger = logging.getLogger(__name__)


async def get_async_session() -> typing.AsyncGenerator[SQLAlchemyAsyncSession, None]:
    """
    Dependency that provides a database session for each request.
    """
    session = async_db.get_session()
    try:
        yield session
    except Exception as e:
        logger.warning("Database session error: %s", e)
        await session.rollback()
        raise
    finally:
        await session.close()
