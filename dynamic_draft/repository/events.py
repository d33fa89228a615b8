import logging
import typing

import fastapi
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncConnection

from dynamic_draft.repository.database import async_db
from dynamic_draft.repository.table import Base

logger = logging.getLogger(__name__)


@event.listens_for(target=async_db.async_engine.sync_engine, identifier="connect")
def inspect_db_server_on_connection(db_api_connection: typing.Any, connection_record: typing.Any) -> None:
    logger.debug("New DB API connection: %s", db_api_connection)


@event.listens_for(target=async_db.async_engine.sync_engine, identifier="close")
def inspect_db_server_on_close(db_api_connection: typing.Any, connection_record: typing.Any) -> None:
    logger.debug("Closing DB API connection: %s", db_api_connection)


async def initialize_db_tables(connection: AsyncConnection) -> None:
    logger.info("Database Table Creation --- Initializing . . .")

    # Register every mapped table on Base.metadata before create_all
    from dynamic_draft.models.db import interview, resume, user  # noqa: F401

    await connection.run_sync(Base.metadata.create_all)

    logger.info("Database Table Creation --- Successfully Initialized!")


async def initialize_db_connection(backend_app: fastapi.FastAPI) -> None:
    logger.info("Database Connection --- Establishing . . .")

    backend_app.state.db = async_db

    async with backend_app.state.db.async_engine.begin() as connection:
        await initialize_db_tables(connection=connection)

    logger.info("Database Connection --- Successfully Established!")


async def dispose_db_connection(backend_app: fastapi.FastAPI) -> None:
    logger.info("Database Connection --- Disposing . . .")

    await backend_app.state.db.async_engine.dispose()

    logger.info("Database Connection --- Successfully Disposed!")
