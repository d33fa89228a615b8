import contextlib
import logging
import typing

import fastapi

from dynamic_draft.config.manager import settings
from dynamic_draft.repository.events import dispose_db_connection, initialize_db_connection


@contextlib.asynccontextmanager
async def backend_lifespan(backend_app: fastapi.FastAPI) -> typing.AsyncIterator[None]:
    logging.basicConfig(level=settings.LOGGING_LEVEL)
    await initialize_db_connection(backend_app=backend_app)
    try:
        yield
    finally:
        await dispose_db_connection(backend_app=backend_app)
