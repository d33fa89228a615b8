import functools
import typing

import fastapi
from sqlalchemy.ext.asyncio import AsyncSession as SQLAlchemyAsyncSession

from dynamic_draft.api.dependencies.session import get_async_session
from dynamic_draft.repository.crud.base import BaseCRUDRepository


# Cached so every route asking for a repository type shares one dependency callable
@functools.lru_cache(maxsize=None)
def get_repository(
    repo_type: typing.Type[BaseCRUDRepository],
) -> typing.Callable[[SQLAlchemyAsyncSession], BaseCRUDRepository]:
    def _get_repo(
        async_session: SQLAlchemyAsyncSession = fastapi.Depends(get_async_session),
    ) -> BaseCRUDRepository:
        return repo_type(async_session=async_session)

    return _get_repo
