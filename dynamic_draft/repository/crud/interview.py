import typing

import sqlalchemy

from dynamic_draft.models.db.interview import Interview
from dynamic_draft.repository.crud.base import BaseCRUDRepository
from dynamic_draft.utilities.exceptions.database import EntityDoesNotExist

_UPDATABLE_FIELDS = frozenset(
    {"company", "position", "scheduled_at", "type", "notes", "status", "reminder", "preparation_tasks"}
)


class InterviewCRUDRepository(BaseCRUDRepository):
    async def list_by_user(self, *, user_id: int) -> list[Interview]:
        stmt = sqlalchemy.select(Interview).where(Interview.user_id == user_id).order_by(Interview.scheduled_at.asc())
        query = await self.async_session.execute(statement=stmt)
        return list(query.scalars().all())

    async def create_interview(self, *, user_id: int, **fields: typing.Any) -> Interview:
        new_interview = Interview(user_id=user_id, **{k: v for k, v in fields.items() if k in _UPDATABLE_FIELDS})
        self.async_session.add(new_interview)
        await self.async_session.commit()
        await self.async_session.refresh(new_interview)
        return new_interview

    async def get_by_id_and_user(self, *, interview_id: int, user_id: int) -> Interview:
        stmt = sqlalchemy.select(Interview).where(Interview.id == interview_id).where(Interview.user_id == user_id)
        query = await self.async_session.execute(statement=stmt)
        interview = query.scalar()
        if not interview:
            raise EntityDoesNotExist(f"Interview with id `{interview_id}` does not exist!")
        return interview  # type: ignore

    async def update_interview(self, *, interview_id: int, user_id: int, changes: dict[str, typing.Any]) -> Interview:
        interview = await self.get_by_id_and_user(interview_id=interview_id, user_id=user_id)
        for field, value in changes.items():
            if field in _UPDATABLE_FIELDS:
                setattr(interview, field, value)
        await self.async_session.commit()
        await self.async_session.refresh(interview)
        return interview

    async def delete_interview(self, *, interview_id: int, user_id: int) -> None:
        interview = await self.get_by_id_and_user(interview_id=interview_id, user_id=user_id)
        await self.async_session.delete(interview)
        await self.async_session.commit()
