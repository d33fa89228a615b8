import sqlalchemy

from dynamic_draft.models.db.resume import Resume
from dynamic_draft.repository.crud.base import BaseCRUDRepository
from dynamic_draft.utilities.exceptions.database import EntityDoesNotExist


class ResumeCRUDRepository(BaseCRUDRepository):
    async def list_by_user(self, *, user_id: int) -> list[Resume]:
        stmt = (
            sqlalchemy.select(Resume)
            .where(Resume.user_id == user_id)
            .order_by(Resume.date_created.desc(), Resume.id.desc())
        )
        query = await self.async_session.execute(statement=stmt)
        return list(query.scalars().all())

    async def create_resume(self, *, user_id: int, content: dict, template: str | None) -> Resume:
        new_resume = Resume(user_id=user_id, content=content, template=template)
        self.async_session.add(new_resume)
        await self.async_session.commit()
        await self.async_session.refresh(new_resume)
        return new_resume

    async def get_by_id_and_user(self, *, resume_id: int, user_id: int) -> Resume:
        stmt = sqlalchemy.select(Resume).where(Resume.id == resume_id).where(Resume.user_id == user_id)
        query = await self.async_session.execute(statement=stmt)
        resume = query.scalar()
        if not resume:
            raise EntityDoesNotExist(f"Resume with id `{resume_id}` does not exist!")
        return resume  # type: ignore

    async def update_content(self, *, resume_id: int, user_id: int, content: dict) -> Resume:
        resume = await self.get_by_id_and_user(resume_id=resume_id, user_id=user_id)
        resume.content = content
        await self.async_session.commit()
        await self.async_session.refresh(resume)
        return resume

    async def delete_resume(self, *, resume_id: int, user_id: int) -> None:
        resume = await self.get_by_id_and_user(resume_id=resume_id, user_id=user_id)
        await self.async_session.delete(resume)
        await self.async_session.commit()
