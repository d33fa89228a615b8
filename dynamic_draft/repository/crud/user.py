import sqlalchemy

from dynamic_draft.models.db.user import User
from dynamic_draft.repository.crud.base import BaseCRUDRepository
from dynamic_draft.utilities.exceptions.database import EntityAlreadyExists, EntityDoesNotExist


class UserCRUDRepository(BaseCRUDRepository):
    async def get_user_by_email(self, *, email: str) -> User:
        stmt = sqlalchemy.select(User).where(User.email == email)
        query = await self.async_session.execute(statement=stmt)
        user = query.scalar()
        if not user:
            raise EntityDoesNotExist("User with this email does not exist!")
        return user  # type: ignore

    async def create_user(self, *, email: str, name: str | None = None) -> User:
        stmt = sqlalchemy.select(User).where(User.email == email)
        query = await self.async_session.execute(statement=stmt)
        if query.scalar():
            raise EntityAlreadyExists("User with this email already exists!")

        new_user = User(email=email, name=name)
        self.async_session.add(new_user)
        await self.async_session.commit()
        await self.async_session.refresh(new_user)
        return new_user

    async def get_or_create_user(self, *, email: str, name: str | None = None) -> User:
        """First authenticated request from a new identity provisions its account."""
        try:
            return await self.get_user_by_email(email=email)
        except EntityDoesNotExist:
            return await self.create_user(email=email, name=name)
