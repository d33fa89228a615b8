import fastapi
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from dynamic_draft.config.manager import settings
from dynamic_draft.models.db.user import User
from dynamic_draft.repository.crud.user import UserCRUDRepository
from dynamic_draft.securities.authorizations.jwt import jwt_generator
from dynamic_draft.api.dependencies.repository import get_repository
from dynamic_draft.utilities.exceptions.http.exc_401 import http_exc_401_unauthorized_request

# Create HTTPBearer security scheme for Swagger UI
security = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = fastapi.Depends(security),
    user_repo: UserCRUDRepository = fastapi.Depends(get_repository(repo_type=UserCRUDRepository)),
) -> User:
    token = credentials.credentials
    try:
        name, email = jwt_generator.retrieve_details_from_token(token=token, secret_key=settings.JWT_SECRET_KEY)
    except ValueError:
        raise await http_exc_401_unauthorized_request()

    return await user_repo.get_or_create_user(email=email, name=name)
