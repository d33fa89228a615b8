import datetime

import pydantic
from jose import jwt as jose_jwt, JWTError as JoseJWTError

from dynamic_draft.config.manager import settings


class JWTAccount(pydantic.BaseModel):
    email: pydantic.EmailStr
    name: str | None = None


class JWToken(pydantic.BaseModel):
    exp: datetime.datetime
    sub: str


class JWTGenerator:
    """Verifies bearer tokens minted by the external session layer.

    ``generate_access_token`` mints tokens of the same shape for local runs and tests.
    """

    def generate_access_token(
        self,
        *,
        email: str,
        name: str | None = None,
        secret_key: str | None = None,
        expires_delta: datetime.timedelta | None = None,
    ) -> str:
        expire = datetime.datetime.now(datetime.timezone.utc) + (expires_delta or datetime.timedelta(hours=1))
        to_encode = JWTAccount(email=email, name=name).model_dump()
        to_encode.update(JWToken(exp=expire, sub=settings.JWT_SUBJECT).model_dump())
        return jose_jwt.encode(to_encode, key=secret_key or settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

    def retrieve_details_from_token(self, token: str, secret_key: str) -> tuple[str | None, str]:
        """Return ``(name, email)`` from a valid token; raise ``ValueError`` otherwise."""
        try:
            payload = jose_jwt.decode(token=token, key=secret_key, algorithms=[settings.JWT_ALGORITHM])
            account = JWTAccount(email=payload.get("email") or payload.get("sub") or "", name=payload.get("name"))
        except JoseJWTError as token_decode_error:
            raise ValueError("Unable to decode JWT Token") from token_decode_error
        except pydantic.ValidationError as validation_error:
            raise ValueError("Invalid payload in token") from validation_error

        return account.name, account.email


jwt_generator: JWTGenerator = JWTGenerator()
