import logging
import pathlib

import decouple
import pydantic
from pydantic_settings import BaseSettings

ROOT_DIR: pathlib.Path = pathlib.Path(__file__).parent.parent.parent.parent.resolve()


class BackendBaseSettings(BaseSettings):
    TITLE: str = "Dynamic Draft Backend API"
    VERSION: str = "0.1.0"
    TIMEZONE: str = "UTC"
    DESCRIPTION: str | None = None
    DEBUG: bool = False
    ENVIRONMENT: str = "DEV"  # Default environment, overridden by subclasses

    SERVER_HOST: str = decouple.config("BACKEND_SERVER_HOST", cast=str, default="127.0.0.1")  # type: ignore
    SERVER_PORT: int = decouple.config("BACKEND_SERVER_PORT", cast=int, default=8000)  # type: ignore
    SERVER_WORKERS: int = decouple.config("BACKEND_SERVER_WORKERS", cast=int, default=1)  # type: ignore
    API_PREFIX: str = "/api"
    DOCS_URL: str = "/docs"
    OPENAPI_URL: str = "/openapi.json"
    REDOC_URL: str = "/redoc"
    OPENAPI_PREFIX: str = ""

    DB_POSTGRES_HOST: str = decouple.config("POSTGRES_HOST", cast=str, default="localhost")  # type: ignore
    DB_MAX_POOL_CON: int = decouple.config("DB_MAX_POOL_CON", cast=int, default=80)  # type: ignore
    DB_POSTGRES_NAME: str = decouple.config("POSTGRES_DB", cast=str, default="dynamic_draft")  # type: ignore
    DB_POSTGRES_PASSWORD: str = decouple.config("POSTGRES_PASSWORD", cast=str, default="postgres")  # type: ignore
    DB_POOL_SIZE: int = decouple.config("DB_POOL_SIZE", cast=int, default=10)  # type: ignore
    DB_POOL_OVERFLOW: int = decouple.config("DB_POOL_OVERFLOW", cast=int, default=20)  # type: ignore
    DB_POSTGRES_PORT: int = decouple.config("POSTGRES_PORT", cast=int, default=5432)  # type: ignore
    DB_POSTGRES_SCHEMA: str = decouple.config("POSTGRES_SCHEMA", cast=str, default="postgresql")  # type: ignore
    DB_TIMEOUT: int = decouple.config("DB_TIMEOUT", cast=int, default=30)  # type: ignore
    DB_POSTGRES_USERNAME: str = decouple.config("POSTGRES_USERNAME", cast=str, default="postgres")  # type: ignore

    IS_DB_ECHO_LOG: bool = decouple.config("IS_DB_ECHO_LOG", cast=bool, default=False)  # type: ignore
    IS_DB_FORCE_ROLLBACK: bool = decouple.config("IS_DB_FORCE_ROLLBACK", cast=bool, default=False)  # type: ignore
    IS_DB_EXPIRE_ON_COMMIT: bool = decouple.config("IS_DB_EXPIRE_ON_COMMIT", cast=bool, default=False)  # type: ignore

    # Tokens are minted by the external OAuth/session layer; we only verify them.
    JWT_SECRET_KEY: str = decouple.config("JWT_SECRET_KEY", cast=str, default="change-me-jwt-secret")  # type: ignore
    JWT_ALGORITHM: str = decouple.config("JWT_ALGORITHM", cast=str, default="HS256")  # type: ignore
    JWT_SUBJECT: str = decouple.config("JWT_SUBJECT", cast=str, default="access")  # type: ignore

    IS_ALLOWED_CREDENTIALS: bool = decouple.config("IS_ALLOWED_CREDENTIALS", cast=bool, default=True)  # type: ignore
    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:3000",  # Next.js default port
        "http://localhost:3001",
        "http://0.0.0.0:3000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:3001",
    ]
    ALLOWED_METHODS: list[str] = ["*"]
    ALLOWED_HEADERS: list[str] = ["*"]

    LOGGING_LEVEL: int = logging.INFO
    LOGGERS: tuple[str, str] = ("uvicorn.asgi", "uvicorn.access")

    # ------------------------------
    # Resume editor policy
    # ------------------------------
    GRAMMAR_LOCAL_DEBOUNCE_SECONDS: float = decouple.config("GRAMMAR_LOCAL_DEBOUNCE_SECONDS", cast=float, default=0.3)  # type: ignore
    # Minimum interval between two remote checks of the same field
    GRAMMAR_REMOTE_COOLDOWN_SECONDS: float = decouple.config("GRAMMAR_REMOTE_COOLDOWN_SECONDS", cast=float, default=60.0)  # type: ignore
    PERSISTENCE_DEBOUNCE_SECONDS: float = decouple.config("PERSISTENCE_DEBOUNCE_SECONDS", cast=float, default=1.0)  # type: ignore
    LOCAL_STORAGE_DIR: str = decouple.config("LOCAL_STORAGE_DIR", cast=str, default=str(ROOT_DIR / ".storage"))  # type: ignore

    LANGUAGE_TOOL_URL: str = decouple.config("LANGUAGE_TOOL_URL", cast=str, default="https://api.languagetool.org/v2/check")  # type: ignore
    LANGUAGE_TOOL_LANGUAGE: str = decouple.config("LANGUAGE_TOOL_LANGUAGE", cast=str, default="en-US")  # type: ignore
    LANGUAGE_TOOL_TIMEOUT_SECONDS: float = decouple.config("LANGUAGE_TOOL_TIMEOUT_SECONDS", cast=float, default=10.0)  # type: ignore

    # Remote resume store used by the editor's explicit "save to account" action
    RESUME_API_BASE_URL: str = decouple.config("RESUME_API_BASE_URL", cast=str, default="http://127.0.0.1:8000/api")  # type: ignore
    RESUME_API_TIMEOUT_SECONDS: float = decouple.config("RESUME_API_TIMEOUT_SECONDS", cast=float, default=15.0)  # type: ignore

    # ------------------------------
    # Interview scheduler
    # ------------------------------
    INTERVIEW_REMINDER_LEAD_MINUTES: int = decouple.config("INTERVIEW_REMINDER_LEAD_MINUTES", cast=int, default=30)  # type: ignore
    INTERVIEW_REMINDER_POLL_SECONDS: float = decouple.config("INTERVIEW_REMINDER_POLL_SECONDS", cast=float, default=60.0)  # type: ignore

    OPENAI_MODEL: str = decouple.config("OPENAI_MODEL", cast=str, default="gpt-4o-mini")  # type: ignore
    OPENAI_API_KEY: str = decouple.config("OPENAI_API_KEY", cast=str, default="")  # type: ignore
    # LLM/ OpenAI client timeout in seconds (request-level).
    OPENAI_TIMEOUT_SECONDS: float = decouple.config("OPENAI_TIMEOUT_SECONDS", cast=float, default=60.0)  # type: ignore

    model_config = pydantic.ConfigDict(
        case_sensitive=True,
        env_file=f"{str(ROOT_DIR)}/.env",
        validate_assignment=True,
        extra='allow'
    )

    @property
    def set_backend_app_attributes(self) -> dict[str, str | bool | None]:
        """
        Set all `FastAPI` class' attributes with the custom values defined in `BackendBaseSettings`.
        """
        return {
            "title": self.TITLE,
            "version": self.VERSION,
            "debug": self.DEBUG,
            "description": self.DESCRIPTION,
            "docs_url": self.DOCS_URL,
            "openapi_url": self.OPENAPI_URL,
            "redoc_url": self.REDOC_URL,
            "openapi_prefix": self.OPENAPI_PREFIX,
            "api_prefix": self.API_PREFIX,
        }
