import fastapi
import uvicorn
from dotenv import load_dotenv
from fastapi.middleware.cors import CORSMiddleware

from dynamic_draft.api.endpoints import router as api_endpoint_router
from dynamic_draft.config.events import backend_lifespan
from dynamic_draft.config.manager import settings


def initialize_backend_application() -> fastapi.FastAPI:
    # Load environment variables from .env if present
    load_dotenv()
    app = fastapi.FastAPI(lifespan=backend_lifespan, **settings.set_backend_app_attributes)  # type: ignore

    tags_metadata = [
        {"name": "resumes", "description": "Account-backed resume storage and AI review."},
        {"name": "templates", "description": "Starter templates adapted to the resume document shape."},
        {"name": "grammar", "description": "Grammar suggestions for a single resume field."},
        {"name": "interviews", "description": "Interview scheduling, preparation checklists and reminders."},
    ]
    app.openapi_tags = tags_metadata  # type: ignore[attr-defined]

    # CORS middleware should be added first to handle preflight requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=settings.IS_ALLOWED_CREDENTIALS,
        allow_methods=settings.ALLOWED_METHODS,
        allow_headers=settings.ALLOWED_HEADERS,
    )

    app.include_router(router=api_endpoint_router, prefix=settings.API_PREFIX)

    @app.get("/")
    async def root():
        return {
            "message": "Welcome to Dynamic Draft Backend API",
            "version": settings.VERSION,
            "docs": settings.DOCS_URL,
            "health": f"{settings.API_PREFIX}/health",
        }

    return app


backend_app: fastapi.FastAPI = initialize_backend_application()

if __name__ == "__main__":
    uvicorn.run(
        app="dynamic_draft.main:backend_app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG,
        workers=settings.SERVER_WORKERS,
        log_level=settings.LOGGING_LEVEL,
    )
