import fastapi

from dynamic_draft.api.routes.grammar import router as grammar_router
from dynamic_draft.api.routes.interviews import router as interviews_router
from dynamic_draft.api.routes.resume import router as resume_router
from dynamic_draft.api.routes.templates import router as templates_router

router = fastapi.APIRouter()


@router.get("/health", status_code=200)
async def health_check():
    return {"status": "healthy", "service": "dynamic-draft-backend"}


router.include_router(router=resume_router)
router.include_router(router=templates_router)
router.include_router(router=grammar_router)
router.include_router(router=interviews_router)
