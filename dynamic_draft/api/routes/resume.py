import logging

import fastapi

from dynamic_draft.api.dependencies.auth import get_current_user
from dynamic_draft.api.dependencies.repository import get_repository
from dynamic_draft.models.db.resume import Resume
from dynamic_draft.models.schemas.resume import (
    ResumeAnalysisRequest,
    ResumeAnalysisResponse,
    ResumeCreate,
    ResumeDeleteResponse,
    ResumeDocument,
    ResumeInResponse,
    ResumeUpdate,
)
from dynamic_draft.repository.crud.resume import ResumeCRUDRepository
from dynamic_draft.services.llm import analyze_resume
from dynamic_draft.utilities.exceptions.database import EntityDoesNotExist
from dynamic_draft.utilities.exceptions.http.exc_404 import http_404_exc_resume_not_found_request

logger = logging.getLogger(__name__)

router = fastapi.APIRouter(prefix="", tags=["resumes"])


def _resume_response(resume: Resume) -> ResumeInResponse:
    return ResumeInResponse(
        id=resume.id,
        content=ResumeDocument.model_validate(resume.content),
        template=resume.template,
        date_created=resume.date_created,
        date_updated=resume.date_updated,
    )


@router.get(
    path="/resumes",
    name="resumes:list",
    response_model=list[ResumeInResponse],
    status_code=fastapi.status.HTTP_200_OK,
    summary="List saved resumes",
    description="Returns every resume saved by the current user, newest first.",
)
async def list_resumes(
    current_user=fastapi.Depends(get_current_user),
    resume_repo: ResumeCRUDRepository = fastapi.Depends(get_repository(repo_type=ResumeCRUDRepository)),
) -> list[ResumeInResponse]:
    resumes = await resume_repo.list_by_user(user_id=current_user.id)
    return [_resume_response(resume) for resume in resumes]


@router.post(
    path="/resumes",
    name="resumes:create",
    response_model=ResumeInResponse,
    status_code=fastapi.status.HTTP_201_CREATED,
    summary="Save a resume",
    description="Stores a full resume document (and the template it started from) under the current user's account.",
)
async def create_resume(
    payload: ResumeCreate,
    current_user=fastapi.Depends(get_current_user),
    resume_repo: ResumeCRUDRepository = fastapi.Depends(get_repository(repo_type=ResumeCRUDRepository)),
) -> ResumeInResponse:
    resume = await resume_repo.create_resume(
        user_id=current_user.id,
        content=payload.content.model_dump(by_alias=True, mode="json"),
        template=payload.template,
    )
    logger.info("Saved resume %s for user %s", resume.id, current_user.id)
    return _resume_response(resume)


@router.patch(
    path="/resumes/{resume_id}",
    name="resumes:update",
    response_model=ResumeInResponse,
    status_code=fastapi.status.HTTP_200_OK,
    summary="Replace a saved resume's content",
    description="Overwrites the document of a resume owned by the current user. Responds 404 for resumes of other users.",
)
async def update_resume(
    resume_id: int,
    payload: ResumeUpdate,
    current_user=fastapi.Depends(get_current_user),
    resume_repo: ResumeCRUDRepository = fastapi.Depends(get_repository(repo_type=ResumeCRUDRepository)),
) -> ResumeInResponse:
    try:
        resume = await resume_repo.update_content(
            resume_id=resume_id,
            user_id=current_user.id,
            content=payload.content.model_dump(by_alias=True, mode="json"),
        )
    except EntityDoesNotExist:
        raise await http_404_exc_resume_not_found_request(resume_id=resume_id)
    return _resume_response(resume)


@router.delete(
    path="/resumes/{resume_id}",
    name="resumes:delete",
    response_model=ResumeDeleteResponse,
    status_code=fastapi.status.HTTP_200_OK,
    summary="Delete a saved resume",
)
async def delete_resume(
    resume_id: int,
    current_user=fastapi.Depends(get_current_user),
    resume_repo: ResumeCRUDRepository = fastapi.Depends(get_repository(repo_type=ResumeCRUDRepository)),
) -> ResumeDeleteResponse:
    try:
        await resume_repo.delete_resume(resume_id=resume_id, user_id=current_user.id)
    except EntityDoesNotExist:
        raise await http_404_exc_resume_not_found_request(resume_id=resume_id)
    return ResumeDeleteResponse(success=True)


@router.post(
    path="/resumes/analyze",
    name="resumes:analyze",
    response_model=ResumeAnalysisResponse,
    status_code=fastapi.status.HTTP_200_OK,
    summary="AI review of a resume",
    description=(
        "Sends the document to the configured language model and returns a markdown review organised as overall "
        "structure, content impact, per-section improvements, missing information and general tips. Returns an "
        "empty review when no model is configured."
    ),
)
async def analyze(
    payload: ResumeAnalysisRequest,
    current_user=fastapi.Depends(get_current_user),
) -> ResumeAnalysisResponse:
    analysis, error, latency_ms, model = await analyze_resume(payload.content)
    return ResumeAnalysisResponse(analysis=analysis, error=error, latency_ms=latency_ms, model=model)
