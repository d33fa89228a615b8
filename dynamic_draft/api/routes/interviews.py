import datetime
import logging

import fastapi

from dynamic_draft.api.dependencies.auth import get_current_user
from dynamic_draft.api.dependencies.repository import get_repository
from dynamic_draft.models.db.interview import Interview
from dynamic_draft.models.schemas.interview import (
    InterviewCreate,
    InterviewDeleteResponse,
    InterviewInResponse,
    InterviewReminder,
    InterviewUpdate,
    PreparationTask,
    default_preparation_tasks,
)
from dynamic_draft.repository.crud.interview import InterviewCRUDRepository
from dynamic_draft.services.reminders import due_reminders, reminder_message
from dynamic_draft.utilities.exceptions.database import EntityDoesNotExist
from dynamic_draft.utilities.exceptions.http.exc_404 import http_404_exc_interview_not_found_request

logger = logging.getLogger(__name__)

router = fastapi.APIRouter(prefix="", tags=["interviews"])


def _interview_response(interview: Interview) -> InterviewInResponse:
    return InterviewInResponse(
        id=interview.id,
        company=interview.company,
        position=interview.position,
        scheduled_at=interview.scheduled_at,
        type=interview.type,
        notes=interview.notes or "",
        status=interview.status,
        reminder=interview.reminder,
        preparation_tasks=[PreparationTask.model_validate(task) for task in interview.preparation_tasks or []],
        created_at=interview.created_at,
    )


@router.get(
    path="/interviews",
    name="interviews:list",
    response_model=list[InterviewInResponse],
    status_code=fastapi.status.HTTP_200_OK,
    summary="List scheduled interviews",
    description="Returns the current user's interviews ordered by start time, soonest first.",
)
async def list_interviews(
    current_user=fastapi.Depends(get_current_user),
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> list[InterviewInResponse]:
    interviews = await interview_repo.list_by_user(user_id=current_user.id)
    return [_interview_response(interview) for interview in interviews]


@router.post(
    path="/interviews",
    name="interviews:create",
    response_model=InterviewInResponse,
    status_code=fastapi.status.HTTP_201_CREATED,
    summary="Schedule an interview",
    description="Creates an interview; the default preparation checklist is attached when none is supplied.",
)
async def create_interview(
    payload: InterviewCreate,
    current_user=fastapi.Depends(get_current_user),
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> InterviewInResponse:
    tasks = payload.preparation_tasks if payload.preparation_tasks is not None else default_preparation_tasks()
    interview = await interview_repo.create_interview(
        user_id=current_user.id,
        company=payload.company,
        position=payload.position,
        scheduled_at=payload.scheduled_at,
        type=payload.type.value,
        notes=payload.notes,
        status=payload.status.value,
        reminder=payload.reminder,
        preparation_tasks=[task.model_dump() for task in tasks],
    )
    return _interview_response(interview)


@router.get(
    path="/interviews/reminders",
    name="interviews:reminders",
    response_model=list[InterviewReminder],
    status_code=fastapi.status.HTTP_200_OK,
    summary="Reminders due now",
    description="Interviews with reminders enabled that start within the reminder lead time.",
)
async def list_due_reminders(
    current_user=fastapi.Depends(get_current_user),
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> list[InterviewReminder]:
    interviews = await interview_repo.list_by_user(user_id=current_user.id)
    now = datetime.datetime.now(datetime.timezone.utc)
    return [
        InterviewReminder(interview_id=i.id, scheduled_at=i.scheduled_at, message=reminder_message(i))
        for i in due_reminders(interviews, now)
    ]


@router.put(
    path="/interviews/{interview_id}",
    name="interviews:update",
    response_model=InterviewInResponse,
    status_code=fastapi.status.HTTP_200_OK,
    summary="Update an interview",
    description="Applies the supplied fields (status, reminder toggle, checklist, ...) to an interview owned by the current user.",
)
async def update_interview(
    interview_id: int,
    payload: InterviewUpdate,
    current_user=fastapi.Depends(get_current_user),
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> InterviewInResponse:
    changes = {key: value for key, value in payload.model_dump(exclude_unset=True).items() if value is not None}
    for enum_field in ("type", "status"):
        if enum_field in changes:
            changes[enum_field] = getattr(payload, enum_field).value
    try:
        interview = await interview_repo.update_interview(
            interview_id=interview_id, user_id=current_user.id, changes=changes
        )
    except EntityDoesNotExist:
        raise await http_404_exc_interview_not_found_request(interview_id=interview_id)
    return _interview_response(interview)


@router.delete(
    path="/interviews/{interview_id}",
    name="interviews:delete",
    response_model=InterviewDeleteResponse,
    status_code=fastapi.status.HTTP_200_OK,
    summary="Delete an interview",
)
async def delete_interview(
    interview_id: int,
    current_user=fastapi.Depends(get_current_user),
    interview_repo: InterviewCRUDRepository = fastapi.Depends(get_repository(repo_type=InterviewCRUDRepository)),
) -> InterviewDeleteResponse:
    try:
        await interview_repo.delete_interview(interview_id=interview_id, user_id=current_user.id)
    except EntityDoesNotExist:
        raise await http_404_exc_interview_not_found_request(interview_id=interview_id)
    return InterviewDeleteResponse(success=True)
