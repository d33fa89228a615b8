import datetime
import enum

import pydantic

from dynamic_draft.models.schemas.base import BaseSchemaModel, UtcDateTime


class InterviewType(str, enum.Enum):
    ONSITE = "onsite"
    PHONE = "phone"
    VIDEO = "video"


class InterviewStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PreparationTask(BaseSchemaModel):
    id: str
    task: str
    completed: bool = False


DEFAULT_PREPARATION_TASKS: tuple[tuple[str, str], ...] = (
    ("1", "Research the company"),
    ("2", "Review job description"),
    ("3", "Prepare questions for interviewer"),
    ("4", "Practice common interview questions"),
    ("5", "Prepare your STAR stories"),
)


def default_preparation_tasks() -> list[PreparationTask]:
    return [PreparationTask(id=task_id, task=task) for task_id, task in DEFAULT_PREPARATION_TASKS]


class InterviewCreate(BaseSchemaModel):
    company: str = pydantic.Field(min_length=1, max_length=256)
    position: str = pydantic.Field(min_length=1, max_length=256)
    scheduled_at: datetime.datetime = pydantic.Field(description="Start of the interview (timezone-aware)")
    type: InterviewType = InterviewType.ONSITE
    notes: str = ""
    status: InterviewStatus = InterviewStatus.SCHEDULED
    reminder: bool = False
    preparation_tasks: list[PreparationTask] | None = pydantic.Field(
        default=None, description="Checklist; the default checklist is used when omitted"
    )

    model_config = BaseSchemaModel.model_config.copy()
    model_config["json_schema_extra"] = {
        "examples": [
            {
                "company": "CloudTech Solutions",
                "position": "Senior DevOps Engineer",
                "scheduledAt": "2026-11-02T15:00:00Z",
                "type": "video",
                "reminder": True,
            }
        ]
    }


class InterviewUpdate(BaseSchemaModel):
    company: str | None = pydantic.Field(default=None, min_length=1, max_length=256)
    position: str | None = pydantic.Field(default=None, min_length=1, max_length=256)
    scheduled_at: datetime.datetime | None = None
    type: InterviewType | None = None
    notes: str | None = None
    status: InterviewStatus | None = None
    reminder: bool | None = None
    preparation_tasks: list[PreparationTask] | None = None


class InterviewInResponse(BaseSchemaModel):
    id: int
    company: str
    position: str
    scheduled_at: UtcDateTime
    type: InterviewType
    notes: str
    status: InterviewStatus
    reminder: bool
    preparation_tasks: list[PreparationTask]
    created_at: UtcDateTime | None = None


class InterviewDeleteResponse(BaseSchemaModel):
    success: bool


class InterviewReminder(BaseSchemaModel):
    interview_id: int
    scheduled_at: UtcDateTime
    message: str
