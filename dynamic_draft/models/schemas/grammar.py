import enum

import pydantic

from dynamic_draft.models.schemas.base import BaseSchemaModel, FrozenSchemaModel


class Severity(str, enum.Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class GrammarSuggestion(FrozenSchemaModel):
    """Advisory annotation on one field of a resume; never persisted with the document."""

    field_path: str = pydantic.Field(description="Address of the annotated field, e.g. experience.0.company")
    original: str = pydantic.Field(description="Flagged span of the field text")
    suggestion: str = pydantic.Field(description="Proposed replacement for the flagged span")
    rule: str = pydantic.Field(description="Rule or description that produced the suggestion")
    severity: Severity = Severity.WARNING
    offset: int | None = pydantic.Field(default=None, description="Start of the flagged span in the field text")
    length: int | None = pydantic.Field(default=None, description="Length of the flagged span")


class GrammarCheckRequest(BaseSchemaModel):
    field_path: str
    text: str
    use_remote: bool = False


class GrammarCheckResponse(BaseSchemaModel):
    field_path: str
    suggestions: list[GrammarSuggestion] = pydantic.Field(default_factory=list)
