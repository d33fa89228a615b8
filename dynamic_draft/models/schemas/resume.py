import enum

import pydantic

from dynamic_draft.models.schemas.base import BaseSchemaModel, FrozenSchemaModel, UtcDateTime


class Section(str, enum.Enum):
    """The five fixed top-level divisions of a resume."""

    PERSONAL_INFO = "personalInfo"
    EDUCATION = "education"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    SKILLS = "skills"


DEFAULT_SECTION_ORDER: tuple[Section, ...] = (
    Section.PERSONAL_INFO,
    Section.EDUCATION,
    Section.EXPERIENCE,
    Section.PROJECTS,
    Section.SKILLS,
)

LIST_SECTIONS: frozenset[Section] = frozenset({Section.EDUCATION, Section.EXPERIENCE, Section.PROJECTS})

SCHEMA_VERSION = 1


class PersonalInfo(FrozenSchemaModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""


class EducationEntry(FrozenSchemaModel):
    institution: str = ""
    degree: str = ""
    graduation_date: str = ""


class ExperienceEntry(FrozenSchemaModel):
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    responsibilities: tuple[str, ...] = ()


class ProjectEntry(FrozenSchemaModel):
    name: str = ""
    description: str = ""
    details: tuple[str, ...] = ()


ResumeEntry = EducationEntry | ExperienceEntry | ProjectEntry


class ResumeDocument(FrozenSchemaModel):
    version: int = pydantic.Field(default=SCHEMA_VERSION, description="Snapshot format version")
    personal_info: PersonalInfo = pydantic.Field(default_factory=PersonalInfo)
    education: tuple[EducationEntry, ...] = ()
    experience: tuple[ExperienceEntry, ...] = ()
    projects: tuple[ProjectEntry, ...] = ()
    skills: dict[str, str] = pydantic.Field(
        default_factory=dict, description="Skill category -> free text; insertion order is display order"
    )
    section_order: tuple[Section, ...] = DEFAULT_SECTION_ORDER

    @pydantic.field_validator("section_order")
    @classmethod
    def _section_order_is_permutation(cls, value: tuple[Section, ...]) -> tuple[Section, ...]:
        if len(value) != len(DEFAULT_SECTION_ORDER) or set(value) != set(DEFAULT_SECTION_ORDER):
            raise ValueError("sectionOrder must list each of the five sections exactly once")
        return value


# Public (camelCase) field name -> model attribute, per list section.
ENTRY_FIELDS: dict[Section, dict[str, str]] = {
    Section.EDUCATION: {"institution": "institution", "degree": "degree", "graduationDate": "graduation_date"},
    Section.EXPERIENCE: {
        "company": "company",
        "position": "position",
        "startDate": "start_date",
        "endDate": "end_date",
        "responsibilities": "responsibilities",
    },
    Section.PROJECTS: {"name": "name", "description": "description", "details": "details"},
}

# The single string-list field each list section may carry.
NESTED_LIST_FIELDS: dict[Section, str] = {
    Section.EXPERIENCE: "responsibilities",
    Section.PROJECTS: "details",
}

PERSONAL_INFO_FIELDS: tuple[str, ...] = tuple(PersonalInfo.model_fields)

SECTION_ATTRIBUTES: dict[Section, str] = {
    Section.PERSONAL_INFO: "personal_info",
    Section.EDUCATION: "education",
    Section.EXPERIENCE: "experience",
    Section.PROJECTS: "projects",
    Section.SKILLS: "skills",
}


def blank_entry(section: Section) -> ResumeEntry:
    """Zero-valued entry matching the shape of a list section."""
    section = Section(section)
    if section is Section.EDUCATION:
        return EducationEntry()
    if section is Section.EXPERIENCE:
        return ExperienceEntry(responsibilities=("",))
    if section is Section.PROJECTS:
        return ProjectEntry(details=("",))
    raise ValueError(f"{section.value} is not a list section")


# ----------------------------------
# Remote persistence API payloads
# ----------------------------------


class ResumeCreate(BaseSchemaModel):
    content: ResumeDocument
    template: str | None = pydantic.Field(default=None, description="Identifier of the template the resume started from")

    model_config = BaseSchemaModel.model_config.copy()
    model_config["json_schema_extra"] = {
        "examples": [
            {"content": {"personalInfo": {"name": "Jake Ryan"}}, "template": "professional"}
        ]
    }


class ResumeUpdate(BaseSchemaModel):
    content: ResumeDocument


class ResumeInResponse(BaseSchemaModel):
    id: int = pydantic.Field(description="Resume ID")
    content: ResumeDocument
    template: str | None = None
    date_created: UtcDateTime
    date_updated: UtcDateTime | None = None


class ResumeDeleteResponse(BaseSchemaModel):
    success: bool


class TemplateSummary(BaseSchemaModel):
    id: str
    name: str


class ResumeAnalysisRequest(BaseSchemaModel):
    content: ResumeDocument


class ResumeAnalysisResponse(BaseSchemaModel):
    analysis: str = pydantic.Field(description="Markdown review, empty when analysis is not configured")
    error: str | None = None
    latency_ms: int | None = None
    model: str
