from __future__ import annotations

from typing import Any, Dict, List, Mapping

from dynamic_draft.models.schemas.resume import (
    DEFAULT_SECTION_ORDER,
    PERSONAL_INFO_FIELDS,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeDocument,
    Section,
)
from dynamic_draft.services.template_data import TEMPLATES

DEFAULT_SKILL_CATEGORIES: tuple[str, ...] = ("languages", "frameworks", "developerTools", "libraries")


def default_document() -> ResumeDocument:
    """Blank document with one empty entry per list section, as a new resume starts."""
    return ResumeDocument(
        personal_info=PersonalInfo(),
        education=(EducationEntry(),),
        experience=(ExperienceEntry(responsibilities=("",)),),
        projects=(ProjectEntry(details=("",)),),
        skills={key: "" for key in DEFAULT_SKILL_CATEGORIES},
        section_order=DEFAULT_SECTION_ORDER,
    )


def sample_document() -> ResumeDocument:
    """Filled-in example resume offered by "reset to example"."""
    return ResumeDocument(
        personal_info=PersonalInfo(
            name="Jake Ryan",
            email="jake@su.edu",
            phone="123-456-7890",
            location="Georgetown, TX",
            linkedin="linkedin.com/in/jakeryan",
            github="github.com/jakeryan",
        ),
        education=(
            EducationEntry(
                institution="Southwestern University",
                degree="Bachelor of Arts in Computer Science, Minor in Business",
                graduation_date="Aug. 2018 - May 2021",
            ),
            EducationEntry(
                institution="Blinn College",
                degree="Associate's in Liberal Arts",
                graduation_date="Aug. 2014 - May 2018",
            ),
        ),
        experience=(
            ExperienceEntry(
                company="Texas A&M University",
                position="Undergraduate Research Assistant",
                start_date="June 2020",
                end_date="Present",
                responsibilities=(
                    "Developed a REST API using FastAPI and PostgreSQL to store data from learning management systems",
                    "Developed a full-stack web application using Flask, React, PostgreSQL and Docker to analyze GitHub data",
                    "Explored ways to visualize GitHub collaboration in a classroom setting",
                ),
            ),
            ExperienceEntry(
                company="Southwestern University",
                position="Information Technology Support Specialist",
                start_date="Sep. 2018",
                end_date="Present",
                responsibilities=(
                    "Communicate with managers to set up campus computers used on campus",
                    "Assess and troubleshoot computer problems brought by students, faculty and staff",
                    "Maintain upkeep of computers, classroom equipment, and 200 printers across campus",
                ),
            ),
            ExperienceEntry(
                company="Southwestern University",
                position="Artificial Intelligence Research Assistant",
                start_date="May 2019",
                end_date="July 2019",
                responsibilities=(
                    "Explored methods to generate video game dungeons based off of The Legend of Zelda",
                    "Developed a game in Java to test the generated dungeons",
                    "Contributed 50K+ lines of code to an established codebase via Git",
                    "Conducted a human subject study to determine which video game dungeon generation technique is enjoyable",
                    "Wrote an 8-page paper and gave multiple presentations on-campus",
                    "Presented virtually to the World Conference on Computational Intelligence",
                ),
            ),
        ),
        projects=(
            ProjectEntry(
                name="Gitlytics",
                description="Python, Flask, React, PostgreSQL, Docker",
                details=(
                    "Developed a full-stack web application using with Flask serving a REST API with React as the frontend",
                    "Implemented GitHub OAuth to get data from user's repositories",
                    "Visualized GitHub data to show collaboration",
                    "Used Celery and Redis for asynchronous tasks",
                ),
            ),
            ProjectEntry(
                name="Simple Paintball",
                description="Spigot API, Java, Maven, TravisCI, Git",
                details=(
                    "Developed a Minecraft server plugin to entertain kids during free time for a previous job",
                    "Published plugin to websites gaining 2K+ downloads and an average 4.5/5-star review",
                    "Implemented continuous delivery using TravisCI to build the plugin upon new a release",
                    "Collaborated with Minecraft server administrators to suggest features and get feedback about the plugin",
                ),
            ),
        ),
        skills={
            "languages": "Java, Python, C/C++, SQL (Postgres), JavaScript, HTML/CSS, R",
            "frameworks": "React, Node.js, Flask, JUnit, WordPress, Material-UI, FastAPI",
            "developerTools": "Git, Docker, TravisCI, Google Cloud Platform, VS Code, Visual Studio, PyCharm, IntelliJ, Eclipse",
            "libraries": "pandas, NumPy, Matplotlib",
        },
    )


# ------------------------------------------------------------------
# Template catalogue
# ------------------------------------------------------------------
def list_templates() -> List[Dict[str, str]]:
    return [{"id": t["id"], "name": t["name"]} for t in TEMPLATES]


def get_template(template_id: str) -> Dict[str, Any] | None:
    for template in TEMPLATES:
        if template["id"] == template_id:
            return template
    return None


# ------------------------------------------------------------------
# Template content -> ResumeDocument
# ------------------------------------------------------------------
def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _first(item: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        if item.get(key):
            return _text(item[key])
    return ""


def _records(value: Any) -> List[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _lines(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list):
        return ()
    return tuple(_text(v) for v in value)


def document_from_template(content: Mapping[str, Any]) -> ResumeDocument:
    """Copy template content into the document shape.

    Missing fields default to empty text or empty lists. Both the picker's
    vocabulary (``school``, ``title``, ``technologies``, flat contact fields)
    and the document's own field names are accepted, so a saved document can
    be used as a template too. A whole template record (``{"id", "content"}``)
    is unwrapped.
    """
    if isinstance(content.get("content"), Mapping):
        content = content["content"]

    nested_info = content.get("personalInfo") if isinstance(content.get("personalInfo"), Mapping) else {}
    contact = content.get("contact") if isinstance(content.get("contact"), Mapping) else {}
    personal_info = PersonalInfo(
        **{field: _first(nested_info, field) or _first(content, field) or _first(contact, field) for field in PERSONAL_INFO_FIELDS}
    )

    education = tuple(
        EducationEntry(
            institution=_first(item, "institution", "school"),
            degree=_first(item, "degree"),
            graduation_date=_first(item, "graduationDate", "graduation_date"),
        )
        for item in _records(content.get("education"))
    )

    experience = tuple(
        ExperienceEntry(
            company=_first(item, "company"),
            position=_first(item, "position", "title"),
            start_date=_first(item, "startDate", "start_date"),
            end_date=_first(item, "endDate", "end_date"),
            responsibilities=_lines(item.get("responsibilities")),
        )
        for item in _records(content.get("experience"))
    )

    projects = []
    for item in _records(content.get("projects")):
        details = _lines(item.get("details"))
        # The preview shows the tech stack as the project's one-line description.
        description = _first(item, "technologies") or _first(item, "description")
        if not details and item.get("technologies") and item.get("description"):
            details = (_text(item["description"]),)
        projects.append(ProjectEntry(name=_first(item, "name"), description=description, details=details))

    raw_skills = content.get("skills")
    if not isinstance(raw_skills, Mapping):
        raw_skills = content.get("technicalSkills")
    skills = {str(key): _text(value) for key, value in raw_skills.items()} if isinstance(raw_skills, Mapping) else {}

    order = content.get("sectionOrder")
    document = ResumeDocument(
        personal_info=personal_info,
        education=education,
        experience=experience,
        projects=tuple(projects),
        skills=skills,
    )
    if isinstance(order, list) and sorted(map(str, order)) == sorted(s.value for s in DEFAULT_SECTION_ORDER):
        document = document.model_copy(update={"section_order": tuple(Section(s) for s in order)})
    return document
