from dynamic_draft.models.schemas.resume import DEFAULT_SECTION_ORDER, Section
from dynamic_draft.editor.section_order import move_section
from dynamic_draft.services.templates import (
    DEFAULT_SKILL_CATEGORIES,
    default_document,
    document_from_template,
    get_template,
    list_templates,
    sample_document,
)


def test_default_document_has_one_blank_entry_per_list_section():
    document = default_document()

    assert len(document.education) == len(document.experience) == len(document.projects) == 1
    assert document.experience[0].responsibilities == ("",)
    assert document.projects[0].details == ("",)
    assert tuple(document.skills) == DEFAULT_SKILL_CATEGORIES
    assert document.section_order == DEFAULT_SECTION_ORDER


def test_catalogue_lists_every_template():
    ids = [t["id"] for t in list_templates()]
    assert ids[:3] == ["professional", "creative", "devops"]
    assert "cybersecurity" in ids
    assert get_template("missing") is None


def test_professional_template_is_adapted():
    document = document_from_template(get_template("professional")["content"])

    assert document.personal_info.name == "Alex Johnson"
    assert document.personal_info.github == "github.com/alexj"
    assert document.education[0].institution == "University of Technology"
    assert document.experience[0].position == "Software Engineer"
    assert document.experience[0].start_date == "June 2020"
    assert len(document.experience[0].responsibilities) == 3
    assert document.projects[0].description == "React, Redux, Node.js, MongoDB"
    assert len(document.projects[0].details) == 3
    assert document.skills["developerTools"] == "Git, Docker, Jenkins, AWS"


def test_devops_template_uses_technical_skills_and_description_as_detail():
    template = get_template("devops")
    document = document_from_template(template)

    assert "cloudPlatforms" in document.skills
    assert document.skills["scripting"] == "Bash, Python, Go"
    project = document.projects[0]
    assert project.description == "Docker, Kubernetes, AWS EKS, Istio"
    assert project.details[0].startswith("Led the migration")


def test_empty_template_gives_empty_document():
    document = document_from_template({})

    assert document.personal_info.name == ""
    assert document.education == document.experience == document.projects == ()
    assert document.skills == {}
    assert document.section_order == DEFAULT_SECTION_ORDER


def test_saved_document_can_be_used_as_template():
    document = move_section(sample_document(), 3, 0).document
    rebuilt = document_from_template(document.model_dump(mode="json", by_alias=True))

    assert rebuilt == document
    assert rebuilt.section_order[0] is Section.PROJECTS


def test_incomplete_section_order_is_ignored():
    document = document_from_template({"sectionOrder": ["skills", "projects"]})
    assert document.section_order == DEFAULT_SECTION_ORDER
