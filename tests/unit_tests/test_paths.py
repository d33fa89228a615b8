import pytest

from dynamic_draft.editor.paths import FieldPath, resolve
from dynamic_draft.models.schemas.resume import Section
from dynamic_draft.services.templates import default_document, sample_document
from dynamic_draft.utilities.exceptions.editor import InvalidFieldPath


@pytest.mark.parametrize(
    "raw",
    [
        "personalInfo.email",
        "skills.languages",
        "education.0.institution",
        "education.1.graduationDate",
        "experience.2.responsibilities.1",
        "projects.0.details.3",
    ],
)
def test_parse_and_str_are_inverse(raw):
    assert str(FieldPath.parse(raw)) == raw


def test_parse_builds_typed_components():
    path = FieldPath.parse("experience.2.responsibilities.1")
    assert path.section is Section.EXPERIENCE
    assert path.index == 2
    assert path.field == "responsibilities"
    assert path.sub_index == 1
    assert path.is_nested


def test_skill_category_may_contain_dots():
    path = FieldPath.parse("skills.node.js")
    assert path.section is Section.SKILLS
    assert path.field == "node.js"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "summary.text",
        "personalInfo.age",
        "personalInfo",
        "education.x.degree",
        "education.-1.degree",
        "education.0.salary",
        "experience.0.responsibilities",
        "experience.0.company.1",
        "education.0",
        "personalInfo.name.extra",
    ],
)
def test_malformed_paths_are_rejected(raw):
    with pytest.raises(InvalidFieldPath):
        FieldPath.parse(raw)


def test_constructor_validates_shape():
    with pytest.raises(InvalidFieldPath):
        FieldPath(section=Section.PERSONAL_INFO, index=0, field="name")
    with pytest.raises(InvalidFieldPath):
        FieldPath(section=Section.PROJECTS, index=0, field="details")


def test_resolve_returns_leaf_text():
    document = sample_document()
    assert resolve(document, "personalInfo.name") == "Jake Ryan"
    assert resolve(document, "education.1.institution") == "Blinn College"
    assert resolve(document, "experience.2.responsibilities.1") == "Developed a game in Java to test the generated dungeons"
    assert resolve(document, "skills.libraries") == "pandas, NumPy, Matplotlib"


def test_resolve_out_of_range_is_none():
    document = default_document()
    assert resolve(document, "education.5.degree") is None
    assert resolve(document, "experience.0.responsibilities.4") is None
    assert resolve(document, "skills.certifications") is None
    assert resolve(document, "experience.0.responsibilities.0") == ""
