"""Point mutations on a ``ResumeDocument``.

Every operation is pure: the input document is never changed, and the returned
document shares every untouched branch with the input by reference. Expected
failures (bad path, index out of range, duplicate skill category) do not
raise; they return a rejected ``MutationResult`` carrying the unchanged
document and a message for the caller to surface.
"""

from __future__ import annotations

import dataclasses
import typing

from dynamic_draft.editor.paths import FieldPath, as_field_path
from dynamic_draft.models.schemas.resume import (
    ENTRY_FIELDS,
    LIST_SECTIONS,
    NESTED_LIST_FIELDS,
    SECTION_ATTRIBUTES,
    ResumeDocument,
    Section,
    blank_entry,
)
from dynamic_draft.utilities.exceptions.editor import InvalidFieldPath


@dataclasses.dataclass(frozen=True)
class MutationResult:
    document: ResumeDocument
    ok: bool = True
    error: str | None = None
    path: FieldPath | None = None

    def __bool__(self) -> bool:
        return self.ok


def _accepted(document: ResumeDocument, path: FieldPath | None = None) -> MutationResult:
    return MutationResult(document=document, ok=True, path=path)


def _rejected(document: ResumeDocument, error: str) -> MutationResult:
    return MutationResult(document=document, ok=False, error=error)


def _replace_at(items: tuple, index: int, item: typing.Any) -> tuple:
    return items[:index] + (item,) + items[index + 1 :]


def _remove_at(items: tuple, index: int) -> tuple:
    return items[:index] + items[index + 1 :]


def _list_section(section: Section | str) -> Section | None:
    try:
        section = Section(section)
    except ValueError:
        return None
    return section if section in LIST_SECTIONS else None


def _entries(document: ResumeDocument, section: Section) -> tuple:
    return getattr(document, SECTION_ATTRIBUTES[section])


def _with_entries(document: ResumeDocument, section: Section, entries: tuple) -> ResumeDocument:
    return document.model_copy(update={SECTION_ATTRIBUTES[section]: entries})


# ------------------------------------------------------------------
# Scalar leaves
# ------------------------------------------------------------------
def set_field(document: ResumeDocument, path: FieldPath | str, value: str) -> MutationResult:
    try:
        path = as_field_path(path)
    except InvalidFieldPath as exc:
        return _rejected(document, str(exc))
    if not isinstance(value, str):
        return _rejected(document, f"Value for {path} must be text")

    if path.section is Section.PERSONAL_INFO:
        personal_info = document.personal_info.model_copy(update={path.field: value})  # type: ignore[dict-item]
        return _accepted(document.model_copy(update={"personal_info": personal_info}), path)

    if path.section is Section.SKILLS:
        if path.field not in document.skills:
            return _rejected(document, f"Unknown skill category: {path.field!r}")
        skills = {**document.skills, path.field: value}  # type: ignore[dict-item]
        return _accepted(document.model_copy(update={"skills": skills}), path)

    entries = _entries(document, path.section)
    if path.index >= len(entries):  # type: ignore[operator]
        return _rejected(document, f"{path.section.value} has no entry {path.index}")
    entry = entries[path.index]  # type: ignore[index]
    attribute = ENTRY_FIELDS[path.section][path.field]  # type: ignore[index]

    if path.sub_index is None:
        new_entry = entry.model_copy(update={attribute: value})
    else:
        items: tuple[str, ...] = getattr(entry, attribute)
        if path.sub_index >= len(items):
            return _rejected(document, f"{path.field} of {path.section.value} {path.index} has no item {path.sub_index}")
        new_entry = entry.model_copy(update={attribute: _replace_at(items, path.sub_index, value)})

    return _accepted(_with_entries(document, path.section, _replace_at(entries, path.index, new_entry)), path)  # type: ignore[arg-type]


# ------------------------------------------------------------------
# Section lists
# ------------------------------------------------------------------
def add_list_item(document: ResumeDocument, section: Section | str) -> MutationResult:
    list_section = _list_section(section)
    if list_section is None:
        return _rejected(document, f"{section} is not a list section")
    entries = _entries(document, list_section)
    return _accepted(_with_entries(document, list_section, entries + (blank_entry(list_section),)))


def remove_list_item(document: ResumeDocument, section: Section | str, index: int) -> MutationResult:
    list_section = _list_section(section)
    if list_section is None:
        return _rejected(document, f"{section} is not a list section")
    entries = _entries(document, list_section)
    if not 0 <= index < len(entries):
        return _rejected(document, f"{list_section.value} has no entry {index}")
    return _accepted(_with_entries(document, list_section, _remove_at(entries, index)))


def _nested_target(
    document: ResumeDocument, section: Section | str, index: int, field: str
) -> tuple[Section, typing.Any, tuple[str, ...]] | str:
    list_section = _list_section(section)
    if list_section is None:
        return f"{section} is not a list section"
    if NESTED_LIST_FIELDS.get(list_section) != field:
        return f"{list_section.value} has no list field {field!r}"
    entries = _entries(document, list_section)
    if not 0 <= index < len(entries):
        return f"{list_section.value} has no entry {index}"
    entry = entries[index]
    return list_section, entry, getattr(entry, field)


def add_nested_list_item(document: ResumeDocument, section: Section | str, index: int, field: str) -> MutationResult:
    target = _nested_target(document, section, index, field)
    if isinstance(target, str):
        return _rejected(document, target)
    list_section, entry, items = target
    new_entry = entry.model_copy(update={field: items + ("",)})
    return _accepted(_with_entries(document, list_section, _replace_at(_entries(document, list_section), index, new_entry)))


def remove_nested_list_item(
    document: ResumeDocument, section: Section | str, index: int, field: str, sub_index: int
) -> MutationResult:
    target = _nested_target(document, section, index, field)
    if isinstance(target, str):
        return _rejected(document, target)
    list_section, entry, items = target
    if not 0 <= sub_index < len(items):
        return _rejected(document, f"{field} of {list_section.value} {index} has no item {sub_index}")
    new_entry = entry.model_copy(update={field: _remove_at(items, sub_index)})
    return _accepted(_with_entries(document, list_section, _replace_at(_entries(document, list_section), index, new_entry)))


# ------------------------------------------------------------------
# Skill categories
# ------------------------------------------------------------------
def rename_skill_category(document: ResumeDocument, old_key: str, new_key: str) -> MutationResult:
    """Move a category's value to ``new_key``, which takes the last display position.

    Rejected when ``old_key`` does not exist or ``new_key`` is already taken.
    """
    new_key = new_key.strip()
    if old_key not in document.skills:
        return _rejected(document, f"Unknown skill category: {old_key!r}")
    if not new_key:
        return _rejected(document, "Skill category name cannot be empty")
    if new_key in document.skills:
        return _rejected(document, f"Skill category {new_key!r} already exists")
    skills = {key: value for key, value in document.skills.items() if key != old_key}
    skills[new_key] = document.skills[old_key]
    return _accepted(document.model_copy(update={"skills": skills}))


def add_skill_category(document: ResumeDocument, key: str) -> MutationResult:
    key = key.strip()
    if not key:
        return _rejected(document, "Skill category name cannot be empty")
    if key in document.skills:
        return _rejected(document, f"Skill category {key!r} already exists")
    return _accepted(document.model_copy(update={"skills": {**document.skills, key: ""}}))


def remove_skill_category(document: ResumeDocument, key: str) -> MutationResult:
    if key not in document.skills:
        return _rejected(document, f"Unknown skill category: {key!r}")
    skills = {k: v for k, v in document.skills.items() if k != key}
    return _accepted(document.model_copy(update={"skills": skills}))
