"""Typed addresses for the leaves of a resume document.

A path names exactly one string leaf:

    personalInfo.<field>                          e.g. personalInfo.email
    skills.<category>                             e.g. skills.languages
    <section>.<index>.<field>                     e.g. education.0.institution
    <section>.<index>.<list field>.<sub_index>    e.g. experience.2.responsibilities.1

Shape is checked when a ``FieldPath`` is built, so a malformed path never
reaches the document. Whether the indices exist is a property of a particular
document and is answered by ``resolve``.
"""

from __future__ import annotations

import dataclasses

from dynamic_draft.models.schemas.resume import (
    ENTRY_FIELDS,
    LIST_SECTIONS,
    NESTED_LIST_FIELDS,
    PERSONAL_INFO_FIELDS,
    ResumeDocument,
    SECTION_ATTRIBUTES,
    Section,
)
from dynamic_draft.utilities.exceptions.editor import InvalidFieldPath


@dataclasses.dataclass(frozen=True)
class FieldPath:
    section: Section
    index: int | None = None
    field: str | None = None
    sub_index: int | None = None

    def __post_init__(self) -> None:
        try:
            section = Section(self.section)
        except ValueError:
            raise InvalidFieldPath(f"Unknown section: {self.section!r}") from None
        object.__setattr__(self, "section", section)

        if section in LIST_SECTIONS:
            self._validate_list_path(section)
        else:
            self._validate_mapping_path(section)

    def _validate_mapping_path(self, section: Section) -> None:
        if self.index is not None or self.sub_index is not None:
            raise InvalidFieldPath(f"{section.value} does not take indices")
        if not self.field:
            raise InvalidFieldPath(f"{section.value} path needs a field name")
        if section is Section.PERSONAL_INFO and self.field not in PERSONAL_INFO_FIELDS:
            raise InvalidFieldPath(f"Unknown personalInfo field: {self.field!r}")

    def _validate_list_path(self, section: Section) -> None:
        if self.index is None or self.index < 0:
            raise InvalidFieldPath(f"{section.value} path needs a non-negative index")
        if self.field not in ENTRY_FIELDS[section]:
            raise InvalidFieldPath(f"Unknown {section.value} field: {self.field!r}")
        nested = NESTED_LIST_FIELDS.get(section)
        if self.field == nested:
            if self.sub_index is None or self.sub_index < 0:
                raise InvalidFieldPath(f"{self.field} path needs a non-negative item index")
        elif self.sub_index is not None:
            raise InvalidFieldPath(f"{self.field} is not a list field")

    @classmethod
    def parse(cls, raw: str) -> FieldPath:
        parts = raw.split(".") if raw else []
        if not parts or not parts[0]:
            raise InvalidFieldPath(f"Empty field path: {raw!r}")

        section = parts[0]
        if section not in {s.value for s in LIST_SECTIONS}:
            # Skill categories are user-defined and may themselves contain dots.
            if len(parts) < 2:
                raise InvalidFieldPath(f"Field path is missing a field: {raw!r}")
            field = ".".join(parts[1:]) if section == Section.SKILLS.value else parts[1]
            if section != Section.SKILLS.value and len(parts) > 2:
                raise InvalidFieldPath(f"Too many segments in field path: {raw!r}")
            return cls(section=section, field=field)  # type: ignore[arg-type]

        if len(parts) not in (3, 4):
            raise InvalidFieldPath(f"Malformed field path: {raw!r}")
        index = _parse_index(parts[1], raw)
        sub_index = _parse_index(parts[3], raw) if len(parts) == 4 else None
        return cls(section=section, index=index, field=parts[2], sub_index=sub_index)  # type: ignore[arg-type]

    @property
    def is_nested(self) -> bool:
        return self.sub_index is not None

    def __str__(self) -> str:
        segments: list[str] = [self.section.value]
        if self.index is not None:
            segments.append(str(self.index))
        if self.field is not None:
            segments.append(self.field)
        if self.sub_index is not None:
            segments.append(str(self.sub_index))
        return ".".join(segments)


def _parse_index(token: str, raw: str) -> int:
    if not token.isdigit():
        raise InvalidFieldPath(f"Expected a non-negative integer index in {raw!r}, got {token!r}")
    return int(token)


def as_field_path(path: FieldPath | str) -> FieldPath:
    return path if isinstance(path, FieldPath) else FieldPath.parse(path)


def resolve(document: ResumeDocument, path: FieldPath | str) -> str | None:
    """Return the string at ``path`` or None when the document has no such leaf."""
    path = as_field_path(path)

    if path.section is Section.PERSONAL_INFO:
        return getattr(document.personal_info, path.field)  # type: ignore[arg-type]
    if path.section is Section.SKILLS:
        return document.skills.get(path.field)  # type: ignore[arg-type]

    entries = getattr(document, SECTION_ATTRIBUTES[path.section])
    if path.index >= len(entries):  # type: ignore[operator]
        return None
    value = getattr(entries[path.index], ENTRY_FIELDS[path.section][path.field])  # type: ignore[index]
    if path.sub_index is None:
        return value
    if path.sub_index >= len(value):
        return None
    return value[path.sub_index]
