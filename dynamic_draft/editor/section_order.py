from __future__ import annotations

import typing

from dynamic_draft.editor.mutations import MutationResult
from dynamic_draft.models.schemas.resume import SECTION_ATTRIBUTES, ResumeDocument, Section

T = typing.TypeVar("T")


def reorder(order: typing.Sequence[T], from_index: int, to_index: int) -> tuple[T, ...]:
    """Move one element, drag-and-drop style.

    ``to_index`` is the position in the list after the element has been taken
    out. Out-of-range indices leave the order unchanged.
    """
    items = tuple(order)
    if not (0 <= from_index < len(items) and 0 <= to_index < len(items)):
        return items
    moved = items[from_index]
    rest = items[:from_index] + items[from_index + 1 :]
    return rest[:to_index] + (moved,) + rest[to_index:]


def move_section(document: ResumeDocument, from_index: int, to_index: int) -> MutationResult:
    size = len(document.section_order)
    if not (0 <= from_index < size and 0 <= to_index < size):
        return MutationResult(
            document=document, ok=False, error=f"Section positions must be between 0 and {size - 1}"
        )
    if from_index == to_index:
        return MutationResult(document=document)
    order = reorder(document.section_order, from_index, to_index)
    return MutationResult(document=document.model_copy(update={"section_order": order}))


def ordered_sections(document: ResumeDocument) -> typing.Iterator[tuple[Section, typing.Any]]:
    """Yield ``(section, content)`` in the document's one section order.

    The edit form and the preview both iterate this, so they cannot disagree.
    """
    for section in document.section_order:
        yield section, getattr(document, SECTION_ATTRIBUTES[section])
