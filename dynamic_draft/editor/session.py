"""One user's editing session over a single resume document.

Every accepted mutation replaces ``session.document`` and fans out to two
debounced side effects: a local grammar re-check of the touched field and a
snapshot of the whole document. Rejected mutations leave everything as it was
and are reported through the returned ``MutationResult``.
"""

from __future__ import annotations

import logging
import typing

from dynamic_draft.config.manager import settings
from dynamic_draft.editor import mutations
from dynamic_draft.editor.mutations import MutationResult
from dynamic_draft.editor.paths import FieldPath, as_field_path, resolve
from dynamic_draft.editor.persistence import PersistenceAdapter
from dynamic_draft.editor.scheduling import Debouncer, Scheduler, default_scheduler
from dynamic_draft.editor.section_order import move_section, ordered_sections
from dynamic_draft.models.schemas.grammar import GrammarSuggestion
from dynamic_draft.models.schemas.resume import NESTED_LIST_FIELDS, SECTION_ATTRIBUTES, ResumeDocument, Section
from dynamic_draft.services.grammar import GrammarOverlay
from dynamic_draft.services.language_tool import LanguageToolClient
from dynamic_draft.services.resume_api_client import RemoteSaveResult, ResumeApiClient
from dynamic_draft.services.templates import default_document, document_from_template, sample_document
from dynamic_draft.utilities.exceptions.editor import InvalidFieldPath, PersistenceUnavailable

logger = logging.getLogger(__name__)

_SNAPSHOT_KEY = "snapshot"


class EditorSession:
    def __init__(
        self,
        persistence: PersistenceAdapter,
        *,
        scheduler: Scheduler | None = None,
        language_tool: LanguageToolClient | None = None,
        document: ResumeDocument | None = None,
        snapshot_delay: float | None = None,
        grammar_cooldown: float | None = None,
        grammar_debounce: float | None = None,
    ) -> None:
        self.persistence = persistence
        self._owns_scheduler = scheduler is None
        self.scheduler: Scheduler = scheduler or default_scheduler()
        self.document: ResumeDocument = document if document is not None else persistence.load_or_default()
        self.overlay = GrammarOverlay(
            remote=language_tool,
            scheduler=self.scheduler,
            current_text=self._current_text,
            cooldown_seconds=grammar_cooldown,
            debounce_seconds=grammar_debounce,
        )
        delay = settings.PERSISTENCE_DEBOUNCE_SECONDS if snapshot_delay is None else snapshot_delay
        self._snapshots = Debouncer(self.scheduler, delay)
        self.unsaved = False
        self.resume_id: int | None = None

    def _current_text(self, field_path: str) -> str | None:
        try:
            return resolve(self.document, field_path)
        except InvalidFieldPath:
            return None

    # ------------------------------------------------------------------
    # Commit pipeline
    # ------------------------------------------------------------------
    def _commit(self, result: MutationResult, *, recheck: FieldPath | None = None) -> MutationResult:
        if not result.ok:
            logger.debug("Mutation rejected: %s", result.error)
            return result
        # Side effects first; swapping the document is the last step.
        if recheck is not None:
            text = resolve(result.document, recheck)
            if text is not None:
                self.overlay.schedule_local_check(str(recheck), text)
        self._snapshots.schedule(_SNAPSHOT_KEY, self._write_snapshot)
        self.document = result.document
        self.unsaved = True
        return result

    def _write_snapshot(self) -> bool:
        try:
            self.persistence.save(self.document)
        except PersistenceUnavailable as e:
            logger.warning("Snapshot not written, document kept in memory: %s", e)
            self.unsaved = True
            return False
        self.unsaved = False
        return True

    def _replace_document(self, document: ResumeDocument) -> MutationResult:
        self.overlay.clear_all()
        return self._commit(MutationResult(document=document))

    # ------------------------------------------------------------------
    # Field and list edits
    # ------------------------------------------------------------------
    def set_field(self, path: FieldPath | str, value: str) -> MutationResult:
        result = mutations.set_field(self.document, path, value)
        return self._commit(result, recheck=result.path)

    def add_list_item(self, section: Section | str) -> MutationResult:
        return self._commit(mutations.add_list_item(self.document, section))

    def remove_list_item(self, section: Section | str, index: int) -> MutationResult:
        before = self.document
        result = self._commit(mutations.remove_list_item(before, section, index))
        if result.ok:
            # Entries after the removed one shift down; their overlays no longer line up.
            section_key = Section(section).value
            for shifted in range(index, len(getattr(before, SECTION_ATTRIBUTES[Section(section)]))):
                self.overlay.clear_prefix(f"{section_key}.{shifted}")
        return result

    def add_nested_list_item(self, section: Section | str, index: int, field: str) -> MutationResult:
        return self._commit(mutations.add_nested_list_item(self.document, section, index, field))

    def remove_nested_list_item(self, section: Section | str, index: int, field: str, sub_index: int) -> MutationResult:
        before = self.document
        result = self._commit(mutations.remove_nested_list_item(before, section, index, field, sub_index))
        if result.ok:
            section_key = Section(section).value
            old_length = len(_nested_items(before, Section(section), index))
            for shifted in range(sub_index, old_length):
                self.overlay.clear(f"{section_key}.{index}.{field}.{shifted}")
        return result

    def rename_skill_category(self, old_key: str, new_key: str) -> MutationResult:
        result = mutations.rename_skill_category(self.document, old_key, new_key)
        recheck = FieldPath(section=Section.SKILLS, field=new_key.strip()) if result.ok else None
        result = self._commit(result, recheck=recheck)
        if result.ok:
            self.overlay.clear(f"{Section.SKILLS.value}.{old_key}")
        return result

    def add_skill_category(self, key: str) -> MutationResult:
        return self._commit(mutations.add_skill_category(self.document, key))

    def remove_skill_category(self, key: str) -> MutationResult:
        result = self._commit(mutations.remove_skill_category(self.document, key))
        if result.ok:
            self.overlay.clear(f"{Section.SKILLS.value}.{key}")
        return result

    def move_section(self, from_index: int, to_index: int) -> MutationResult:
        return self._commit(move_section(self.document, from_index, to_index))

    def sections(self) -> list[tuple[Section, typing.Any]]:
        return list(ordered_sections(self.document))

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------
    async def check_grammar(self, path: FieldPath | str, use_remote: bool = True) -> list[GrammarSuggestion]:
        path = as_field_path(path)
        text = resolve(self.document, path)
        if text is None:
            return []
        return await self.overlay.check(str(path), text, use_remote=use_remote)

    def apply_suggestion(self, suggestion: GrammarSuggestion) -> MutationResult:
        """Write a suggestion's replacement into its field.

        The flagged span is located by offset when it still matches, otherwise
        by the first occurrence of the flagged text. A suggestion without a
        replacement only flags the span and cannot be applied. No new check is
        started.
        """
        if not suggestion.suggestion:
            return MutationResult(
                document=self.document, ok=False, error=f"No replacement offered for {suggestion.original!r}"
            )
        try:
            path = FieldPath.parse(suggestion.field_path)
        except InvalidFieldPath as e:
            return MutationResult(document=self.document, ok=False, error=str(e))
        current = resolve(self.document, path)
        if current is None:
            return MutationResult(document=self.document, ok=False, error=f"{path} no longer exists")

        offset, length = suggestion.offset, suggestion.length
        if offset is not None and length is not None and current[offset : offset + length] == suggestion.original:
            updated = current[:offset] + suggestion.suggestion + current[offset + length :]
        elif suggestion.original and suggestion.original in current:
            updated = current.replace(suggestion.original, suggestion.suggestion, 1)
        else:
            return MutationResult(
                document=self.document, ok=False, error=f"{suggestion.original!r} is no longer in {path}"
            )

        result = self._commit(mutations.set_field(self.document, path, updated))
        if result.ok:
            self.overlay.discard(suggestion)
        return result

    # ------------------------------------------------------------------
    # Whole-document actions
    # ------------------------------------------------------------------
    def reset(self) -> MutationResult:
        return self._replace_document(default_document())

    def load_sample(self) -> MutationResult:
        return self._replace_document(sample_document())

    def load_template(self, content: typing.Mapping[str, typing.Any]) -> MutationResult:
        return self._replace_document(document_from_template(content))

    def save_now(self) -> bool:
        self._snapshots.cancel_all()
        return self._write_snapshot()

    def close(self) -> None:
        self._snapshots.flush()
        self.overlay.clear_all()
        close_scheduler = getattr(self.scheduler, "close", None)
        if self._owns_scheduler and close_scheduler is not None:
            close_scheduler()

    async def save_remote(self, client: ResumeApiClient, template: str | None = None) -> RemoteSaveResult:
        if self.resume_id is None:
            result = await client.create(self.document, template=template)
            if result.ok and result.resume_id is not None:
                self.resume_id = result.resume_id
        else:
            result = await client.update(self.resume_id, self.document)
        if not result.ok:
            logger.warning("Remote save failed, document kept locally: %s", result.error)
        return result


def _nested_items(document: ResumeDocument, section: Section, index: int) -> tuple[str, ...]:
    field = NESTED_LIST_FIELDS.get(section)
    entries = getattr(document, SECTION_ATTRIBUTES[section])
    if field is None or not 0 <= index < len(entries):
        return ()
    return getattr(entries[index], field)
