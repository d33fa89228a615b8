import json
import logging
import typing

import pydantic

from dynamic_draft.models.schemas.resume import ResumeDocument
from dynamic_draft.repository.storage import KeyValueStore
from dynamic_draft.services.templates import default_document, document_from_template

logger = logging.getLogger(__name__)

RESUME_DATA_KEY = "resumeData"
SELECTED_TEMPLATE_KEY = "selectedTemplate"


class PersistenceAdapter:
    """The document's only link to durable storage.

    A snapshot is the full document as a self-describing JSON record under
    ``resumeData``. A template picked on the template page is parked under
    ``selectedTemplate`` and wins over the snapshot exactly once.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def save(self, document: ResumeDocument) -> None:
        self.store.set(RESUME_DATA_KEY, document.model_dump_json(by_alias=True))

    def select_template(self, content: typing.Mapping[str, typing.Any]) -> None:
        self.store.set(SELECTED_TEMPLATE_KEY, json.dumps(dict(content)))

    def load(self) -> ResumeDocument | None:
        raw_template = self.store.get(SELECTED_TEMPLATE_KEY)
        if raw_template is not None:
            self.store.delete(SELECTED_TEMPLATE_KEY)
            try:
                content = json.loads(raw_template)
            except ValueError as e:
                logger.warning("Ignoring unreadable selected template: %s", e)
            else:
                if isinstance(content, dict):
                    return document_from_template(content)
                logger.warning("Ignoring selected template of type %s", type(content).__name__)

        raw_snapshot = self.store.get(RESUME_DATA_KEY)
        if raw_snapshot is None:
            return None
        try:
            return ResumeDocument.model_validate_json(raw_snapshot)
        except pydantic.ValidationError as e:
            logger.warning("Stored resume snapshot is corrupt, ignoring it: %s", e.errors()[:3])
            return None

    def load_or_default(self) -> ResumeDocument:
        return self.load() or default_document()

    def clear(self) -> None:
        self.store.delete(RESUME_DATA_KEY)
        self.store.delete(SELECTED_TEMPLATE_KEY)
