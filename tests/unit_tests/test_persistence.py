import json

import pytest

from dynamic_draft.editor.mutations import set_field
from dynamic_draft.editor.persistence import RESUME_DATA_KEY, SELECTED_TEMPLATE_KEY, PersistenceAdapter
from dynamic_draft.editor.section_order import move_section
from dynamic_draft.repository.storage import FileStore, InMemoryStore
from dynamic_draft.services.templates import default_document, get_template, sample_document
from dynamic_draft.utilities.exceptions.editor import PersistenceUnavailable


def test_snapshot_round_trip(persistence, store):
    document = move_section(sample_document(), 4, 0).document
    persistence.save(document)

    raw = json.loads(store.data[RESUME_DATA_KEY])
    assert raw["personalInfo"]["name"] == "Jake Ryan"
    assert raw["sectionOrder"][0] == "skills"
    assert persistence.load() == document


def test_empty_store_loads_default(persistence):
    assert persistence.load() is None
    assert persistence.load_or_default() == default_document()


def test_selected_template_wins_once(persistence, store):
    persistence.save(sample_document())
    persistence.select_template(get_template("professional")["content"])

    from_template = persistence.load()
    assert from_template.personal_info.name == "Alex Johnson"
    assert SELECTED_TEMPLATE_KEY not in store.data

    assert persistence.load().personal_info.name == "Jake Ryan"


def test_unreadable_template_falls_back_to_snapshot(store):
    store.set(SELECTED_TEMPLATE_KEY, "not json")
    store.set(RESUME_DATA_KEY, sample_document().model_dump_json(by_alias=True))
    persistence = PersistenceAdapter(store)

    assert persistence.load().personal_info.name == "Jake Ryan"
    assert SELECTED_TEMPLATE_KEY not in store.data


def test_corrupt_snapshot_is_ignored():
    store = InMemoryStore({RESUME_DATA_KEY: '{"sectionOrder": ["skills"]}'})
    persistence = PersistenceAdapter(store)

    assert persistence.load() is None
    assert persistence.load_or_default() == default_document()


def test_clear_removes_both_keys(persistence, store):
    persistence.save(default_document())
    persistence.select_template({"name": "Someone"})
    persistence.clear()
    assert store.data == {}


def test_file_store_persists_across_instances(tmp_path):
    document = set_field(default_document(), "personalInfo.name", "Ada Lovelace").document
    PersistenceAdapter(FileStore(tmp_path)).save(document)

    assert (tmp_path / f"{RESUME_DATA_KEY}.json").exists()
    assert PersistenceAdapter(FileStore(tmp_path)).load() == document


def test_file_store_rejects_path_like_keys(tmp_path):
    store = FileStore(tmp_path)
    with pytest.raises(ValueError):
        store.set("../escape", "{}")
    with pytest.raises(ValueError):
        store.get(".hidden")


def test_file_store_delete_is_idempotent(tmp_path):
    store = FileStore(tmp_path)
    store.set("resumeData", "{}")
    store.delete("resumeData")
    store.delete("resumeData")
    assert store.get("resumeData") is None


def test_unreachable_storage_raises_persistence_unavailable(tmp_path):
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("occupied")
    store = FileStore(blocker)

    with pytest.raises(PersistenceUnavailable):
        store.set("resumeData", "{}")
    with pytest.raises(PersistenceUnavailable):
        store.get("resumeData")
